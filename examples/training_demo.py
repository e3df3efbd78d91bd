from pathlib import Path

from linreg import Dataset, LinearModel
from linreg.visualization import plot_linear_model

""" Demo of training, saving and plotting a linear model. """

""" Load and normalize the dataset """
data_path = Path(__file__).parent / "data.csv"
dataset = Dataset.load(data_path).normalize()

""" Train in normalized space and save """
model = LinearModel(learning_rate=0.1)
model.train(dataset, 10000, progress=True)
model.save("linear_model.csv")

""" Back to km / price and report """
model = model.denormalize(dataset)
dataset = dataset.denormalize()
print(model)
print(f"Mean Absolute Percentage Error: {model.mean_absolute_percentage_error(dataset) * 100:.2f}%")
print(f"Estimated price for 100000 km: {model.estimate(100000):.0f}")

plot_linear_model(model, dataset, "plot.png")
