from __future__ import annotations
import argparse
from dataclasses import dataclass

DEFAULT_MODEL_PATH = "linear_model.csv"
DEFAULT_PLOT_PATH = "plot.png"
DEFAULT_ITERATIONS = 10000
DEFAULT_LEARNING_RATE = 0.01


@dataclass(frozen=True)
class TrainConfig:
    """Options of a training run.

    Attributes:
        dataset_path: CSV dataset to fit.
        output_model_path: Where the fitted model is saved.
        plot_path: Where the plot image is written when `plot` is set.
        iterations: Number of gradient descent steps, must be > 0.
        learning_rate: Gradient descent step size, must be > 0.
        plot: Write a plot of the data and the fitted line.
        precision: Report the mean absolute percentage error.
        progress: Show a progress bar while training.
    """
    dataset_path: str
    output_model_path: str = DEFAULT_MODEL_PATH
    plot_path: str = DEFAULT_PLOT_PATH
    iterations: int = DEFAULT_ITERATIONS
    learning_rate: float = DEFAULT_LEARNING_RATE
    plot: bool = False
    precision: bool = False
    progress: bool = False

    def __post_init__(self):
        if self.iterations <= 0:
            raise ValueError(f"Number of iterations must be greater than 0, got {self.iterations}")
        if not self.learning_rate > 0:
            raise ValueError(f"Learning rate must be greater than 0, got {self.learning_rate}")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> TrainConfig:
        return cls(
            dataset_path=args.dataset_path,
            output_model_path=args.output_model_path,
            plot_path=args.plot_path,
            iterations=args.iterations,
            learning_rate=args.learning_rate,
            plot=args.plot,
            precision=args.precision,
            progress=args.progress,
        )
