import logging
from pathlib import Path
from typing import Union
from matplotlib.figure import Figure

from linreg.errors import CouldNotSaveFile
from linreg.ml.dataset import Dataset
from linreg.ml.linear_model import LinearModel

logger = logging.getLogger(__name__)

PLOT_TITLE = "Linear Regression"
PLOT_BACKGROUND = "#ECECF3"
PLOT_DATA_COLOR = "#5C9DFF"
PLOT_DATA_MARKER_SIZE = 10
PLOT_WIDTH = 1000
PLOT_HEIGHT = 800
PLOT_DPI = 100


def plot_linear_model(model: LinearModel, dataset: Dataset, path: Union[str, Path]) -> None:
    """
    Draw the data points and the regression line and save the image.

    The axes span [x.min, x.max] x [y.min, y.max] as stored in `dataset`, so both
    the model and the dataset must be in the original (denormalized) scale.

    Args:
        model: Denormalized model.
        dataset: Denormalized dataset that still carries its min/max.
        path: Output image path; the format follows the extension.

    Raises:
        CouldNotSaveFile: If the image cannot be written.
    """
    x_min, x_max = dataset.get_x_min(), dataset.get_x_max()
    y_min, y_max = dataset.get_y_min(), dataset.get_y_max()

    fig = Figure(figsize=(PLOT_WIDTH / PLOT_DPI, PLOT_HEIGHT / PLOT_DPI), dpi=PLOT_DPI)
    ax = fig.add_subplot()
    ax.set_title(PLOT_TITLE, fontsize=20)
    ax.set_facecolor(PLOT_BACKGROUND)
    ax.grid(color="white", linewidth=2)
    ax.set_axisbelow(True)
    for spine in ax.spines.values():
        spine.set_color(PLOT_BACKGROUND)
    ax.set_xlim(x_min, x_max)
    ax.set_ylim(y_min, y_max)

    ax.plot(dataset.x.values, dataset.y.values, "o", color=PLOT_DATA_COLOR,
            markersize=PLOT_DATA_MARKER_SIZE, label="Data", clip_on=False)
    ax.plot([x_min, x_max], [model.estimate(x_min), model.estimate(x_max)],
            color="black", linewidth=2, label="Regression Line")
    ax.legend(edgecolor="black", facecolor="white", framealpha=0.8)

    try:
        fig.savefig(path)
    except OSError as err:
        raise CouldNotSaveFile(str(err)) from err
    logger.info("Wrote plot", extra={"path": str(path)})
