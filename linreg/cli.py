"""
Command line entry points.

    linreg-train <dataset_path> [-o PATH] [--plot-path PATH] [-i N] [-l RATE] [--plot] [--precision]
    linreg-predict <x_value> <model_path>

Both return 0 on success. Any linreg error is written to stderr and gives exit code 1.
"""
import argparse
import logging
import sys
from typing import List, Optional

from linreg.config import (
    DEFAULT_ITERATIONS,
    DEFAULT_LEARNING_RATE,
    DEFAULT_MODEL_PATH,
    DEFAULT_PLOT_PATH,
    TrainConfig,
)
from linreg.errors import LinearRegressionError
from linreg.ml.dataset import Dataset
from linreg.ml.linear_model import LinearModel
from linreg.utils.json_logging import setup_json_logging
from linreg.visualization.plot import plot_linear_model

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Number of iterations must be an integer, got {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError("Number of iterations must be greater than 0")
    return number


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Learning rate must be a number, got {value!r}")
    if not number > 0:
        raise argparse.ArgumentTypeError("Learning rate must be greater than 0")
    return number


def build_train_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linreg-train",
        description="Fit y = a * x + b to a CSV dataset with gradient descent.",
    )
    parser.add_argument("dataset_path", help="CSV dataset")
    parser.add_argument("-o", "--output-model-path", default=DEFAULT_MODEL_PATH, help="Output model path")
    parser.add_argument("--plot-path", default=DEFAULT_PLOT_PATH, help="Plot path")
    parser.add_argument("-i", "--iterations", type=_positive_int, default=DEFAULT_ITERATIONS,
                        help="Number of iterations")
    parser.add_argument("-l", "--learning-rate", type=_positive_float, default=DEFAULT_LEARNING_RATE,
                        help="Learning rate")
    parser.add_argument("--plot", action="store_true", help="Plot the dataset and the model")
    parser.add_argument("--precision", action="store_true",
                        help="Print the model precision (Mean Absolute Percentage Error)")
    parser.add_argument("--progress", action="store_true", help="Show a training progress bar")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress as JSON to stderr")
    return parser


def build_predict_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linreg-predict",
        description="Estimate y for a value of x with a saved model.",
    )
    parser.add_argument("x_value", type=float, help="Predicted x value")
    parser.add_argument("model_path", help="CSV model")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress as JSON to stderr")
    return parser


def run_training(config: TrainConfig) -> LinearModel:
    """
    Load, normalize, train, save, then report in the original scale.

    The saved model holds the normalized-space coefficients. The returned model
    is the denormalized one.
    """
    model = LinearModel(learning_rate=config.learning_rate)
    dataset = Dataset.load(config.dataset_path).normalize()
    model.train(dataset, config.iterations, progress=config.progress)
    model.save(config.output_model_path)

    model = model.denormalize(dataset)
    dataset = dataset.denormalize()

    print(model)
    if config.plot:
        plot_linear_model(model, dataset, config.plot_path)
    if config.precision:
        mape = model.mean_absolute_percentage_error(dataset)
        print(f"Mean Absolute Percentage Error: {mape * 100:.2f}%")
    return model


def train(argv: Optional[List[str]] = None) -> int:
    args = build_train_parser().parse_args(argv)
    setup_json_logging(logging.INFO if args.verbose else logging.WARNING)
    try:
        run_training(TrainConfig.from_args(args))
    except LinearRegressionError as err:
        logger.debug("Training failed", exc_info=True)
        print(err, file=sys.stderr)
        return 1
    return 0


def predict(argv: Optional[List[str]] = None) -> int:
    args = build_predict_parser().parse_args(argv)
    setup_json_logging(logging.INFO if args.verbose else logging.WARNING)
    try:
        model = LinearModel.load(args.model_path)
    except LinearRegressionError as err:
        print(err, file=sys.stderr)
        return 1
    print(f"Estimate value for {args.x_value} (x): {model.estimate(args.x_value)} (y)")
    return 0
