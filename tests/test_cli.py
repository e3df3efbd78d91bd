import logging
import pytest
from PIL import Image
from linreg.cli import predict, train
from linreg.ml.linear_model import LinearModel
from testing_utils import LINE_PAIRS, write_dataset_csv, write_model_csv


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    root.handlers = saved_handlers
    root.setLevel(saved_level)


@pytest.fixture
def dataset_path(tmp_path):
    return write_dataset_csv(tmp_path / "data.csv", LINE_PAIRS)


class TestTrain:
    """Test cases for the train entry point."""

    def test_train_saves_normalized_model(self, tmp_path, dataset_path, capsys):
        model_path = tmp_path / "model.csv"
        code = train([str(dataset_path), "-o", str(model_path), "-i", "5000", "-l", "0.1"])

        assert code == 0
        saved = LinearModel.load(model_path)
        # y = 2x + 1 is the identity line once both columns are scaled to [0, 1]
        assert saved.a == pytest.approx(1.0, abs=1e-3)
        assert saved.b == pytest.approx(0.0, abs=1e-3)
        assert saved.learning_rate == 0.1

        out = capsys.readouterr().out
        assert out.startswith("LinearModel(a=")
        assert "Mean Absolute Percentage Error" not in out

    def test_train_reports_precision(self, tmp_path, dataset_path, capsys):
        code = train([str(dataset_path), "-o", str(tmp_path / "model.csv"), "-i", "5000", "-l", "0.1", "--precision"])

        assert code == 0
        assert "Mean Absolute Percentage Error: 0.00%" in capsys.readouterr().out

    def test_train_writes_plot(self, tmp_path, dataset_path):
        plot_path = tmp_path / "fit.png"
        code = train([str(dataset_path), "-o", str(tmp_path / "model.csv"), "-i", "100",
                      "--plot", "--plot-path", str(plot_path)])

        assert code == 0
        with Image.open(plot_path) as image:
            assert image.size == (1000, 800)

    def test_train_without_plot_flag_writes_no_plot(self, tmp_path, dataset_path):
        plot_path = tmp_path / "fit.png"
        train([str(dataset_path), "-o", str(tmp_path / "model.csv"), "-i", "10", "--plot-path", str(plot_path)])
        assert not plot_path.exists()

    def test_train_missing_dataset(self, tmp_path, capsys):
        model_path = tmp_path / "model.csv"
        code = train([str(tmp_path / "missing.csv"), "-o", str(model_path)])

        assert code == 1
        assert capsys.readouterr().err.startswith("CouldNotOpenFile:")
        assert not model_path.exists()

    def test_train_empty_dataset(self, tmp_path, capsys):
        path = tmp_path / "data.csv"
        path.write_text("km,price\n")
        code = train([str(path), "-o", str(tmp_path / "model.csv")])

        assert code == 1
        assert "IsEmpty: Dataset is empty" in capsys.readouterr().err

    def test_train_constant_column(self, tmp_path, capsys):
        path = write_dataset_csv(tmp_path / "data.csv", [(1.0, 5.0), (2.0, 5.0)])
        code = train([str(path), "-o", str(tmp_path / "model.csv")])

        assert code == 1
        assert capsys.readouterr().err.startswith("DegenerateData:")

    def test_train_nan_value(self, tmp_path, capsys):
        path = tmp_path / "data.csv"
        path.write_text("km,price\n1,3\n2,nan\n3,7\n")
        model_path = tmp_path / "model.csv"
        code = train([str(path), "-o", str(model_path), "-i", "10"])

        assert code == 1
        assert capsys.readouterr().err.startswith("DegenerateData:")
        assert not model_path.exists()

    @pytest.mark.parametrize("value, message", [
        ("1.5", "Number of iterations must be an integer"),
        ("abc", "Number of iterations must be an integer"),
        ("0", "Number of iterations must be greater than 0"),
    ])
    def test_train_iterations_messages(self, dataset_path, capsys, value, message):
        with pytest.raises(SystemExit):
            train([str(dataset_path), "-i", value])
        assert message in capsys.readouterr().err

    def test_train_learning_rate_not_a_number(self, dataset_path, capsys):
        with pytest.raises(SystemExit):
            train([str(dataset_path), "-l", "fast"])
        assert "Learning rate must be a number" in capsys.readouterr().err

    @pytest.mark.parametrize("flag", [["-i", "0"], ["-i", "abc"], ["-l", "-0.1"]])
    def test_train_rejects_bad_arguments(self, dataset_path, flag):
        with pytest.raises(SystemExit) as excinfo:
            train([str(dataset_path)] + flag)
        assert excinfo.value.code == 2


class TestPredict:
    """Test cases for the predict entry point."""

    def test_predict_prints_estimate(self, tmp_path, capsys):
        model_path = write_model_csv(tmp_path / "model.csv", 2.0, 1.0, 0.01)
        code = predict(["5", str(model_path)])

        assert code == 0
        assert capsys.readouterr().out == "Estimate value for 5.0 (x): 11.0 (y)\n"

    def test_predict_missing_model(self, tmp_path, capsys):
        code = predict(["5", str(tmp_path / "missing.csv")])

        assert code == 1
        assert capsys.readouterr().err.startswith("CouldNotOpenFile:")

    def test_predict_invalid_model(self, tmp_path, capsys):
        path = tmp_path / "model.csv"
        path.write_text("a,b,learning_rate\n")
        code = predict(["5", str(path)])

        assert code == 1
        assert capsys.readouterr().err.startswith("InvalidFormat:")
