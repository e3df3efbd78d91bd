class LinearRegressionError(Exception):
    """Base class for every failure surfaced by linreg.

    Each subclass is one error kind. The display form is ``"<Kind>: <detail>"``
    so the CLI can write ``str(err)`` straight to stderr.
    """

    def __init__(self, detail: str = ""):
        super().__init__(detail)
        self.detail = detail

    def __str__(self):
        return f"{type(self).__name__}: {self.detail}"


class CouldNotOpenFile(LinearRegressionError):
    pass


class InvalidFormat(LinearRegressionError):
    pass


class IsEmpty(LinearRegressionError):
    def __init__(self, detail: str = "Dataset is empty"):
        super().__init__(detail)


class CouldNotSaveFile(LinearRegressionError):
    pass


class CouldNotSerialize(LinearRegressionError):
    pass


class DegenerateData(LinearRegressionError):
    """Data that makes scaling or the error metric divide by zero."""


class NotNormalized(LinearRegressionError):
    """A denormalization was requested without a stored min/max."""
