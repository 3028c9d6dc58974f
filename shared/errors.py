# shared/errors.py
"""
Error types shared by the model loader, the inference core and its callers.

InvalidArgumentError is the only error raised while predicting.
ModelFormatError is raised only while building a Predictor from an artifact.
"""


class InvalidArgumentError(ValueError):
    """Feature vector length does not match the model's feature count."""

    def __init__(self, actual: int, expected: int, what: str = "feature vector"):
        self.actual = actual
        self.expected = expected
        super().__init__(f"{what} has length {actual}, expected {expected}")


class ModelFormatError(ValueError):
    """Model artifact is malformed or internally inconsistent."""
