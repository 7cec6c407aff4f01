class PredictorError(ValueError):
    """Base error for the prediction pipeline."""


class EmptyHistory(PredictorError):
    """Raised when no sessions are supplied; no model may run on empty input."""

    def __init__(self, message: str = "no sessions supplied"):
        super().__init__(message)


class ProviderError(RuntimeError):
    """Session history could not be fetched or parsed."""
