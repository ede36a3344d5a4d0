"""Error types shared across the weight tracker."""


class WeightTrackerError(Exception):
    """Base error for the weight tracker."""


class WeightInputError(WeightTrackerError, ValueError):
    """User-correctable input error tied to a single form field."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class ConfirmationRequiredError(WeightTrackerError):
    """A destructive action was requested without explicit confirmation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class WeightApiError(WeightTrackerError):
    """The persistence server rejected a request or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
