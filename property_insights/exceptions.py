"""Custom exception hierarchy for property-insights."""


class PropertyInsightsError(Exception):
    """Base exception for all property-insights errors."""


class NotFoundError(PropertyInsightsError):
    """Raised when a property id or address does not resolve."""


class ValidationError(PropertyInsightsError):
    """Raised when a submitted form fails validation.

    Parameters
    ----------
    errors : dict[str, str]
        Field name to human-readable message.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Invalid fields: {fields}")


class TransportError(PropertyInsightsError):
    """Raised when the email provider cannot be reached or rejects a send."""

    def __init__(self, message: str, status_code: int = 502) -> None:
        super().__init__(message)
        self.status_code = status_code


class ConfigurationError(PropertyInsightsError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        super().__init__(message)
        self.status_code = status_code
