class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    def __init__(self, message: str, errors: list | None = None):
        super().__init__(message)
        self.errors = errors or []


class NotFoundError(DomainError):
    """Raised when a group or other resource is not configured."""


class UpstreamError(DomainError):
    """Raised when the spreadsheet backend cannot be reached or rejects a call."""

    def __init__(self, message: str, hint: str | None = None):
        super().__init__(message)
        self.hint = hint


class ConfigurationError(DomainError):
    """Raised when credentials or settings are missing or malformed."""
