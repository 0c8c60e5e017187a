"""Custom exceptions for the application."""


class MapAnalysisError(Exception):
    """Base exception for map analysis errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(MapAnalysisError):
    """Input validation errors raised before analysis starts."""

    def __init__(self, message: str, field: str | None = None, details: dict | None = None):
        super().__init__(message, details)
        self.field = field


class APIError(MapAnalysisError):
    """API endpoint errors."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"


class AnalysisCancelledError(MapAnalysisError):
    """Raised inside a worker when its analysis was abandoned."""
