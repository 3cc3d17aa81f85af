"""
Error types for the audit pipeline.

Every error carries a user-safe ``message`` that is the only text allowed to
cross the HTTP boundary. Lower-level causes are chained and logged server-side.
"""

from typing import Optional


class AuditError(Exception):
    """Base class for pipeline failures with a user-safe message"""

    default_message = "An internal server error occurred."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class FetchError(AuditError):
    """Raised when the browser cannot launch, navigate, or read the page"""

    default_message = (
        "Could not fetch or process the content of the URL. "
        "It might be down or blocking automated access."
    )


class ConfigError(AuditError):
    """Raised when the Gemini API key is not configured"""

    default_message = (
        "GEMINI_API_KEY is not set. Please add it to your environment variables."
    )


class GenerationError(AuditError):
    """Raised when the Gemini call fails or returns unusable output"""

    default_message = "Failed to generate audit from AI."

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
