# Core package - Infrastructure components
from .browser import launch_browser, extract_content, truncate_content
from .errors import AuditError, FetchError, ConfigError, GenerationError

__all__ = [
    # Browser
    "launch_browser",
    "extract_content",
    "truncate_content",
    # Errors
    "AuditError",
    "FetchError",
    "ConfigError",
    "GenerationError",
]
