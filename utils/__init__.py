# Utils package - Utility modules organized by domain
# Import from subpackages for convenience

from .clients.gemini import call_gemini_api
from .parsing.json import parse_audit_json

__all__ = [
    "call_gemini_api",
    "parse_audit_json",
]
