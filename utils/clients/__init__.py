# Clients subpackage - External API clients
from .gemini import build_gemini_payload, call_gemini_api, extract_candidate_text

__all__ = [
    "build_gemini_payload",
    "call_gemini_api",
    "extract_candidate_text",
]
