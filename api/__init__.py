# API package - FastAPI components
# The router lives in api.routes and is imported by main.py
from .models import (
    Finding,
    Score,
    AuditResult,
    AuditRequest,
    ErrorResponse,
)

__all__ = [
    "Finding",
    "Score",
    "AuditResult",
    "AuditRequest",
    "ErrorResponse",
]
