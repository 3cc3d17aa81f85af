# Analyzer package - UX audit engine
from .prompts import get_audit_prompt
from .schema import AUDIT_SCHEMA
from .generator import generate_audit
from .pipeline import run_audit

__all__ = [
    "get_audit_prompt",
    "AUDIT_SCHEMA",
    "generate_audit",
    "run_audit",
]
