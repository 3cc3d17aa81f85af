# Parsing subpackage - Model output parsing
from .json import parse_audit_json, strip_code_fences

__all__ = [
    "parse_audit_json",
    "strip_code_fences",
]
