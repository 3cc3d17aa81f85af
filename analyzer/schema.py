"""
Response schema sent to Gemini as a structured-output constraint.

The schema uses the OpenAPI subset understood by the Generative Language API
(upper-case type names). It is declared once and reused for every request.
"""

from types import MappingProxyType
from typing import Any, Dict

SEVERITY_LEVELS = ("Critical", "High", "Medium", "Positive")
EFFORT_LEVELS = ("High", "Medium", "Low", "N/A")

FINDING_CATEGORIES = ("heuristics", "golden-rules", "user-flow")

FINDING_FIELDS = ("title", "finding", "recommendation", "severity", "effort")


def _finding_list_schema() -> Dict[str, Any]:
    return {
        "type": "ARRAY",
        "items": {
            "type": "OBJECT",
            "properties": {
                "title": {"type": "STRING"},
                "finding": {"type": "STRING"},
                "recommendation": {"type": "STRING"},
                "severity": {"type": "STRING", "enum": list(SEVERITY_LEVELS)},
                "effort": {"type": "STRING", "enum": list(EFFORT_LEVELS)},
            },
            "required": list(FINDING_FIELDS),
        },
    }


def build_audit_schema() -> Dict[str, Any]:
    """Return a fresh, JSON-serializable copy of the audit schema"""
    properties = {category: _finding_list_schema() for category in FINDING_CATEGORIES}
    properties["benchmark"] = {
        "type": "OBJECT",
        "properties": {
            "designScore": {"type": "NUMBER"},
            "summary": {"type": "STRING"},
        },
        "required": ["designScore", "summary"],
    }
    return {
        "type": "OBJECT",
        "properties": properties,
        "required": [*FINDING_CATEGORIES, "benchmark"],
    }


def _freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    return value


# Read-only at every level; build_audit_schema() gives a mutable copy
AUDIT_SCHEMA = _freeze(build_audit_schema())
