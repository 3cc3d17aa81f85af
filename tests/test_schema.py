"""
Tests for the audit response schema and its validation models
"""

import pytest

from analyzer.prompts import get_audit_prompt
from analyzer.schema import (
    AUDIT_SCHEMA,
    EFFORT_LEVELS,
    FINDING_CATEGORIES,
    SEVERITY_LEVELS,
    build_audit_schema,
)
from api.models import AuditResult, Finding, Score


def test_top_level_fields():
    assert set(AUDIT_SCHEMA["properties"]) == {
        "heuristics",
        "golden-rules",
        "user-flow",
        "benchmark",
    }
    assert AUDIT_SCHEMA["required"] == ("heuristics", "golden-rules", "user-flow", "benchmark")


@pytest.mark.parametrize("category", FINDING_CATEGORIES)
def test_finding_categories(category):
    items = AUDIT_SCHEMA["properties"][category]["items"]

    assert AUDIT_SCHEMA["properties"][category]["type"] == "ARRAY"
    assert items["required"] == ("title", "finding", "recommendation", "severity", "effort")
    assert items["properties"]["severity"]["enum"] == ("Critical", "High", "Medium", "Positive")
    assert items["properties"]["effort"]["enum"] == ("High", "Medium", "Low", "N/A")


def test_benchmark():
    benchmark = AUDIT_SCHEMA["properties"]["benchmark"]

    assert dict(benchmark["properties"]["designScore"]) == {"type": "NUMBER"}
    assert dict(benchmark["properties"]["summary"]) == {"type": "STRING"}
    assert benchmark["required"] == ("designScore", "summary")


def test_schema_is_read_only():
    with pytest.raises(TypeError):
        AUDIT_SCHEMA["properties"] = {}


def test_nested_levels_are_read_only():
    benchmark = AUDIT_SCHEMA["properties"]["benchmark"]

    with pytest.raises(TypeError):
        benchmark["properties"]["designScore"]["type"] = "STRING"
    with pytest.raises(AttributeError):
        benchmark["required"].append("extra")
    with pytest.raises(AttributeError):
        AUDIT_SCHEMA["properties"]["heuristics"]["items"]["required"].clear()


def test_build_returns_independent_copies():
    first = build_audit_schema()
    first["properties"]["heuristics"]["items"]["required"].clear()

    assert build_audit_schema()["properties"]["heuristics"]["items"]["required"]


def test_models_mirror_schema():
    aliases = {field.alias or name for name, field in AuditResult.model_fields.items()}

    assert aliases == set(AUDIT_SCHEMA["properties"])
    assert set(Finding.model_fields) == set(
        AUDIT_SCHEMA["properties"]["heuristics"]["items"]["properties"]
    )
    assert set(Score.model_fields) == set(AUDIT_SCHEMA["properties"]["benchmark"]["properties"])


def test_enums_match_models():
    severity = Finding.model_fields["severity"].annotation.__args__
    effort = Finding.model_fields["effort"].annotation.__args__

    assert severity == SEVERITY_LEVELS
    assert effort == EFFORT_LEVELS


def test_prompt_embeds_content_verbatim():
    content = "Welcome!\n  <Free> shipping & returns"
    prompt = get_audit_prompt(content)

    assert f"---\n{content}\n---" in prompt
    assert "senior UX researcher" in prompt
    assert "Do not include any text outside of the JSON object." in prompt
