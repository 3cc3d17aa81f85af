import json

from api.models import AuditResult


def strip_code_fences(response_text: str) -> str:
    """Remove a surrounding markdown code block if the model added one"""
    text = response_text.strip()
    if text.startswith("```json"):
        text = text[len("```json"):]
    elif text.startswith("```"):
        text = text[len("```"):]
    if text.endswith("```"):
        text = text[: -len("```")]
    return text.strip()


def parse_audit_json(response_text: str) -> dict:
    """
    Parse and validate the audit JSON returned by Gemini.

    Unlike a repair parser this is strict: the payload must be valid JSON and
    must match the audit schema. Nothing is patched or filled in.

    Args:
        response_text: Text of the first candidate

    Returns:
        The parsed object, unchanged

    Raises:
        ValueError: If the text is not JSON or does not match the schema
            (json.JSONDecodeError and pydantic.ValidationError are both
            ValueError subclasses)
    """
    text = strip_code_fences(response_text)
    result = json.loads(text)
    if not isinstance(result, dict):
        raise ValueError(f"Expected a JSON object, got {type(result).__name__}")

    # Strict: "7.5" or true is not a number, and field names must be the schema keys
    AuditResult.model_validate_json(text, strict=True)
    return result
