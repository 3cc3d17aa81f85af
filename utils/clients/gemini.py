"""
Gemini API client utilities for the UX Audit Service.

This module sends a single generateContent request with a structured-output
constraint. Each audit makes exactly one attempt; failures are not retried.
"""

import logging
from typing import Any, Dict, Mapping

import requests

from config import Settings
from core.errors import GenerationError

logger = logging.getLogger(__name__)


def _to_json_value(value: Any) -> Any:
    """Copy read-only mappings and tuples into plain dicts and lists"""
    if isinstance(value, Mapping):
        return {key: _to_json_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_json_value(item) for item in value]
    return value


def build_gemini_payload(prompt: str, response_schema: Mapping[str, Any]) -> Dict[str, Any]:
    """Build the generateContent request body"""
    return {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": _to_json_value(response_schema),
        },
    }


def call_gemini_api(
    prompt: str,
    response_schema: Mapping[str, Any],
    settings: Settings,
) -> Dict[str, Any]:
    """
    Calls the Gemini generateContent endpoint once.

    Args:
        prompt: The full audit prompt
        response_schema: Schema the model output must follow
        settings: Application settings (key, model, base URL)

    Returns:
        Decoded JSON body of the Gemini response

    Raises:
        GenerationError: If the API answers with a non-success status
        requests.RequestException: On transport failures
    """
    response = requests.post(
        settings.gemini_endpoint,
        params={"key": settings.GEMINI_API_KEY},
        headers={"Content-Type": "application/json"},
        json=build_gemini_payload(prompt, response_schema),
    )

    if not response.ok:
        logger.error(f"❌ Gemini API error response ({response.status_code}): {response.text}")
        raise GenerationError(status_code=response.status_code)

    return response.json()


def extract_candidate_text(response_data: Dict[str, Any]) -> str:
    """Return the text of the first part of the first candidate"""
    return response_data["candidates"][0]["content"]["parts"][0]["text"]
