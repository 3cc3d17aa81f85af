"""
Audit generation for the UX Audit Service.

Turns extracted page text into a validated audit by calling Gemini with the
fixed response schema. One outbound call per audit, nothing persisted.
"""

import logging

import requests

from analyzer.prompts import get_audit_prompt
from analyzer.schema import AUDIT_SCHEMA
from config import Settings
from core.errors import ConfigError, GenerationError
from utils.clients.gemini import call_gemini_api, extract_candidate_text
from utils.parsing.json import parse_audit_json

logger = logging.getLogger(__name__)


def generate_audit(content: str, settings: Settings) -> dict:
    """
    Generate a UX audit for the given page text.

    Args:
        content: Sanitized page text from the extractor
        settings: Application settings carrying the Gemini credential

    Returns:
        The audit object exactly as returned by the model, after validation

    Raises:
        ConfigError: If no API key is configured (checked before any network I/O)
        GenerationError: If the call fails or the output does not match the schema
    """
    if not settings.GEMINI_API_KEY:
        raise ConfigError()

    logger.info("🤖 Generating AI audit...")
    prompt = get_audit_prompt(content)

    try:
        response_data = call_gemini_api(prompt, AUDIT_SCHEMA, settings)
        audit = parse_audit_json(extract_candidate_text(response_data))
    except GenerationError:
        raise
    except requests.RequestException as e:
        logger.error(f"❌ Error calling Gemini API: {str(e)}")
        raise GenerationError() from e
    except (KeyError, IndexError, TypeError, ValueError) as e:
        logger.error(f"❌ Gemini returned an unusable audit: {str(e)}")
        raise GenerationError() from e

    logger.info("✅ Successfully received JSON from AI")
    return audit
