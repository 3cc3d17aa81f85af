"""
Shared fixtures for the UX Audit Service tests.

Playwright and the Gemini HTTP call are always replaced with mocks, so the
suite runs without a browser install or network access.
"""

import json
from typing import Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from config import Settings, get_settings


def make_finding(title: str, severity: str = "High", effort: str = "Medium") -> dict:
    return {
        "title": title,
        "finding": f"{title} observed on the landing page.",
        "recommendation": f"Address {title.lower()}.",
        "severity": severity,
        "effort": effort,
    }


@pytest.fixture
def settings():
    """Settings with a dummy Gemini key"""
    return Settings(GEMINI_API_KEY="test-key")


@pytest.fixture
def unconfigured_settings():
    """Settings with no Gemini key"""
    return Settings(GEMINI_API_KEY="")


@pytest.fixture
def sample_audit():
    """A well-formed audit with one finding per category"""
    return {
        "heuristics": [make_finding("Visibility of system status")],
        "golden-rules": [make_finding("Offer informative feedback", "Positive", "N/A")],
        "user-flow": [make_finding("Signup requires too many steps", "Critical", "High")],
        "benchmark": {
            "designScore": 7.5,
            "summary": "Solid navigation, weak onboarding.",
        },
    }


def gemini_body(text: str) -> dict:
    """Shape of a generateContent response with a single candidate"""
    return {
        "candidates": [
            {
                "content": {"role": "model", "parts": [{"text": text}]},
                "finishReason": "STOP",
            }
        ]
    }


def make_http_response(
    status_code: int = 200,
    body: Optional[dict] = None,
    text: str = "",
) -> MagicMock:
    """Mock of requests.Response"""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.text = text or json.dumps(body or {})
    response.json.return_value = body
    return response


@pytest.fixture
def gemini_ok_response(sample_audit):
    return make_http_response(200, gemini_body(json.dumps(sample_audit)))


def make_playwright_mocks(page_text: str = "Hello world"):
    """
    Build a mock for playwright.async_api.async_playwright.

    Returns:
        Tuple of (async_playwright mock, playwright instance, browser, page)
    """
    page = MagicMock()
    page.goto = AsyncMock(return_value=None)
    page.evaluate = AsyncMock(return_value=page_text)

    context = MagicMock()
    context.new_page = AsyncMock(return_value=page)

    browser = MagicMock()
    browser.new_context = AsyncMock(return_value=context)
    browser.close = AsyncMock(return_value=None)

    playwright = MagicMock()
    playwright.chromium.launch = AsyncMock(return_value=browser)

    manager = MagicMock()
    manager.__aenter__ = AsyncMock(return_value=playwright)
    manager.__aexit__ = AsyncMock(return_value=False)

    async_playwright = MagicMock(return_value=manager)
    return async_playwright, playwright, browser, page


@pytest.fixture
def client(settings):
    """TestClient with the settings dependency overridden"""
    from main import app

    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()
