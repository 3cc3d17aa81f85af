"""
Headless browser content extraction for the UX Audit Service
Renders a page with Playwright and returns its bounded, human-visible text
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from playwright.async_api import async_playwright, Browser, Error as PlaywrightError

from config import Settings
from core.errors import FetchError

logger = logging.getLogger(__name__)


BROWSER_ARGS = [
    "--disable-dev-shm-usage",  # Prevents memory issues in Docker
    "--no-sandbox",  # Required in some containerized environments
    "--disable-setuid-sandbox",
    "--disable-gpu",
]

# Drops code and CSS before reading text so only visible copy reaches the model
SANITIZE_AND_READ_TEXT = """() => {
    document
        .querySelectorAll('script, style, link[rel="stylesheet"]')
        .forEach((el) => el.remove());
    return document.body ? document.body.innerText : "";
}"""


@asynccontextmanager
async def launch_browser() -> AsyncIterator[Browser]:
    """
    Launch an isolated headless Chromium for a single request.

    The browser is closed on every exit path, including errors raised
    while the caller is still navigating or reading the page.
    """
    async with async_playwright() as p:
        logger.info("🚀 Launching browser...")
        browser = await p.chromium.launch(headless=True, args=BROWSER_ARGS)
        try:
            yield browser
        finally:
            await browser.close()
            logger.info("✅ Browser closed")


def truncate_content(text: str, max_length: int) -> str:
    """Trim whitespace and keep the first ``max_length`` characters"""
    return text.strip()[:max_length]


async def extract_content(url: str, settings: Settings) -> str:
    """
    Fetch a URL in a headless browser and return its visible text.

    Args:
        url: The website URL to render
        settings: Application settings (timeout, viewport, size bound)

    Returns:
        Plain text of the page body, at most settings.MAX_CONTENT_LENGTH chars

    Raises:
        FetchError: If the browser cannot launch, navigation fails or times out
    """
    logger.info(f"🌐 Fetching content for: {url}")

    try:
        async with launch_browser() as browser:
            context = await browser.new_context(
                viewport={
                    "width": settings.VIEWPORT_WIDTH,
                    "height": settings.VIEWPORT_HEIGHT,
                },
                user_agent=settings.BROWSER_USER_AGENT,
            )
            page = await context.new_page()
            await page.goto(
                url,
                wait_until="networkidle",
                timeout=settings.navigation_timeout_ms,
            )
            text = await page.evaluate(SANITIZE_AND_READ_TEXT)
    except PlaywrightError as e:
        logger.error(f"❌ Browser error fetching {url}: {str(e)}")
        raise FetchError() from e

    content = truncate_content(text or "", settings.MAX_CONTENT_LENGTH)
    logger.info(f"✅ Extracted {len(content)} characters from {url}")
    return content
