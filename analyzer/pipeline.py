import logging

from fastapi.concurrency import run_in_threadpool

from analyzer.generator import generate_audit
from config import Settings
from core.browser import extract_content

logger = logging.getLogger(__name__)


async def run_audit(url: str, settings: Settings) -> dict:
    """Extract the page text, then generate the audit from it"""
    logger.info(f"--- New Audit Request for {url} ---")

    website_content = await extract_content(url, settings)

    # generate_audit blocks on requests; keep it off the event loop
    return await run_in_threadpool(generate_audit, website_content, settings)
