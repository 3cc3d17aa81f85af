import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from analyzer.pipeline import run_audit
from api.models import AuditRequest, ErrorResponse
from config import Settings, get_settings
from core.errors import AuditError

logger = logging.getLogger(__name__)

# Create router
router = APIRouter()


@router.get("/")
async def root():
    return {
        "service": "UX Audit",
        "status": "running",
        "endpoints": {"audit": "/api/audit (POST)"},
    }


@router.post(
    "/api/audit",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_audit(
    request: Optional[AuditRequest] = None,
    settings: Settings = Depends(get_settings),
):
    """
    Renders the given URL, extracts its text, and returns a UX audit with:
    - Nielsen's heuristics findings
    - Shneiderman's golden rules findings
    - User flow findings
    - A benchmark design score and summary

    Every failure is reported as 500 with a user-safe {"error": ...} body.
    """
    if request is None or not request.url:
        return JSONResponse(status_code=400, content={"error": "URL is required."})

    try:
        return await run_audit(request.url, settings)
    except AuditError as e:
        logger.error(f"Error during audit process for {request.url}: {e.message}")
        return JSONResponse(status_code=500, content={"error": e.message})
    except Exception:
        logger.exception(f"Unexpected failure during audit for {request.url}")
        return JSONResponse(
            status_code=500,
            content={"error": "An internal server error occurred."},
        )


@router.get("/health")
async def health_check(settings: Settings = Depends(get_settings)):
    return {
        "status": "healthy",
        "gemini_api": "configured" if settings.GEMINI_API_KEY else "missing",
    }
