"""
UX Audit Service - Main Application

A FastAPI backend that renders a website with Playwright, extracts its
visible text, and asks Gemini for a structured UX audit (Nielsen's
heuristics, Shneiderman's golden rules, user flow, and a benchmark score).
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
from api.routes import router
from config import settings

# Load environment variables
load_dotenv()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.GEMINI_API_KEY:
        logger.warning(
            "⚠️  GEMINI_API_KEY environment variable is not set. The API calls will fail."
        )
    yield


# Initialize FastAPI app
app = FastAPI(title="UX Audit Service", lifespan=lifespan)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include all routes from api/routes.py
app.include_router(router)


def run():
    import uvicorn

    logger.info(f"Server is running on http://localhost:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, timeout_keep_alive=60)


if __name__ == "__main__":
    run()
