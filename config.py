"""
Centralized configuration for the UX Audit Service
All environment variables and settings are defined here
"""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Constructed once at startup and passed explicitly into the extractor
    and the generator. Frozen, so it stays read-only for the process lifetime.
    """

    # ======================
    # Gemini API Configuration
    # ======================
    GEMINI_API_KEY: str = Field(default="", description="Gemini API key")
    GEMINI_MODEL: str = Field(
        default="gemini-2.0-flash",
        description="Gemini model used for the audit"
    )
    GEMINI_API_BASE_URL: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Root URL of the Generative Language API"
    )

    # ======================
    # Server Configuration
    # ======================
    HOST: str = Field(default="0.0.0.0", description="Bind address")
    PORT: int = Field(default=3000, description="Listening port")

    # ======================
    # Browser Configuration
    # ======================
    NAVIGATION_TIMEOUT: int = Field(
        default=30,
        description="Max seconds to wait for the page to settle"
    )
    MAX_CONTENT_LENGTH: int = Field(
        default=10000,
        description="Max characters of page text sent to the model"
    )
    VIEWPORT_WIDTH: int = Field(
        default=1920,
        description="Browser viewport width"
    )
    VIEWPORT_HEIGHT: int = Field(
        default=1080,
        description="Browser viewport height"
    )
    BROWSER_USER_AGENT: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
        ),
        description="User agent for the browser context"
    )

    # ======================
    # Logging Configuration
    # ======================
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )

    @property
    def navigation_timeout_ms(self) -> int:
        """Navigation timeout in milliseconds, as Playwright expects it"""
        return self.NAVIGATION_TIMEOUT * 1000

    @property
    def gemini_endpoint(self) -> str:
        """Full generateContent URL for the configured model"""
        return f"{self.GEMINI_API_BASE_URL}/models/{self.GEMINI_MODEL}:generateContent"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"  # Allow extra env vars in .env file
        frozen = True


# Global settings instance
settings = Settings()


# ======================
# Convenience Functions
# ======================

def get_settings() -> Settings:
    """Get the process-wide settings (FastAPI dependency)"""
    return settings
