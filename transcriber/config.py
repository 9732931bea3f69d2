"""Minimal settings + logging for the hearing transcriber."""

from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Load .env file from project root
PROJECT_DIR = Path(__file__).resolve().parent.parent
load_dotenv(dotenv_path=PROJECT_DIR / ".env")


class Settings(BaseSettings):
    """Essential settings for the gateway and logging."""

    # Environment + logging
    log_level: str = "INFO"

    # Model configuration
    gemini_model: str = "gemini-2.5-pro"
    google_api_key: str = ""


settings = Settings()


def configure_structlog() -> None:
    """Simple logging setup."""
    import logging
    import sys

    import structlog

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        stream=sys.stdout,
        format="%(message)s",
    )

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.stdlib.add_log_level,
            structlog.dev.ConsoleRenderer(colors=True),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
