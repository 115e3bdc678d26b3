import logging
import os
from pydantic_settings import BaseSettings
from functools import lru_cache

logger = logging.getLogger("presentations.config")

DEFAULT_API_URL = "https://diplomatic-harmony-production-66e6.up.railway.app"


class Settings(BaseSettings):
    API_URL: str = DEFAULT_API_URL
    MAX_UPLOAD_BYTES: int = 100 * 1024 * 1024
    PRESENTATION_EXTENSIONS: list[str] = [
        ".ppt", ".pptx", ".pptm", ".pps", ".ppsx", ".pot", ".potx",
        ".odp", ".key", ".presentation",
    ]
    PDF_EXTENSIONS: list[str] = [".pdf"]
    REQUEST_TIMEOUT: float | None = None
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), ".env")
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    logger.debug("Loading settings from .env")
    settings = Settings()
    logger.debug(
        "Settings loaded — API_URL=%s, MAX_UPLOAD_BYTES=%d, REQUEST_TIMEOUT=%s",
        settings.API_URL,
        settings.MAX_UPLOAD_BYTES,
        settings.REQUEST_TIMEOUT,
    )
    return settings


def configure_logging(level: str | None = None):
    logging.basicConfig(
        level=(level or get_settings().LOG_LEVEL).upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
