from pathlib import Path
import logging
import os
import warnings

from dotenv import load_dotenv

# Load environment variables from repo root and the package directory (if present).
REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(REPO_ROOT / ".env")
load_dotenv(Path(__file__).resolve().parent / ".env")


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _parse_origins(value: str) -> list:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


def _parse_log_level(value: str) -> str:
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        warnings.warn(f"Unknown LOG_LEVEL {value!r}, using INFO")
        return "INFO"
    return level


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./taskboard.db")
AUTO_CREATE_TABLES = _get_bool("AUTO_CREATE_TABLES", True)

LOG_LEVEL = _parse_log_level(os.getenv("LOG_LEVEL", "INFO"))
LOG_FILE = os.getenv("LOG_FILE") or None

CORS_ORIGINS = _parse_origins(os.getenv("CORS_ORIGINS", "http://localhost:3000"))
