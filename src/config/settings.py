"""
Configuration settings for the Users & Movies API
"""

import os
import logging

def _get_bool(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment"""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")

# Environment configuration
DATABASE_URL = os.getenv("DATABASE_URL")
PORT = int(os.getenv("PORT", 8080))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

def configure_logging(level: str = LOG_LEVEL):
    """Configure root logging; runs on import, before any module logs"""
    logging.basicConfig(level=level)

configure_logging()
logger = logging.getLogger(__name__)

# Database pool configuration
DB_POOL_MIN_SIZE = int(os.getenv("DB_POOL_MIN_SIZE", 2))
DB_POOL_MAX_SIZE = int(os.getenv("DB_POOL_MAX_SIZE", 10))
DB_COMMAND_TIMEOUT = float(os.getenv("DB_COMMAND_TIMEOUT", 60))
DB_CREATE_TABLES = _get_bool("DB_CREATE_TABLES")

# CORS settings
ALLOWED_ORIGINS = [origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",") if origin.strip()]

if not DATABASE_URL:
    logger.warning("DATABASE_URL not set - the database pool cannot be initialized")
