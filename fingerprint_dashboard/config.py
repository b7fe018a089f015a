# =======================================================================================
# fingerprint_dashboard/config.py - Configuration Management
# =======================================================================================
import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

def _env_int(name: str, default: Optional[int] = None) -> Optional[int]:
    """Helper to parse integer environment variables."""
    v = os.getenv(name)
    return int(v) if v and v.isdigit() else default

class Config:
    # API Settings
    API_DEBUG: bool = os.getenv("API_DEBUG", "false").lower() == "true"
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = _env_int("API_PORT", 3000)

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Log stores
    LOG_CAPACITY: int = _env_int("LOG_CAPACITY", 500)
    LOG_DEFAULT_LIMIT: int = _env_int("LOG_DEFAULT_LIMIT", 50)
    LOG_MAX_LIMIT: int = _env_int("LOG_MAX_LIMIT", 100)

    # Device liveness (seconds since last heartbeat)
    DEVICE_OFFLINE_AFTER: int = _env_int("DEVICE_OFFLINE_AFTER", 60)

    # Optional log archive; empty disables it
    ARCHIVE_DB_URL: str = os.getenv("ARCHIVE_DB_URL", "")
    ARCHIVE_POOL_SIZE: int = _env_int("ARCHIVE_POOL_SIZE", 5)
    ARCHIVE_MAX_OVERFLOW: int = _env_int("ARCHIVE_MAX_OVERFLOW", 10)

config = Config()
