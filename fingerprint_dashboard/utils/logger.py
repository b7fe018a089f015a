# =======================================================================================
# fingerprint_dashboard/utils/logger.py - Logging Setup
# =======================================================================================
import logging
import sys

from ..config import config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def create_console_handler() -> logging.Handler:
    """Create console handler for the service logger."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def resolve_level(name: str) -> int:
    """Map a level name to its number; unknown names fall back to INFO."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


app_logger = logging.getLogger("fingerprint_dashboard")

# Only add handlers once (module reloads under uvicorn --reload)
if not app_logger.handlers:
    app_logger.addHandler(create_console_handler())

app_logger.setLevel(logging.DEBUG if config.API_DEBUG else resolve_level(config.LOG_LEVEL))
app_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Child logger under the service logger, e.g. get_logger("archive")."""
    return app_logger.getChild(name)
