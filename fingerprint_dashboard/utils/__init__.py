# =======================================================================================
# fingerprint_dashboard/utils/__init__.py - Utils Package
# =======================================================================================
from .exceptions import *
from .validators import *

__all__ = [
    "FingerprintDashboardError", "BadRequestError", "NotFoundError",
    "InternalError", "CommandValidator", "now_ms"
]
