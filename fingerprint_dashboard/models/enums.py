# =======================================================================================
# fingerprint_dashboard/models/enums.py - Enums and Constants
# =======================================================================================
from enum import Enum
from typing import Literal

# Type aliases for better type hints
CommandType = Literal["enroll", "delete", "clear"]
LogKind = Literal["access", "event", "enrollment"]

class CommandKind(Enum):
    """Commands a device can be asked to execute on next contact."""
    ENROLL = "enroll"
    DELETE = "delete"
    CLEAR = "clear"

DEFAULT_DEVICE_STATUS = "online"
