# =======================================================================================
# fingerprint_dashboard/models/__init__.py - Models Package
# =======================================================================================
from .schemas import *
from .enums import *

__all__ = [
    "DeviceRecord", "EnrolledUser", "Command", "AccessLogEntry", "EventLogEntry",
    "EnrollmentLogEntry", "HeartbeatRequest", "StatusReportRequest", "AccessLogRequest",
    "EventLogRequest", "EnrollmentLogRequest", "CommandRequest", "CommandType",
    "CommandKind", "LogKind",
]
