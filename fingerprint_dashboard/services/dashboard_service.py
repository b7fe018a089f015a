# =======================================================================================
# fingerprint_dashboard/services/dashboard_service.py
# =======================================================================================

from datetime import datetime
from typing import Dict, Optional

from ..models.schemas import AccessLogEntry, EnrollmentLogEntry, EventLogEntry
from ..utils.validators import now_ms
from .command_queue import CommandQueue
from .device_registry import DeviceRegistry
from .log_store import LogStore


class DashboardService:
    """Aggregated counters for the dashboard and the health endpoint."""

    def __init__(
        self,
        registry: DeviceRegistry,
        commands: CommandQueue,
        access_logs: LogStore[AccessLogEntry],
        event_logs: LogStore[EventLogEntry],
        enrollment_logs: LogStore[EnrollmentLogEntry],
    ):
        self.registry = registry
        self.commands = commands
        self.access_logs = access_logs
        self.event_logs = event_logs
        self.enrollment_logs = enrollment_logs

    # ---------- helpers ----------

    @staticmethod
    def start_of_day_ms(now: Optional[int] = None) -> int:
        """Local midnight of the day containing ``now`` (epoch ms)."""
        ts = datetime.fromtimestamp((now if now is not None else now_ms()) / 1000)
        midnight = ts.replace(hour=0, minute=0, second=0, microsecond=0)
        return int(midnight.timestamp() * 1000)

    # ---------- summary ----------

    def get_summary(self, now: Optional[int] = None) -> Dict[str, int]:
        now = now if now is not None else now_ms()
        devices = self.registry.list()
        today = self.access_logs.entries_since(self.start_of_day_ms(now))
        granted = sum(1 for e in today if e.granted)

        return {
            "devices": len(devices),
            "onlineDevices": sum(1 for d in devices if self.registry.is_online(d, now)),
            "pendingCommands": self.commands.pending(),
            "accessLogs": len(self.access_logs),
            "eventLogs": len(self.event_logs),
            "enrollmentLogs": len(self.enrollment_logs),
            "accessToday": len(today),
            "grantedToday": granted,
            "deniedToday": len(today) - granted,
        }
