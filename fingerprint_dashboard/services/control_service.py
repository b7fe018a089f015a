# =======================================================================================
# fingerprint_dashboard/services/control_service.py - Operator-Facing Operations
# =======================================================================================
from typing import List, Optional, Tuple

from ..models.schemas import (
    AccessLogEntry,
    Command,
    CommandRequest,
    DeviceRecord,
    EnrollmentLogEntry,
    EventLogEntry,
)
from ..utils.logger import get_logger
from ..utils.validators import CommandValidator
from .command_queue import CommandQueue
from .device_registry import DeviceRegistry
from .log_store import LogStore

logger = get_logger("control")


class ControlService:
    """Queues commands for devices and reads registry and log state."""

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

    def enqueue_command(self, request: CommandRequest) -> Command:
        """Validate and queue a command; it goes out on the device's next heartbeat."""
        device_id = CommandValidator.require_device_id(request.deviceId)
        command = CommandValidator.normalize(request)
        self.commands.enqueue(device_id, command)
        logger.info(
            "[command] Queued %s for %s (%d pending)",
            command.type, device_id, self.commands.pending(device_id),
        )
        return command

    def get_device(self, device_id: str) -> DeviceRecord:
        return self.registry.get(device_id)

    def list_devices(self) -> List[DeviceRecord]:
        return self.registry.list()

    def is_online(self, device: DeviceRecord) -> bool:
        return self.registry.is_online(device)

    def access_log(self, device_id: Optional[str] = None, limit: Optional[int] = None) -> Tuple[List[AccessLogEntry], int]:
        return self.access_logs.query(device_id=device_id, limit=limit)

    def event_log(self, device_id: Optional[str] = None, limit: Optional[int] = None) -> Tuple[List[EventLogEntry], int]:
        return self.event_logs.query(device_id=device_id, limit=limit)

    def enrollment_log(self, device_id: Optional[str] = None, limit: Optional[int] = None) -> Tuple[List[EnrollmentLogEntry], int]:
        return self.enrollment_logs.query(device_id=device_id, limit=limit)
