# =======================================================================================
# fingerprint_dashboard/services/ingestion_service.py - Device-Facing Operations
# =======================================================================================
from typing import Any, Dict, List, Optional, Tuple

from ..models.schemas import (
    AccessLogEntry,
    AccessLogRequest,
    Command,
    DeviceRecord,
    EnrollmentLogEntry,
    EnrollmentLogRequest,
    EventLogEntry,
    EventLogRequest,
    HeartbeatRequest,
    StatusReportRequest,
)
from ..utils.logger import get_logger
from ..utils.validators import CommandValidator, now_ms
from .command_queue import CommandQueue
from .device_registry import DeviceRegistry
from .log_store import LogStore

logger = get_logger("ingest")


def _merge_telemetry(explicit: Optional[Dict[str, Any]], extra: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Fold loose top-level fields (usersCount, signal, ...) into telemetry."""
    merged: Dict[str, Any] = dict(extra or {})
    merged.update(explicit or {})
    return merged


class IngestionService:
    """Handles heartbeats, status reports and log entries sent by devices."""

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

    # ----------------------------------------------------------------------
    # Device state
    # ----------------------------------------------------------------------
    def heartbeat(self, request: HeartbeatRequest) -> Tuple[DeviceRecord, List[Command]]:
        """Register liveness and hand over everything queued for the device."""
        device_id = CommandValidator.require_device_id(request.deviceId)
        telemetry = _merge_telemetry(request.telemetry, request.model_extra)

        device = self.registry.report_heartbeat(device_id, request.status, telemetry)
        commands = self.commands.drain(device_id)

        logger.debug("[heartbeat] %s status=%s", device_id, device.status)
        if commands:
            logger.info(
                "[heartbeat] Delivering %d command(s) to %s: %s",
                len(commands), device_id, ", ".join(c.type for c in commands),
            )
        return device, commands

    def poll_commands(self, device_id: str) -> List[Command]:
        """Drain the queue without touching device state."""
        device_id = CommandValidator.require_device_id(device_id)
        commands = self.commands.drain(device_id)
        if commands:
            logger.info("[command] Polled %d command(s) for %s", len(commands), device_id)
        return commands

    def report_status(self, request: StatusReportRequest) -> Optional[DeviceRecord]:
        device_id = CommandValidator.require_device_id(request.deviceId)
        telemetry = _merge_telemetry(request.telemetry, request.model_extra)

        device = self.registry.report_status(device_id, request.users, telemetry)
        if device is None:
            logger.warning("[status] Ignoring status from unregistered device %s", device_id)
        else:
            logger.debug("[status] %s reports %d enrolled user(s)", device_id, len(device.users))
        return device

    # ----------------------------------------------------------------------
    # Logs
    # ----------------------------------------------------------------------
    def record_access(self, request: AccessLogRequest) -> AccessLogEntry:
        received = now_ms()
        entry = AccessLogEntry(
            deviceId=CommandValidator.require_device_id(request.deviceId),
            userId=request.userId,
            userName=request.userName,
            cardId=request.cardId,
            granted=request.granted,
            timestamp=request.timestamp if request.timestamp is not None else received,
            receivedAt=received,
        )
        self.access_logs.append(entry)
        self.registry.record_access(entry.deviceId, entry.granted)

        logger.info(
            "[access] %s: %s (%s) on %s",
            "GRANTED" if entry.granted else "DENIED", entry.userName, entry.cardId or "-", entry.deviceId,
        )
        return entry

    def record_event(self, request: EventLogRequest) -> EventLogEntry:
        received = now_ms()
        entry = EventLogEntry(
            deviceId=CommandValidator.require_device_id(request.deviceId),
            action=request.action,
            message=request.message,
            userId=request.userId,
            cardId=request.cardId,
            details=dict(request.model_extra or {}),
            timestamp=request.timestamp if request.timestamp is not None else received,
            receivedAt=received,
        )
        self.event_logs.append(entry)
        logger.info("[event] %s: %s - %s", entry.deviceId, entry.action, entry.message or "")
        return entry

    def record_enrollment(self, request: EnrollmentLogRequest) -> EnrollmentLogEntry:
        received = now_ms()
        entry = EnrollmentLogEntry(
            deviceId=CommandValidator.require_device_id(request.deviceId),
            status=request.status,
            success=request.success,
            userId=request.id,
            name=request.name,
            cardId=request.cardId,
            step=request.step,
            timestamp=request.timestamp if request.timestamp is not None else received,
            receivedAt=received,
        )
        self.enrollment_logs.append(entry)
        logger.info("[enroll] %s: %s - %s (%s)", entry.deviceId, entry.status, entry.name or "?", entry.cardId or "-")
        return entry
