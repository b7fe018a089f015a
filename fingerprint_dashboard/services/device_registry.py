# =======================================================================================
# fingerprint_dashboard/services/device_registry.py - Device Registry
# =======================================================================================
import threading
from typing import Any, Dict, List, Optional

from ..models.enums import DEFAULT_DEVICE_STATUS
from ..models.schemas import DeviceRecord, EnrolledUser
from ..utils.exceptions import NotFoundError
from ..utils.validators import now_ms


class DeviceRegistry:
    """Last-known state of every device that has sent a heartbeat."""

    def __init__(self, offline_after: int = 60):
        # seconds without a heartbeat before a device counts as offline
        self.offline_after = offline_after
        self._devices: Dict[str, DeviceRecord] = {}
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------
    def report_heartbeat(
        self,
        device_id: str,
        status: Optional[str] = None,
        telemetry: Optional[Dict[str, Any]] = None,
    ) -> DeviceRecord:
        """Upsert the device and stamp lastSeen. Creates the record if unseen."""
        now = now_ms()
        status = (status or "").strip() or DEFAULT_DEVICE_STATUS

        with self._lock:
            device = self._devices.get(device_id)
            if device is None:
                device = DeviceRecord(
                    deviceId=device_id,
                    name=f"Device {device_id}",
                    status=status,
                    firstSeen=now,
                    lastSeen=now,
                )
                self._devices[device_id] = device
            else:
                device.status = status
                device.lastSeen = now

            if telemetry:
                device.telemetry.update(telemetry)
            return device.model_copy(deep=True)

    def report_status(
        self,
        device_id: str,
        users: List[EnrolledUser],
        telemetry: Optional[Dict[str, Any]] = None,
    ) -> Optional[DeviceRecord]:
        """
        Mirror the device's own view of its enrolled users.

        Unknown devices are ignored (returns None); only a heartbeat registers
        a device.
        """
        with self._lock:
            device = self._devices.get(device_id)
            if device is None:
                return None

            device.users = [u.model_copy() for u in users]
            device.lastSeen = now_ms()
            if telemetry:
                device.telemetry.update(telemetry)
            return device.model_copy(deep=True)

    def record_access(self, device_id: str, granted: bool) -> None:
        """Bump the access counters of a known device."""
        with self._lock:
            device = self._devices.get(device_id)
            if device is None:
                return
            device.totalAccess += 1
            if granted:
                device.grantedAccess += 1
            else:
                device.deniedAccess += 1

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def get(self, device_id: str) -> DeviceRecord:
        with self._lock:
            device = self._devices.get(device_id)
            if device is None:
                raise NotFoundError(f"Device {device_id} not found")
            return device.model_copy(deep=True)

    def list(self) -> List[DeviceRecord]:
        with self._lock:
            return [d.model_copy(deep=True) for d in self._devices.values()]

    def __len__(self) -> int:
        return len(self._devices)

    def is_online(self, device: DeviceRecord, now: Optional[int] = None) -> bool:
        """Reported online and heard from within ``offline_after`` seconds."""
        now = now if now is not None else now_ms()
        if device.status != DEFAULT_DEVICE_STATUS:
            return False
        return now - device.lastSeen <= self.offline_after * 1000
