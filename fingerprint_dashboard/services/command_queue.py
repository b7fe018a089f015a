# =======================================================================================
# fingerprint_dashboard/services/command_queue.py - Per-Device Command Queue
# =======================================================================================
import threading
from typing import Dict, List, Optional

from ..models.schemas import Command


class CommandQueue:
    """
    Pending commands per device, delivered at most once.

    Commands are appended by operator actions and handed over in FIFO order
    the next time the device checks in. Nothing is persisted and delivery is
    never acknowledged: once drained, a command counts as delivered.
    """

    def __init__(self):
        self._pending: Dict[str, List[Command]] = {}
        self._lock = threading.Lock()

    def enqueue(self, device_id: str, command: Command) -> None:
        with self._lock:
            self._pending.setdefault(device_id, []).append(command)

    def drain(self, device_id: str) -> List[Command]:
        """Return every pending command for the device and empty its queue."""
        with self._lock:
            return self._pending.pop(device_id, [])

    def pending(self, device_id: Optional[str] = None) -> int:
        with self._lock:
            if device_id is not None:
                return len(self._pending.get(device_id, []))
            return sum(len(cmds) for cmds in self._pending.values())
