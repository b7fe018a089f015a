# =======================================================================================
# fingerprint_dashboard/services/log_store.py - Bounded In-Memory Log Store
# =======================================================================================
import itertools
import threading
from collections import deque
from typing import Deque, Generic, List, Optional, Tuple, TypeVar

from pydantic import BaseModel

Entry = TypeVar("Entry", bound=BaseModel)


class LogStore(Generic[Entry]):
    """
    Newest-first, fixed-capacity sequence of log entries.

    Entries must expose ``id`` and ``deviceId`` attributes. Appending past
    capacity silently drops the oldest entry.
    """

    def __init__(self, capacity: int = 500, default_limit: int = 50, max_limit: int = 100):
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self.default_limit = default_limit
        self.max_limit = max_limit

        self._entries: Deque[Entry] = deque(maxlen=capacity)
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def append(self, entry: Entry) -> int:
        """Insert at the head and return the entry id (assigned if missing)."""
        with self._lock:
            if entry.id is None:
                entry.id = next(self._ids)
            # deque(maxlen) drops from the right end on appendleft
            self._entries.appendleft(entry)
            return entry.id

    def effective_limit(self, limit: Optional[int]) -> int:
        if limit is None:
            limit = self.default_limit
        return max(0, min(limit, self.max_limit))

    def query(self, device_id: Optional[str] = None, limit: Optional[int] = None) -> Tuple[List[Entry], int]:
        """Return (newest matching entries up to the limit, total matching)."""
        cap = self.effective_limit(limit)
        with self._lock:
            if device_id is None:
                matching = list(self._entries)
            else:
                matching = [e for e in self._entries if e.deviceId == device_id]
        return matching[:cap], len(matching)

    def entries_since(self, timestamp: int) -> List[Entry]:
        """Entries received by the server at or after ``timestamp`` (epoch ms).

        Device clocks are often uptime counters, so ``receivedAt`` is used.
        """
        with self._lock:
            return [e for e in self._entries if e.receivedAt >= timestamp]
