# =======================================================================================
# fingerprint_dashboard/services/log_archive.py - Append-Only Log Archive
# =======================================================================================
import json
from typing import Optional

from pydantic import BaseModel
from sqlalchemy import BigInteger, Column, Integer, MetaData, String, Table, Text

from ..database import DatabaseManager
from ..models.enums import LogKind
from ..utils.logger import get_logger

logger = get_logger("archive")

metadata = MetaData()

log_archive = Table(
    "log_archive",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("kind", String(16), nullable=False),
    Column("entry_id", Integer),
    Column("device_id", String(128), nullable=False),
    Column("received_at", BigInteger, nullable=False),
    Column("payload", Text, nullable=False),
)


class LogArchive:
    """
    Fire-and-forget copy of ingested log entries into a SQL database.

    The in-memory stores stay authoritative for every read. Write failures
    are logged and dropped; callers never see them.
    """

    def __init__(self, db: Optional[DatabaseManager] = None):
        self.db = db
        self._table_ready = False
        if self.db is not None:
            self._ensure_table()

    @classmethod
    def from_url(cls, url: str, pool_size: int = 5, max_overflow: int = 10) -> "LogArchive":
        if not url:
            return cls(None)
        return cls(DatabaseManager(url, pool_size=pool_size, max_overflow=max_overflow))

    def _ensure_table(self) -> bool:
        """Create the archive table once; retried on later writes if it fails."""
        if self._table_ready:
            return True
        try:
            metadata.create_all(self.db.engine)
            self._table_ready = True
        except Exception:
            logger.exception("[archive] Could not prepare archive table at %s", self.db.engine.url)
        return self._table_ready

    @property
    def enabled(self) -> bool:
        return self.db is not None

    def record(self, kind: LogKind, entry: BaseModel) -> None:
        """Write one entry. Intended to run as a background task."""
        if self.db is None or not self._ensure_table():
            return
        try:
            self.db.execute_query(
                """
                INSERT INTO log_archive (kind, entry_id, device_id, received_at, payload)
                VALUES (:kind, :eid, :dev, :recv, :payload)
                """,
                {
                    "kind": kind,
                    "eid": getattr(entry, "id", None),
                    "dev": entry.deviceId,
                    "recv": entry.receivedAt,
                    "payload": json.dumps(entry.model_dump()),
                },
            )
        except Exception:
            logger.exception("[archive] Failed to write %s log for %s", kind, entry.deviceId)

    def health(self) -> str:
        if self.db is None:
            return "disabled"
        try:
            self.db.fetch_one("SELECT 1")
            return "ok"
        except Exception as e:
            logger.warning("[archive] Health check failed: %s", e)
            return "error"

    def count(self, kind: Optional[LogKind] = None) -> int:
        if self.db is None:
            return 0
        if kind is None:
            row = self.db.fetch_one("SELECT COUNT(*) AS n FROM log_archive")
        else:
            row = self.db.fetch_one("SELECT COUNT(*) AS n FROM log_archive WHERE kind = :kind", {"kind": kind})
        return int(row["n"] or 0) if row else 0

    def close(self) -> None:
        if self.db is not None:
            self.db.dispose()
