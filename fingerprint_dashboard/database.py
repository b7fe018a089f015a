# =======================================================================================
# fingerprint_dashboard/database.py - Archive Database Management
# =======================================================================================
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool
from contextlib import contextmanager
from typing import Any, Dict

def _engine_options(url: str, pool_size: int, max_overflow: int) -> Dict[str, Any]:
    # SQLite has no READ COMMITTED level and manages its own pool
    if url.startswith("sqlite"):
        return {"future": True}
    return {
        "poolclass": QueuePool,
        "pool_size": pool_size,
        "max_overflow": max_overflow,
        "pool_pre_ping": True,
        "isolation_level": "READ COMMITTED",
        "future": True,
    }

class DatabaseManager:
    """Manages database connections and transactions."""

    def __init__(self, url: str, pool_size: int = 5, max_overflow: int = 10):
        self.url = url
        self.engine: Engine = create_engine(url, **_engine_options(url, pool_size, max_overflow))

    @contextmanager
    def get_connection(self):
        """Get a database connection with automatic cleanup."""
        with self.engine.begin() as conn:
            yield conn

    def execute_query(self, query: str, params: dict = None):
        """Execute a query with parameters."""
        with self.get_connection() as conn:
            return conn.execute(text(query), params or {})

    def fetch_one(self, query: str, params: dict = None):
        """Fetch a single result."""
        with self.get_connection() as conn:
            result = conn.execute(text(query), params or {})
            return result.mappings().first()

    def dispose(self) -> None:
        self.engine.dispose()
