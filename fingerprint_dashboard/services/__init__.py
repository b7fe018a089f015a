# =======================================================================================
# fingerprint_dashboard/services/__init__.py - Services Package
# =======================================================================================
from .log_store import LogStore
from .command_queue import CommandQueue
from .device_registry import DeviceRegistry
from .ingestion_service import IngestionService
from .control_service import ControlService
from .dashboard_service import DashboardService
from .log_archive import LogArchive

__all__ = [
    "LogStore", "CommandQueue", "DeviceRegistry", "IngestionService",
    "ControlService", "DashboardService", "LogArchive",
]
