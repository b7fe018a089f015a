# =======================================================================================
# fingerprint_dashboard/api/dependencies.py - FastAPI Dependencies
# =======================================================================================
from fastapi import Request
from ..services.control_service import ControlService
from ..services.dashboard_service import DashboardService
from ..services.ingestion_service import IngestionService
from ..services.log_archive import LogArchive

# Services are built once per app in create_app() and kept on app.state.

def get_ingestion_service(request: Request) -> IngestionService:
    """Dependency to get the device-facing service."""
    return request.app.state.ingestion

def get_control_service(request: Request) -> ControlService:
    """Dependency to get the operator-facing service."""
    return request.app.state.control

def get_dashboard_service(request: Request) -> DashboardService:
    return request.app.state.dashboard

def get_log_archive(request: Request) -> LogArchive:
    return request.app.state.archive
