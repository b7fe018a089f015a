# =======================================================================================
# fingerprint_dashboard/api/routes/logs.py - Log Endpoints
# =======================================================================================
from typing import Optional
from fastapi import APIRouter, BackgroundTasks, Depends, Query
from ...models.schemas import (
    AccessLogRequest,
    AccessLogsResponse,
    EnrollmentLogRequest,
    EnrollmentLogsResponse,
    EventLogRequest,
    EventLogsResponse,
    LogAppendResponse,
)
from ...services.control_service import ControlService
from ...services.ingestion_service import IngestionService
from ...services.log_archive import LogArchive
from ..dependencies import get_control_service, get_ingestion_service, get_log_archive

router = APIRouter()


# ---- ingestion ----

@router.post("/logs/access", response_model=LogAppendResponse)
def post_access_log(
    request: AccessLogRequest,
    background_tasks: BackgroundTasks,
    service: IngestionService = Depends(get_ingestion_service),
    archive: LogArchive = Depends(get_log_archive),
):
    entry = service.record_access(request)
    if archive.enabled:
        background_tasks.add_task(archive.record, "access", entry)
    return LogAppendResponse(id=entry.id)


@router.post("/logs/event", response_model=LogAppendResponse)
def post_event_log(
    request: EventLogRequest,
    background_tasks: BackgroundTasks,
    service: IngestionService = Depends(get_ingestion_service),
    archive: LogArchive = Depends(get_log_archive),
):
    entry = service.record_event(request)
    if archive.enabled:
        background_tasks.add_task(archive.record, "event", entry)
    return LogAppendResponse(id=entry.id)


@router.post("/logs/enrollment", response_model=LogAppendResponse)
def post_enrollment_log(
    request: EnrollmentLogRequest,
    background_tasks: BackgroundTasks,
    service: IngestionService = Depends(get_ingestion_service),
    archive: LogArchive = Depends(get_log_archive),
):
    entry = service.record_enrollment(request)
    if archive.enabled:
        background_tasks.add_task(archive.record, "enrollment", entry)
    return LogAppendResponse(id=entry.id)


# ---- reads ----

@router.get("/logs/access", response_model=AccessLogsResponse)
def get_access_logs(
    device_id: Optional[str] = Query(None, alias="deviceId"),
    limit: Optional[int] = Query(None, ge=1, description="Capped at LOG_MAX_LIMIT"),
    service: ControlService = Depends(get_control_service),
):
    logs, total = service.access_log(device_id, limit)
    return AccessLogsResponse(logs=logs, total=total)


@router.get("/logs/events", response_model=EventLogsResponse)
def get_event_logs(
    device_id: Optional[str] = Query(None, alias="deviceId"),
    limit: Optional[int] = Query(None, ge=1),
    service: ControlService = Depends(get_control_service),
):
    logs, total = service.event_log(device_id, limit)
    return EventLogsResponse(logs=logs, total=total)


@router.get("/logs/enrollment", response_model=EnrollmentLogsResponse)
def get_enrollment_logs(
    device_id: Optional[str] = Query(None, alias="deviceId"),
    limit: Optional[int] = Query(None, ge=1),
    service: ControlService = Depends(get_control_service),
):
    logs, total = service.enrollment_log(device_id, limit)
    return EnrollmentLogsResponse(logs=logs, total=total)
