# =======================================================================================
# fingerprint_dashboard/api/routes/devices.py - Device Endpoints
# =======================================================================================
from fastapi import APIRouter, Depends
from ...models.schemas import (
    DeviceListResponse,
    DeviceResponse,
    CommandsResponse,
    HeartbeatRequest,
    HeartbeatResponse,
    StatusReportRequest,
    StatusReportResponse,
)
from ...services.control_service import ControlService
from ...services.ingestion_service import IngestionService
from ...utils.validators import now_ms
from ..dependencies import get_control_service, get_ingestion_service

router = APIRouter()


# ---- device-facing ----

@router.post("/devices/heartbeat", response_model=HeartbeatResponse)
def heartbeat(
    request: HeartbeatRequest, service: IngestionService = Depends(get_ingestion_service)
):
    """Record liveness and return every command queued since the last contact."""
    _, commands = service.heartbeat(request)
    return HeartbeatResponse(
        commands=[c.to_wire() for c in commands],
        serverTime=now_ms(),
    )


@router.post("/devices/status", response_model=StatusReportResponse)
def report_status(
    request: StatusReportRequest, service: IngestionService = Depends(get_ingestion_service)
):
    device = service.report_status(request)
    if device is None:
        return StatusReportResponse(
            message="Device not registered; send a heartbeat first",
            registered=False,
        )
    return StatusReportResponse(message="Status received", registered=True)


@router.get("/devices/{device_id}/commands", response_model=CommandsResponse)
def poll_commands(device_id: str, service: IngestionService = Depends(get_ingestion_service)):
    """Drain pending commands for devices that poll instead of heartbeating."""
    commands = service.poll_commands(device_id)
    return CommandsResponse(commands=[c.to_wire() for c in commands])


# ---- operator-facing ----

@router.get("/devices", response_model=DeviceListResponse)
def list_devices(service: ControlService = Depends(get_control_service)):
    devices = service.list_devices()
    return DeviceListResponse(devices=devices, total=len(devices))


@router.get("/devices/{device_id}", response_model=DeviceResponse)
def get_device(device_id: str, service: ControlService = Depends(get_control_service)):
    device = service.get_device(device_id)
    return DeviceResponse(device=device, online=service.is_online(device))
