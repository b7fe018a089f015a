# =======================================================================================
# fingerprint_dashboard/api/routes/commands.py - Command Endpoints
# =======================================================================================
from fastapi import APIRouter, Depends
from ...models.schemas import CommandRequest, CommandResponse
from ...services.control_service import ControlService
from ..dependencies import get_control_service

router = APIRouter()

@router.post("/command", response_model=CommandResponse)
def enqueue_command(request: CommandRequest, service: ControlService = Depends(get_control_service)):
    """Queue enroll/delete/clear for a device; echoes the normalized command."""
    command = service.enqueue_command(request)
    return CommandResponse(command=command.to_wire())
