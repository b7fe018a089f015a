# =======================================================================================
# fingerprint_dashboard/utils/validators.py - Validation Helpers
# =======================================================================================
import time
from typing import Optional

from .exceptions import BadRequestError
from ..models.enums import CommandKind
from ..models.schemas import Command, CommandRequest


def now_ms() -> int:
    """Current server time in epoch milliseconds."""
    return int(time.time() * 1000)


class CommandValidator:
    """Turns an operator command request into the command a device receives."""

    @staticmethod
    def require_device_id(device_id: Optional[str]) -> str:
        if device_id is None or not str(device_id).strip():
            raise BadRequestError("deviceId is required")
        return str(device_id).strip()

    @staticmethod
    def _require_user_id(request: CommandRequest) -> int:
        if request.id is None:
            raise BadRequestError(f"id is required for {request.type} commands")
        return request.id

    @classmethod
    def normalize(cls, request: CommandRequest, timestamp: Optional[int] = None) -> Command:
        """
        Validate type-specific fields and apply defaults.

        enroll -> {id, name, phone, cardId}; phone and cardId default to "".
        delete -> {id}
        clear  -> no payload
        """
        cls.require_device_id(request.deviceId)
        kind = CommandKind(request.type)
        ts = timestamp if timestamp is not None else now_ms()

        if kind is CommandKind.ENROLL:
            user_id = cls._require_user_id(request)
            if not request.name or not request.name.strip():
                raise BadRequestError("name is required for enroll commands")
            return Command(
                type=kind.value,
                id=user_id,
                name=request.name.strip(),
                phone=request.phone or "",
                cardId=request.cardId or "",
                timestamp=ts,
            )

        if kind is CommandKind.DELETE:
            return Command(type=kind.value, id=cls._require_user_id(request), timestamp=ts)

        return Command(type=kind.value, timestamp=ts)
