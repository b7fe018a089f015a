
# =======================================================================================
# fingerprint_dashboard/models/schemas.py - Pydantic Models
# =======================================================================================
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, ConfigDict, Field
from .enums import CommandType, DEFAULT_DEVICE_STATUS

# ========== Stored records ==========

class EnrolledUser(BaseModel):
    """User summary as self-reported by the device."""
    id: int
    name: str = ""
    cardId: str = ""
    phone: str = ""

class DeviceRecord(BaseModel):
    """Last-known state of a device."""
    deviceId: str
    name: str
    status: str = DEFAULT_DEVICE_STATUS
    firstSeen: int
    lastSeen: int
    users: List[EnrolledUser] = Field(default_factory=list)
    telemetry: Dict[str, Any] = Field(default_factory=dict)
    totalAccess: int = 0
    grantedAccess: int = 0
    deniedAccess: int = 0

class Command(BaseModel):
    """Normalized command waiting in a device queue."""
    type: CommandType
    id: Optional[int] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    cardId: Optional[str] = None
    timestamp: int

    def to_wire(self) -> Dict[str, Any]:
        """Payload sent to the device; fields a type does not carry are omitted."""
        return self.model_dump(exclude_none=True)

class AccessLogEntry(BaseModel):
    id: Optional[int] = None
    deviceId: str
    userId: Optional[int] = None
    userName: str
    cardId: Optional[str] = None
    granted: bool
    timestamp: int
    receivedAt: int

class EventLogEntry(BaseModel):
    id: Optional[int] = None
    deviceId: str
    action: str
    message: Optional[str] = None
    userId: Optional[int] = None
    cardId: Optional[str] = None
    details: Dict[str, Any] = Field(default_factory=dict)
    timestamp: int
    receivedAt: int

class EnrollmentLogEntry(BaseModel):
    id: Optional[int] = None
    deviceId: str
    status: str
    success: Optional[bool] = None
    userId: Optional[int] = None
    name: Optional[str] = None
    cardId: Optional[str] = None
    step: Optional[int] = None
    timestamp: int
    receivedAt: int

# ========== Device-facing requests ==========

class HeartbeatRequest(BaseModel):
    """Heartbeat body; unknown top-level fields are kept as telemetry."""
    model_config = ConfigDict(extra="allow")

    deviceId: str = Field(..., min_length=1, description="Reporting device identifier")
    status: Optional[str] = Field(None, description="Status token, e.g. online")
    telemetry: Optional[Dict[str, Any]] = None
    timestamp: Optional[int] = Field(None, description="Device clock, informational")

class StatusReportRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    deviceId: str = Field(..., min_length=1)
    users: List[EnrolledUser]
    telemetry: Optional[Dict[str, Any]] = None

class AccessLogRequest(BaseModel):
    deviceId: str = Field(..., min_length=1)
    userId: Optional[int] = None
    userName: str = Field(..., min_length=1)
    cardId: Optional[str] = None
    granted: bool
    timestamp: Optional[int] = Field(None, description="Event time in epoch ms")

class EventLogRequest(BaseModel):
    """Device event; fields beyond the known ones are kept under details."""
    model_config = ConfigDict(extra="allow")

    deviceId: str = Field(..., min_length=1)
    action: str = Field(..., min_length=1)
    message: Optional[str] = None
    userId: Optional[int] = None
    cardId: Optional[str] = None
    timestamp: Optional[int] = None

class EnrollmentLogRequest(BaseModel):
    deviceId: str = Field(..., min_length=1)
    status: str = Field(..., min_length=1, description="started | step | success | failed")
    success: Optional[bool] = None
    id: Optional[int] = Field(None, description="User slot on the device")
    name: Optional[str] = None
    cardId: Optional[str] = None
    step: Optional[int] = None
    timestamp: Optional[int] = None

# ========== Operator-facing requests ==========

class CommandRequest(BaseModel):
    deviceId: str = Field(..., min_length=1)
    type: CommandType
    id: Optional[int] = Field(None, description="User slot; numeric strings accepted")
    name: Optional[str] = None
    phone: Optional[str] = None
    cardId: Optional[str] = None

# ========== Responses ==========

class LogAppendResponse(BaseModel):
    success: bool = True
    id: int

class StatusReportResponse(BaseModel):
    success: bool = True
    message: str
    registered: bool

class HeartbeatResponse(BaseModel):
    success: bool = True
    message: str = "Heartbeat received"
    commands: List[Dict[str, Any]]
    serverTime: int

class CommandsResponse(BaseModel):
    success: bool = True
    commands: List[Dict[str, Any]]

class CommandResponse(BaseModel):
    success: bool = True
    command: Dict[str, Any]

class DeviceResponse(BaseModel):
    success: bool = True
    device: DeviceRecord
    online: bool

class DeviceListResponse(BaseModel):
    success: bool = True
    devices: List[DeviceRecord]
    total: int

class AccessLogsResponse(BaseModel):
    success: bool = True
    logs: List[AccessLogEntry]
    total: int

class EventLogsResponse(BaseModel):
    success: bool = True
    logs: List[EventLogEntry]
    total: int

class EnrollmentLogsResponse(BaseModel):
    success: bool = True
    logs: List[EnrollmentLogEntry]
    total: int

# ========== Health for dashboard ==========

class Stats(BaseModel):
    devices: int
    onlineDevices: int
    pendingCommands: int
    accessLogs: int
    eventLogs: int
    enrollmentLogs: int
    accessToday: int
    grantedToday: int
    deniedToday: int

class HealthResponse(BaseModel):
    status: str                 # "OK"
    stats: Stats
    archive: str                # "disabled" | "ok" | "error"
    message: Optional[str] = None
