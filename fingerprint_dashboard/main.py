# =======================================================================================
# fingerprint_dashboard/main.py - FastAPI Application Entry Point
# =======================================================================================
from typing import List, Optional
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from . import __version__
from .config import Config, config
from .api.dependencies import get_dashboard_service, get_log_archive
from .api.routes.commands import router as commands_router
from .api.routes.devices import router as devices_router
from .api.routes.logs import router as logs_router
from .models.schemas import HealthResponse, Stats
from .services.command_queue import CommandQueue
from .services.control_service import ControlService
from .services.dashboard_service import DashboardService
from .services.device_registry import DeviceRegistry
from .services.ingestion_service import IngestionService
from .services.log_archive import LogArchive
from .services.log_store import LogStore
from .utils.exceptions import FingerprintDashboardError, InternalError
from .utils.logger import get_logger

logger = get_logger("api")


def list_endpoints(app: FastAPI) -> List[str]:
    """'METHOD /path' for every public route, used in 404 bodies."""
    endpoints = []
    for path, operations in app.openapi().get("paths", {}).items():
        for method in operations:
            endpoints.append(f"{method.upper()} {path}")
    return endpoints


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path"))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(FingerprintDashboardError)
    async def dashboard_error_handler(request: Request, exc: FingerprintDashboardError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": str(exc)},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = _format_validation_errors(exc)
        logger.info("[api] Bad request %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=400, content={"success": False, "error": message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return JSONResponse(
                status_code=404,
                content={
                    "success": False,
                    "error": f"Endpoint not found: {request.method} {request.url.path}",
                    "endpoints": list_endpoints(request.app),
                },
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("[api] Unhandled error on %s %s", request.method, request.url.path)
        error = InternalError("Internal server error")
        return JSONResponse(status_code=error.status_code, content={"success": False, "error": str(error)})


def create_app(settings: Optional[Config] = None) -> FastAPI:
    settings = settings or config

    app = FastAPI(
        title="Fingerprint Access Dashboard API",
        version=__version__,
        description="Device heartbeats, access logs and command queues for fingerprint readers",
        debug=settings.API_DEBUG,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Stores, owned by this app instance
    registry = DeviceRegistry(offline_after=settings.DEVICE_OFFLINE_AFTER)
    commands = CommandQueue()
    log_options = dict(
        capacity=settings.LOG_CAPACITY,
        default_limit=settings.LOG_DEFAULT_LIMIT,
        max_limit=settings.LOG_MAX_LIMIT,
    )
    access_logs = LogStore(**log_options)
    event_logs = LogStore(**log_options)
    enrollment_logs = LogStore(**log_options)
    stores = (registry, commands, access_logs, event_logs, enrollment_logs)

    app.state.settings = settings
    app.state.ingestion = IngestionService(*stores)
    app.state.control = ControlService(*stores)
    app.state.dashboard = DashboardService(*stores)
    app.state.archive = LogArchive.from_url(
        settings.ARCHIVE_DB_URL,
        pool_size=settings.ARCHIVE_POOL_SIZE,
        max_overflow=settings.ARCHIVE_MAX_OVERFLOW,
    )

    # Routers
    app.include_router(devices_router, tags=["devices"])
    app.include_router(commands_router, tags=["commands"])
    app.include_router(logs_router, tags=["logs"])

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    def health(
        dashboard: DashboardService = Depends(get_dashboard_service),
        archive: LogArchive = Depends(get_log_archive),
    ):
        archive_state = archive.health()
        return HealthResponse(
            status="OK",
            stats=Stats(**dashboard.get_summary()),
            archive=archive_state,
            message="Archive unreachable" if archive_state == "error" else None,
        )

    register_exception_handlers(app)

    @app.on_event("startup")
    async def startup_event():
        logger.info(
            "Fingerprint dashboard API started (log capacity %d, archive %s)",
            settings.LOG_CAPACITY,
            "enabled" if app.state.archive.enabled else "disabled",
        )

    @app.on_event("shutdown")
    async def shutdown_event():
        app.state.archive.close()

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
