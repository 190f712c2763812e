import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from designops.config import settings
from designops.database import close_db, engine, init_db
from designops.errors import (
    ConcurrentUpdateError,
    DuplicateError,
    NotFoundError,
    ReferenceInUseError,
    StorageError,
    ValidationError,
)
from designops.health import check_database
from designops.routers import (
    artwork_logs,
    artwork_types,
    dashboard,
    designers,
    jobs,
    leads,
    project_types,
    system_lookup,
)

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("designops")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: create tables
    logger.info(f"Starting {settings.app_name}")
    await init_db()
    logger.info("Database tables ready")
    yield
    # Shutdown: close connections
    logger.info(f"Shutting down {settings.app_name}")
    await close_db()


app = FastAPI(
    title=settings.app_name,
    description="Job, artwork log and lookup administration for the design team",
    version="0.1.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_cors_origin],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(jobs.router)
app.include_router(artwork_logs.router)
app.include_router(designers.router)
app.include_router(artwork_types.router)
app.include_router(project_types.router)
app.include_router(system_lookup.router)
app.include_router(dashboard.router)
app.include_router(leads.router)


def _field_name(loc: tuple) -> str:
    # ("body", "job_title") -> "job_title"; ("query", "category") -> "category"
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    return ".".join(parts) or "body"


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors: dict[str, str] = {}
    for error in exc.errors():
        errors.setdefault(_field_name(tuple(error["loc"])), error["msg"])
    return JSONResponse(
        status_code=422,
        content={"detail": "Invalid request", "errors": errors},
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "errors": exc.field_errors},
    )


@app.exception_handler(DuplicateError)
async def duplicate_error_handler(request: Request, exc: DuplicateError):
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": exc.message, "errors": exc.field_errors},
    )


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.exception_handler(ReferenceInUseError)
@app.exception_handler(ConcurrentUpdateError)
async def conflict_handler(request: Request, exc: Exception):
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(f"Storage failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": str(exc)},
    )


@app.get("/")
async def root():
    return {"message": f"{settings.app_name} - Ready"}


@app.get("/health")
async def health_check():
    """Report database connectivity."""
    database = await check_database(engine)
    return {
        "status": "healthy" if database.status == "connected" else "degraded",
        "dependencies": {
            "database": database.status,
        },
        "latency_ms": database.latency_ms,
    }
