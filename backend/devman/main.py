"""Main FastAPI application."""

import time
import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from devman.api import config, credentials, devices, errors, interfaces, metrics, sites
from devman.core import settings, setup_logging
from devman.core.logging import LoggerAdapter, get_logger
from devman.core.metrics import (
    HTTP_REQUEST_DURATION_SECONDS,
    HTTP_REQUESTS_IN_PROGRESS,
    HTTP_REQUESTS_TOTAL,
    set_app_info,
)
from devman.domain.exceptions import DomainError, EncodingError

# Setup logging
setup_logging()
logger = get_logger(__name__)

# Create app
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
)

# Set application info metric
set_app_info(version=settings.api_version, environment=settings.environment)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _normalize_path(path: str) -> str:
    """Replace numeric path segments with ``{id}`` to bound label cardinality."""
    return "/".join("{id}" if part.isdigit() else part for part in path.split("/"))


@app.middleware("http")
async def prometheus_metrics_middleware(request: Request, call_next):
    """Middleware to collect Prometheus metrics for all HTTP requests."""
    # Skip metrics for the metrics endpoint itself to avoid recursion
    if request.url.path == "/metrics":
        return await call_next(request)

    method = request.method
    endpoint = _normalize_path(request.url.path)

    HTTP_REQUESTS_IN_PROGRESS.labels(method=method, endpoint=endpoint).inc()
    start_time = time.perf_counter()

    try:
        response = await call_next(request)
        status_code = str(response.status_code)
    except Exception:
        status_code = "500"
        raise
    finally:
        duration = time.perf_counter() - start_time
        HTTP_REQUESTS_IN_PROGRESS.labels(method=method, endpoint=endpoint).dec()
        HTTP_REQUEST_DURATION_SECONDS.labels(method=method, endpoint=endpoint).observe(duration)
        HTTP_REQUESTS_TOTAL.labels(method=method, endpoint=endpoint, status_code=status_code).inc()

    return response


@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    """Tag each request with an ``X-Request-ID`` and log its outcome."""
    request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
    request.state.request_id = request_id
    request_logger = LoggerAdapter(logger, {"request_id": request_id})

    start_time = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start_time) * 1000

    request_logger.info(
        "%s %s -> %d (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round(duration_ms, 1),
        },
    )
    response.headers["X-Request-ID"] = request_id
    return response


# Include routers. Device credentials come before devices so that
# /devices/credentials is not captured by /devices/{dev_id}.
app.include_router(metrics.router)
app.include_router(sites.router, prefix=settings.api_prefix)
app.include_router(credentials.device_router, prefix=settings.api_prefix)
app.include_router(devices.router, prefix=settings.api_prefix)
app.include_router(interfaces.router, prefix=settings.api_prefix)
app.include_router(interfaces.ip_router, prefix=settings.api_prefix)
app.include_router(interfaces.archive_router, prefix=settings.api_prefix)
app.include_router(credentials.router, prefix=settings.api_prefix)
app.include_router(config.router, prefix=settings.api_prefix)


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {
        "message": "Welcome to the Device Manager API",
        "version": settings.api_version,
        "docs": "/docs",
    }


@app.get("/version")
async def version() -> dict:
    return {"version": settings.api_version}


@app.get("/health")
async def health() -> dict:
    """Basic liveness check."""
    return {"status": "healthy"}


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError):
    """Translate domain errors to HTTP responses globally."""
    http_exc = errors.to_http(exc)
    return JSONResponse(
        status_code=http_exc.status_code,
        content={"detail": http_exc.detail},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report undecodable or invalid bodies and path parameters as 400."""
    logger.info("Rejected request payload at %s", [error.get("loc") for error in exc.errors()])
    return await domain_exception_handler(request, EncodingError())
