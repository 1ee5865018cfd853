"""
Structured JSON logging with correlation IDs and per-request access logs.
"""

import logging
import sys
import time
import uuid
from typing import Optional
from datetime import datetime, timezone
from pythonjsonlogger import jsonlogger
from contextvars import ContextVar
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

# Context variable for correlation ID (task-local)
correlation_id_var: ContextVar[Optional[str]] = ContextVar(
    "correlation_id", default=None
)


class CorrelationIdFilter(logging.Filter):
    """Add correlation ID to log records."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get() or "none"
        return True


class ServiceJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter that adds timestamp, level, logger and source fields."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = (
            datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
        )
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record.setdefault("correlation_id", getattr(record, "correlation_id", "none"))
        log_record["source"] = {
            "file": record.pathname,
            "line": record.lineno,
            "function": record.funcName,
        }


def setup_logging(level: str = "INFO"):
    """Configure structured JSON logging for the service."""

    formatter = ServiceJsonFormatter("%(message)s")

    # Console handler with JSON formatting
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(CorrelationIdFilter())

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    # Route uvicorn loggers through the same handler
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.addHandler(console_handler)
        uvicorn_logger.propagate = False

    audit_logger = logging.getLogger("brainmate.audit")
    audit_logger.setLevel(logging.INFO)

    return audit_logger


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to add correlation IDs to requests."""

    async def dispatch(self, request: Request, call_next):
        # Generate or extract correlation ID
        correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())

        correlation_id_var.set(correlation_id)
        request.state.correlation_id = correlation_id

        response = await call_next(request)

        response.headers["X-Correlation-ID"] = correlation_id

        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of every request."""

    async def dispatch(self, request: Request, call_next):
        logger = logging.getLogger("brainmate.access")
        started = time.perf_counter()
        logger.info(f"<-- {request.method} {request.url.path}")

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"--> {request.method} {request.url.path} {response.status_code} {elapsed_ms:.0f}ms",
            extra={
                "request_method": request.method,
                "request_path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round(elapsed_ms, 1),
            },
        )
        return response


def log_event(
    event_type: str,
    message: str,
    level: int = logging.INFO,
    user_id: Optional[str] = None,
    ip_address: Optional[str] = None,
    request_method: Optional[str] = None,
    request_path: Optional[str] = None,
    event_category: str = "service",
    **extra_fields
):
    """
    Log an audit event with structured data.

    Args:
        event_type: Type of event (e.g., "auth.rejected", "store.failure")
        message: Human-readable message
        level: Logging level (default: INFO)
        user_id: Opaque client user ID if applicable
        ip_address: Client IP address
        request_method: HTTP method
        request_path: Request path
        event_category: Event category (default: "service")
        **extra_fields: Additional fields to include
    """
    logger = logging.getLogger("brainmate.audit")

    extra = {
        "event_type": event_type,
        "event_category": event_category,
    }

    if user_id:
        extra["user_id"] = user_id
    if ip_address:
        extra["ip_address"] = ip_address
    if request_method:
        extra["request_method"] = request_method
    if request_path:
        extra["request_path"] = request_path

    extra.update(extra_fields)

    logger.log(level, message, extra=extra)


def get_client_ip(request: Request) -> str:
    """Extract client IP address from request, considering proxies."""
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        # Take the first IP (original client)
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip

    if request.client:
        return request.client.host

    return "unknown"
