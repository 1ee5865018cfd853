from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from contextlib import asynccontextmanager
from brainmate.core.config import settings
from brainmate.core.database import engine, Base
from brainmate.core.auth import require_bearer_token
from brainmate.core.errors import register_error_handlers
from brainmate.core.logging_config import (
    setup_logging,
    CorrelationIdMiddleware,
    RequestLoggingMiddleware,
    log_event,
)
from brainmate.api.endpoints import articles, highlights, reading, profile
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
import logging

# Configure structured JSON logging
audit_logger = setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to add security headers to all responses."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        return response


# Initialize rate limiter
limiter = Limiter(key_func=get_remote_address, default_limits=[settings.RATE_LIMIT])


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Starting Brainmate reading service...")

    # Create the key/value table
    Base.metadata.create_all(bind=engine)
    logger.info("Key/value store table ready")

    yield

    logger.info("Shutting down Brainmate reading service...")


def include_routers(app: FastAPI, prefix: str = "") -> None:
    """Mount every resource router; all of them require the bearer credential."""
    protected = [Depends(require_bearer_token)]

    app.include_router(
        articles.router,
        prefix=f"{prefix}/articles",
        tags=["articles"],
        dependencies=protected,
    )
    app.include_router(
        highlights.router,
        prefix=f"{prefix}/highlights",
        tags=["highlights"],
        dependencies=protected,
    )
    app.include_router(
        reading.router,
        prefix=f"{prefix}/reading",
        tags=["reading"],
        dependencies=protected,
    )
    app.include_router(
        profile.router,
        prefix=f"{prefix}/profile",
        tags=["profile"],
        dependencies=protected,
    )

    @app.get(f"{prefix}/health")
    def health_check():
        return {"status": "ok"}


app = FastAPI(
    title="Brainmate - Reading Service",
    description="Daily article feed, saved articles, highlights and reading stats",
    version=VERSION,
    lifespan=lifespan,
)

# Add correlation ID middleware (first, so all logs have correlation IDs)
app.add_middleware(CorrelationIdMiddleware)
app.add_middleware(RequestLoggingMiddleware)

# Add rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

# Add security headers middleware
app.add_middleware(SecurityHeadersMiddleware)

register_error_handlers(app)

log_event(
    event_type="app.startup",
    message="Brainmate reading service starting",
    event_category="system",
    debug=settings.DEBUG,
    api_prefix=settings.API_PREFIX or "/",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    expose_headers=["Content-Length"],
    max_age=600,
)

include_routers(app, settings.API_PREFIX)


@app.get("/")
def root():
    return {
        "name": "Brainmate",
        "version": VERSION,
        "description": "Reading service",
    }
