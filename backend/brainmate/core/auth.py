from fastapi import Depends, HTTPException, status, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from brainmate.core.config import settings
from brainmate.core.logging_config import log_event, get_client_ip
from typing import Optional
import hmac
import logging

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def is_valid_token(token: Optional[str]) -> bool:
    """Compare a presented bearer token against the configured credential."""
    if not token:
        return False
    return hmac.compare_digest(token.encode(), settings.API_BEARER_TOKEN.encode())


async def require_bearer_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> None:
    """
    Reject requests that do not carry the static bearer credential.

    The credential only gates access to the service; it says nothing about
    which user is calling. User IDs are opaque partition keys chosen by the
    client.
    """
    token = credentials.credentials if credentials else None
    if is_valid_token(token):
        return

    log_event(
        event_type="auth.rejected",
        message="Request rejected: missing or invalid bearer token",
        level=logging.WARNING,
        ip_address=get_client_ip(request),
        request_method=request.method,
        request_path=request.url.path,
        event_category="security",
    )
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )
