"""Authorization Gate — per-route admin check applied before any handler runs.

Invariants:
    - A request passes only with a configured admin key, via X-API-Key or Bearer
    - Rejection raises UnauthorizedError (401) — the handler never executes
    - No configured keys → every request is rejected
"""

import hmac
import logging

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader, HTTPAuthorizationCredentials, HTTPBearer

from participant_api.config import get_settings
from participant_api.core.errors import UnauthorizedError

logger = logging.getLogger(__name__)

_http_bearer = HTTPBearer(auto_error=False)
_api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


def _is_admin_key(candidate: str) -> bool:
    return any(
        hmac.compare_digest(candidate.encode(), key.encode())
        for key in get_settings().admin_api_keys
    )


async def require_admin(
    request: Request,
    bearer_token: HTTPAuthorizationCredentials | None = Depends(_http_bearer),
    api_key: str | None = Depends(_api_key_header),
) -> None:
    """Pass through for admin callers, reject everyone else."""
    if api_key and _is_admin_key(api_key):
        return
    if bearer_token and bearer_token.credentials and _is_admin_key(bearer_token.credentials):
        return
    logger.warning(
        "Rejected unauthenticated request",
        extra={"path": request.url.path, "method": request.method},
    )
    raise UnauthorizedError()
