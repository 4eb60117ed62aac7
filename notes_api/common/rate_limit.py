# notes_api/common/rate_limit.py

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from notes_api.common.config import settings
from notes_api.common.utils.global_messages import GlobalMessages

logger = logging.getLogger(__name__)

# In-memory storage (resets on restart).
# For production with multiple workers, point RATE_LIMIT_STORAGE_URI at Redis:
#   RATE_LIMIT_STORAGE_URI=redis://localhost:6379
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.DEFAULT_RATE_LIMIT],
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    strategy="moving-window",
    headers_enabled=True,
    enabled=settings.RATE_LIMIT_ENABLED,
)

# Limit each IP to 5 login requests per rolling minute.
# Decorated routes must accept `request: Request` and `response: Response`.
login_limit = limiter.limit(
    settings.LOGIN_RATE_LIMIT,
    error_message=GlobalMessages.TOO_MANY_LOGIN_ATTEMPTS,
)


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """
    Log the rejected request and reply with the limit's message.

    Must stay synchronous: SlowAPIMiddleware calls it without awaiting.
    """
    logger.warning(
        "Too Many Requests: %s\t%s\t%s\t%s",
        exc.detail,
        request.method,
        request.url.path,
        request.headers.get("origin"),
    )
    response = JSONResponse(status_code=exc.status_code, content={"message": exc.detail})
    return request.app.state.limiter._inject_headers(response, request.state.view_rate_limit)
