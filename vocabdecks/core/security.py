"""
Request identity handling.

Authentication itself happens upstream (gateway / session layer). That layer
forwards the signed-in user's id in a trusted header, which the middleware
below attaches to the request. Handlers never read ambient state: endpoints
lift it into an explicit ``RequestContext`` that is passed to every service.
"""
import logging
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from vocabdecks.core.config import settings
from vocabdecks.core.exceptions import AuthenticationError
from vocabdecks.schemas.auth import Identity, RequestContext

logger = logging.getLogger(__name__)


def identity_from_header(value: Optional[str]) -> Optional[Identity]:
    """Build an identity from the raw header value, or None when absent/blank."""
    if value is None:
        return None
    user_id = value.strip()
    if not user_id:
        return None
    return Identity(id=user_id)


class IdentityMiddleware(BaseHTTPMiddleware):
    """Attach the upstream-resolved identity (if any) to ``request.state.user``."""

    def __init__(self, app, header_name: Optional[str] = None):
        super().__init__(app)
        self.header_name = header_name or settings.identity_header

    async def dispatch(self, request: Request, call_next):
        request.state.user = identity_from_header(request.headers.get(self.header_name))
        return await call_next(request)


def get_request_context(request: Request) -> RequestContext:
    """Dependency returning the explicit per-request context."""
    return RequestContext(user=getattr(request.state, "user", None))


def require_user(context: RequestContext) -> Identity:
    """Return the signed-in identity or fail closed."""
    user = context.user
    if user is None:
        logger.warning("Rejected call without a signed-in user")
        raise AuthenticationError("You must be signed in to perform this action.")
    return user
