from fastapi import Request
import logging
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.config import settings

logger = logging.getLogger("app")

# Route prefixes where every request needs a bearer token
PROTECTED_PREFIXES = (f"{settings.API_PREFIX}/post", f"{settings.API_PREFIX}/profile/me")

class AuthLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        path = request.url.path

        if not request.headers.get("Authorization") and path.startswith(PROTECTED_PREFIXES):
            logger.warning(f"Protected endpoint {path} accessed without auth header")

        response = await call_next(request)

        # Log auth-related status codes, with the caller if the guard saw one
        if response.status_code in [401, 403]:
            user_id = getattr(request.state, "user_id", None)
            logger.warning(f"Auth error: {response.status_code} on {request.method} {path} (user: {user_id})")

        return response
