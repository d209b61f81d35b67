from typing import Optional

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer

from app.core import security
from app.core.config import settings
from app.core.exceptions import AuthError

# Bearer token scheme; failures are reported with our own messages
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_PREFIX}/auth", auto_error=False)

def get_current_user_id(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
) -> str:
    """
    Auth guard for private routes.

    Verifies the bearer token and records its subject on request.state so
    downstream code (and the logging middleware) can see who is calling.
    """
    if not token:
        raise AuthError("No token, authorization denied")

    user_id = security.verify_access_token(token)
    if not user_id:
        raise AuthError("Token is not valid")

    request.state.user_id = user_id
    return user_id
