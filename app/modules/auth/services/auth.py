"""Email/password authentication"""
import logging
from typing import Any, Dict, Tuple

from sqlalchemy.orm import Session

from app.core.exceptions import ValidationError, field_error
from app.core.security import create_access_token, verify_password
from app.modules.auth.schemas.auth import LoginRequest
from app.modules.user_management.services.user import get_user_by_email, is_valid_email

logger = logging.getLogger("app")

def validate_login(login_in: LoginRequest) -> None:
    errors = []
    if not is_valid_email(login_in.email):
        errors.append(field_error("please include a valid email", "email"))
    if not login_in.password:
        errors.append(field_error("password is required", "password"))
    if errors:
        raise ValidationError(errors)

def authenticate_user(db: Session, email: str, password: str) -> Tuple[bool, Dict[str, Any]]:
    """Check credentials and issue an access token"""
    user = get_user_by_email(db, email)
    if not user or not verify_password(password, user.hashed_password):
        logger.info(f"Failed login attempt for {email}")
        return False, {"error": "Invalid credentials"}

    return True, {
        "access_token": create_access_token(user.id),
        "token_type": "bearer",
    }
