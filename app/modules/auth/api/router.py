"""Authentication router: login and current user"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, ValidationError
from app.db.session import get_db
from app.deps import get_current_user_id
from app.modules.auth.schemas.auth import LoginRequest, Token
from app.modules.auth.services.auth import authenticate_user, validate_login
from app.modules.user_management.schemas.user import User as UserSchema
from app.modules.user_management.services.user import get_user

router = APIRouter()

@router.get("", response_model=UserSchema)
def read_current_user(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Get the authenticated user"""
    user = get_user(db, user_id=user_id)
    if not user:
        raise NotFoundError("user not found")
    return user

@router.post("", response_model=Token)
def login(
    *,
    db: Session = Depends(get_db),
    login_in: LoginRequest,
) -> Token:
    """Authenticate with email and password and get a bearer token"""
    validate_login(login_in)

    success, result = authenticate_user(db, login_in.email, login_in.password)
    if not success:
        raise ValidationError.single(result["error"])

    return Token(token=result["access_token"], token_type=result["token_type"])
