from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.modules.user_management.schemas.user import UserCreate
from app.modules.user_management.services.user import register_user

router = APIRouter()

@router.post("", response_class=PlainTextResponse)
def register(
    *,
    db: Session = Depends(get_db),
    user_in: UserCreate,
) -> str:
    """
    Register a user. Public.
    No token is issued here; clients log in through POST /api/auth.
    """
    register_user(db, user_in)
    return "user Registered"
