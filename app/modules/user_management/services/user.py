from typing import Any, Dict, List, Optional
import logging
import uuid

from email_validator import validate_email, EmailNotValidError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, NotFoundError, ValidationError, field_error
from app.core.security import get_password_hash, gravatar_url, normalize_email
from app.modules.user_management.models.user import User
from app.modules.user_management.schemas.user import UserCreate

logger = logging.getLogger("app")

MIN_PASSWORD_LENGTH = 6

def get_user(db: Session, user_id: str) -> Optional[User]:
    """Get user by ID"""
    return db.query(User).filter(User.id == user_id).first()

def require_user(db: Session, user_id: str) -> User:
    """The token subject must still exist, e.g. to be copied onto a post"""
    user = get_user(db, user_id=user_id)
    if not user:
        raise NotFoundError("user not found")
    return user

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """Get user by email"""
    return db.query(User).filter(User.email == normalize_email(email)).first()

def is_valid_email(email: str) -> bool:
    try:
        validate_email(email.strip(), check_deliverability=False)
    except EmailNotValidError:
        return False
    return True

def validate_registration(user_in: UserCreate) -> List[Dict[str, Any]]:
    """Collect every violated registration constraint"""
    errors = []
    if not user_in.name.strip():
        errors.append(field_error("name is required", "name"))
    if not is_valid_email(user_in.email):
        errors.append(field_error("please include a valid email", "email"))
    if len(user_in.password) < MIN_PASSWORD_LENGTH:
        errors.append(field_error(
            f"please enter a password with {MIN_PASSWORD_LENGTH} or more characters", "password"
        ))
    return errors

def register_user(db: Session, user_in: UserCreate) -> User:
    """
    Register a new user.

    A duplicate email is reported as a conflict even when other fields are
    also invalid. The caller gets the stored user back and decides whether
    to follow up with a token.
    """
    if user_in.email and get_user_by_email(db, user_in.email):
        raise ConflictError("user already exist", param="email")

    errors = validate_registration(user_in)
    if errors:
        raise ValidationError(errors)

    user = User(
        id=str(uuid.uuid4()),
        name=user_in.name.strip(),
        email=normalize_email(user_in.email),
        avatar=gravatar_url(user_in.email),
        hashed_password=get_password_hash(user_in.password),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # A concurrent registration took the email after our lookup
        db.rollback()
        logger.info(f"Duplicate email on commit: {user.email}")
        raise ConflictError("user already exist", param="email")
    db.refresh(user)
    logger.info(f"Registered user {user.id}")
    return user
