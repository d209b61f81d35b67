# Implements security-related functionality:
# JWT token generation and verification
# Password hashing and verification using bcrypt
# Email normalization and Gravatar avatar derivation
# Provides core security functions used by the auth and user modules

from datetime import datetime, timedelta, timezone
from typing import Any, Optional, Union
from urllib.parse import urlencode
import hashlib
import logging

from jose import jwt, JWTError
from passlib.context import CryptContext

from app.core.config import settings

logger = logging.getLogger("app")

# Password hashing context; bcrypt generates a fresh salt for every hash
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

def create_access_token(subject: Union[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    if expires_delta is not None:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {"exp": expire, "sub": str(subject)}
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def verify_access_token(token: str) -> Optional[str]:
    """Return the token subject (user id), or None if the token is unusable"""
    try:
        # jose checks the signature and the exp claim
        payload = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM]
        )
    except JWTError as e:
        logger.warning(f"JWT verification error: {e}")
        return None

    user_id = payload.get("sub")
    if not user_id:
        logger.warning("Token payload missing 'sub' field")
        return None
    if payload.get("exp") is None:
        logger.warning("Token payload missing 'exp' field")
        return None

    return user_id

def normalize_email(email: str) -> str:
    return email.strip().lower()

def gravatar_url(email: str) -> str:
    """Deterministic avatar URL for an email address"""
    digest = hashlib.md5(normalize_email(email).encode("utf-8")).hexdigest()
    query = urlencode({
        "s": settings.GRAVATAR_SIZE,
        "r": settings.GRAVATAR_RATING,
        "d": settings.GRAVATAR_DEFAULT,
    })
    return f"{settings.GRAVATAR_BASE_URL}/{digest}?{query}"
