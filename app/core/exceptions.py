# Application error taxonomy.
# Services raise these; the handlers registered in app.main turn them into
# responses, so no route has to build error bodies itself.
#
#   AppError
#   ├── ValidationError  -> 400 {"errors": [...]}
#   ├── ConflictError    -> 400 {"msg"} or {"errors": [...]}
#   ├── AuthError        -> 401 {"msg"} (bearer token missing or bad)
#   ├── ForbiddenError   -> 401 {"msg"} (not the owner)
#   ├── NotFoundError    -> 404 {"msg"}
#   └── InternalError    -> 500 "Server error"

from typing import Any, Dict, List, Optional

from fastapi import status


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Server error"):
        self.message = message
        super().__init__(message)

    def to_body(self) -> Dict[str, Any]:
        return {"msg": self.message}


def field_error(msg: str, param: Optional[str] = None, location: str = "body") -> Dict[str, Any]:
    """Build one entry of an ``{"errors": [...]}`` body"""
    error = {"msg": msg, "location": location}
    if param:
        error["param"] = param
    return error


class ValidationError(AppError):
    """Malformed input. Carries every violated field, not just the first."""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, errors: List[Dict[str, Any]]):
        self.errors = errors
        super().__init__("; ".join(e["msg"] for e in errors) or "Validation failed")

    @classmethod
    def single(cls, msg: str, param: Optional[str] = None) -> "ValidationError":
        return cls([field_error(msg, param)])

    def to_body(self) -> Dict[str, Any]:
        return {"errors": self.errors}


class ConflictError(AppError):
    """Request clashes with existing state (duplicate like, duplicate email...)"""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, param: Optional[str] = None):
        self.param = param
        super().__init__(message)

    def to_body(self) -> Dict[str, Any]:
        if self.param:
            return {"errors": [field_error(self.message, self.param)]}
        return {"msg": self.message}


class AuthError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(AppError):
    # 401 rather than 403 to match what clients of this API already expect
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
