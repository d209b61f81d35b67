from typing import Any, List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.db.session import get_db
from app.deps import get_current_user_id
from app.modules.posts.schemas.post import Message
from app.modules.profiles.schemas.profile import (
    Profile as ProfileSchema, ProfileSummary, ProfileUpsert
)
from app.modules.profiles.services.profile import (
    delete_profile, get_profile_by_user, list_profiles, summarize_profile, upsert_profile
)

router = APIRouter()

@router.get("/me", response_model=ProfileSchema)
def read_my_profile(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
) -> Any:
    """Get the current user's profile"""
    profile = get_profile_by_user(db, user_id)
    if not profile:
        raise NotFoundError("There is no profile for this user")
    return profile

@router.post("", response_model=ProfileSchema)
def create_or_update_profile(
    *,
    db: Session = Depends(get_db),
    profile_in: ProfileUpsert,
    user_id: str = Depends(get_current_user_id),
) -> Any:
    """Create or update the current user's profile"""
    return upsert_profile(db, user_id, profile_in)

@router.get("", response_model=List[ProfileSchema])
def read_profiles(db: Session = Depends(get_db)) -> Any:
    """Get all profiles. Public."""
    return list_profiles(db)

@router.get("/summaries", response_model=List[ProfileSummary])
def read_profile_summaries(db: Session = Depends(get_db)) -> Any:
    """Get the profile cards for the developer list. Public."""
    return [summarize_profile(profile) for profile in list_profiles(db)]

@router.get("/user/{user_id}", response_model=ProfileSchema)
def read_profile_by_user_id(
    user_id: str,
    db: Session = Depends(get_db),
) -> Any:
    """Get a profile by its owner's user ID. Public."""
    profile = get_profile_by_user(db, user_id)
    if not profile:
        raise NotFoundError("Profile not found")
    return profile

@router.delete("", response_model=Message)
def delete_my_profile(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
) -> Any:
    """Delete the current user's profile"""
    delete_profile(db, user_id)
    return Message(msg="Profile deleted")
