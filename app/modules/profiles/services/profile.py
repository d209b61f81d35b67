from typing import List, Optional
import logging
import uuid

from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, ValidationError, field_error
from app.modules.profiles.models.profile import Profile
from app.modules.profiles.schemas.profile import ProfileSummary, ProfileUpsert
from app.modules.user_management.services.user import require_user

logger = logging.getLogger("app")

# Number of skills shown on a profile card
SUMMARY_SKILLS = 4

def get_profile_by_user(db: Session, user_id: str) -> Optional[Profile]:
    """Get profile by owner ID"""
    return db.query(Profile).filter(Profile.user_id == user_id).first()

def list_profiles(db: Session) -> List[Profile]:
    """Get all profiles"""
    return db.query(Profile).order_by(Profile.date.desc()).all()

def upsert_profile(db: Session, user_id: str, profile_in: ProfileUpsert) -> Profile:
    """Create the user's profile, or update the fields sent if one exists"""
    errors = []
    if not profile_in.status or not profile_in.status.strip():
        errors.append(field_error("Status is required", "status"))
    if not profile_in.skills:
        errors.append(field_error("Skills is required", "skills"))
    if errors:
        raise ValidationError(errors)

    require_user(db, user_id)
    update_data = profile_in.model_dump(exclude_unset=True)

    profile = get_profile_by_user(db, user_id)
    if profile:
        logger.info(f"Updating profile for user ID: {user_id}")
        for field, value in update_data.items():
            setattr(profile, field, value)
    else:
        logger.info(f"Creating profile for user ID: {user_id}")
        profile = Profile(id=str(uuid.uuid4()), user_id=user_id, **update_data)
        db.add(profile)

    db.commit()
    db.refresh(profile)
    return profile

def delete_profile(db: Session, user_id: str) -> Profile:
    profile = get_profile_by_user(db, user_id)
    if not profile:
        raise NotFoundError("There is no profile for this user")

    db.delete(profile)
    db.commit()
    return profile

def summarize_profile(profile: Profile) -> ProfileSummary:
    headline = profile.status
    if profile.company:
        headline = f"{profile.status} at {profile.company}"

    return ProfileSummary(
        user_id=profile.user.id,
        name=profile.user.name,
        avatar=profile.user.avatar,
        status=profile.status,
        company=profile.company,
        location=profile.location,
        headline=headline,
        skills=list(profile.skills or [])[:SUMMARY_SKILLS],
    )
