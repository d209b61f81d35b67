from typing import Dict, List, Optional, Union
from datetime import datetime
from pydantic import BaseModel, ConfigDict, field_validator

from app.modules.user_management.schemas.user import UserRef

SOCIAL_NETWORKS = ("youtube", "twitter", "facebook", "linkedin", "instagram")

def split_skills(v: Union[str, List[str], None]) -> Optional[List[str]]:
    """Accept "python, fastapi" as well as ["python", "fastapi"]"""
    if v is None or not isinstance(v, (str, list)):
        return v
    items = v.split(",") if isinstance(v, str) else v
    if not all(isinstance(s, str) for s in items):
        raise ValueError("Skills must be strings")
    return [s.strip() for s in items if s.strip()]

class ProfileUpsert(BaseModel):
    status: Optional[str] = None
    skills: Optional[List[str]] = None
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    social: Optional[Dict[str, str]] = None

    @field_validator("skills", mode="before")
    @classmethod
    def parse_skills(cls, v):
        return split_skills(v)

    @field_validator("social")
    @classmethod
    def known_networks_only(cls, v):
        if v is None:
            return v
        return {k: url for k, url in v.items() if k in SOCIAL_NETWORKS and url}

class Profile(BaseModel):
    """Profile returned to client, with its owner embedded"""
    id: str
    user: UserRef
    status: str
    skills: List[str] = []
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    social: Optional[Dict[str, str]] = None
    date: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class ProfileSummary(BaseModel):
    """Read-only card shown in the developer list"""
    user_id: str
    name: str
    avatar: Optional[str] = None
    status: str
    company: Optional[str] = None
    location: Optional[str] = None
    headline: str
    skills: List[str] = []
