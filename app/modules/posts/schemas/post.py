from typing import List, Optional
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, field_validator

from app.modules.posts.comments.schemas.comment import Comment
from app.modules.posts.reactions.schemas.reaction import Like

class PostCreate(BaseModel):
    text: str = ""

class Post(BaseModel):
    """Post model returned to client"""
    id: str
    user: str
    text: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    likes: List[Like] = []
    comments: List[Comment] = []
    date: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("date")
    @classmethod
    def as_utc(cls, v: datetime) -> datetime:
        # SQLite hands back naive values; dates are always stored in UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

class Message(BaseModel):
    msg: str
