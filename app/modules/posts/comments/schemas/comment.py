from typing import Optional
from datetime import datetime
from pydantic import BaseModel

class CommentCreate(BaseModel):
    text: str = ""

class Comment(BaseModel):
    """Comment embedded in a post, with the commenter's name and avatar"""
    id: str
    user: str
    text: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    date: datetime
