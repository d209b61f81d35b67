from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict

class UserCreate(BaseModel):
    # Plain strings: the registration service validates and reports
    # every bad field at once instead of failing on the first one
    name: str = ""
    email: str = ""
    password: str = ""

class UserBase(BaseModel):
    name: str
    email: str
    avatar: Optional[str] = None

class User(UserBase):
    """User model returned to client (never carries the password hash)"""
    id: str
    date: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class UserRef(BaseModel):
    """Owner reference embedded in other documents"""
    id: str
    name: str
    avatar: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
