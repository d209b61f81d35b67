from sqlalchemy import Column, String, DateTime, Text, ForeignKey, JSON
from sqlalchemy.ext.mutable import MutableDict, MutableList
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.db.session import Base

class Profile(Base):
    __tablename__ = "profiles"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"), unique=True, index=True, nullable=False)
    status = Column(String, nullable=False)
    company = Column(String, nullable=True)
    website = Column(String, nullable=True)
    location = Column(String, nullable=True)
    skills = Column(MutableList.as_mutable(JSON), nullable=False, default=list)
    bio = Column(Text, nullable=True)
    githubusername = Column(String, nullable=True)
    social = Column(MutableDict.as_mutable(JSON), nullable=True)
    date = Column(DateTime, default=func.now())

    user = relationship("User", lazy="joined")
