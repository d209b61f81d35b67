from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, Text, ForeignKey, JSON
from sqlalchemy.ext.mutable import MutableList

from app.db.session import Base

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

class Post(Base):
    __tablename__ = "posts"

    id = Column(String, primary_key=True, index=True)
    user = Column(String, ForeignKey("users.id"), index=True, nullable=False)
    text = Column(Text, nullable=False)
    # Copied from the author at creation time for display
    name = Column(String)
    avatar = Column(String, nullable=True)
    # Embedded documents, newest first:
    #   likes:    [{"id", "user"}]
    #   comments: [{"id", "user", "text", "name", "avatar", "date"}]
    likes = Column(MutableList.as_mutable(JSON), nullable=False, default=list)
    comments = Column(MutableList.as_mutable(JSON), nullable=False, default=list)
    # Microsecond resolution keeps the newest-first listing stable
    date = Column(DateTime(timezone=True), default=_utcnow, index=True)
