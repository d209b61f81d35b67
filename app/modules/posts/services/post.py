from typing import List, Optional
import logging
import uuid

from sqlalchemy.orm import Session

from app.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from app.modules.posts.models.post import Post
from app.modules.user_management.services.user import require_user

logger = logging.getLogger("app")

def require_text(text: str) -> str:
    if not text or not text.strip():
        raise ValidationError.single("Text is required", "text")
    return text

def find_post(db: Session, post_id: str) -> Optional[Post]:
    """Get post by ID; unknown and malformed IDs both give None"""
    return db.query(Post).filter(Post.id == post_id).first()

def get_post(db: Session, post_id: str) -> Post:
    post = find_post(db, post_id)
    if not post:
        raise NotFoundError("post not found")
    return post

def list_posts(db: Session) -> List[Post]:
    """Get all posts, newest first"""
    return db.query(Post).order_by(Post.date.desc()).all()

def create_post(db: Session, user_id: str, text: str) -> Post:
    """Create new post"""
    require_text(text)
    user = require_user(db, user_id)

    logger.info(f"Creating post for user ID: {user_id}")
    post = Post(
        id=str(uuid.uuid4()),
        user=user.id,
        text=text,
        name=user.name,
        avatar=user.avatar,
        likes=[],
        comments=[],
    )
    db.add(post)
    db.commit()
    db.refresh(post)
    return post

def delete_post(db: Session, user_id: str, post_id: str) -> Post:
    """Delete a post. Only its author may do this."""
    post = get_post(db, post_id)

    if post.user != user_id:
        raise ForbiddenError("user not authorised")

    logger.info(f"Deleting post with ID: {post.id}")
    db.delete(post)
    db.commit()
    return post
