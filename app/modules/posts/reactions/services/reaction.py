from typing import Any, Dict, List, Optional
import logging
import uuid

from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError
from app.modules.posts.models.post import Post
from app.modules.posts.services.post import get_post

logger = logging.getLogger("app")

def find_like_index(post: Post, user_id: str) -> Optional[int]:
    """Position of the user's like in the post's like list"""
    for index, like in enumerate(post.likes):
        if like["user"] == user_id:
            return index
    return None

def like_post(db: Session, user_id: str, post_id: str) -> List[Dict[str, Any]]:
    """Like a post; a second like by the same user is rejected"""
    post = get_post(db, post_id)

    if find_like_index(post, user_id) is not None:
        raise ConflictError("post already liked")

    post.likes.insert(0, {"id": str(uuid.uuid4()), "user": user_id})
    db.commit()
    db.refresh(post)
    logger.info(f"User {user_id} liked post {post_id}")
    return list(post.likes)

def unlike_post(db: Session, user_id: str, post_id: str) -> List[Dict[str, Any]]:
    """Remove the user's like from a post"""
    post = get_post(db, post_id)

    index = find_like_index(post, user_id)
    if index is None:
        raise ConflictError("post has not yet been liked")

    del post.likes[index]
    db.commit()
    db.refresh(post)
    logger.info(f"User {user_id} unliked post {post_id}")
    return list(post.likes)
