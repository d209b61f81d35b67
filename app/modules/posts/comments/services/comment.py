from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import logging
import uuid

from sqlalchemy.orm import Session

from app.core.exceptions import ForbiddenError, NotFoundError
from app.modules.posts.models.post import Post
from app.modules.posts.services.post import get_post, require_text
from app.modules.user_management.services.user import require_user

logger = logging.getLogger("app")

def find_comment_index(post: Post, comment_id: str) -> Optional[int]:
    """Position of a comment in the post's comment list, by comment ID"""
    for index, comment in enumerate(post.comments):
        if comment["id"] == comment_id:
            return index
    return None

def add_comment(db: Session, user_id: str, post_id: str, text: str) -> Post:
    """Comment on a post. Newest comment goes first."""
    require_text(text)
    post = get_post(db, post_id)
    user = require_user(db, user_id)

    post.comments.insert(0, {
        "id": str(uuid.uuid4()),
        "user": user.id,
        "text": text,
        "name": user.name,
        "avatar": user.avatar,
        "date": datetime.now(timezone.utc).isoformat(),
    })
    db.commit()
    db.refresh(post)
    return post

def delete_comment(db: Session, user_id: str, post_id: str, comment_id: str) -> List[Dict[str, Any]]:
    """Delete a comment. Only the comment's author may do this."""
    post = get_post(db, post_id)

    index = find_comment_index(post, comment_id)
    if index is None:
        raise NotFoundError("comment does not exist")

    if post.comments[index]["user"] != user_id:
        raise ForbiddenError("unauthorised user")

    del post.comments[index]
    db.commit()
    db.refresh(post)
    logger.info(f"Deleted comment {comment_id} from post {post_id}")
    return list(post.comments)
