from typing import Any, List
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.deps import get_current_user_id
from app.modules.posts.schemas.post import Post as PostSchema, PostCreate, Message
from app.modules.posts.services.post import create_post, delete_post, get_post, list_posts

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("", response_model=PostSchema)
def create_new_post(
    *,
    db: Session = Depends(get_db),
    post_in: PostCreate,
    user_id: str = Depends(get_current_user_id),
) -> Any:
    """
    Create a post. Name and avatar are copied from the author.
    """
    return create_post(db, user_id, post_in.text)

@router.get("", response_model=List[PostSchema])
def read_posts(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
) -> Any:
    """
    Retrieve all posts, newest first.
    """
    return list_posts(db)

@router.get("/{post_id}", response_model=PostSchema)
def read_post_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str,
    user_id: str = Depends(get_current_user_id),
) -> Any:
    """
    Get post by ID.
    """
    return get_post(db, post_id)

@router.delete("/{post_id}", response_model=Message)
def delete_post_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str,
    user_id: str = Depends(get_current_user_id),
) -> Any:
    """
    Delete a post, along with its embedded likes and comments.
    Only the author may delete it.
    """
    delete_post(db, user_id, post_id)
    return Message(msg="Post removed")
