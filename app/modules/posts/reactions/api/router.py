from typing import Any, List

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.deps import get_current_user_id
from app.modules.posts.reactions.schemas.reaction import Like as LikeSchema
from app.modules.posts.reactions.services.reaction import like_post, unlike_post

router = APIRouter()

@router.put("/like/{post_id}", response_model=List[LikeSchema])
def like(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to like"),
    user_id: str = Depends(get_current_user_id),
) -> Any:
    """Like a post and return its likes, newest first"""
    return like_post(db, user_id, post_id)

@router.put("/unlike/{post_id}", response_model=List[LikeSchema])
def unlike(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to unlike"),
    user_id: str = Depends(get_current_user_id),
) -> Any:
    """Remove the current user's like from a post"""
    return unlike_post(db, user_id, post_id)
