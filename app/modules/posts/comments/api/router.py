from typing import Any, List

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.deps import get_current_user_id
from app.modules.posts.schemas.post import Post as PostSchema
from app.modules.posts.comments.schemas.comment import Comment as CommentSchema, CommentCreate
from app.modules.posts.comments.services.comment import add_comment, delete_comment

router = APIRouter()

@router.post("/comment/{post_id}", response_model=PostSchema)
def create_new_comment(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to comment on"),
    comment_in: CommentCreate,
    user_id: str = Depends(get_current_user_id),
) -> Any:
    """Comment on a post and return the updated post"""
    return add_comment(db, user_id, post_id, comment_in.text)

@router.delete("/comment/{post_id}/{comment_id}", response_model=List[CommentSchema])
def delete_comment_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post"),
    comment_id: str,
    user_id: str = Depends(get_current_user_id),
) -> Any:
    """Delete one of your own comments and return the remaining comments"""
    return delete_comment(db, user_id, post_id, comment_id)
