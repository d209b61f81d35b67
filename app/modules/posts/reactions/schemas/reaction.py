from pydantic import BaseModel

class Like(BaseModel):
    """Like embedded in a post; at most one per user"""
    id: str
    user: str
