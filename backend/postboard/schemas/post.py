# postboard/schemas/post.py
"""
Pydantic schemas for post endpoints.
"""
from pydantic import BaseModel

__all__ = ["PostIn", "PostOut"]


class PostIn(BaseModel):
    """Request body for creating or replacing a post."""
    title: str
    content: str


class PostOut(BaseModel):
    id: int
    title: str
    content: str
    authorId: int  # Owning account id
    createdAt: str  # ISO timestamp
