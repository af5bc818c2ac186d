# postboard/api/routers/posts.py
from fastapi import APIRouter, Depends, HTTPException, status

from postboard.api.deps import get_current_identity
from postboard.core.security import TokenClaims
from postboard.models import Post
from postboard.schemas.post import PostIn, PostOut
from postboard.services import posts as post_service

router = APIRouter(prefix="/posts", tags=["posts"])


def _post_out(p: Post) -> dict:
    return PostOut(
        id=p.id,
        title=p.title,
        content=p.content,
        authorId=p.author_id,
        createdAt=p.created_at.isoformat(),
    ).model_dump()


def _not_found_or_unauthorized() -> HTTPException:
    # Same answer for "no such post" and "someone else's post"
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={"code": "POST_NOT_FOUND_OR_UNAUTHORIZED", "message": "Post not found or unauthorized"},
    )


@router.get("")
async def list_posts():
    """
    All posts, newest first. Public.

    Returns:
        dict: {"success": True, "data": [post, ...]}
    """
    rows = await post_service.list_posts()
    return {"success": True, "data": [_post_out(p) for p in rows]}


@router.get("/{post_id}")
async def get_post(post_id: int):
    """
    A single post. Public.

    Raises:
        HTTPException (404): POST_NOT_FOUND
    """
    p = await post_service.get_post(post_id)
    if p is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"code": "POST_NOT_FOUND", "message": "Post not found"},
        )
    return {"success": True, "data": _post_out(p)}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_post(body: PostIn, identity: TokenClaims = Depends(get_current_identity)):
    """Create a post owned by the authenticated account."""
    p = await post_service.create_post(identity, body.title, body.content)
    return {"success": True, "data": {"id": p.id}}


@router.put("/{post_id}")
async def update_post(post_id: int, body: PostIn, identity: TokenClaims = Depends(get_current_identity)):
    """
    Replace title and content of the caller's own post.

    Raises:
        HTTPException (401): not authenticated
        HTTPException (404): post missing or owned by another account
    """
    if not await post_service.update_post(identity, post_id, body.title, body.content):
        raise _not_found_or_unauthorized()
    return {"success": True, "data": {"id": post_id, "updated": True}}


@router.delete("/{post_id}")
async def delete_post(post_id: int, identity: TokenClaims = Depends(get_current_identity)):
    """
    Delete the caller's own post.

    Raises:
        HTTPException (401): not authenticated
        HTTPException (404): post missing or owned by another account
    """
    if not await post_service.delete_post(identity, post_id):
        raise _not_found_or_unauthorized()
    return {"success": True, "data": {"id": post_id, "deleted": True}}
