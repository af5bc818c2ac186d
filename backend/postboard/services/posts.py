# postboard/services/posts.py
"""
Ownership-scoped post operations.

Update and delete are a single conditional statement on (id, owner), so the
ownership check and the write happen atomically. A zero row count means
"missing or not yours"; callers must not tell the two apart.
"""
from postboard.core.security import TokenClaims
from postboard.models import Post

# Post ids are a signed 32-bit auto-increment column
MAX_POST_ID = 2**31 - 1


def _valid_id(post_id: int) -> bool:
    # Ids outside the column range cannot exist, and some drivers refuse to bind them
    return 1 <= post_id <= MAX_POST_ID


async def create_post(identity: TokenClaims, title: str, content: str) -> Post:
    return await Post.create(title=title, content=content, author_id=identity.account_id)


async def list_posts() -> list[Post]:
    """All posts, newest first."""
    return await Post.all().order_by("-created_at", "-id")


async def get_post(post_id: int) -> Post | None:
    if not _valid_id(post_id):
        return None
    return await Post.get_or_none(id=post_id)


async def update_post(identity: TokenClaims, post_id: int, title: str, content: str) -> bool:
    """True if the caller's post was updated."""
    if not _valid_id(post_id):
        return False
    updated = await Post.filter(id=post_id, author_id=identity.account_id).update(title=title, content=content)
    return updated > 0


async def delete_post(identity: TokenClaims, post_id: int) -> bool:
    """True if the caller's post was deleted."""
    if not _valid_id(post_id):
        return False
    deleted = await Post.filter(id=post_id, author_id=identity.account_id).delete()
    return deleted > 0
