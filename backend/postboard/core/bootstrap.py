# postboard/core/bootstrap.py
"""
Bootstrap module for storage initialization.
Brings the store to a servable state on every process start: database,
tables, then baseline accounts and posts. Every step is safe to repeat.
"""
import logging

from tortoise import Tortoise

from postboard.config import Settings
from postboard.core.db import ensure_database, tortoise_config
from postboard.core.security import hash_password
from postboard.core.seed_data import SEED_ACCOUNTS, SEED_POSTS
from postboard.models import Account, Post

logger = logging.getLogger("uvicorn.error")


class BootstrapError(RuntimeError):
    """A bootstrap step failed; the process must not start serving."""


async def seed_accounts(seeds: list[dict] = SEED_ACCOUNTS) -> int:
    """
    Insert the seed accounts if the accounts table is empty.
    Passwords go through the credential hasher first.
    Returns the number of rows inserted.
    """
    if await Account.all().count():
        return 0
    logger.info("[bootstrap] Populating accounts with seed data...")
    for seed in seeds:
        await Account.create(
            username=seed["username"],
            email=seed["email"],
            password_hash=hash_password(seed["password"]),
        )
    return len(seeds)


async def seed_posts(seeds: list[dict] = SEED_POSTS) -> int:
    """
    Insert the seed posts if the posts table is empty.

    Gated independently of the accounts: an empty posts table is re-seeded
    even when accounts already exist. Authors are resolved by username, and
    a post whose author is gone is skipped.
    """
    if await Post.all().count():
        return 0
    logger.info("[bootstrap] Populating posts with seed data...")
    usernames = sorted({seed["author"] for seed in seeds})
    authors = {a.username: a for a in await Account.filter(username__in=usernames)}
    inserted = 0
    for seed in seeds:
        author = authors.get(seed["author"])
        if author is None:
            logger.warning("[bootstrap] Seed author %r not found -> skip post %r", seed["author"], seed["title"])
            continue
        await Post.create(title=seed["title"], content=seed["content"], author=author)
        inserted += 1
    return inserted


async def bootstrap_storage(settings: Settings) -> None:
    """
    Make storage ready for traffic.

    Sequence: create the database if absent, create missing tables, seed
    accounts, seed posts. Runs on its own connection, which is closed on
    both success and failure. Any failure is raised as BootstrapError.
    """
    try:
        await ensure_database(settings.database_url)
        logger.info("[bootstrap] Database ready")

        await Tortoise.init(config=tortoise_config(settings.database_url, pool_size=1))
        await Tortoise.generate_schemas(safe=True)  # CREATE TABLE IF NOT EXISTS
        logger.info("[bootstrap] Tables ready")

        accounts = await seed_accounts()
        posts = await seed_posts()
        logger.info("[bootstrap] Seeded accounts=%d posts=%d", accounts, posts)
    except Exception as exc:
        logger.exception("[bootstrap] Storage initialization failed")
        raise BootstrapError(f"storage initialization failed: {exc}") from exc
    finally:
        await Tortoise.close_connections()
