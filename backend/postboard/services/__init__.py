"""
Services Module

Storage-facing operations used by the routers:
- accounts: registration, credential check, profile lookup
- posts: ownership-scoped post CRUD
"""
from .accounts import authenticate, get_account, register_account
from .posts import create_post, delete_post, get_post, list_posts, update_post

__all__ = [
    # Accounts
    "register_account",
    "authenticate",
    "get_account",
    # Posts
    "create_post",
    "list_posts",
    "get_post",
    "update_post",
    "delete_post",
]
