# postboard/models/__init__.py
"""
Database models module initialization.
Exports all Tortoise ORM models; this module is also what the ORM config
registers as the "models" app.

Models exported:
- Account: account and credential model
- Post: post authored by an Account
"""
from .account import Account
from .post import Post

__models__ = [Account, Post]
