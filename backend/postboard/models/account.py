# postboard/models/account.py
"""
Database model for accounts.
An account owns posts and authenticates with email + password.
"""
from tortoise import fields, models


class Account(models.Model):
    """
    Account database model.

    Relationships:
    - Has many Posts (one-to-many, via related_name="posts")

    Security:
    - password_hash always holds a bcrypt hash, never the plain text
    - username and email are each unique across all accounts
    """
    id = fields.IntField(primary_key=True)  # Auto-increment identifier
    username = fields.CharField(max_length=50, unique=True)
    email = fields.CharField(max_length=100, unique=True)
    password_hash = fields.CharField(max_length=255)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"
