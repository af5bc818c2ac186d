# postboard/schemas/account.py
"""
Pydantic schemas for account endpoints.
Defines request/response models for registration, login and profile.
"""
from pydantic import BaseModel

__all__ = ["RegisterIn", "LoginIn", "AccountOut", "LoginOut"]


class RegisterIn(BaseModel):
    """Request model for registration. Uniqueness is enforced by the database."""
    username: str
    email: str
    password: str  # Plain text, hashed server-side before storage


class LoginIn(BaseModel):
    email: str
    password: str


class AccountOut(BaseModel):
    """
    Public account information.
    Never includes the password hash.
    """
    id: int
    username: str
    email: str


class LoginOut(BaseModel):
    """Response model for a successful login."""
    user: AccountOut
    accessToken: str  # Bearer token for the Authorization header
