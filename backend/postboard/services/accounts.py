# postboard/services/accounts.py
"""
Account operations: registration and credential checks.
Hashing runs in the threadpool so bcrypt does not stall the event loop.
"""
from starlette.concurrency import run_in_threadpool

from postboard.core.security import hash_password, verify_password
from postboard.models import Account


async def register_account(username: str, email: str, password: str) -> Account:
    """
    Create an account with a hashed password.

    Duplicate username/email surface as tortoise IntegrityError from the
    unique constraints; there is no pre-check.
    """
    password_hash = await run_in_threadpool(hash_password, password)
    return await Account.create(username=username, email=email, password_hash=password_hash)


async def authenticate(email: str, password: str) -> Account | None:
    """Return the account for valid credentials, None for unknown email or wrong password."""
    account = await Account.get_or_none(email=email)
    if account is None:
        return None
    if not await run_in_threadpool(verify_password, password, account.password_hash):
        return None
    return account


async def get_account(account_id: int) -> Account | None:
    return await Account.get_or_none(id=account_id)
