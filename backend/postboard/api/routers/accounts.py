# postboard/api/routers/accounts.py
from fastapi import APIRouter, Depends, HTTPException, status
from passlib.exc import PasswordValueError

from postboard.api.deps import get_current_identity, get_token_service
from postboard.core.security import TokenClaims, TokenService
from postboard.schemas.account import AccountOut, LoginIn, LoginOut, RegisterIn
from postboard.services import accounts as account_service

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(body: RegisterIn):
    """
    Register a new account.

    The password is hashed before storage. A duplicate username or email
    violates a unique constraint and is answered with 500 STORAGE_ERROR by
    the app-level storage error handler.

    Returns:
        dict: {"success": True, "data": {"id": <new account id>}}

    Raises:
        HTTPException (400): INVALID_PASSWORD if bcrypt cannot hash the password (NUL bytes)
    """
    try:
        account = await account_service.register_account(body.username, body.email, body.password)
    except PasswordValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"code": "INVALID_PASSWORD", "message": str(exc)},
        )
    return {"success": True, "data": {"id": account.id}}


@router.post("/login")
async def login(body: LoginIn, tokens: TokenService = Depends(get_token_service)):
    """
    Authenticate with email + password and issue an access token.

    Unknown email and wrong password get the same 401 so callers cannot discover
    which emails are registered.

    Returns:
        dict: {"success": True, "data": {"user": {...}, "accessToken": str}}

    Raises:
        HTTPException (401): AUTH_INVALID_CREDENTIALS
    """
    account = await account_service.authenticate(body.email, body.password)
    if account is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"code": "AUTH_INVALID_CREDENTIALS", "message": "Invalid credentials"},
        )
    token = tokens.issue(TokenClaims(account_id=account.id, email=account.email))
    out = LoginOut(
        user=AccountOut(id=account.id, username=account.username, email=account.email),
        accessToken=token,
    )
    return {"success": True, "data": out.model_dump()}


@router.get("/profile")
async def profile(identity: TokenClaims = Depends(get_current_identity)):
    """
    Public profile of the authenticated account.

    Raises:
        HTTPException (401): missing/invalid/expired token
        HTTPException (404): ACCOUNT_NOT_FOUND if the account was deleted after the token was issued
    """
    account = await account_service.get_account(identity.account_id)
    if account is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"code": "ACCOUNT_NOT_FOUND", "message": "Account not found"},
        )
    return {"success": True, "data": AccountOut(id=account.id, username=account.username, email=account.email).model_dump()}
