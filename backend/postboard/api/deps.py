# postboard/api/deps.py
import logging

from fastapi import Header, HTTPException, Request, status

from postboard.core.security import TokenClaims, TokenError, TokenService

logger = logging.getLogger("uvicorn.error")


def extract_bearer_token(authorization: str | None) -> str | None:
    """
    Pull the credential out of an `Authorization: Bearer <token>` value.
    Anything other than exactly two parts with a bearer scheme yields None.
    """
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1]


def get_token_service(request: Request) -> TokenService:
    return request.app.state.tokens


async def get_current_identity(
    request: Request,
    authorization: str | None = Header(default=None),
) -> TokenClaims:
    """
    FastAPI dependency gating authenticated routes.

    Verifies the bearer token and returns its claims. The claims are also
    placed on `request.state.identity`, which lives for this request only.

    Raises:
        HTTPException (401): AUTH_REQUIRED if the header is missing or not "Bearer <token>"
        HTTPException (401): AUTH_INVALID_TOKEN for any verification failure
            (malformed, bad signature, expired); the reason is logged, not returned

    Usage:
        @router.post("")
        async def create(identity: TokenClaims = Depends(get_current_identity)):
            ...
    """
    token = extract_bearer_token(authorization)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"code": "AUTH_REQUIRED", "message": "No token provided"},
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        identity = get_token_service(request).verify(token)
    except TokenError as exc:
        logger.info("[auth] token rejected on %s %s: %s", request.method, request.url.path, exc.reason)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"code": "AUTH_INVALID_TOKEN", "message": "Invalid token"},
            headers={"WWW-Authenticate": "Bearer"},
        )

    request.state.identity = identity
    return identity
