# postboard/core/security.py
"""
Security module for authentication.
Handles password hashing and signed access tokens (issue / verify).
"""
import datetime as dt
from dataclasses import dataclass

import jwt  # PyJWT
from passlib.context import CryptContext

# Password hashing context
# bcrypt with a fixed cost of 10; hashes are self-describing ($2b$10$<salt><digest>)
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=10,
)

JWT_ALG = "HS256"  # Symmetric MAC keyed by the server secret
DEFAULT_TOKEN_TTL = dt.timedelta(hours=24)


def hash_password(plain: str) -> str:
    """
    Hash a plain text password with bcrypt.

    Every call draws a new salt, so hashing the same password twice yields
    two different strings that both verify.
    """
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """
    Check a plain text password against a stored hash.

    The comparison is done by bcrypt in constant time. A stored value that is
    not a recognised hash (empty, truncated, foreign scheme) is a mismatch,
    never an error.
    """
    try:
        return pwd_context.verify(plain, hashed)
    except (ValueError, TypeError):
        return False


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by an access token."""
    account_id: int
    email: str


class TokenError(Exception):
    """Base class for token verification failures."""
    reason = "invalid"


class TokenMalformedError(TokenError):
    reason = "malformed"


class TokenSignatureError(TokenError):
    reason = "signature"


class TokenExpiredError(TokenError):
    reason = "expired"


class TokenService:
    """
    Issues and verifies HS256 access tokens.

    Tokens are self-contained: claims plus an absolute expiry, signed with the
    server secret. There is no server-side store, so a token stays valid until
    it expires.
    """

    def __init__(self, secret: str, ttl: dt.timedelta = DEFAULT_TOKEN_TTL, algorithm: str = JWT_ALG):
        if not secret:
            raise ValueError("token secret must not be empty")
        self._secret = secret
        self.ttl = ttl
        self.algorithm = algorithm

    def issue(self, claims: TokenClaims, now: dt.datetime | None = None) -> str:
        """
        Create a signed token for `claims`, valid for `self.ttl` from `now`.

        Token payload includes:
            - sub: account id (string, as JWT requires)
            - email: account email
            - iat: issued at timestamp
            - exp: expiration timestamp
        """
        now = now or dt.datetime.now(dt.timezone.utc)
        payload = {
            "sub": str(claims.account_id),
            "email": claims.email,
            "iat": now,
            "exp": now + self.ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Decode and validate a token.

        Raises:
            TokenExpiredError: signature is fine but `exp` has passed
            TokenSignatureError: the MAC does not match the header and payload
            TokenMalformedError: anything else (bad segments, missing claims)
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": ["sub", "email", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise TokenExpiredError(str(exc)) from exc
        except jwt.InvalidSignatureError as exc:
            # InvalidSignatureError subclasses DecodeError, keep it before the catch-all
            raise TokenSignatureError(str(exc)) from exc
        except jwt.InvalidTokenError as exc:
            raise TokenMalformedError(str(exc)) from exc

        try:
            return TokenClaims(account_id=int(payload["sub"]), email=str(payload["email"]))
        except (TypeError, ValueError) as exc:
            raise TokenMalformedError(f"bad claim: {exc}") from exc
