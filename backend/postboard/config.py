# postboard/config.py
import os
from typing import Mapping

from dotenv import load_dotenv
from pydantic import BaseModel


class ConfigError(RuntimeError):
    """Raised when required configuration is missing or malformed."""


REQUIRED_VARS = ("DATABASE_URL", "JWT_SECRET")


class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "Postboard API"
    env: str = "dev"

    # Host & Port settings
    host: str = "0.0.0.0"
    port: int = 3000

    # Storage
    database_url: str
    db_pool_size: int = 10  # Upper bound on simultaneous pooled connections

    # Token signing
    jwt_secret: str
    access_token_expire_hours: int = 24

    # CORS origins for frontend
    CORS_ORIGINS: list[str] = ["*"]

    # Rate limiting (per client IP)
    rate_limit: str = "100 per 15 minutes"
    rate_limit_enabled: bool = True

    log_level: str = "info"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """
        Build settings from the process environment (plus `.env` if present).

        Raises ConfigError naming every missing required variable, so the
        process exits before it binds a port.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        missing = [name for name in REQUIRED_VARS if not environ.get(name)]
        if missing:
            raise ConfigError(f"missing required configuration: {', '.join(missing)}")

        # The bootstrap and the serving pool use separate connections; an in-memory
        # SQLite database does not survive between them
        if ":memory:" in environ["DATABASE_URL"]:
            raise ConfigError("DATABASE_URL must not be an in-memory SQLite database")

        try:
            return cls(
                env=environ.get("ENV", "dev"),
                host=environ.get("HOST", "0.0.0.0"),
                port=int(environ.get("PORT", "3000")),
                database_url=environ["DATABASE_URL"],
                db_pool_size=int(environ.get("DB_POOL_SIZE", "10")),
                jwt_secret=environ["JWT_SECRET"],
                access_token_expire_hours=int(environ.get("ACCESS_TOKEN_EXPIRE_HOURS", "24")),
                CORS_ORIGINS=[o.strip() for o in environ.get("CORS_ORIGINS", "*").split(",") if o.strip()],
                rate_limit=environ.get("RATE_LIMIT", "100 per 15 minutes"),
                rate_limit_enabled=environ.get("RATE_LIMIT_ENABLED", "true").lower() in ("true", "1", "yes"),
                log_level=environ.get("LOG_LEVEL", "info").lower(),
            )
        except ValueError as exc:
            raise ConfigError(f"invalid configuration: {exc}") from exc
