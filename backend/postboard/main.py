# postboard/main.py
import asyncio
import datetime as dt
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from tortoise.exceptions import BaseORMException

from postboard import __version__
from postboard.api.routers import accounts, posts
from postboard.config import ConfigError, Settings
from postboard.core.bootstrap import bootstrap_storage
from postboard.core.db import register_db
from postboard.core.security import TokenService
from postboard.middleware import SecurityHeadersMiddleware, build_limiter, rate_limit_exceeded_handler

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    # Schema + seed data first, on a short-lived connection in its own task; failure aborts startup
    await asyncio.create_task(bootstrap_storage(settings))
    async with register_db(app, settings.database_url, settings.db_pool_size):
        logger.info("[startup] %s %s ready (env=%s)", settings.APP_NAME, __version__, settings.env)
        yield


async def storage_error_handler(request: Request, exc: BaseORMException) -> JSONResponse:
    logger.error("[storage] %s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=500,
        content={"detail": {"code": "STORAGE_ERROR", "message": str(exc)}},
    )


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("[error] %s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"detail": {"code": "INTERNAL_ERROR", "message": str(exc)}},
    )


def create_app(settings: Settings) -> FastAPI:
    """
    Build the application around an explicit settings object.
    Settings and the token service hang off `app.state`; nothing is global.
    """
    app = FastAPI(title=settings.APP_NAME, version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.tokens = TokenService(
        settings.jwt_secret,
        ttl=dt.timedelta(hours=settings.access_token_expire_hours),
    )

    # Rate limiting
    app.state.limiter = build_limiter(settings)
    app.add_middleware(SlowAPIMiddleware)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    app.add_middleware(SecurityHeadersMiddleware)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(BaseORMException, storage_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)

    # REST
    app.include_router(accounts.router)
    app.include_router(posts.router)

    @app.get("/")
    def root():
        return {"message": "API is running!"}

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    return app


def run() -> None:
    """Console entry point: load settings (fail fast), then serve."""
    try:
        settings = Settings.from_env()
    except ConfigError as exc:
        raise SystemExit(f"postboard: {exc}")
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level)


if __name__ == "__main__":
    run()
