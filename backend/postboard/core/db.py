# postboard/core/db.py
"""
Database configuration and connection management.
Builds the Tortoise ORM config from settings, registers the serving pool,
and makes sure the logical database exists before anything connects to it.
"""
import logging
import re
from pathlib import Path

from fastapi import FastAPI
from tortoise import Tortoise, connections
from tortoise.backends.base.config_generator import expand_db_url
from tortoise.contrib.fastapi import RegisterTortoise

logger = logging.getLogger("uvicorn.error")

MODELS_MODULE = "postboard.models"
SQLITE_ENGINE = "tortoise.backends.sqlite"
_IDENTIFIER = re.compile(r"^[A-Za-z0-9_]+$")


def is_sqlite(engine: str) -> bool:
    return engine == SQLITE_ENGINE


def tortoise_config(db_url: str, pool_size: int = 10) -> dict:
    """
    Tortoise ORM configuration dictionary for `db_url`.

    Server backends get a bounded pool (minsize 1, maxsize `pool_size`);
    callers beyond the bound wait for a free connection.
    """
    connection = expand_db_url(db_url)
    if not is_sqlite(connection["engine"]):
        connection["credentials"].setdefault("minsize", 1)
        connection["credentials"].setdefault("maxsize", pool_size)
    return {
        "connections": {"default": connection},
        "apps": {
            "models": {
                "models": [MODELS_MODULE],
                "default_connection": "default",
            },
        },
    }


def database_bootstrap_sql(engine: str, name: str) -> tuple[str, str | None, str]:
    """
    Return (maintenance database, existence query, create statement) for a
    server backend. The existence query is None when the create statement is
    already conditional.
    """
    if not _IDENTIFIER.match(name or ""):
        raise ValueError(f"refusing to create database with unsafe name {name!r}")
    if engine.startswith("tortoise.backends.mysql"):
        return "mysql", None, f"CREATE DATABASE IF NOT EXISTS `{name}`"
    if engine.startswith(("tortoise.backends.asyncpg", "tortoise.backends.psycopg")):
        return "postgres", f"SELECT 1 FROM pg_database WHERE datname = '{name}'", f'CREATE DATABASE "{name}"'
    raise ValueError(f"unsupported database engine: {engine}")


async def ensure_database(db_url: str) -> None:
    """
    Create the logical database named in `db_url` if it does not exist yet.

    SQLite only needs the parent directory of the file. Server backends are
    reached through their maintenance database on a throwaway connection
    that is closed before returning.
    """
    config = expand_db_url(db_url)
    engine = config["engine"]
    credentials = config["credentials"]

    if is_sqlite(engine):
        file_path = credentials.get("file_path", ":memory:")
        if file_path != ":memory:":
            Path(file_path).parent.mkdir(parents=True, exist_ok=True)
        return

    name = credentials.get("database")
    maintenance_db, exists_sql, create_sql = database_bootstrap_sql(engine, name)
    maintenance = {"engine": engine, "credentials": {**credentials, "database": maintenance_db}}

    await Tortoise.init(config={"connections": {"maintenance": maintenance}, "apps": {}})
    try:
        conn = connections.get("maintenance")
        if exists_sql is not None:
            _, rows = await conn.execute_query(exists_sql)
            if rows:
                return
        await conn.execute_script(create_sql)
    finally:
        await Tortoise.close_connections()


def register_db(app: FastAPI, db_url: str, pool_size: int = 10) -> RegisterTortoise:
    """
    Async context manager owning the pool used to serve requests.

    Enter it in the app lifespan after the bootstrap has prepared the schema;
    the connections are registered globally so request tasks can use them,
    and are closed when the context exits, including on error.
    """
    return RegisterTortoise(app, config=tortoise_config(db_url, pool_size))
