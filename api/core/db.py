"""
Async database access helpers (raw SQL) using asyncpg.

Each service owns one `Database` (a named asyncpg pool). FastAPI opens
them on startup and closes them on shutdown (see `api/main.py`), and
handlers receive theirs through a dependency instead of a module global.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg
from fastapi import FastAPI, Request

from . import config

logger = logging.getLogger(__name__)


# Storage failures are explicit and separable from "no row matched".
class StorageError(RuntimeError):
    pass


_DRIVER_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
)


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url(service: str) -> str:
    """
    DSN for `service`: `<SERVICE>_DATABASE_URL`, falling back to `DATABASE_URL`.
    """
    url = config.env_str(f"{service.upper()}_DATABASE_URL") or config.env_str("DATABASE_URL")
    if not url:
        raise RuntimeError(f"DATABASE_URL is not set (or {service.upper()}_DATABASE_URL).")
    return _sanitize_database_url(url)


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Database:
    """
    A named connection pool with the three query helpers repositories use.
    """

    def __init__(self, name: str, dsn: str) -> None:
        self.name = name
        self.dsn = dsn
        self._pool: asyncpg.Pool | None = None

    async def connect(self) -> None:
        if self._pool is not None:
            return None
        self._pool = await asyncpg.create_pool(
            dsn=self.dsn,
            min_size=config.pool_min_size(),
            max_size=config.pool_max_size(),
            command_timeout=config.command_timeout(),
        )
        logger.info("Opened %s database pool", self.name)

    async def close(self) -> None:
        if self._pool is None:
            return None
        await self._pool.close()
        self._pool = None
        logger.info("Closed %s database pool", self.name)

    def pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise StorageError(f"{self.name} DB pool is not initialized. Call connect() on startup.")
        return self._pool

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        try:
            row = await self.pool().fetchrow(sql, *args)
        except _DRIVER_ERRORS as exc:
            raise StorageError(str(exc) or type(exc).__name__) from exc
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        try:
            rows = await self.pool().fetch(sql, *args)
        except _DRIVER_ERRORS as exc:
            raise StorageError(str(exc) or type(exc).__name__) from exc
        return [_record_to_dict(r) for r in rows]


async def open_databases(app: FastAPI, services: list[str]) -> None:
    app.state.databases = {}
    try:
        for service in services:
            database = Database(service, database_url(service))
            await database.connect()
            app.state.databases[service] = database
    except BaseException:
        # Startup failed part way; release the pools that did open.
        await close_databases(app)
        raise


async def close_databases(app: FastAPI) -> None:
    databases: dict[str, Database] = getattr(app.state, "databases", {})
    for database in databases.values():
        await database.close()
    app.state.databases = {}


def database_for(request: Request, service: str) -> Database:
    databases: dict[str, Database] = getattr(request.app.state, "databases", {})
    database = databases.get(service)
    if database is None:
        raise StorageError(f"No database configured for service '{service}'.")
    return database
