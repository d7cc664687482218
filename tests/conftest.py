from __future__ import annotations

import re
from typing import Any

import pytest
from fastapi.testclient import TestClient

from clients import dependencies as clients_dependencies
from core.db import StorageError
from main import create_app
from products import dependencies as products_dependencies

_INSERT = re.compile(r"^INSERT INTO (\w+) \(([^)]*)\) VALUES \([^)]*\) RETURNING id$")
_SELECT_ONE = re.compile(r"^SELECT (.+) FROM (\w+) WHERE id = \$1$")
_SELECT_ALL = re.compile(r"^SELECT (.+) FROM (\w+)$")
_UPDATE = re.compile(r"^UPDATE (\w+) SET (.+) WHERE id = \$(\d+) RETURNING id$")
_DELETE = re.compile(r"^DELETE FROM (\w+) WHERE id = \$1 RETURNING id$")
_ASSIGNMENT = re.compile(r"(\w+) = \$(\d+)")


def _columns(raw: str) -> list[str]:
    return [col.strip() for col in raw.split(",")]


class FakeDatabase:
    """
    In-memory stand-in for core.db.Database.

    Understands the single-table statement shapes the repositories issue.
    Set `fail_with` to make every call raise StorageError.
    """

    def __init__(self, name: str = "fake") -> None:
        self.name = name
        self.tables: dict[str, dict[int, dict[str, Any]]] = {}
        self.next_ids: dict[str, int] = {}
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.fail_with: str | None = None

    def _table(self, name: str) -> dict[int, dict[str, Any]]:
        return self.tables.setdefault(name, {})

    def _record(self, sql: str, args: tuple[Any, ...]) -> str:
        normalized = " ".join(sql.split())
        self.calls.append((normalized, args))
        if self.fail_with is not None:
            raise StorageError(self.fail_with)
        return normalized

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        stmt = self._record(sql, args)

        match = _INSERT.match(stmt)
        if match:
            table, cols = match.group(1), _columns(match.group(2))
            new_id = self.next_ids.get(table, 1)
            self.next_ids[table] = new_id + 1
            self._table(table)[new_id] = {"id": new_id, **dict(zip(cols, args))}
            return {"id": new_id}

        match = _SELECT_ONE.match(stmt)
        if match:
            cols, table = _columns(match.group(1)), match.group(2)
            row = self._table(table).get(args[0])
            return {col: row[col] for col in cols} if row is not None else None

        match = _UPDATE.match(stmt)
        if match:
            table, assignments, id_pos = match.group(1), match.group(2), int(match.group(3))
            row = self._table(table).get(args[id_pos - 1])
            if row is None:
                return None
            for col, pos in _ASSIGNMENT.findall(assignments):
                row[col] = args[int(pos) - 1]
            return {"id": row["id"]}

        match = _DELETE.match(stmt)
        if match:
            row = self._table(match.group(1)).pop(args[0], None)
            return {"id": row["id"]} if row is not None else None

        raise AssertionError(f"Unexpected statement: {stmt}")

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        stmt = self._record(sql, args)
        match = _SELECT_ALL.match(stmt)
        if not match:
            raise AssertionError(f"Unexpected statement: {stmt}")
        cols, table = _columns(match.group(1)), match.group(2)
        return [{col: row[col] for col in cols} for row in self._table(table).values()]


@pytest.fixture
def clients_db() -> FakeDatabase:
    return FakeDatabase("clients")


@pytest.fixture
def products_db() -> FakeDatabase:
    return FakeDatabase("products")


@pytest.fixture
def app(clients_db: FakeDatabase, products_db: FakeDatabase):
    application = create_app(["clients", "products"])
    application.dependency_overrides[clients_dependencies.get_db] = lambda: clients_db
    application.dependency_overrides[products_dependencies.get_db] = lambda: products_db
    return application


@pytest.fixture
def http_client(app) -> TestClient:
    # Not used as a context manager, so the lifespan never opens real pools.
    return TestClient(app)
