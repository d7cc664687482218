"""
Client persistence (raw SQL).
"""

from __future__ import annotations

from core.db import Database, StorageError


async def create_client(
    db: Database,
    *,
    name: str,
    email: str,
    phone: str,
    address: str,
) -> int:
    row = await db.fetch_one(
        """
        INSERT INTO clients (name, email, phone, address)
        VALUES ($1, $2, $3, $4)
        RETURNING id
        """,
        name,
        email,
        phone,
        address,
    )
    if row is None:
        raise StorageError("insert into clients returned no id")
    return int(row["id"])


async def get_client(db: Database, client_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, name, email, phone, address
        FROM clients
        WHERE id = $1
        """,
        client_id,
    )


async def update_client(
    db: Database,
    client_id: int,
    *,
    name: str,
    email: str,
    phone: str,
    address: str,
) -> bool:
    row = await db.fetch_one(
        """
        UPDATE clients
        SET name = $1, email = $2, phone = $3, address = $4
        WHERE id = $5
        RETURNING id
        """,
        name,
        email,
        phone,
        address,
        client_id,
    )
    return row is not None


async def delete_client(db: Database, client_id: int) -> bool:
    row = await db.fetch_one(
        """
        DELETE FROM clients
        WHERE id = $1
        RETURNING id
        """,
        client_id,
    )
    return row is not None


async def list_clients(db: Database) -> list[dict]:
    # Unordered and fully materialized; the table is expected to stay small.
    return await db.fetch_all(
        """
        SELECT id, name, email, phone, address
        FROM clients
        """
    )
