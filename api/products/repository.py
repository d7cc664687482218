"""
Product persistence (raw SQL).
"""

from __future__ import annotations

from core.db import Database, StorageError


async def create_product(db: Database, *, namep: str, price: float, stock: int) -> int:
    row = await db.fetch_one(
        """
        INSERT INTO products (namep, price, stock)
        VALUES ($1, $2, $3)
        RETURNING id
        """,
        namep,
        price,
        stock,
    )
    if row is None:
        raise StorageError("insert into products returned no id")
    return int(row["id"])


async def get_product(db: Database, product_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, namep, price, stock
        FROM products
        WHERE id = $1
        """,
        product_id,
    )


async def update_product(
    db: Database,
    product_id: int,
    *,
    namep: str,
    price: float,
    stock: int,
) -> bool:
    row = await db.fetch_one(
        """
        UPDATE products
        SET namep = $1, price = $2, stock = $3
        WHERE id = $4
        RETURNING id
        """,
        namep,
        price,
        stock,
        product_id,
    )
    return row is not None


async def delete_product(db: Database, product_id: int) -> bool:
    row = await db.fetch_one(
        """
        DELETE FROM products
        WHERE id = $1
        RETURNING id
        """,
        product_id,
    )
    return row is not None


async def list_products(db: Database) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, namep, price, stock
        FROM products
        """
    )
