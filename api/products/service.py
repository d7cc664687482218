"""
Product business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core.db import Database, StorageError

from . import repository, schemas

logger = logging.getLogger(__name__)


def _storage_failure(action: str, exc: StorageError) -> HTTPException:
    logger.error("could not %s: %s", action, exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"could not {action}: {exc}",
    )


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found.")


def _to_product(row: dict) -> schemas.Product:
    return schemas.Product(
        id=int(row["id"]),
        namep=str(row["namep"]),
        price=float(row["price"]),
        stock=int(row["stock"]),
    )


async def create_product(db: Database, payload: schemas.CreateProductRequest) -> schemas.CreateProductResponse:
    try:
        product_id = await repository.create_product(
            db,
            namep=payload.namep,
            price=payload.price,
            stock=payload.stock,
        )
    except StorageError as exc:
        raise _storage_failure("create product", exc) from exc

    logger.info("Product %s created", product_id)
    return schemas.CreateProductResponse(id=product_id)


async def get_product(db: Database, product_id: int) -> schemas.GetProductResponse:
    try:
        row = await repository.get_product(db, product_id)
    except StorageError as exc:
        raise _storage_failure("retrieve product", exc) from exc

    if row is None:
        raise _not_found()
    return schemas.GetProductResponse(product=_to_product(row))


async def update_product(
    db: Database,
    product_id: int,
    payload: schemas.UpdateProductRequest,
) -> schemas.OkResponse:
    try:
        updated = await repository.update_product(
            db,
            product_id,
            namep=payload.namep,
            price=payload.price,
            stock=payload.stock,
        )
    except StorageError as exc:
        raise _storage_failure("update product", exc) from exc

    if not updated:
        raise _not_found()
    logger.info("Product %s updated", product_id)
    return schemas.OkResponse()


async def delete_product(db: Database, product_id: int) -> schemas.OkResponse:
    try:
        deleted = await repository.delete_product(db, product_id)
    except StorageError as exc:
        raise _storage_failure("delete product", exc) from exc

    if not deleted:
        raise _not_found()
    logger.info("Product %s deleted", product_id)
    return schemas.OkResponse()


async def list_products(db: Database) -> schemas.ListProductsResponse:
    try:
        rows = await repository.list_products(db)
    except StorageError as exc:
        raise _storage_failure("list products", exc) from exc

    return schemas.ListProductsResponse(products=[_to_product(row) for row in rows])
