"""
Product catalog API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Database

from . import dependencies, schemas, service

router = APIRouter()


@router.post("/products", response_model=schemas.CreateProductResponse)
async def create_product(
    request: schemas.CreateProductRequest,
    db: Database = Depends(dependencies.get_db),
) -> schemas.CreateProductResponse:
    return await service.create_product(db, request)


@router.get("/products", response_model=schemas.ListProductsResponse)
async def list_products(
    db: Database = Depends(dependencies.get_db),
) -> schemas.ListProductsResponse:
    return await service.list_products(db)


@router.get("/products/{product_id}", response_model=schemas.GetProductResponse)
async def get_product(
    product_id: int,
    db: Database = Depends(dependencies.get_db),
) -> schemas.GetProductResponse:
    return await service.get_product(db, product_id)


@router.put("/products/{product_id}", response_model=schemas.OkResponse)
async def update_product(
    product_id: int,
    request: schemas.UpdateProductRequest,
    db: Database = Depends(dependencies.get_db),
) -> schemas.OkResponse:
    return await service.update_product(db, product_id, request)


@router.delete("/products/{product_id}", response_model=schemas.OkResponse)
async def delete_product(
    product_id: int,
    db: Database = Depends(dependencies.get_db),
) -> schemas.OkResponse:
    return await service.delete_product(db, product_id)
