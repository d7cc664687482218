"""
Product API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Product(BaseModel):
    id: int
    namep: str
    price: float
    stock: int


class CreateProductRequest(BaseModel):
    namep: str = ""
    # NaN/Infinity cannot be written back as JSON.
    price: float = Field(default=0.0, allow_inf_nan=False)
    stock: int = 0


class UpdateProductRequest(CreateProductRequest):
    pass


class CreateProductResponse(BaseModel):
    id: int


class GetProductResponse(BaseModel):
    product: Product


class ListProductsResponse(BaseModel):
    products: list[Product]


class OkResponse(BaseModel):
    ok: bool = True
