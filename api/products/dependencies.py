"""
Storage dependency for product routes.
"""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from core import db

SERVICE_NAME = "products"


async def get_db(request: Request) -> db.Database:
    try:
        return db.database_for(request, SERVICE_NAME)
    except db.StorageError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(exc),
        ) from exc
