"""
Client registry API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Database

from . import dependencies, schemas, service

router = APIRouter()


@router.post("/clients", response_model=schemas.CreateClientResponse)
async def create_client(
    request: schemas.CreateClientRequest,
    db: Database = Depends(dependencies.get_db),
) -> schemas.CreateClientResponse:
    return await service.create_client(db, request)


@router.get("/clients", response_model=schemas.ListClientsResponse)
async def list_clients(
    db: Database = Depends(dependencies.get_db),
) -> schemas.ListClientsResponse:
    return await service.list_clients(db)


@router.get("/clients/{client_id}", response_model=schemas.GetClientResponse)
async def get_client(
    client_id: int,
    db: Database = Depends(dependencies.get_db),
) -> schemas.GetClientResponse:
    return await service.get_client(db, client_id)


@router.put("/clients/{client_id}", response_model=schemas.OkResponse)
async def update_client(
    client_id: int,
    request: schemas.UpdateClientRequest,
    db: Database = Depends(dependencies.get_db),
) -> schemas.OkResponse:
    """
    Overwrite every field of a client. Omitted fields are written as "".
    """
    return await service.update_client(db, client_id, request)


@router.delete("/clients/{client_id}", response_model=schemas.OkResponse)
async def delete_client(
    client_id: int,
    db: Database = Depends(dependencies.get_db),
) -> schemas.OkResponse:
    return await service.delete_client(db, client_id)
