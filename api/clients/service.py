"""
Client business logic.

Each operation is one statement. Storage failures surface as 500 with the
driver message; a missing id surfaces as 404. Nothing is retried.
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
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client not found.")


def _to_client(row: dict) -> schemas.Client:
    return schemas.Client(
        id=int(row["id"]),
        name=str(row["name"]),
        email=str(row["email"]),
        phone=str(row["phone"]),
        address=str(row["address"]),
    )


async def create_client(db: Database, payload: schemas.CreateClientRequest) -> schemas.CreateClientResponse:
    try:
        client_id = await repository.create_client(
            db,
            name=payload.name,
            email=payload.email,
            phone=payload.phone,
            address=payload.address,
        )
    except StorageError as exc:
        raise _storage_failure("create client", exc) from exc

    logger.info("Client %s created", client_id)
    return schemas.CreateClientResponse(id=client_id)


async def get_client(db: Database, client_id: int) -> schemas.GetClientResponse:
    try:
        row = await repository.get_client(db, client_id)
    except StorageError as exc:
        raise _storage_failure("retrieve client", exc) from exc

    if row is None:
        raise _not_found()
    return schemas.GetClientResponse(client=_to_client(row))


async def update_client(
    db: Database,
    client_id: int,
    payload: schemas.UpdateClientRequest,
) -> schemas.OkResponse:
    try:
        updated = await repository.update_client(
            db,
            client_id,
            name=payload.name,
            email=payload.email,
            phone=payload.phone,
            address=payload.address,
        )
    except StorageError as exc:
        raise _storage_failure("update client", exc) from exc

    if not updated:
        raise _not_found()
    logger.info("Client %s updated", client_id)
    return schemas.OkResponse()


async def delete_client(db: Database, client_id: int) -> schemas.OkResponse:
    try:
        deleted = await repository.delete_client(db, client_id)
    except StorageError as exc:
        raise _storage_failure("delete client", exc) from exc

    if not deleted:
        raise _not_found()
    logger.info("Client %s deleted", client_id)
    return schemas.OkResponse()


async def list_clients(db: Database) -> schemas.ListClientsResponse:
    try:
        rows = await repository.list_clients(db)
    except StorageError as exc:
        raise _storage_failure("list clients", exc) from exc

    return schemas.ListClientsResponse(clients=[_to_client(row) for row in rows])
