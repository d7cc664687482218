"""
Client API schemas (request/response models).

Field names are the wire contract. Omitted request fields decode to
their zero value, so an update always overwrites every field.
"""

from __future__ import annotations

from pydantic import BaseModel


class Client(BaseModel):
    id: int
    name: str
    email: str
    phone: str
    address: str


class CreateClientRequest(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""


class UpdateClientRequest(CreateClientRequest):
    pass


class CreateClientResponse(BaseModel):
    id: int


class GetClientResponse(BaseModel):
    client: Client


class ListClientsResponse(BaseModel):
    clients: list[Client]


class OkResponse(BaseModel):
    ok: bool = True
