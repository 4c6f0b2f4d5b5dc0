"""Pydantic models for the JSON bodies exchanged over the socket."""

from __future__ import annotations

from pydantic import BaseModel, TypeAdapter


class User(BaseModel):
    id: str
    name: str


class CreateUserRequest(BaseModel):
    name: str


class ErrorEnvelope(BaseModel):
    """Body of every non-success response."""
    msg: str


UserNames = TypeAdapter(list[str])
