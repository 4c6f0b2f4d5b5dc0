"""HTTP endpoints of the users service."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from udshttp.errors import BadRequestError
from udshttp.protocol import EP_USER, EP_USERS
from udshttp.schemas import CreateUserRequest

router = APIRouter()


@router.get(EP_USERS)
async def list_users(request: Request) -> list[str]:
    return [u.name for u in request.app.state.store.list_users()]


@router.post(EP_USER, status_code=201)
async def create_user(body: CreateUserRequest, request: Request):
    if not body.name:
        raise BadRequestError("name must not be empty")
    user = request.app.state.store.create_user(body.name)
    return JSONResponse(user.model_dump(), status_code=201)
