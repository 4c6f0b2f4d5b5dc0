"""FastAPI app factory + lifespan for the users service."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from udshttp.errors import BadRequestError, HandlerError, NotFoundError
from udshttp.schemas import ErrorEnvelope
from udshttp.server.routes import router
from udshttp.server.store import StaticUserStore, UserStore

log = logging.getLogger(__name__)


def envelope(status_code: int, msg: str) -> JSONResponse:
    return JSONResponse(ErrorEnvelope(msg=msg).model_dump(), status_code=status_code)


def _describe(errors) -> str:
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg', 'invalid')}" if loc else err.get("msg", "invalid"))
    return "; ".join(parts) or "invalid request"


# --- Exception handlers -----------------------------------------------------

async def handle_handler_error(request: Request, exc: HandlerError) -> JSONResponse:
    log.info("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.msg)
    return envelope(exc.status_code, exc.msg)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown path and unknown method on a known path are both "not found".
    if exc.status_code in (404, 405):
        return await handle_handler_error(
            request, NotFoundError(f"no route for {request.method} {request.url.path}"),
        )
    return envelope(exc.status_code, str(exc.detail))


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return await handle_handler_error(request, BadRequestError(_describe(exc.errors())))


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    return envelope(500, "internal server error")


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info("users service starting up (store=%s)", type(app.state.store).__name__)
    yield
    log.info("users service shutting down")


def create_app(store: UserStore | None = None) -> FastAPI:
    app = FastAPI(
        title="udshttp",
        description="Users service served over a Unix domain socket",
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else StaticUserStore()
    app.include_router(router)
    app.add_exception_handler(HandlerError, handle_handler_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected)
    return app
