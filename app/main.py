import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1.router import router as api_v1_router
from app.core.config import settings as app_settings
from app.core.exceptions import (
    DuplicateError,
    IntegrityError,
    NotAuthenticatedError,
    NotFoundError,
)
from app.core.store import EntityStore
from app.scripts.seed import seed_sample_properties

# Configure logging
logging.basicConfig(
    level=getattr(logging, app_settings.LOG_LEVEL.upper(), logging.INFO)
)
logger = logging.getLogger(__name__)


async def not_found_handler(request: Request, exc: NotFoundError):
    logger.warning("Not found: %s", exc.detail)
    return JSONResponse(
        status_code=404,
        content={"detail": exc.detail, "type": "not_found"},
    )


async def duplicate_handler(request: Request, exc: DuplicateError):
    logger.warning("Duplicate rejected: %s", exc.detail)
    return JSONResponse(
        status_code=409,
        content={"detail": exc.detail, "type": "duplicate"},
    )


async def integrity_handler(request: Request, exc: IntegrityError):
    """Store inconsistency: fail this request loudly, keep serving others."""
    logger.error(
        "Integrity violation on %s %s: %s",
        request.method,
        request.url.path,
        exc.detail,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": exc.detail, "type": "integrity_error"},
    )


async def not_authenticated_handler(request: Request, exc: NotAuthenticatedError):
    return JSONResponse(
        status_code=401,
        content={"detail": exc.detail, "type": "not_authenticated"},
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning("Request validation error: %s", exc.errors())
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Request validation failed",
            "errors": jsonable_encoder(exc.errors(), custom_encoder={Exception: str}),
            "type": "validation_error",
        },
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """Catch-all handler for unexpected/unhandled exceptions.

    Returns a generic 500 response so that raw stack traces are never
    leaked to the client.
    """
    logger.error(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected internal error occurred. Please try again later.",
            "type": "internal_server_error",
        },
    )


def create_app(
    store: Optional[EntityStore] = None,
    seed: Optional[bool] = None,
) -> FastAPI:
    """Build an application bound to its own entity store.

    A fresh store is created (and seeded with the sample listings unless
    *seed* or ``SEED_SAMPLE_DATA`` says otherwise) when none is given.
    """
    if store is None:
        store = EntityStore()
        if seed is None:
            seed = app_settings.SEED_SAMPLE_DATA
        if seed:
            seed_sample_properties(store)

    app = FastAPI(
        title="Rental Property Directory",
        description="Search, favorite and track rental listings",
        version="0.1.0",
    )
    app.state.store = store

    # CORS middleware – restricted to configured origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            o.strip() for o in app_settings.CORS_ORIGINS.split(",") if o.strip()
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_v1_router)

    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(DuplicateError, duplicate_handler)
    app.add_exception_handler(IntegrityError, integrity_handler)
    app.add_exception_handler(NotAuthenticatedError, not_authenticated_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    return app


app = create_app()
