# nursery_pos/core/errors.py

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class NurseryError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(NurseryError):
    """Bad input: empty required field, negative amount, empty cart."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(NurseryError):
    status_code = status.HTTP_404_NOT_FOUND


class StorageError(NurseryError):
    """The database rejected or could not complete a write."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class ExportEmptyError(NurseryError):
    """No sales fall inside the requested export range."""

    status_code = status.HTTP_404_NOT_FOUND


async def nursery_error_handler(request: Request, exc: NurseryError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    # Reads that hit a broken store surface the same way failed writes do
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Storage unavailable"},
    )


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(NurseryError, nursery_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
