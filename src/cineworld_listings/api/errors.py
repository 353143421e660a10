"""Mapping of listings errors to `{"error": ...}` responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cineworld_listings.errors import ListingsError

logger = logging.getLogger(__name__)


async def listings_error_handler(request: Request, exc: ListingsError) -> JSONResponse:
    logger.warning(f"{request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers so every ListingsError becomes an error response."""
    app.add_exception_handler(ListingsError, listings_error_handler)
