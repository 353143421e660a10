"""Shared test fixtures."""

import pytest
from fastapi import FastAPI

from cineworld_listings.api.errors import register_exception_handlers
from cineworld_listings.api.routes import branch, films, health


@pytest.fixture
def test_app() -> FastAPI:
    """Minimal FastAPI app without CORS middleware, for API tests."""
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(health.router)
    app.include_router(films.router, prefix="/api/cineworld")
    app.include_router(branch.router, prefix="/api/cineworld")
    return app
