"""FastAPI application entry point."""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cineworld_listings import __version__
from cineworld_listings.api.errors import register_exception_handlers
from cineworld_listings.api.routes import branch, films, health
from cineworld_listings.config import settings

logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(name)s %(message)s")
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Cineworld Listings API",
    description="Film schedules for Cineworld branches",
    version=__version__,
)

# Configure CORS. Requests without an Origin header are never blocked.
app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=settings.cors_origin_regex,
    allow_methods=["GET"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(health.router)
app.include_router(films.router, prefix="/api/cineworld", tags=["cineworld"])
app.include_router(branch.router, prefix="/api/cineworld", tags=["cineworld"])


def run() -> None:
    """Serve the API with uvicorn."""
    logger.info(f"Server running on port {settings.api_port}")
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
