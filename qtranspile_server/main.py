"""FastAPI application for the transpiler server."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .config import settings
from .routes import backends_router, transpile_router
from .services.backends import get_registry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Startup: Initialize registry (loads device files from disk)
    registry = get_registry()
    logger.info("Transpiler server started with %d backends loaded", len(registry.names()))
    yield
    # Shutdown: nothing to clean up


app = FastAPI(
    title="Quantum Circuit Transpiler Server",
    description="Parses, routes and optimizes quantum circuits for target devices",
    version=settings.transpiler_version,
    lifespan=lifespan,
)

app.include_router(transpile_router, tags=["transpile"])
app.include_router(backends_router, prefix="/backends", tags=["backends"])


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


def run():
    """Entry point for qtranspile-server command."""
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
