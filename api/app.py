"""
FastAPI Application

Main application setup and configuration.

Usage:
    uvicorn api.app:app --reload

    # Or run directly
    python -m api.app
"""

import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from api.routes import health, receipts
from api.deps import load_runtime_config
from api.errors import APIError, api_error_handler, generic_error_handler, validation_error_handler
from core.store import ReceiptStore


def _resolve_log_level() -> int:
    """Resolve the log level from the runtime config, defaulting to INFO."""
    raw = load_runtime_config().log_level
    return getattr(logging, (raw or "INFO").upper(), logging.INFO)


logging.basicConfig(
    level=_resolve_log_level(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def create_app(store: ReceiptStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Receipt store to serve from. A fresh in-memory store is
               created when omitted.
    """

    app = FastAPI(
        title="Receipt Points API",
        description="""
Scores retail receipts and serves the awarded points.

## Endpoints

- **POST /receipts/process** - Score a receipt, returns its id
- **GET /receipts/{id}/points** - Points awarded to a processed receipt
- **GET /health** - Health check

Scores are kept in memory for the lifetime of the process.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.store = store if store is not None else ReceiptStore()

    # Register exception handlers
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(receipts.router)

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    config = load_runtime_config()
    uvicorn.run(app, host=config.server.host, port=config.server.port)
