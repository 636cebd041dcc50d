"""
CLI Serve Command

Run the API with uvicorn.

Usage:
    receipt-points serve [--host 0.0.0.0] [--port 8080] [--reload]
"""

from __future__ import annotations

import logging
from argparse import Namespace

import uvicorn

from api.deps import load_runtime_config


logger = logging.getLogger(__name__)


EXIT_SUCCESS = 0


def serve_cmd(args: Namespace) -> int:
    """Start the API server; returns when the server stops."""
    server = load_runtime_config().server
    host = args.host or server.host
    port = args.port or server.port
    reload = args.reload or server.reload

    logger.info(f"Starting server on {host}:{port}...")
    uvicorn.run("api.app:app", host=host, port=port, reload=reload)
    return EXIT_SUCCESS
