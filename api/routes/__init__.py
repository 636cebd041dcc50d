"""API route handlers."""

from api.routes import health, receipts

__all__ = ["health", "receipts"]
