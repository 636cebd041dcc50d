"""
Receipt Points API (FastAPI)

HTTP API for scoring receipts:
- POST /receipts/process - Score and store a receipt
- GET /receipts/{id}/points - Look up awarded points
- GET /health - Health check

Usage:
    uvicorn api.app:app --reload
"""

__version__ = "0.1.0"
