"""
HTTP Client Module

requests-based HTTP client for calling the receipt points API.
"""

from .client import HttpClient, HttpError, HttpResponse

__all__ = [
    "HttpClient",
    "HttpError",
    "HttpResponse",
]
