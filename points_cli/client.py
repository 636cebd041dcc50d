"""
Receipts API Client

Thin wrapper over HttpClient for the two receipt endpoints.
"""

from __future__ import annotations

import logging
from typing import Any

from core.http import HttpClient, HttpError, HttpResponse


logger = logging.getLogger(__name__)


class ReceiptRequestError(HttpError):
    """The API answered a receipt request with a non-2xx status."""


def _error_message(response: HttpResponse) -> str:
    """Extract the message from an API error envelope, falling back to the body text."""
    try:
        body = response.json()
        return str(body["error"]["message"])
    except (ValueError, KeyError, TypeError):
        return response.text.strip() or f"HTTP {response.status_code}"


class ReceiptsClient:
    """
    Client for the receipt points API.

    Usage:
        with ReceiptsClient("http://localhost:8080") as client:
            receipt_id = client.process_receipt(payload)
            points = client.get_points(receipt_id)
    """

    def __init__(self, base_url: str, *, timeout: float = 30.0, http: HttpClient | None = None) -> None:
        self.http = http or HttpClient(
            base_url=base_url,
            timeout=timeout,
            default_headers={"Accept": "application/json"},
        )

    def _check(self, response: HttpResponse) -> Any:
        if not response.ok:
            raise ReceiptRequestError(
                _error_message(response),
                status_code=response.status_code,
                response=response,
            )
        return response.json()

    def process_receipt(self, payload: bytes | dict[str, Any]) -> str:
        """
        Submit a receipt and return its id.

        Raw bytes are sent as-is so a receipt file reaches the server unchanged.
        """
        if isinstance(payload, (bytes, bytearray)):
            response = self.http.post(
                "/receipts/process",
                data=bytes(payload),
                headers={"Content-Type": "application/json"},
            )
        else:
            response = self.http.post("/receipts/process", json=payload)
        body = self._check(response)
        logger.debug(f"Receipt accepted with id {body['id']}")
        return body["id"]

    def get_points(self, receipt_id: str) -> int:
        """Return the points for a processed receipt."""
        body = self._check(self.http.get(f"/receipts/{receipt_id}/points"))
        return int(body["points"])

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "ReceiptsClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()
