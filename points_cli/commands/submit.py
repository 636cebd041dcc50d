"""
CLI Submit Command

Submit receipt files to a running API, then fetch the points for every
receipt that was accepted.

Usage:
    receipt-points submit sample_receipts/morning-receipt.json sample_receipts/simple-receipt.json
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

from core.http import HttpError
from points_cli.client import ReceiptRequestError, ReceiptsClient
from points_cli.config import CLIConfig


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_REQUEST_FAILED = 2


@dataclass
class SubmissionResult:
    """Outcome of submitting one receipt file."""
    file: str
    id: str | None = None
    points: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class SubmitSummary:
    """Summary of a submit run for CLI output."""
    base_url: str = ""
    results: list[SubmissionResult] = field(default_factory=list)

    @property
    def all_ok(self) -> bool:
        return all(r.ok for r in self.results)

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        for result in d["results"]:
            for key in ("id", "points", "error"):
                if result[key] is None:
                    del result[key]
        return d


def submit_files(client: ReceiptsClient, paths: list[Path]) -> list[SubmissionResult]:
    """
    POST every file, then GET points for each accepted receipt.

    Unreadable or rejected files are recorded and skipped. Connection
    failures propagate as HttpError.
    """
    results: list[SubmissionResult] = []

    for path in paths:
        result = SubmissionResult(file=path.name)
        results.append(result)
        try:
            payload = path.read_bytes()
        except OSError as e:
            result.error = f"Failed to read file: {e}"
            continue
        try:
            result.id = client.process_receipt(payload)
            logger.info(f"Received ID for file {path.name}: {result.id}")
        except ReceiptRequestError as e:
            result.error = f"Rejected ({e.status_code}): {e}"

    for result in results:
        if result.id is None:
            continue
        try:
            result.points = client.get_points(result.id)
        except ReceiptRequestError as e:
            result.error = f"Points lookup failed ({e.status_code}): {e}"

    return results


def print_summary_human(summary: SubmitSummary) -> None:
    """Print summary in human-readable format."""
    for result in summary.results:
        if result.ok:
            print(f"{result.file}: id={result.id} points={result.points}")
        else:
            print(f"{result.file}: error: {result.error}")


def submit_cmd(args: Namespace) -> int:
    """
    Execute the submit command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    config: CLIConfig = getattr(args, "cli_config", None) or CLIConfig()
    base_url = args.base_url or config.base_url
    paths = [Path(p) for p in args.files]

    summary = SubmitSummary(base_url=base_url)
    try:
        with ReceiptsClient(base_url, timeout=config.timeout) as client:
            summary.results = submit_files(client, paths)
    except HttpError as e:
        print(f"Could not reach {base_url}: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print_summary_human(summary)

    return EXIT_SUCCESS if summary.all_ok else EXIT_REQUEST_FAILED
