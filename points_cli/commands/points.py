"""
CLI Points Command

Look up the points for one processed receipt.

Usage:
    receipt-points points 7fb1377b-b223-49d9-a31a-5a02701dd310
"""

from __future__ import annotations

import json
import sys
from argparse import Namespace

from core.http import HttpError
from points_cli.client import ReceiptRequestError, ReceiptsClient
from points_cli.config import CLIConfig


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_REQUEST_FAILED = 2


def points_cmd(args: Namespace) -> int:
    """Execute the points command."""
    config: CLIConfig = getattr(args, "cli_config", None) or CLIConfig()
    base_url = args.base_url or config.base_url

    try:
        with ReceiptsClient(base_url, timeout=config.timeout) as client:
            points = client.get_points(args.receipt_id)
    except ReceiptRequestError as e:
        print(f"Error ({e.status_code}): {e}", file=sys.stderr)
        return EXIT_REQUEST_FAILED
    except HttpError as e:
        print(f"Could not reach {base_url}: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if args.json:
        print(json.dumps({"id": args.receipt_id, "points": points}, indent=2))
    else:
        print(f"points: {points}")
    return EXIT_SUCCESS
