"""
CLI Score Command

Score a receipt file locally, without a server, and show how each rule
contributed.

Usage:
    receipt-points score receipt.json [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path

from pydantic import ValidationError

from core.points import score_breakdown
from core.schemas.receipt import Receipt


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_REQUEST_FAILED = 2


def load_receipt(path: Path) -> Receipt:
    """Read and decode a receipt JSON file."""
    return Receipt.model_validate_json(path.read_bytes())


def score_cmd(args: Namespace) -> int:
    """Execute the score command."""
    path = Path(args.file)

    try:
        receipt = load_receipt(path)
    except OSError as e:
        print(f"Failed to read {path}: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except ValidationError as e:
        print(f"Invalid receipt {path}: {e.error_count()} error(s)", file=sys.stderr)
        for err in e.errors():
            loc = ".".join(str(part) for part in err["loc"])
            print(f"  - {loc}: {err['msg']}", file=sys.stderr)
        return EXIT_REQUEST_FAILED

    missing = receipt.missing_fields()
    if missing:
        print(f"Receipt would be rejected, missing: {', '.join(missing)}", file=sys.stderr)
        return EXIT_REQUEST_FAILED

    results = score_breakdown(receipt)
    total = sum(r.points for r in results)

    if args.json:
        print(json.dumps(
            {
                "points": total,
                "rules": [
                    {"rule_id": r.rule_id, "description": r.description, "points": r.points}
                    for r in results
                ],
            },
            indent=2,
        ))
    else:
        for r in results:
            print(f"  {r.points:>4}  {r.rule_id}")
        print(f"points: {total}")

    return EXIT_SUCCESS
