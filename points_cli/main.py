"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m points_cli submit FILE [FILE ...] [--base-url URL] [--json]
    python -m points_cli points ID [--base-url URL] [--json]
    python -m points_cli score FILE [--json]
    python -m points_cli serve [--host HOST] [--port PORT] [--reload]
    python -m points_cli config --init

Environment Variables:
    RECEIPT_POINTS_BASE_URL     API base URL (default: http://localhost:8080)
    RECEIPT_POINTS_TIMEOUT      Request timeout in seconds (default: 30)
    RECEIPT_POINTS_LOG_LEVEL    Log level (default: INFO)
    RECEIPT_POINTS_LOG_FILE     Optional log file
"""

from __future__ import annotations

import argparse
import logging
import sys
import traceback
from argparse import Namespace
from pathlib import Path
from typing import Sequence

from points_cli.commands import submit, points, score, serve
from points_cli.config import load_config, get_default_config_template


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_REQUEST_FAILED = 2


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="receipt-points",
        description="Receipt Points CLI - Submit receipts, look up points, and score receipts locally.",
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s 0.1.0"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./receipt_points.json or ~/.config/receipt-points/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- submit command ---
    submit_parser = subparsers.add_parser(
        "submit",
        help="Submit receipt files and print their points",
        description="POST each receipt file to the API, then fetch the points for every returned id.",
    )
    submit_parser.add_argument(
        "files",
        nargs="+",
        help="Receipt JSON files",
    )
    submit_parser.add_argument(
        "--base-url",
        type=str,
        default=None,
        help="API base URL (default: from config)",
    )
    submit_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON summary",
    )
    submit_parser.set_defaults(func=submit.submit_cmd)

    # --- points command ---
    points_parser = subparsers.add_parser(
        "points",
        help="Look up the points for a receipt id",
    )
    points_parser.add_argument("receipt_id", type=str, help="Receipt id returned by submit")
    points_parser.add_argument("--base-url", type=str, default=None, help="API base URL")
    points_parser.add_argument("--json", action="store_true", help="JSON output")
    points_parser.set_defaults(func=points.points_cmd)

    # --- score command ---
    score_parser = subparsers.add_parser(
        "score",
        help="Score a receipt file locally",
        description="Score a receipt without a server and show each rule's contribution.",
    )
    score_parser.add_argument("file", type=str, help="Receipt JSON file")
    score_parser.add_argument("--json", action="store_true", help="JSON output")
    score_parser.set_defaults(func=score.score_cmd)

    # --- serve command ---
    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the API server",
    )
    serve_parser.add_argument("--host", type=str, default=None, help="Bind address (default: from config)")
    serve_parser.add_argument("--port", type=int, default=None, help="Listen port (default: from config)")
    serve_parser.add_argument("--reload", action="store_true", default=False, help="Auto-reload on code changes")
    serve_parser.set_defaults(func=serve.serve_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Configuration management",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        help="Print a template configuration file",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: Namespace) -> int:
    """Handle config command."""
    if args.init:
        print(get_default_config_template())
        return EXIT_SUCCESS

    config = args.cli_config
    print(f"base_url: {config.base_url}")
    print(f"timeout: {config.timeout}")
    print(f"log_level: {config.log_level}")
    print(f"log_file: {config.log_file}")
    print(f"default_output_format: {config.default_output_format}")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=request rejected)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    # Load configuration
    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # Setup logging
    log_level = args.log_level or config.log_level
    setup_logging(level=log_level, log_file=config.log_file)

    # Attach config to args for commands to use
    args.cli_config = config

    if hasattr(args, "json") and not args.json:
        args.json = config.default_output_format == "json"

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if args.log_level == "DEBUG":
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
