"""
Receipt Points CLI

Command-line interface for the receipt points service.

Usage:
    python -m points_cli submit sample_receipts/*.json
    python -m points_cli points <id>
    python -m points_cli score receipt.json
    python -m points_cli serve --port 8080
"""

__version__ = "0.1.0"
