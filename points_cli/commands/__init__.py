"""
CLI command modules.
"""

from points_cli.commands import submit, points, score, serve

__all__ = ["submit", "points", "score", "serve"]
