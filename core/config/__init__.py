"""
Runtime Configuration Module

Provides configuration loading and management for the receipt points service.
"""

from .runtime import (
    ClientConfig,
    RuntimeConfig,
    ServerConfig,
)

__all__ = [
    "RuntimeConfig",
    "ServerConfig",
    "ClientConfig",
]
