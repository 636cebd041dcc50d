"""
API Dependencies

Dependency injection for the API.
Provides the runtime configuration and the per-application receipt store.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from fastapi import Request

from core.config.runtime import RuntimeConfig
from core.store import ReceiptStore

logger = logging.getLogger(__name__)


CONFIG_SEARCH_PATHS = (
    Path("receipt_points.json"),
    Path("receipt_points.yaml"),
    Path(".receipt_points.json"),
    Path.home() / ".config" / "receipt-points" / "config.json",
)

YAML_SUFFIXES = (".yaml", ".yml")


def load_runtime_config() -> RuntimeConfig:
    """Load RuntimeConfig from config file, then overlay environment variables.

    Search order for config file:
      1. ./receipt_points.json
      2. ./receipt_points.yaml
      3. ./.receipt_points.json
      4. ~/.config/receipt-points/config.json

    Environment variables ALWAYS override config file values.
    """
    config: RuntimeConfig | None = None

    for path in CONFIG_SEARCH_PATHS:
        if path.exists():
            try:
                if path.suffix in YAML_SUFFIXES:
                    config = RuntimeConfig.from_yaml(path)
                else:
                    with open(path) as f:
                        config = RuntimeConfig.from_dict(json.load(f))
                logger.info(f"Loaded config from {path}")
                break
            except Exception as e:
                logger.warning(f"Failed to parse {path}: {e}")

    if config is None:
        config = RuntimeConfig()

    return config.with_env_overrides()


def get_store(request: Request) -> ReceiptStore:
    """Return the receipt store owned by the running application."""
    return request.app.state.store
