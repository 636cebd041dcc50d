"""
CLI Configuration

Configuration management for the receipt points CLI.
Supports environment variables and configuration files.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path


# Environment variable prefix
ENV_PREFIX = "RECEIPT_POINTS_"


@dataclass
class CLIConfig:
    """Main CLI configuration."""

    # API endpoint
    base_url: str = "http://localhost:8080"
    timeout: float = 30.0

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    # Output
    default_output_format: str = "human"  # "human" or "json"


def load_config_from_env() -> CLIConfig:
    """Load configuration from environment variables."""
    config = CLIConfig()

    if os.getenv(f"{ENV_PREFIX}BASE_URL"):
        config.base_url = os.getenv(f"{ENV_PREFIX}BASE_URL", config.base_url)
    if os.getenv(f"{ENV_PREFIX}TIMEOUT"):
        config.timeout = float(os.getenv(f"{ENV_PREFIX}TIMEOUT", "30"))

    # Logging
    config.log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "INFO")
    config.log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE")

    return config


def load_config_from_file(path: Path) -> CLIConfig:
    """Load configuration from a JSON file."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r") as f:
        data = json.load(f)

    config = CLIConfig()

    # The API config file nests client settings under "client"
    client_data = data.get("client", {})
    config.base_url = data.get("base_url", client_data.get("base_url", config.base_url))
    config.timeout = data.get("timeout", client_data.get("timeout", config.timeout))

    config.log_level = data.get("log_level", config.log_level)
    config.log_file = data.get("log_file", config.log_file)
    config.default_output_format = data.get("default_output_format", config.default_output_format)

    return config


def load_config(config_path: Path | None = None) -> CLIConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings.

    Args:
        config_path: Optional path to config file

    Returns:
        Merged configuration
    """
    config = CLIConfig()

    if config_path is not None:
        config = load_config_from_file(config_path)
    else:
        default_paths = [
            Path.cwd() / "receipt_points.json",
            Path.cwd() / ".receipt_points.json",
            Path.home() / ".config" / "receipt-points" / "config.json",
        ]
        for default_path in default_paths:
            if default_path.exists():
                config = load_config_from_file(default_path)
                break

    # Override with environment variables
    env_config = load_config_from_env()

    if os.getenv(f"{ENV_PREFIX}BASE_URL"):
        config.base_url = env_config.base_url
    if os.getenv(f"{ENV_PREFIX}TIMEOUT"):
        config.timeout = env_config.timeout
    if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
        config.log_level = env_config.log_level
    if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
        config.log_file = env_config.log_file

    return config


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return """{
  "server": {
    "host": "0.0.0.0",
    "port": 8080,
    "reload": false
  },
  "client": {
    "base_url": "http://localhost:8080",
    "timeout": 30.0
  },
  "log_level": "INFO",
  "log_file": null,
  "default_output_format": "human"
}
"""
