"""
Runtime Configuration

Central configuration for the API server and the demonstration client.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


ENV_PREFIX = "RECEIPT_POINTS_"


@dataclass
class ServerConfig:
    """Configuration for the HTTP server."""
    host: str = "0.0.0.0"
    port: int = 8080
    reload: bool = False


@dataclass
class ClientConfig:
    """Configuration for clients calling the API."""
    base_url: str = "http://localhost:8080"
    timeout: float = 30.0


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration for the receipt points service.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    server: ServerConfig = field(default_factory=ServerConfig)
    client: ClientConfig = field(default_factory=ClientConfig)
    log_level: str = "INFO"
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - RECEIPT_POINTS_HOST: Bind address for the server
        - RECEIPT_POINTS_PORT: Listen port for the server
        - RECEIPT_POINTS_RELOAD: Enable auto-reload (true/false)
        - RECEIPT_POINTS_BASE_URL: API base URL used by clients
        - RECEIPT_POINTS_TIMEOUT: Client request timeout in seconds
        - RECEIPT_POINTS_LOG_LEVEL: Log level
        """
        overrides: dict[str, Any] = {}

        # Server settings
        if os.getenv(f"{ENV_PREFIX}HOST"):
            overrides.setdefault("server", {})["host"] = os.getenv(f"{ENV_PREFIX}HOST")
        if os.getenv(f"{ENV_PREFIX}PORT"):
            overrides.setdefault("server", {})["port"] = int(os.getenv(f"{ENV_PREFIX}PORT", "8080"))
        if os.getenv(f"{ENV_PREFIX}RELOAD"):
            overrides.setdefault("server", {})["reload"] = (
                os.getenv(f"{ENV_PREFIX}RELOAD", "false").lower() == "true"
            )

        # Client settings
        if os.getenv(f"{ENV_PREFIX}BASE_URL"):
            overrides.setdefault("client", {})["base_url"] = os.getenv(f"{ENV_PREFIX}BASE_URL")
        if os.getenv(f"{ENV_PREFIX}TIMEOUT"):
            overrides.setdefault("client", {})["timeout"] = float(os.getenv(f"{ENV_PREFIX}TIMEOUT", "30"))

        # Logging
        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides["log_level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        server_data = data.get("server", {})
        client_data = data.get("client", {})

        server = ServerConfig(**server_data) if server_data else ServerConfig()
        client = ClientConfig(**client_data) if client_data else ClientConfig()

        return cls(
            server=server,
            client=client,
            log_level=data.get("log_level", "INFO"),
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        import copy
        new_config = copy.deepcopy(self)

        if "server" in overrides:
            for key, value in overrides["server"].items():
                setattr(new_config.server, key, value)

        if "client" in overrides:
            for key, value in overrides["client"].items():
                setattr(new_config.client, key, value)

        if "log_level" in overrides:
            new_config.log_level = overrides["log_level"]

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "server": {
                "host": self.server.host,
                "port": self.server.port,
                "reload": self.server.reload,
            },
            "client": {
                "base_url": self.client.base_url,
                "timeout": self.client.timeout,
            },
            "log_level": self.log_level,
            "extra": self.extra,
        }

