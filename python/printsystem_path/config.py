"""Resolver configuration.

Naming limits and transport defaults are held in a ResolverConfig model.
Configuration can be loaded from a YAML file, located by argument or by
the PRINTSYSTEM_PATH_CONFIG environment variable.

Example YAML:
    max_server_name_length: 63
    default_tcp_port: 515
    http_schemes: [http, https]
    log_level: debug
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigurationError
from .logging import configure_logging, log_debug

CONFIG_ENV_VAR = "PRINTSYSTEM_PATH_CONFIG"


class ResolverConfig(BaseModel):
    """Settings shared by every resolver in a chain.

    Example:
        >>> config = ResolverConfig(default_tcp_port=515)
        >>> chain = PathResolver.default(properties, config=config)
    """

    max_server_name_length: int = Field(
        default=255,
        ge=1,
        description="Longest accepted print server (host) name.",
    )
    max_printer_name_length: int = Field(
        default=220,
        ge=1,
        description="Longest accepted printer (queue) name.",
    )
    default_tcp_port: int = Field(
        default=9100,
        ge=1,
        le=65535,
        description="Port used by the TCP/IP resolver when PortNumber is absent.",
    )
    http_schemes: tuple[str, ...] = Field(
        default=("http", "https"),
        min_length=1,
        description="URL schemes accepted by the HTTP resolver.",
    )
    log_level: str = Field(
        default="info",
        pattern="^(trace|debug|info|warn|error)$",
        description="Log level for the printsystem_path logger.",
    )

    model_config = {"extra": "forbid", "frozen": True}


def load_config(path: str | Path | None = None) -> ResolverConfig:
    """Load a ResolverConfig from YAML.

    Search order:
    1. The ``path`` argument
    2. The PRINTSYSTEM_PATH_CONFIG environment variable
    3. Built-in defaults

    Args:
        path: Optional path to a YAML file.

    Returns:
        The loaded configuration.

    Raises:
        ConfigurationError: If the file is missing, unreadable, not a YAML
            mapping, or holds invalid settings.
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if not env_path:
            log_debug("No resolver configuration file, using defaults")
            return ResolverConfig()
        path = env_path

    config_path = Path(path)
    try:
        with config_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")

    try:
        config = ResolverConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings in {config_path}: {e}") from e

    configure_logging(config.log_level)
    log_debug(f"Loaded resolver configuration from {config_path}")
    return config


__all__ = [
    "CONFIG_ENV_VAR",
    "ResolverConfig",
    "load_config",
]
