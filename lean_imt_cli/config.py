"""
CLI Configuration

Locates and loads the runtime configuration for the CLI.
Supports environment variables and configuration files.
"""

from __future__ import annotations

import json
from pathlib import Path

from lean_imt.config import RuntimeConfig


def default_config_paths() -> list[Path]:
    """Config file locations searched when no path is given, in order."""
    return [
        Path.cwd() / "lean_imt.json",
        Path.cwd() / ".lean_imt.json",
        Path.home() / ".config" / "lean_imt" / "config.json",
    ]


def load_config(config_path: Path | None = None) -> RuntimeConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings.

    Args:
        config_path: Optional path to config file. When omitted the
            default locations are searched in order.

    Returns:
        Merged configuration

    Raises:
        FileNotFoundError: If config_path is given but does not exist
    """
    config = RuntimeConfig()

    if config_path is not None:
        config = RuntimeConfig.from_file(config_path)
    else:
        for default_path in default_config_paths():
            if default_path.exists():
                config = RuntimeConfig.from_file(default_path)
                break

    return config.with_env_overrides()


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return json.dumps(RuntimeConfig().to_dict(), indent=2) + "\n"
