"""Configuration management for motionkit library."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_ADAPTERS = ["struct", "color", "numeric"]


@dataclass
class MotionConfig:
    """Configuration for an adapter group.

    This configuration can be loaded from:
    - motionkit.yaml in the working directory
    - A file named by the MOTIONKIT_CONFIG environment variable
    - Programmatic configuration

    The order of ``adapters`` is the dispatch priority of the group built
    from it.
    """

    additive: bool = False
    additive_weighting: float = 1.0
    adapters: list[str] = field(default_factory=lambda: list(DEFAULT_ADAPTERS))

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "additive": self.additive,
            "additive_weighting": self.additive_weighting,
            "adapters": list(self.adapters),
        }

    def save(self, path: Path | str) -> None:
        """Save configuration to YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)

        logger.info(f"Saved motionkit config to {path}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MotionConfig:
        """Create configuration from dictionary.

        Raises:
            ConfigurationError: If a value has the wrong type
        """
        additive = data.get("additive", False)
        if not isinstance(additive, bool):
            raise ConfigurationError(
                "'additive' must be a boolean",
                {"value": additive},
            )

        weighting = data.get("additive_weighting", 1.0)
        if isinstance(weighting, bool) or not isinstance(weighting, (int, float)):
            raise ConfigurationError(
                "'additive_weighting' must be a number",
                {"value": weighting},
            )

        adapters = data.get("adapters", list(DEFAULT_ADAPTERS))
        if not isinstance(adapters, list) or not all(isinstance(a, str) for a in adapters):
            raise ConfigurationError(
                "'adapters' must be a list of adapter names",
                {"value": adapters},
            )

        return cls(
            additive=additive,
            additive_weighting=float(weighting),
            adapters=adapters,
        )


def _read_config_file(path: Path) -> MotionConfig:
    """Parse one configuration file (YAML by suffix, JSON otherwise)."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            f"Failed to parse configuration file: {path}",
            {"path": str(path), "error": str(e)},
        ) from e

    if data is not None and not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file must contain a mapping: {path}",
            {"path": str(path)},
        )

    logger.debug(f"Loaded motionkit config from {path}")
    return MotionConfig.from_dict(data or {})


def load_config(
    config_path: Path | str | None = None,
    search_paths: list[Path | str] | None = None,
) -> MotionConfig:
    """Load motionkit configuration.

    A file named explicitly (config_path, or else the MOTIONKIT_CONFIG
    environment variable) must exist. Otherwise the first existing file among
    search_paths and the default locations (./motionkit.yaml, ./motionkit.yml,
    ~/.motionkit/config.yaml) is used, and defaults apply if there is none.

    Args:
        config_path: Explicit path to configuration file
        search_paths: Additional paths to search for configuration

    Returns:
        MotionConfig instance

    Raises:
        ConfigurationError: If a named file is missing or a file has errors
    """
    named = config_path or os.environ.get("MOTIONKIT_CONFIG")
    if named:
        path = Path(named)
        if not path.is_file():
            source = "config_path" if config_path else "MOTIONKIT_CONFIG"
            raise ConfigurationError(
                f"Configuration file not found: {path}",
                {"path": str(path), "source": source},
            )
        return _read_config_file(path)

    candidates = [Path(p) for p in search_paths or []]
    candidates.extend([
        Path.cwd() / "motionkit.yaml",
        Path.cwd() / "motionkit.yml",
        Path.home() / ".motionkit" / "config.yaml",
    ])

    for path in candidates:
        if path.is_file():
            return _read_config_file(path)

    return MotionConfig()


def get_default_config() -> MotionConfig:
    """Get default motionkit configuration."""
    return MotionConfig()
