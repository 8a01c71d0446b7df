"""
Core configuration for nake

Provides NakeConfig dataclass holding the naming conventions shared by the
validator, the name resolver and the binder, plus the process-wide default
instance used when a Task is built without an explicit config.

Environment Variables:
  NAKE_ROOT_CONTAINER: Name of the root script container (default: Script)
  NAKE_NESTED_JOINER: Joiner used in nested container paths (default: +)
  NAKE_LOG_LEVEL: Logging level for the nake logger hierarchy (default: WARNING)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from dotenv import load_dotenv

from nake.core.execution.errors import ConfigurationError
from nake.logger import get_logger

logger = get_logger(__name__)

DEFAULT_ROOT_CONTAINER = "Script"
DEFAULT_NESTED_JOINER = "+"
DEFAULT_LOG_LEVEL = "WARNING"

# Separator used in qualified task names; fixed by the display signature format
NAME_SEPARATOR = "."


@dataclass(frozen=True)
class NakeConfig:
    """Naming conventions for tasks and their compiled counterparts."""

    root_container: str = DEFAULT_ROOT_CONTAINER
    nested_type_joiner: str = DEFAULT_NESTED_JOINER
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> NakeConfig:
        """Load configuration from environment variables."""
        config = cls(
            root_container=os.getenv("NAKE_ROOT_CONTAINER", DEFAULT_ROOT_CONTAINER),
            nested_type_joiner=os.getenv("NAKE_NESTED_JOINER", DEFAULT_NESTED_JOINER),
            log_level=os.getenv("NAKE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
        config.validate()
        return config

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ConfigurationError: If any value is empty or the joiner collides
                with the qualified name separator.
        """
        if not self.root_container.strip():
            raise ConfigurationError(
                "root_container must not be empty",
                what="Invalid root container name",
                why="NAKE_ROOT_CONTAINER is empty",
                how_to_fix="Unset NAKE_ROOT_CONTAINER or set it to the script class name",
            )
        if NAME_SEPARATOR in self.root_container:
            raise ConfigurationError(
                f"root_container must be a single identifier, got '{self.root_container}'"
            )
        if not self.nested_type_joiner or self.nested_type_joiner == NAME_SEPARATOR:
            raise ConfigurationError(
                f"nested_type_joiner must be non-empty and differ from '{NAME_SEPARATOR}', "
                f"got '{self.nested_type_joiner}'"
            )


def load_env_files(paths: Iterable[Path], override: bool = False) -> bool:
    """
    Load the first existing .env file from the provided paths.

    Returns:
        True if a file was loaded, False if none of the paths exist
    """
    for env_path in paths:
        if env_path.exists():
            load_dotenv(env_path, override=override)
            logger.debug("Loaded .env file from %s", env_path)
            return True
    return False


_config: NakeConfig | None = None


def get_config() -> NakeConfig:
    """Return the process-wide config, loading it from the environment on first use."""
    global _config
    if _config is None:
        _config = NakeConfig.from_env()
    return _config


def set_config(config: NakeConfig | None) -> None:
    """Replace the process-wide config; ``None`` re-reads the environment on next use."""
    global _config
    if config is not None:
        config.validate()
    _config = config


__all__ = [
    "NakeConfig",
    "NAME_SEPARATOR",
    "get_config",
    "set_config",
    "load_env_files",
]
