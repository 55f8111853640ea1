"""TOML configuration loading.

Reads either a dedicated memberorder.toml (top-level table) or the
[tool.memberorder] table of a pyproject.toml:

    [tool.memberorder]
    enabled = true
    member-order = ["public const", "private const", ...]

    [tool.memberorder.performance]
    debounce-timeout = 300
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from memberorder.domain.exceptions import ConfigurationError
from memberorder.domain.model.configuration import OrderConfig

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "memberorder.toml"
PYPROJECT_FILE_NAME = "pyproject.toml"
TOOL_TABLE = "memberorder"


def load_config(path: Path) -> OrderConfig:
    """Load configuration from a TOML file.

    Missing keys keep their defaults. Unknown keys are ignored.

    Args:
        path: memberorder.toml or pyproject.toml

    Returns:
        Parsed configuration

    Raises:
        ConfigurationError: If the file is unreadable, not TOML, or a value
            has the wrong type
    """
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigurationError(str(path), f"cannot read file: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(str(path), f"invalid TOML: {e}") from e

    if path.name == PYPROJECT_FILE_NAME:
        data = data.get("tool", {}).get(TOOL_TABLE, {})

    config = config_from_mapping(data, source=str(path))
    logger.debug("Loaded configuration from %s", path)
    return config


def config_from_mapping(data: dict[str, object], source: str = "<mapping>") -> OrderConfig:
    """Build configuration from a parsed TOML table.

    Args:
        data: Table contents
        source: Label used in error messages

    Returns:
        Parsed configuration

    Raises:
        ConfigurationError: If a value has the wrong type
    """
    if not isinstance(data, dict):
        raise ConfigurationError(source, "configuration must be a table")

    defaults = OrderConfig()

    enabled = data.get("enabled", defaults.enabled)
    if not isinstance(enabled, bool):
        raise ConfigurationError(source, f"'enabled' must be a boolean, got {enabled!r}")

    member_order = data.get("member-order", defaults.member_order)
    if not isinstance(member_order, (list, tuple)) or not all(
        isinstance(name, str) for name in member_order
    ):
        raise ConfigurationError(
            source, f"'member-order' must be an array of strings, got {member_order!r}"
        )

    performance = data.get("performance", {})
    if not isinstance(performance, dict):
        raise ConfigurationError(source, "'performance' must be a table")

    debounce_timeout = performance.get("debounce-timeout", defaults.debounce_timeout)
    if isinstance(debounce_timeout, bool) or not isinstance(debounce_timeout, int):
        raise ConfigurationError(
            source, f"'performance.debounce-timeout' must be an integer, got {debounce_timeout!r}"
        )
    if debounce_timeout < 0:
        raise ConfigurationError(
            source, f"'performance.debounce-timeout' must be >= 0, got {debounce_timeout}"
        )

    return OrderConfig(
        enabled=enabled,
        member_order=tuple(member_order),
        debounce_timeout=debounce_timeout,
    )


def find_config(start: Path) -> Path | None:
    """Find the nearest configuration file at or above start.

    In each directory memberorder.toml wins over pyproject.toml; a
    pyproject.toml counts only if it has a [tool.memberorder] table.

    Args:
        start: Directory (or file) to search from

    Returns:
        Path of the configuration file, None if there is none
    """
    directory = start if start.is_dir() else start.parent
    for candidate in (directory.resolve(), *directory.resolve().parents):
        dedicated = candidate / CONFIG_FILE_NAME
        if dedicated.is_file():
            return dedicated
        pyproject = candidate / PYPROJECT_FILE_NAME
        if pyproject.is_file() and _has_tool_table(pyproject):
            return pyproject
    return None


def _has_tool_table(pyproject: Path) -> bool:
    """Check if a pyproject.toml carries [tool.memberorder]."""
    try:
        with pyproject.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        logger.debug("Skipping unreadable %s", pyproject)
        return False
    return TOOL_TABLE in data.get("tool", {})
