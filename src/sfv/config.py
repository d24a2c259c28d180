# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Configuration model and loaders for sfv-tools."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .creation import DEFAULT_TOOL_NAME
from .digest import DEFAULT_CHUNK_SIZE

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "sfv"
CONFIG_FILENAME: Final[str] = ".sfv.toml"

DEFAULT_EXCLUDES: Final[tuple[str, ...]] = (
    ".git",
    ".hg",
    ".svn",
    "__pycache__",
    ".mypy_cache",
    ".pytest_cache",
    ".tox",
    ".venv",
)


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class SfvConfig(BaseModel):
    """Settings shared by the manifest creator, validator and CLI."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    tool_name: str = Field(default=DEFAULT_TOOL_NAME, min_length=1)
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)
    emoji: bool = True
    color: bool = True
    excludes: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDES))


def _read_toml(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Unable to read configuration at {path}: {exc}") from exc


def _pyproject_section(path: Path) -> dict[str, Any]:
    data = _read_toml(path)
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"[tool.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return dict(section)


def load_config(root: Path) -> SfvConfig:
    """Return the configuration for ``root``.

    Values merge in increasing precedence: built-in defaults,
    ``[tool.sfv]`` in ``pyproject.toml``, then ``.sfv.toml``.

    Args:
        root: Directory holding the configuration files.

    Returns:
        SfvConfig: Validated configuration.

    Raises:
        ConfigError: If a file cannot be parsed or a value is invalid.
    """

    merged: dict[str, Any] = {}
    merged.update(_pyproject_section(root / PYPROJECT_FILENAME))
    merged.update(_read_toml(root / CONFIG_FILENAME))
    try:
        return SfvConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid sfv configuration under {root}: {exc}") from exc


__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_EXCLUDES",
    "ConfigError",
    "SfvConfig",
    "load_config",
]
