# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, options)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Final

import typer

from ..config import ConfigError, SfvConfig, load_config
from ..logging import fail as core_fail
from ..logging import ok as core_ok
from ..logging import warn as core_warn

EXIT_OK: Final[int] = 0
EXIT_VALIDATION_FAILED: Final[int] = 1
EXIT_ERROR: Final[int] = 2

ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", "-r", help="Directory holding pyproject.toml or .sfv.toml."),
]
EMOJI_OPTION = Annotated[
    bool | None,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output (defaults to configuration)."),
]


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = EXIT_ERROR) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI presentation settings."""

    use_emoji: bool
    use_color: bool | None = None

    def fail(self, message: str) -> None:
        """Log a failure message honouring presentation preferences.

        Args:
            message: Text describing the failure state.
        """

        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        """Log a warning message honouring presentation preferences.

        Args:
            message: Text describing the warning condition.
        """

        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def ok(self, message: str) -> None:
        """Log a success message honouring presentation preferences.

        Args:
            message: Text describing the successful state.
        """

        core_ok(message, use_emoji=self.use_emoji, use_color=self.use_color)


def build_cli_logger(config: SfvConfig, *, emoji: bool | None = None) -> CLILogger:
    """Return a logger honouring ``config`` unless ``emoji`` overrides it.

    Args:
        config: Resolved configuration supplying emoji and colour defaults.
        emoji: Optional CLI override for emoji output.

    Returns:
        CLILogger: Logger configured for the current command.
    """

    use_emoji = config.emoji if emoji is None else emoji
    return CLILogger(use_emoji=use_emoji, use_color=None if config.color else False)


def load_cli_config(root: Path) -> SfvConfig:
    """Return the configuration for ``root``.

    Args:
        root: Directory holding ``pyproject.toml`` or ``.sfv.toml``.

    Returns:
        SfvConfig: Validated configuration.

    Raises:
        CLIError: If the configuration cannot be read or is invalid.
    """

    try:
        return load_config(root.resolve())
    except ConfigError as exc:
        raise CLIError(str(exc)) from exc


def display_path(path: str | os.PathLike[str]) -> str:
    """Return ``path`` as printable text.

    Undecodable filesystem bytes, carried as lone surrogates, are shown as
    replacement characters instead of failing the console write.

    Args:
        path: Path text or path-like object to render.

    Returns:
        str: Text that can always be encoded as UTF-8.
    """

    return os.fsencode(path).decode("utf-8", "replace")


def exit_with_error(exc: CLIError, *, emoji: bool | None) -> typer.Exit:
    """Report ``exc`` and return the matching :class:`typer.Exit`.

    Args:
        exc: Failure raised before the command could start its work.
        emoji: Optional CLI override for emoji output.

    Returns:
        typer.Exit: Exit carrying the error's status code, ready to raise.
    """

    CLILogger(use_emoji=True if emoji is None else emoji).fail(str(exc))
    return typer.Exit(code=exc.exit_code)


__all__ = [
    "EMOJI_OPTION",
    "EXIT_ERROR",
    "EXIT_OK",
    "EXIT_VALIDATION_FAILED",
    "ROOT_OPTION",
    "CLIError",
    "CLILogger",
    "build_cli_logger",
    "display_path",
    "exit_with_error",
    "load_cli_config",
]
