# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command that writes an SFV manifest for a set of files."""

from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Annotated

import typer

from ..creation import SfvCreator
from ..discovery import iter_input_paths
from .shared import (
    EMOJI_OPTION,
    EXIT_ERROR,
    EXIT_OK,
    ROOT_OPTION,
    CLIError,
    build_cli_logger,
    display_path,
    exit_with_error,
    load_cli_config,
)

PATHS_ARGUMENT = Annotated[
    list[Path],
    typer.Argument(help="Files or directories to include, in manifest order."),
]
OUTPUT_OPTION = Annotated[
    Path | None,
    typer.Option("--output", "-o", help="Manifest file to write (defaults to stdout)."),
]


def create_manifest(
    paths: PATHS_ARGUMENT,
    output: OUTPUT_OPTION = None,
    root: ROOT_OPTION = Path("."),
    emoji: EMOJI_OPTION = None,
) -> None:
    """Hash the given files and emit an SFV manifest.

    Raises:
        typer.Exit: ``0`` on success, ``2`` when a file or the output cannot be
            read or written.
    """

    try:
        config = load_cli_config(root)
    except CLIError as exc:
        raise exit_with_error(exc, emoji=emoji) from exc
    logger = build_cli_logger(config, emoji=emoji)

    creator = SfvCreator(tool_name=config.tool_name, chunk_size=config.chunk_size)
    for path in iter_input_paths(
        paths,
        excludes=config.excludes,
        skip_files=() if output is None else (output,),
    ):
        try:
            creator.add_path(path)
        except OSError as exc:
            logger.fail(f"Cannot read {display_path(path)}: {exc.strerror or exc}")
            raise typer.Exit(code=EXIT_ERROR) from exc

    if output is None:
        _write_stdout(creator)
        raise typer.Exit(code=EXIT_OK)

    try:
        creator.write_to_path(output)
    except OSError as exc:
        logger.fail(f"Cannot write {display_path(output)}: {exc.strerror or exc}")
        raise typer.Exit(code=EXIT_ERROR) from exc
    logger.ok(f"Wrote {len(creator)} record(s) to {display_path(output)}")
    raise typer.Exit(code=EXIT_OK)


def _write_stdout(creator: SfvCreator) -> None:
    """Write the manifest to stdout as UTF-8, preserving undecodable path bytes."""

    buffer = io.StringIO()
    creator.write(buffer)
    sys.stdout.flush()
    sys.stdout.buffer.write(buffer.getvalue().encode("utf-8", "surrogateescape"))
    sys.stdout.buffer.flush()


__all__ = ["create_manifest"]
