# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command that checks files against an SFV manifest."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Final

import typer

from ..record import RecordStatus
from ..validation import ManifestErrorKind, ManifestLoadError, Validator
from .shared import (
    EMOJI_OPTION,
    EXIT_ERROR,
    EXIT_OK,
    EXIT_VALIDATION_FAILED,
    ROOT_OPTION,
    CLIError,
    build_cli_logger,
    display_path,
    exit_with_error,
    load_cli_config,
)

MANIFEST_ARGUMENT = Annotated[Path, typer.Argument(help="SFV manifest to check.")]
QUIET_OPTION = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Only report records that fail."),
]

_STATUS_LABELS: Final[dict[RecordStatus, str]] = {
    RecordStatus.MISMATCH: "checksum mismatch",
    RecordStatus.MISSING: "missing",
    RecordStatus.UNREADABLE: "unreadable",
}


def verify_manifest(
    manifest: MANIFEST_ARGUMENT,
    quiet: QUIET_OPTION = False,
    root: ROOT_OPTION = Path("."),
    emoji: EMOJI_OPTION = None,
) -> None:
    """Recompute every checksum listed in MANIFEST and compare.

    Raises:
        typer.Exit: ``0`` when all records match, ``1`` when any record fails,
            ``2`` when the manifest cannot be loaded.
    """

    try:
        config = load_cli_config(root)
    except CLIError as exc:
        raise exit_with_error(exc, emoji=emoji) from exc
    logger = build_cli_logger(config, emoji=emoji)

    try:
        validator = Validator.from_path(manifest, chunk_size=config.chunk_size)
    except ManifestLoadError as exc:
        label = "Cannot read manifest" if exc.kind is ManifestErrorKind.IO else "Malformed manifest"
        logger.fail(f"{label} {exc}")
        raise typer.Exit(code=EXIT_ERROR) from exc

    report = validator.verify()
    for check in report.checks:
        if check.ok:
            if not quiet:
                logger.ok(f"{display_path(check.record.path)}: OK")
            continue
        logger.fail(f"{display_path(check.record.path)}: {_STATUS_LABELS[check.status]}")

    total = len(report.checks)
    failed = len(report.failures)
    if failed:
        logger.warn(f"{failed} of {total} file(s) failed verification")
        raise typer.Exit(code=EXIT_VALIDATION_FAILED)
    logger.ok(f"All {total} file(s) verified")
    raise typer.Exit(code=EXIT_OK)


__all__ = ["verify_manifest"]
