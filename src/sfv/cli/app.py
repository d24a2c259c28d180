# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the create and verify commands."""

from __future__ import annotations

import typer

from .create import create_manifest
from .verify import verify_manifest

app = typer.Typer(
    help="Create and verify SFV (CRC-32) checksum manifests.",
    no_args_is_help=True,
    add_completion=False,
)
app.command(name="create")(create_manifest)
app.command(name="verify")(verify_manifest)

__all__ = ["app"]
