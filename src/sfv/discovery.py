# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Expand user-supplied paths into the ordered list of files to hash."""

from __future__ import annotations

import os
from collections.abc import Collection, Iterable, Iterator
from pathlib import Path

from .config import DEFAULT_EXCLUDES


def iter_input_paths(
    paths: Iterable[Path],
    *,
    excludes: Collection[str] = DEFAULT_EXCLUDES,
    skip_files: Iterable[Path] = (),
) -> Iterator[Path]:
    """Yield files to hash in argument order.

    Directories are walked recursively in sorted order with ``excludes``
    pruned. Anything that is not a directory, including paths that do not
    exist, is yielded unchanged so the creator reports the error.

    Args:
        paths: Paths supplied by the caller.
        excludes: Directory names skipped while walking.
        skip_files: Files never yielded, compared after resolving; used to
            keep the manifest being written out of its own input.

    Yields:
        Path: Candidate file paths.
    """

    skipped = {path.resolve() for path in skip_files}
    for path in paths:
        candidates = _walk_directory(path, excludes) if path.is_dir() else iter((path,))
        for candidate in candidates:
            if skipped and candidate.resolve() in skipped:
                continue
            yield candidate


def _walk_directory(root: Path, excludes: Collection[str]) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(name for name in dirnames if name not in excludes)
        directory = Path(dirpath)
        for filename in sorted(filenames):
            yield directory / filename


__all__ = ["iter_input_paths"]
