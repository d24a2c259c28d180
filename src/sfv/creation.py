# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Build SFV manifests from filesystem paths."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Final

from .digest import DEFAULT_CHUNK_SIZE
from .record import SfvRecord, TextWriter

DEFAULT_TOOL_NAME: Final[str] = "sfv-tools"
HEADER_PREFIX: Final[str] = ";created using "


class SfvCreator:
    """Accumulate records in insertion order and write them as a manifest."""

    def __init__(
        self,
        *,
        tool_name: str = DEFAULT_TOOL_NAME,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        """Create an empty creator.

        Args:
            tool_name: Name written into the manifest header comment.
            chunk_size: Read size used while hashing input files.
        """

        self._tool_name = tool_name
        self._chunk_size = chunk_size
        self._records: list[SfvRecord] = []

    @property
    def tool_name(self) -> str:
        """Return the name written into the manifest header comment."""

        return self._tool_name

    @property
    def records(self) -> tuple[SfvRecord, ...]:
        """Return the accumulated records in insertion order.

        Returns:
            tuple[SfvRecord, ...]: Immutable snapshot of the records added so far.
        """

        return tuple(self._records)

    @property
    def header(self) -> str:
        """Return the header comment line, newline included."""

        return f"{HEADER_PREFIX}{self._tool_name}\n"

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SfvRecord]:
        return iter(self._records)

    def add_path(self, path: str | os.PathLike[str]) -> SfvRecord:
        """Hash ``path`` and append the resulting record.

        The record list is untouched when hashing fails.

        Args:
            path: File to hash; its text form is stored verbatim.

        Returns:
            SfvRecord: The record that was appended.

        Raises:
            OSError: If the file cannot be opened or read.
        """

        record = SfvRecord.from_path(path, chunk_size=self._chunk_size)
        self._records.append(record)
        return record

    def add_paths(self, paths: Iterable[str | os.PathLike[str]]) -> None:
        """Append a record for each entry in ``paths``, stopping at the first error."""

        for path in paths:
            self.add_path(path)

    def write(self, writer: TextWriter) -> None:
        """Write the header comment followed by every record.

        Writing stops at the first failing call and leaves ``writer`` partially
        written; use :meth:`write_to_path` for atomic replacement.

        Args:
            writer: Text sink receiving the manifest lines.

        Raises:
            OSError: If ``writer`` rejects a line.
        """

        writer.write(self.header)
        for record in self._records:
            record.serialize(writer)

    def write_to_path(self, destination: str | os.PathLike[str]) -> Path:
        """Write the manifest to ``destination`` through a temporary sibling file.

        The file is UTF-8 with ``surrogateescape`` so paths holding undecodable
        filesystem bytes are written back as the original bytes.

        Args:
            destination: Manifest file to create or replace.

        Returns:
            Path: The destination path.

        Raises:
            OSError: If the temporary file cannot be written or renamed.
        """

        target = Path(destination)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", errors="surrogateescape", newline="\n") as handle:
                self.write(handle)
            os.replace(tmp_path, target)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise
        return target


__all__ = ["DEFAULT_TOOL_NAME", "HEADER_PREFIX", "SfvCreator"]
