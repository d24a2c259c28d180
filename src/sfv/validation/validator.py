# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Load SFV manifests and check every record against the filesystem."""

from __future__ import annotations

import os
from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from ..digest import DEFAULT_CHUNK_SIZE
from ..record import RecordFormatError, RecordStatus, SfvRecord, is_comment
from .errors import ManifestLoadError

_IN_MEMORY_SOURCE = "<lines>"


@dataclass(frozen=True, slots=True)
class RecordCheck:
    """Outcome of checking a single record."""

    record: SfvRecord
    status: RecordStatus

    @property
    def ok(self) -> bool:
        return self.status is RecordStatus.OK


@dataclass(slots=True)
class ValidationReport:
    """Per-record outcomes of a full manifest check, in manifest order."""

    checks: list[RecordCheck] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return ``True`` when every record passed."""

        return all(check.ok for check in self.checks)

    @property
    def failures(self) -> list[RecordCheck]:
        """Return the checks that did not pass."""

        return [check for check in self.checks if not check.ok]

    def counts(self) -> Counter[RecordStatus]:
        """Return the number of checks per status."""

        return Counter(check.status for check in self.checks)


class Validator:
    """Hold the records of a successfully loaded manifest.

    Instances only come from :meth:`from_path` or :meth:`from_lines`; a
    manifest that fails to load raises :class:`ManifestLoadError` and never
    yields a validator.
    """

    def __init__(self, records: Sequence[SfvRecord], *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        """Wrap already parsed ``records``.

        Args:
            records: Records in manifest order.
            chunk_size: Read size used when checking records.
        """

        self._records = tuple(records)
        self._chunk_size = chunk_size

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        *,
        source: str = _IN_MEMORY_SOURCE,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> Validator:
        """Parse manifest ``lines``, skipping comments.

        Args:
            lines: Manifest lines with or without trailing newlines.
            source: Label used in error messages.
            chunk_size: Read size used when checking records.

        Returns:
            Validator: Validator holding the parsed records in line order.

        Raises:
            ManifestLoadError: If a data line is malformed.
        """

        records: list[SfvRecord] = []
        for line_number, line in enumerate(lines, start=1):
            if is_comment(line):
                continue
            try:
                records.append(SfvRecord.parse(line))
            except RecordFormatError as exc:
                raise ManifestLoadError.from_format_error(exc, manifest=source, line_number=line_number) from exc
        return cls(records, chunk_size=chunk_size)

    @classmethod
    def from_path(
        cls,
        manifest_path: str | os.PathLike[str],
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> Validator:
        """Load the manifest at ``manifest_path``.

        Args:
            manifest_path: SFV manifest to read as UTF-8 text; undecodable bytes
                are kept via ``surrogateescape`` so paths match the filesystem.
            chunk_size: Read size used when checking records.

        Returns:
            Validator: Validator holding the manifest records in file order.

        Raises:
            ManifestLoadError: If the manifest cannot be opened or read
                (``kind == IO``) or a data line is malformed (``kind == FORMAT``).
        """

        source = os.fspath(manifest_path)
        try:
            with open(manifest_path, encoding="utf-8", errors="surrogateescape") as handle:
                return cls.from_lines(handle, source=source, chunk_size=chunk_size)
        except OSError as exc:
            raise ManifestLoadError.from_io_error(exc, manifest=source) from exc

    @property
    def records(self) -> tuple[SfvRecord, ...]:
        """Return the loaded records in manifest order.

        Returns:
            tuple[SfvRecord, ...]: Records parsed from the manifest data lines.
        """

        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SfvRecord]:
        return iter(self._records)

    def validate(self) -> bool:
        """Return ``True`` iff every record matches its file.

        Checking stops at the first failing record.

        Returns:
            bool: Logical AND of :meth:`SfvRecord.validate` over all records.
        """

        return all(record.validate(chunk_size=self._chunk_size) for record in self._records)

    def verify(self) -> ValidationReport:
        """Check every record without short-circuiting.

        Returns:
            ValidationReport: One :class:`RecordCheck` per record in manifest order.
        """

        return ValidationReport(
            checks=[RecordCheck(record, record.check(chunk_size=self._chunk_size)) for record in self._records]
        )


__all__ = ["RecordCheck", "ValidationReport", "Validator"]
