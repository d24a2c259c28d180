# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Single SFV manifest entries: parsing, serialisation and verification."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import Final, Protocol

from .digest import CRC32_MASK, DEFAULT_CHUNK_SIZE, checksum_file

COMMENT_PREFIX: Final[str] = ";"
_HEX_TOKEN: Final[re.Pattern[str]] = re.compile(r"[0-9A-Fa-f]+")


class TextWriter(Protocol):
    """Anything that accepts text via ``write``."""

    def write(self, text: str, /) -> int | None: ...


class RecordFormatErrorKind(str, Enum):
    """Enumerate the ways a manifest data line can be malformed."""

    MISSING_FILE_PATH = "missing_file_path"
    MISSING_CHECKSUM = "missing_checksum"
    INVALID_CHECKSUM = "invalid_checksum"
    TOO_LONG = "too_long"

    @property
    def description(self) -> str:
        """Return a short human-readable explanation of the failure."""

        return _KIND_DESCRIPTIONS[self]


_KIND_DESCRIPTIONS: Final[dict[RecordFormatErrorKind, str]] = {
    RecordFormatErrorKind.MISSING_FILE_PATH: "line has no file path",
    RecordFormatErrorKind.MISSING_CHECKSUM: "line has no checksum",
    RecordFormatErrorKind.INVALID_CHECKSUM: "checksum is not a 32-bit hexadecimal value",
    RecordFormatErrorKind.TOO_LONG: "line has more than two fields",
}


class RecordFormatError(ValueError):
    """Raised when a manifest data line cannot be parsed into a record."""

    def __init__(self, kind: RecordFormatErrorKind, line: str) -> None:
        """Initialise the error with its ``kind`` and the offending ``line``.

        Args:
            kind: Discriminant describing the parse failure.
            line: Raw line text that failed to parse.
        """

        super().__init__(f"{kind.description}: {line.rstrip()!r}")
        self.kind = kind
        self.line = line


class RecordStatus(str, Enum):
    """Outcome of checking one record against the filesystem."""

    OK = "ok"
    MISMATCH = "mismatch"
    MISSING = "missing"
    UNREADABLE = "unreadable"


def is_comment(line: str) -> bool:
    """Return ``True`` when the first non-whitespace character is ``;``."""

    return line.lstrip().startswith(COMMENT_PREFIX)


def _parse_checksum(token: str) -> int:
    if not _HEX_TOKEN.fullmatch(token):
        raise ValueError(f"invalid hexadecimal literal {token!r}")
    value = int(token, 16)
    if value > CRC32_MASK:
        raise ValueError(f"checksum {token!r} exceeds 32 bits")
    return value


@dataclass(frozen=True, slots=True)
class SfvRecord:
    """Pair a file path with the CRC-32 checksum claimed for its contents."""

    path: str
    checksum: int

    @classmethod
    def from_path(
        cls,
        path: str | os.PathLike[str],
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> SfvRecord:
        """Hash the file at ``path`` and return a record describing it.

        Args:
            path: File to hash; its text form becomes the stored path.
            chunk_size: Read size used while streaming the file.

        Returns:
            SfvRecord: Record holding ``path`` and the computed checksum.

        Raises:
            OSError: If the file cannot be opened or read.
        """

        return cls(path=os.fspath(path), checksum=checksum_file(path, chunk_size=chunk_size))

    @classmethod
    def parse(cls, line: str) -> SfvRecord:
        """Parse a manifest data line of the form ``<path> <checksum>``.

        Args:
            line: Manifest line that is not a comment.

        Returns:
            SfvRecord: Record built from the two whitespace-separated tokens.

        Raises:
            RecordFormatError: If the line does not hold exactly a path and a
                32-bit hexadecimal checksum.
        """

        tokens = line.split()
        if not tokens:
            raise RecordFormatError(RecordFormatErrorKind.MISSING_FILE_PATH, line)
        if len(tokens) == 1:
            raise RecordFormatError(RecordFormatErrorKind.MISSING_CHECKSUM, line)
        if len(tokens) > 2:
            raise RecordFormatError(RecordFormatErrorKind.TOO_LONG, line)
        path, raw_checksum = tokens
        try:
            checksum = _parse_checksum(raw_checksum)
        except ValueError as exc:
            raise RecordFormatError(RecordFormatErrorKind.INVALID_CHECKSUM, line) from exc
        return cls(path=path, checksum=checksum)

    @property
    def checksum_hex(self) -> str:
        """Return the checksum as lowercase hex without padding."""

        return f"{self.checksum:x}"

    def to_line(self) -> str:
        """Return the manifest line for this record, newline included."""

        return f"{self.path} {self.checksum_hex}\n"

    def serialize(self, writer: TextWriter) -> None:
        """Write the manifest line for this record to ``writer``."""

        writer.write(self.to_line())

    def check(self, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> RecordStatus:
        """Recompute the checksum of ``path`` and classify the outcome.

        Filesystem errors never escape: an absent file is ``MISSING`` and any
        other open or read failure is ``UNREADABLE``.
        """

        try:
            actual = checksum_file(self.path, chunk_size=chunk_size)
        except FileNotFoundError:
            return RecordStatus.MISSING
        except OSError:
            return RecordStatus.UNREADABLE
        return RecordStatus.OK if actual == self.checksum else RecordStatus.MISMATCH

    def validate(self, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> bool:
        """Return ``True`` when the file at ``path`` still matches ``checksum``."""

        return self.check(chunk_size=chunk_size) is RecordStatus.OK


def parse_record(line: str) -> SfvRecord:
    """Parse ``line`` into an :class:`SfvRecord`; see :meth:`SfvRecord.parse`."""

    return SfvRecord.parse(line)


__all__ = [
    "COMMENT_PREFIX",
    "RecordFormatError",
    "RecordFormatErrorKind",
    "RecordStatus",
    "SfvRecord",
    "TextWriter",
    "is_comment",
    "parse_record",
]
