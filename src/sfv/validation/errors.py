# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Errors raised while loading an SFV manifest."""

from __future__ import annotations

from enum import Enum

from ..record import RecordFormatError


class ManifestErrorKind(str, Enum):
    """Discriminate between unreadable manifests and malformed ones."""

    IO = "io"
    FORMAT = "format"


class ManifestLoadError(RuntimeError):
    """Raised when a manifest cannot be opened, read or parsed.

    ``kind`` tells callers which branch applies and ``cause`` holds the
    underlying :class:`OSError` or :class:`~sfv.record.RecordFormatError`.
    Use :meth:`from_io_error` and :meth:`from_format_error` to construct it.
    """

    def __init__(
        self,
        kind: ManifestErrorKind,
        cause: OSError | RecordFormatError,
        *,
        manifest: str,
        line_number: int | None = None,
    ) -> None:
        location = manifest if line_number is None else f"{manifest}:{line_number}"
        super().__init__(f"{location}: {cause}")
        self.kind = kind
        self.cause = cause
        self.manifest = manifest
        self.line_number = line_number

    @classmethod
    def from_io_error(
        cls,
        error: OSError,
        *,
        manifest: str,
        line_number: int | None = None,
    ) -> ManifestLoadError:
        """Wrap an I/O failure raised while opening or reading ``manifest``."""

        return cls(ManifestErrorKind.IO, error, manifest=manifest, line_number=line_number)

    @classmethod
    def from_format_error(
        cls,
        error: RecordFormatError,
        *,
        manifest: str,
        line_number: int,
    ) -> ManifestLoadError:
        """Wrap a parse failure for the data line at ``line_number``."""

        return cls(ManifestErrorKind.FORMAT, error, manifest=manifest, line_number=line_number)


__all__ = ["ManifestErrorKind", "ManifestLoadError"]
