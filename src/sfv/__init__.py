# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Create and verify SFV checksum manifests."""

from __future__ import annotations

from .creation import DEFAULT_TOOL_NAME, HEADER_PREFIX, SfvCreator
from .digest import DEFAULT_CHUNK_SIZE, Crc32Digest, checksum_file
from .record import (
    RecordFormatError,
    RecordFormatErrorKind,
    RecordStatus,
    SfvRecord,
    is_comment,
    parse_record,
)
from .validation import (
    ManifestErrorKind,
    ManifestLoadError,
    RecordCheck,
    ValidationReport,
    Validator,
)

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_TOOL_NAME",
    "HEADER_PREFIX",
    "Crc32Digest",
    "ManifestErrorKind",
    "ManifestLoadError",
    "RecordCheck",
    "RecordFormatError",
    "RecordFormatErrorKind",
    "RecordStatus",
    "SfvCreator",
    "SfvRecord",
    "ValidationReport",
    "Validator",
    "checksum_file",
    "is_comment",
    "parse_record",
]
