# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Manifest loading and verification."""

from __future__ import annotations

from .errors import ManifestErrorKind, ManifestLoadError
from .validator import RecordCheck, ValidationReport, Validator

__all__ = [
    "ManifestErrorKind",
    "ManifestLoadError",
    "RecordCheck",
    "ValidationReport",
    "Validator",
]
