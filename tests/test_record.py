# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for parsing, serialising and checking single SFV records."""

from __future__ import annotations

import io
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from sfv.record import (
    RecordFormatError,
    RecordFormatErrorKind,
    RecordStatus,
    SfvRecord,
    is_comment,
    parse_record,
)


@pytest.mark.parametrize(
    ("line", "path", "checksum"),
    [
        ("file_one.zip   c45ad668", "file_one.zip", 0xC45AD668),
        ("file_two.zip   7903b8e6   \n", "file_two.zip", 0x7903B8E6),
        ("file_three.zip E99A65FB", "file_three.zip", 0xE99A65FB),
        ("\tzero.bin\t0", "zero.bin", 0),
    ],
)
def test_well_formed_lines_are_parsed(line: str, path: str, checksum: int) -> None:
    record = parse_record(line)
    assert record.path == path
    assert record.checksum == checksum


@pytest.mark.parametrize(
    ("line", "kind"),
    [
        ("", RecordFormatErrorKind.MISSING_FILE_PATH),
        ("   \t \n", RecordFormatErrorKind.MISSING_FILE_PATH),
        ("foo.txt", RecordFormatErrorKind.MISSING_CHECKSUM),
        ("foo.txt abc123 extra", RecordFormatErrorKind.TOO_LONG),
        ("foo.txt zzzz", RecordFormatErrorKind.INVALID_CHECKSUM),
        ("foo.txt 0x1234", RecordFormatErrorKind.INVALID_CHECKSUM),
        ("foo.txt +1234", RecordFormatErrorKind.INVALID_CHECKSUM),
        ("foo.txt 1_234", RecordFormatErrorKind.INVALID_CHECKSUM),
        ("foo.txt 100000000", RecordFormatErrorKind.INVALID_CHECKSUM),
    ],
)
def test_malformed_lines_are_rejected(line: str, kind: RecordFormatErrorKind) -> None:
    with pytest.raises(RecordFormatError) as excinfo:
        SfvRecord.parse(line)
    assert excinfo.value.kind is kind
    assert excinfo.value.line == line


def test_invalid_checksum_chains_value_error() -> None:
    with pytest.raises(RecordFormatError) as excinfo:
        SfvRecord.parse("foo.txt zzzz")
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_serialize_then_parse_round_trips() -> None:
    record = SfvRecord(path="dir/file.bin", checksum=0x00AB12CD)
    buffer = io.StringIO()
    record.serialize(buffer)
    assert buffer.getvalue() == "dir/file.bin ab12cd\n"
    assert SfvRecord.parse(buffer.getvalue()) == record


def test_zero_checksum_renders_without_padding() -> None:
    assert SfvRecord(path="empty", checksum=0).to_line() == "empty 0\n"


def test_records_are_immutable() -> None:
    record = SfvRecord(path="a", checksum=1)
    with pytest.raises(FrozenInstanceError):
        record.path = "b"  # type: ignore[misc]


def test_from_path_hashes_file(tmp_path: Path) -> None:
    target = tmp_path / "a.txt"
    target.write_bytes(b"hello")
    record = SfvRecord.from_path(target)
    assert record.path == str(target)
    assert record.checksum_hex == "3610a686"


def test_from_path_propagates_io_errors(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        SfvRecord.from_path(tmp_path / "missing.txt")


@pytest.mark.parametrize("checksum_text", ["3610a686", "3610A686"])
def test_validate_accepts_either_case(tmp_path: Path, checksum_text: str) -> None:
    target = tmp_path / "a.txt"
    target.write_bytes(b"hello")
    record = SfvRecord.parse(f"{target} {checksum_text}")
    assert record.validate()
    assert record.check() is RecordStatus.OK


@pytest.mark.parametrize("position", range(8))
def test_flipping_one_hex_digit_fails_validation(tmp_path: Path, position: int) -> None:
    target = tmp_path / "a.txt"
    target.write_bytes(b"hello")
    digits = list("3610a686")
    digits[position] = "f" if digits[position] != "f" else "0"
    record = SfvRecord.parse(f"{target} {''.join(digits)}")
    assert not record.validate()
    assert record.check() is RecordStatus.MISMATCH


def test_validate_tolerates_missing_file(tmp_path: Path) -> None:
    record = SfvRecord(path=str(tmp_path / "gone.txt"), checksum=0x3610A686)
    assert record.validate() is False
    assert record.check() is RecordStatus.MISSING


def test_directory_is_reported_unreadable(tmp_path: Path) -> None:
    record = SfvRecord(path=str(tmp_path), checksum=0)
    assert record.check() is RecordStatus.UNREADABLE
    assert not record.validate()


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        (";created using sfv-tools", True),
        ("   ; indented comment", True),
        ("file.txt 1234", False),
        ("", False),
    ],
)
def test_is_comment(line: str, expected: bool) -> None:
    assert is_comment(line) is expected
