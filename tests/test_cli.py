# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the create and verify CLI commands."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from sfv.cli.app import app


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "a.txt").write_bytes(b"hello")
    (tmp_path / "b.txt").write_bytes(b"123456789")
    return tmp_path


def test_create_writes_manifest_to_stdout(workspace: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["create", "a.txt", "b.txt", "--no-emoji"])
    assert result.exit_code == 0
    assert result.stdout == ";created using sfv-tools\na.txt 3610a686\nb.txt cbf43926\n"


def test_create_uses_configured_tool_name(workspace: Path) -> None:
    (workspace / ".sfv.toml").write_text('tool_name = "release-bot"\n', encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["create", "a.txt"])
    assert result.exit_code == 0
    assert result.stdout.startswith(";created using release-bot\n")


def test_create_missing_input_exits_with_error(workspace: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["create", "a.txt", "nope.txt", "--no-emoji", "-o", "out.sfv"])
    assert result.exit_code == 2
    assert "Cannot read nope.txt" in result.stdout
    assert not (workspace / "out.sfv").exists()


def test_create_then_verify_round_trip(workspace: Path) -> None:
    runner = CliRunner()
    created = runner.invoke(app, ["create", "a.txt", "b.txt", "-o", "files.sfv", "--no-emoji"])
    assert created.exit_code == 0
    assert "Wrote 2 record(s)" in created.stdout

    verified = runner.invoke(app, ["verify", "files.sfv", "--no-emoji"])
    assert verified.exit_code == 0
    assert "a.txt: OK" in verified.stdout
    assert "All 2 file(s) verified" in verified.stdout


def test_verify_reports_failures(workspace: Path) -> None:
    (workspace / "files.sfv").write_text(
        ";created using sfv-tools\na.txt 3610a686\nb.txt 0\ngone.txt 1\n",
        encoding="utf-8",
    )
    runner = CliRunner()
    result = runner.invoke(app, ["verify", "files.sfv", "--quiet", "--no-emoji"])
    assert result.exit_code == 1
    assert "a.txt: OK" not in result.stdout
    assert "b.txt: checksum mismatch" in result.stdout
    assert "gone.txt: missing" in result.stdout
    assert "2 of 3 file(s) failed verification" in result.stdout


def test_verify_malformed_manifest_exits_with_error(workspace: Path) -> None:
    (workspace / "files.sfv").write_text("a.txt 3610a686 extra\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["verify", "files.sfv", "--no-emoji"])
    assert result.exit_code == 2
    assert "Malformed manifest" in result.stdout


def test_verify_missing_manifest_exits_with_error(workspace: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["verify", "absent.sfv", "--no-emoji"])
    assert result.exit_code == 2
    assert "Cannot read manifest" in result.stdout


def test_invalid_configuration_exits_with_error(workspace: Path) -> None:
    (workspace / ".sfv.toml").write_text("chunk_size = -1\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["verify", "absent.sfv", "--no-emoji"])
    assert result.exit_code == 2
    assert "Invalid sfv configuration" in result.stdout


def test_recreating_manifest_in_hashed_directory_skips_output(workspace: Path) -> None:
    runner = CliRunner()
    for _ in range(2):
        created = runner.invoke(app, ["create", ".", "-o", "files.sfv", "--no-emoji"])
        assert created.exit_code == 0

    manifest_text = (workspace / "files.sfv").read_text(encoding="utf-8")
    assert manifest_text == ";created using sfv-tools\na.txt 3610a686\nb.txt cbf43926\n"

    verified = runner.invoke(app, ["verify", "files.sfv", "--no-emoji"])
    assert verified.exit_code == 0
    assert "All 2 file(s) verified" in verified.stdout


@pytest.mark.skipif(sys.platform != "linux", reason="needs a filesystem accepting non-UTF-8 names")
def test_non_utf8_file_names_round_trip(workspace: Path) -> None:
    name = os.fsdecode(b"caf\xe9.txt")
    Path(name).write_bytes(b"hello")
    runner = CliRunner()

    to_stdout = runner.invoke(app, ["create", name, "--no-emoji"])
    assert to_stdout.exit_code == 0
    assert to_stdout.stdout_bytes == b";created using sfv-tools\ncaf\xe9.txt 3610a686\n"

    created = runner.invoke(app, ["create", name, "-o", "files.sfv", "--no-emoji"])
    assert created.exit_code == 0

    verified = runner.invoke(app, ["verify", "files.sfv", "--no-emoji"])
    assert verified.exit_code == 0
    assert "caf�.txt: OK" in verified.stdout
