"""Tests for the command line entry point that run without a Win32 host."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from keydrag.__main__ import main


def test_help():
    result = CliRunner().invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "--config" in result.output


def test_missing_config_file(tmp_path: Path):
    result = CliRunner().invoke(main, ["--config", str(tmp_path / "nope.toml")])
    assert result.exit_code == 2


def test_invalid_config_rejected(tmp_path: Path):
    path = tmp_path / "keydrag.toml"
    path.write_text("[keydrag]\nvertical-step = -1\n")

    result = CliRunner().invoke(main, ["--config", str(path)])

    assert result.exit_code == 2
    assert "vertical-step" in result.output
    assert "greater than 0" in result.output


def test_unknown_config_key_rejected(tmp_path: Path):
    path = tmp_path / "keydrag.toml"
    path.write_text("[keydrag]\nspeed = 3\n")

    result = CliRunner().invoke(main, ["--config", str(path)])

    assert result.exit_code == 2
    assert "speed" in result.output
