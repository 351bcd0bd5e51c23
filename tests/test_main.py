"""
Tests for the command line checker.
"""

import logging
import sys

import pytest

from odissey.__main__ import main


def run(monkeypatch, *args: str) -> int:
    monkeypatch.setattr(sys, "argv", ["odissey", "--no-color", *args])
    return main()


def test_valid_config(monkeypatch, capsys, write_config) -> None:
    path = write_config('odissey { listen { port 7000 } server "db" { port 5432 } }')

    assert run(monkeypatch, "--print", str(path)) == 0

    out = capsys.readouterr().out
    assert f"using configuration file '{path}'" in out
    assert "  port 7000" in out
    assert "  <db> :5432" in out


def test_invalid_config(monkeypatch, capsys, write_config) -> None:
    path = write_config("odissey {\n  listen {\n    port yes\n  }\n}")

    assert run(monkeypatch, "-q", str(path)) == 1

    err = capsys.readouterr().err
    assert f"{path}:3 expected 'number'" in err


def test_missing_config(monkeypatch, tmp_path) -> None:
    assert run(monkeypatch, str(tmp_path / "absent.conf")) == 1


def test_version(monkeypatch, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run(monkeypatch, "--version")

    assert excinfo.value.code == 0
    assert "odissey 0.1.0" in capsys.readouterr().out


def console_level() -> int:
    return logging.getLogger("odissey").handlers[0].level


@pytest.mark.parametrize("flag, level", [("-q", logging.ERROR), ("-d", logging.DEBUG), ("-v", logging.INFO)])
def test_command_line_level_kept(monkeypatch, write_config, flag: str, level: int) -> None:
    path = write_config("odissey { }")

    assert run(monkeypatch, flag, str(path)) == 0
    assert console_level() == level


def test_config_verbosity_overrides_command_line(monkeypatch, write_config) -> None:
    path = write_config("odissey { log_verbosity 2 }")

    assert run(monkeypatch, "-q", str(path)) == 0
    assert console_level() == logging.DEBUG


def test_pid_file_directory(monkeypatch, tmp_path, write_config) -> None:
    path = write_config(f'odissey {{ pid_file "{tmp_path}" }}')

    assert run(monkeypatch, str(path)) == 0
