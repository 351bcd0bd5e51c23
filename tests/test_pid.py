"""
Tests for pid file handling.
"""

import os
from pathlib import Path

import psutil
import pytest

from odissey.pid import PidFile, PidFileError


def dead_pid() -> int:
    pid = 2 ** 22 + 17
    while psutil.pid_exists(pid):
        pid += 1
    return pid


def test_create_and_unlink(tmp_path: Path) -> None:
    pid_file = PidFile(tmp_path / "odissey.pid")

    pid_file.create()

    assert pid_file.read() == os.getpid()
    assert pid_file.running_pid() == os.getpid()

    pid_file.unlink()
    assert not pid_file.path.exists()
    pid_file.unlink()


def test_missing_and_malformed(tmp_path: Path) -> None:
    pid_file = PidFile(tmp_path / "odissey.pid")
    assert pid_file.read() is None

    pid_file.path.write_text("not a pid\n")
    assert pid_file.read() is None
    assert pid_file.running_pid() is None


def test_stale_pid_file_is_taken_over(tmp_path: Path) -> None:
    pid_file = PidFile(tmp_path / "odissey.pid")
    pid_file.path.write_text(f"{dead_pid()}\n")

    assert pid_file.running_pid() is None
    pid_file.create()
    assert pid_file.read() == os.getpid()


def test_live_pid_file_is_refused(tmp_path: Path) -> None:
    pid_file = PidFile(tmp_path / "odissey.pid")
    pid_file.create()

    with pytest.raises(PidFileError, match="owned by running process"):
        pid_file.create(pid=dead_pid())


def test_unwritable_location(tmp_path: Path) -> None:
    pid_file = PidFile(tmp_path / "missing" / "odissey.pid")

    with pytest.raises(PidFileError, match="failed to create pid file"):
        pid_file.create()


def test_directory_is_not_a_pid(tmp_path: Path) -> None:
    pid_file = PidFile(tmp_path)

    assert pid_file.read() is None
    assert pid_file.running_pid() is None
