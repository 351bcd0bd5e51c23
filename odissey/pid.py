"""
PID file handling for the pid_file setting.
"""

import os
from pathlib import Path

import psutil

from .logging import Loggers


logger = Loggers.pid()


class PidFileError(Exception):
    """Exception raised when the pid file cannot be taken."""

    pass


class PidFile:
    """
    A pid file that refuses to be taken over from a live process.

    Usage:
        pid_file = PidFile(scheme.pid_file)
        pid_file.create()
        ...
        pid_file.unlink()
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def read(self) -> int | None:
        """Return the pid stored in the file, or None if absent, unreadable or malformed."""
        try:
            text = self.path.read_text().strip()
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning(f"Cannot read pid file '{self.path}': {e}")
            return None
        try:
            return int(text)
        except ValueError:
            logger.warning(f"Ignoring malformed pid file '{self.path}'")
            return None

    def running_pid(self) -> int | None:
        """Return the stored pid if that process is still alive."""
        pid = self.read()
        if pid is None or pid <= 0:
            return None
        if not psutil.pid_exists(pid):
            return None
        return pid

    def create(self, pid: int | None = None) -> None:
        """
        Write `pid` (default: the current process) into the file.

        Raises:
            PidFileError: If another live process owns the file or it
                cannot be written
        """
        pid = pid if pid is not None else os.getpid()
        owner = self.running_pid()
        if owner is not None and owner != pid:
            raise PidFileError(f"pid file '{self.path}' is owned by running process {owner}")

        try:
            self.path.write_text(f"{pid}\n")
        except OSError as e:
            raise PidFileError(f"failed to create pid file '{self.path}': {e}") from e
        logger.debug(f"Wrote pid {pid} to {self.path}")

    def unlink(self) -> None:
        self.path.unlink(missing_ok=True)
