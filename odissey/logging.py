"""
Logging configuration for odissey.

Features:
- Console output with optional colors
- File output with rotation (log_file)
- Syslog output (syslog, syslog_ident, syslog_facility)
- Verbosity taken from the command line or from the parsed scheme
"""

import logging
import logging.handlers
import sys
from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config.scheme import Scheme


# ANSI color codes for console output
class Colors:
    """ANSI color codes."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"

    BRIGHT_RED = "\033[91m"


# Log level colors
LEVEL_COLORS = {
    logging.DEBUG: Colors.DIM + Colors.CYAN,
    logging.INFO: Colors.GREEN,
    logging.WARNING: Colors.YELLOW,
    logging.ERROR: Colors.RED,
    logging.CRITICAL: Colors.BOLD + Colors.BRIGHT_RED,
}

# Component colors for logger names
COMPONENT_COLORS = {
    "config": Colors.MAGENTA,
    "pid": Colors.BLUE,
    "main": Colors.GREEN,
}


class ColoredFormatter(logging.Formatter):
    """
    Formatter that adds ANSI colors to log output.

    Colors are applied based on log level and component name.
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        use_colors: bool = True,
    ):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        original_levelname = record.levelname
        original_name = record.name

        if self.use_colors:
            level_color = LEVEL_COLORS.get(record.levelno, "")
            record.levelname = f"{level_color}{record.levelname:8}{Colors.RESET}"

            for key, color in COMPONENT_COLORS.items():
                if record.name.endswith(f".{key}"):
                    record.name = f"{color}{record.name}{Colors.RESET}"
                    break

        result = super().format(record)

        record.levelname = original_levelname
        record.name = original_name

        return result


class PlainFormatter(logging.Formatter):
    """Plain formatter without colors for file output."""

    def format(self, record: logging.LogRecord) -> str:
        original_levelname = record.levelname
        record.levelname = f"{record.levelname:8}"
        result = super().format(record)
        record.levelname = original_levelname
        return result


@dataclass
class LogConfig:
    """Logging configuration."""

    # Console settings
    console_level: str = "INFO"
    console_colors: bool = True

    # File settings
    file_enabled: bool = False
    file_path: str = "/var/log/odissey.log"
    file_level: str = "DEBUG"
    file_max_bytes: int = 10 * 1024 * 1024  # 10 MB
    file_backup_count: int = 5

    # Syslog settings
    syslog_enabled: bool = False
    syslog_ident: str = "odissey"
    syslog_facility: str = "daemon"
    syslog_address: str = "/dev/log"

    # Format
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_scheme(cls, scheme: "Scheme", base: "LogConfig | None" = None) -> "LogConfig":
        """
        Build logging settings from a parsed scheme.

        Command line settings in `base` are kept where the scheme is silent.
        """
        config = replace(base) if base is not None else cls()

        verbosity = scheme.log_verbosity
        if verbosity is not None:
            if verbosity <= 0:
                config.console_level = "error"
            elif verbosity == 1:
                config.console_level = "info"
            else:
                config.console_level = "debug"

        if scheme.log_file:
            config.file_enabled = True
            config.file_path = scheme.log_file

        config.syslog_enabled = scheme.syslog
        config.syslog_ident = scheme.syslog_ident
        config.syslog_facility = scheme.syslog_facility
        return config


def get_log_level(level_str: str) -> int:
    """Convert string log level to logging constant."""
    levels = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "warn": logging.WARNING,
        "error": logging.ERROR,
        "critical": logging.CRITICAL,
    }
    return levels.get(level_str.lower(), logging.INFO)


def get_syslog_facility(name: str) -> int:
    """Map a facility name such as 'daemon' or 'local0' to its code."""
    return logging.handlers.SysLogHandler.facility_names.get(
        name.lower(), logging.handlers.SysLogHandler.LOG_DAEMON
    )


def setup_logging(config: LogConfig | None = None) -> None:
    """
    Configure logging for the application.

    Args:
        config: Logging configuration (uses defaults if None)
    """
    if config is None:
        config = LogConfig()

    root_logger = logging.getLogger("odissey")
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter at handlers

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(get_log_level(config.console_level))

    # Use colored formatter if colors enabled and stdout is a TTY
    use_colors = config.console_colors and hasattr(sys.stdout, "isatty") and sys.stdout.isatty()
    console_handler.setFormatter(ColoredFormatter(
        fmt=config.format,
        datefmt=config.date_format,
        use_colors=use_colors,
    ))
    root_logger.addHandler(console_handler)

    # File handler
    if config.file_enabled:
        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            config.file_path,
            maxBytes=config.file_max_bytes,
            backupCount=config.file_backup_count,
        )
        file_handler.setLevel(get_log_level(config.file_level))
        file_handler.setFormatter(PlainFormatter(
            fmt=config.format,
            datefmt=config.date_format,
        ))
        root_logger.addHandler(file_handler)

    # Syslog handler
    if config.syslog_enabled:
        syslog_handler = logging.handlers.SysLogHandler(
            address=config.syslog_address,
            facility=get_syslog_facility(config.syslog_facility),
        )
        syslog_handler.ident = f"{config.syslog_ident}: "
        syslog_handler.setLevel(get_log_level(config.console_level))
        syslog_handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        root_logger.addHandler(syslog_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a component.

    Args:
        name: Component name (will be prefixed with odissey)

    Returns:
        Logger instance
    """
    if name.startswith("odissey"):
        return logging.getLogger(name)
    return logging.getLogger(f"odissey.{name}")


class Loggers:
    """Pre-configured loggers for common components."""

    @staticmethod
    def main() -> logging.Logger:
        return get_logger("main")

    @staticmethod
    def config() -> logging.Logger:
        return get_logger("config")

    @staticmethod
    def pid() -> logging.Logger:
        return get_logger("pid")
