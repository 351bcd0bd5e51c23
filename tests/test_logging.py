"""
Tests for logging setup.
"""

import logging
import logging.handlers
from pathlib import Path

from odissey.config.scheme import Scheme
from odissey.logging import (
    ColoredFormatter,
    LogConfig,
    get_log_level,
    get_logger,
    get_syslog_facility,
    setup_logging,
)


def test_log_config_from_scheme() -> None:
    scheme = Scheme(log_verbosity=2, log_file="/tmp/odissey.log", syslog=True, syslog_ident="pool")

    config = LogConfig.from_scheme(scheme)

    assert config.console_level == "debug"
    assert config.file_enabled is True
    assert config.file_path == "/tmp/odissey.log"
    assert config.syslog_enabled is True
    assert config.syslog_ident == "pool"
    assert config.syslog_facility == "daemon"


def test_log_config_from_scheme_keeps_base() -> None:
    base = LogConfig(console_colors=False)

    config = LogConfig.from_scheme(Scheme(log_verbosity=0), base)

    assert config.console_level == "error"
    assert config.console_colors is False
    assert config.file_enabled is False
    assert base.console_level == "INFO"


def test_level_and_facility_names() -> None:
    assert get_log_level("WARN") == logging.WARNING
    assert get_log_level("nonsense") == logging.INFO
    assert get_syslog_facility("local0") == logging.handlers.SysLogHandler.LOG_LOCAL0
    assert get_syslog_facility("nonsense") == logging.handlers.SysLogHandler.LOG_DAEMON


def test_get_logger_prefix() -> None:
    assert get_logger("config").name == "odissey.config"
    assert get_logger("odissey.pid").name == "odissey.pid"


def test_setup_logging_with_file(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "odissey.log"
    setup_logging(LogConfig(file_enabled=True, file_path=str(log_path)))
    get_logger("config").info("hello")

    root = logging.getLogger("odissey")
    assert len(root.handlers) == 2
    for handler in root.handlers:
        handler.flush()
    assert "hello" in log_path.read_text()


def test_colored_formatter_restores_record() -> None:
    formatter = ColoredFormatter(fmt="%(levelname)s %(name)s %(message)s", use_colors=True)
    record = logging.LogRecord("odissey.config", logging.ERROR, __file__, 1, "boom", None, None)

    text = formatter.format(record)

    assert "\033[" in text
    assert record.levelname == "ERROR"
    assert record.name == "odissey.config"


def test_log_config_from_scheme_without_verbosity() -> None:
    base = LogConfig(console_level="error")

    config = LogConfig.from_scheme(Scheme(), base)

    assert config.console_level == "error"
