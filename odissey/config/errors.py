"""
Configuration errors and the located error reporter.
"""

from ..logging import Loggers


class ConfigError(Exception):
    """Exception raised for configuration errors."""

    pass


class ConfigSyntaxError(ConfigError):
    """A parse failure at a known place in a configuration file."""

    def __init__(self, filename: str, line: int, message: str):
        self.filename = filename
        self.line = line
        self.message = message
        super().__init__(f"{filename}:{line} {message}")


def report(source_name: str, line: int, message: str) -> ConfigSyntaxError:
    """
    Log a located syntax error and return it for the caller to raise.

    Args:
        source_name: Configuration file name used in the message
        line: 1-based line of the offending token
        message: Human-readable description

    Returns:
        The error carrying the same location and message
    """
    error = ConfigSyntaxError(source_name, line, message)
    Loggers.config().error(str(error))
    return error
