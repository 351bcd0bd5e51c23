"""
Configuration loader with file reading and validation.
"""

from pathlib import Path

from ..logging import Loggers
from ..pid import PidFile
from .errors import ConfigError, ConfigSyntaxError
from .lexer import Lexer
from .parser import ConfigParser
from .scheme import Scheme


logger = Loggers.config()


class ConfigLoader:
    """
    Loads configuration from files or strings.

    Usage:
        loader = ConfigLoader()
        scheme = loader.load_file("/etc/odissey.conf")
        # or
        scheme = loader.load_string(config_text)

    Syntax errors propagate as ConfigSyntaxError; the partially filled
    scheme of a failed parse is dropped.
    """

    def load_file(self, path: str | Path) -> Scheme:
        """
        Load configuration from a file.

        Args:
            path: Path to the configuration file

        Returns:
            Parsed Scheme

        Raises:
            ConfigError: If file cannot be read
            ConfigSyntaxError: If file cannot be parsed
        """
        path = Path(path)

        try:
            source = path.read_text()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"failed to open config file '{path}'")
            raise ConfigError(f"failed to open config file '{path}'") from e

        return self.load_string(source, str(path))

    def load(self, path: str | Path) -> Scheme:
        """Alias for load_file."""
        return self.load_file(path)

    def load_string(self, source: str, filename: str = "<string>") -> Scheme:
        """
        Load configuration from a string.

        Args:
            source: Configuration source text
            filename: Filename for error messages

        Returns:
            Parsed Scheme

        Raises:
            ConfigSyntaxError: If configuration cannot be parsed
        """
        parser = ConfigParser(Lexer(source, filename), Scheme(), filename)
        scheme = parser.parse()
        logger.debug(
            f"Loaded {filename}: {len(scheme.servers)} servers, "
            f"{len(scheme.routes)} routes, {len(scheme.users)} users"
        )
        return scheme

    def validate(self, scheme: Scheme) -> list[str]:
        """
        Check the environment the scheme will run in.

        Args:
            scheme: Parsed configuration

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        if scheme.pid_file:
            owner = PidFile(scheme.pid_file).running_pid()
            if owner is not None:
                warnings.append(f"pid file '{scheme.pid_file}' is owned by running process {owner}")

        return warnings


def load_config(path: str | Path) -> Scheme:
    """
    Convenience function to load configuration from a file.

    Args:
        path: Path to the configuration file

    Returns:
        Parsed Scheme
    """
    loader = ConfigLoader()
    return loader.load_file(path)


__all__ = ["ConfigLoader", "ConfigError", "ConfigSyntaxError", "load_config"]
