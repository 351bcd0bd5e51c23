"""
Entry point for the odissey configuration checker.

Usage:
    python -m odissey /path/to/odissey.conf
    python -m odissey --print /path/to/odissey.conf
    python -m odissey --help
"""

import argparse
import sys

from . import __version__
from .config.loader import ConfigLoader, ConfigError
from .const import DEFAULT_CONFIG_FILE
from .logging import LogConfig, get_logger, setup_logging


logger = get_logger("main")


def check_config(config_path: str, log_config: LogConfig, show: bool = False) -> int:
    """Parse the configuration file, report warnings and optionally print it."""
    loader = ConfigLoader()
    try:
        scheme = loader.load_file(config_path)
    except ConfigError as e:
        # Already logged with its location by the parser
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    # From here on log the way the configuration asks to
    setup_logging(LogConfig.from_scheme(scheme, log_config))

    for warning in loader.validate(scheme):
        logger.warning(warning)

    if show:
        for line in scheme.describe():
            print(line)

    logger.info(f"{config_path}: configuration is valid")
    return 0


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="odissey",
        description="Check an odissey connection pooler configuration file",
    )

    parser.add_argument(
        "config",
        nargs="?",
        default=DEFAULT_CONFIG_FILE,
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_FILE})",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging (INFO level)",
    )

    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level)",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode (only errors)",
    )

    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to file",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "--print",
        dest="show",
        action="store_true",
        help="Print the parsed configuration",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args()

    # Setup initial logging from command line args
    # This will be reconfigured after loading config file
    log_config = LogConfig()

    if args.debug:
        log_config.console_level = "debug"
    elif args.verbose:
        log_config.console_level = "info"
    elif args.quiet:
        log_config.console_level = "error"
    else:
        log_config.console_level = "warning"

    if args.no_color:
        log_config.console_colors = False

    if args.log_file:
        log_config.file_enabled = True
        log_config.file_path = args.log_file

    setup_logging(log_config)

    return check_config(args.config, log_config, show=args.show)


if __name__ == "__main__":
    sys.exit(main())
