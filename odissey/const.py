"""
Application constants and metadata.
"""

# Application info
APP_NAME = "odissey"
APP_VERSION = "0.1.0"
DEFAULT_CONFIG_FILE = "/etc/odissey.conf"

# Listen defaults
DEFAULT_PORT = 6432
DEFAULT_BACKLOG = 128
DEFAULT_KEEPALIVE = 7200
DEFAULT_CLIENT_MAX = 100
DEFAULT_WORKERS = 1

# Route defaults
DEFAULT_POOL_MIN = 0
DEFAULT_POOL_MAX = 100

# Logging defaults
DEFAULT_LOG_VERBOSITY = 1
DEFAULT_SYSLOG_IDENT = "odissey"
DEFAULT_SYSLOG_FACILITY = "daemon"
