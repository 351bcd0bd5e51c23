"""
Keyword table for the odissey configuration language.

Identifiers found by the lexer are looked up here by exact text.
The table is built once at import time and never modified.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Keyword(Enum):
    """Reserved words; the value is the literal text."""

    # main
    ODISSEY = "odissey"
    YES = "yes"
    NO = "no"
    ON = "on"
    OFF = "off"
    DAEMONIZE = "daemonize"
    LOG_VERBOSITY = "log_verbosity"
    LOG_FILE = "log_file"
    PID_FILE = "pid_file"
    SYSLOG = "syslog"
    SYSLOG_IDENT = "syslog_ident"
    SYSLOG_FACILITY = "syslog_facility"
    POOLING = "pooling"

    # listen
    LISTEN = "listen"
    HOST = "host"
    PORT = "port"
    BACKLOG = "backlog"
    NODELAY = "nodelay"
    KEEPALIVE = "keepalive"
    WORKERS = "workers"
    CLIENT_MAX = "client_max"

    # server
    SERVER = "server"

    # routing
    ROUTING = "routing"
    DEFAULT = "default"
    ROUTE = "route"
    MODE = "mode"
    DATABASE = "database"
    USER = "user"
    PASSWORD = "password"
    TTL = "ttl"
    POOL_MIN = "pool_min"
    POOL_MAX = "pool_max"

    # users
    USERS = "users"

    def __str__(self) -> str:
        return self.value


KEYWORDS: Mapping[str, Keyword] = MappingProxyType({kw.value: kw for kw in Keyword})


def lookup(text: str) -> Keyword | None:
    """Return the keyword spelled exactly as `text`, or None."""
    return KEYWORDS.get(text)
