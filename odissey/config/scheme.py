"""
In-memory configuration tree ("scheme") filled in by the parser.

The scheme is created empty, populated block by block during a parse and
handed over to the caller. Collections are append-only while parsing.
"""

from dataclasses import dataclass, field

from ..const import (
    DEFAULT_BACKLOG,
    DEFAULT_CLIENT_MAX,
    DEFAULT_KEEPALIVE,
    DEFAULT_LOG_VERBOSITY,
    DEFAULT_POOL_MAX,
    DEFAULT_POOL_MIN,
    DEFAULT_PORT,
    DEFAULT_SYSLOG_FACILITY,
    DEFAULT_SYSLOG_IDENT,
    DEFAULT_WORKERS,
)


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


@dataclass
class SchemeServer:
    """A backend server declared with `server "name" { ... }`."""
    name: str
    host: str | None = None
    port: int = 0


@dataclass
class SchemeRoute:
    """
    A routing policy for one database, or the default route.

    Examples:
        "mydb" { pool_max 10 }  -> SchemeRoute(target="mydb", pool_max=10)
        default { ttl 30 }      -> SchemeRoute(target="", is_default=True, ttl=30)
    """
    target: str
    is_default: bool = False
    route: str | None = None  # Server the route forwards to
    client_max: int = DEFAULT_CLIENT_MAX
    pool_min: int = DEFAULT_POOL_MIN
    pool_max: int = DEFAULT_POOL_MAX
    database: str | None = None
    user: str | None = None
    password: str | None = None
    ttl: int = 0


@dataclass
class SchemeUser:
    """Client credentials from the `users` block."""
    user: str
    password: str | None = None


@dataclass
class Scheme:
    """Root of the configuration tree."""

    config_file: str | None = None

    # Process
    daemonize: bool = False
    pid_file: str | None = None
    pooling: str | None = None

    # Logging
    log_verbosity: int | None = None  # None when the file does not set it
    log_file: str | None = None
    syslog: bool = False
    syslog_ident: str = DEFAULT_SYSLOG_IDENT
    syslog_facility: str = DEFAULT_SYSLOG_FACILITY

    # Listen
    host: str | None = None
    port: int = DEFAULT_PORT
    backlog: int = DEFAULT_BACKLOG
    nodelay: bool = True
    keepalive: int = DEFAULT_KEEPALIVE
    client_max: int = DEFAULT_CLIENT_MAX
    workers: int = DEFAULT_WORKERS

    # Routing
    routing: str | None = None

    servers: list[SchemeServer] = field(default_factory=list)
    routes: list[SchemeRoute] = field(default_factory=list)
    users: list[SchemeUser] = field(default_factory=list)

    @property
    def verbosity(self) -> int:
        """Effective log verbosity."""
        if self.log_verbosity is None:
            return DEFAULT_LOG_VERBOSITY
        return self.log_verbosity

    def add_server(self, name: str) -> SchemeServer:
        """Append a server entry and return it for population."""
        server = SchemeServer(name=name)
        self.servers.append(server)
        return server

    def add_route(self, target: str = "", is_default: bool = False) -> SchemeRoute:
        """Append a route entry; the default route has an empty target."""
        route = SchemeRoute(target="" if is_default else target, is_default=is_default)
        self.routes.append(route)
        return route

    def add_user(self, user: str) -> SchemeUser:
        """Append a user entry and return it for population."""
        entry = SchemeUser(user=user)
        self.users.append(entry)
        return entry

    def find_server(self, name: str) -> SchemeServer | None:
        """Get first server with given name."""
        for server in self.servers:
            if server.name == name:
                return server
        return None

    def default_route(self) -> SchemeRoute | None:
        for route in self.routes:
            if route.is_default:
                return route
        return None

    def find_route(self, target: str) -> SchemeRoute | None:
        """Get the route for a database, falling back to the default route."""
        for route in self.routes:
            if not route.is_default and route.target == target:
                return route
        return self.default_route()

    def find_user(self, name: str) -> SchemeUser | None:
        for user in self.users:
            if user.user == name:
                return user
        return None

    def describe(self) -> list[str]:
        """Render the scheme as indented text lines, one setting per line."""
        lines = [
            f"using configuration file '{self.config_file or ''}'",
            f"daemonize {_yes_no(self.daemonize)}",
            f"log_verbosity {self.verbosity}",
        ]
        if self.log_file:
            lines.append(f"log_file '{self.log_file}'")
        if self.pid_file:
            lines.append(f"pid_file '{self.pid_file}'")
        if self.syslog:
            lines.append(f"syslog {self.syslog_ident} ({self.syslog_facility})")
        if self.pooling:
            lines.append(f"pooling '{self.pooling}'")

        lines.append("listen")
        lines.append(f"  host {self.host or '*'}")
        lines.append(f"  port {self.port}")
        lines.append(f"  backlog {self.backlog}")
        lines.append(f"  nodelay {_yes_no(self.nodelay)}")
        lines.append(f"  keepalive {self.keepalive}")
        lines.append(f"  client_max {self.client_max}")
        lines.append(f"  workers {self.workers}")

        if self.servers:
            lines.append("servers")
            for server in self.servers:
                lines.append(f"  <{server.name}> {server.host or ''}:{server.port}")

        if self.routing or self.routes:
            lines.append("routing")
            if self.routing:
                lines.append(f"  mode {self.routing}")
            for route in self.routes:
                label = "default" if route.is_default else f"<{route.target}>"
                lines.append(f"  {label}")
                if route.route:
                    lines.append(f"    route {route.route}")
                if route.database:
                    lines.append(f"    database {route.database}")
                if route.user:
                    lines.append(f"    user {route.user}")
                lines.append(f"    client_max {route.client_max}")
                lines.append(f"    pool_min {route.pool_min}")
                lines.append(f"    pool_max {route.pool_max}")
                lines.append(f"    ttl {route.ttl}")

        if self.users:
            lines.append("users")
            for user in self.users:
                lines.append(f"  <{user.user}>")

        return lines
