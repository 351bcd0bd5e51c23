"""
Tests for the configuration tree.
"""

from odissey.config.scheme import Scheme


def test_defaults() -> None:
    scheme = Scheme()

    assert scheme.daemonize is False
    assert scheme.log_verbosity is None
    assert scheme.verbosity == 1
    assert scheme.port == 6432
    assert scheme.backlog == 128
    assert scheme.nodelay is True
    assert scheme.workers == 1
    assert scheme.servers == []
    assert scheme.routes == []
    assert scheme.users == []


def test_add_entries_return_handles() -> None:
    scheme = Scheme()

    server = scheme.add_server("main")
    server.port = 5432
    route = scheme.add_route("db")
    route.pool_max = 3
    default = scheme.add_route("ignored", is_default=True)
    user = scheme.add_user("alice")
    user.password = "pw"

    assert scheme.servers[0].port == 5432
    assert scheme.routes[0].pool_max == 3
    assert default.target == ""
    assert default.is_default is True
    assert scheme.users[0].password == "pw"


def test_lookups() -> None:
    scheme = Scheme()
    scheme.add_server("a")
    named = scheme.add_route("sales")
    default = scheme.add_route(is_default=True)
    scheme.add_user("bob")

    assert scheme.find_server("a") is scheme.servers[0]
    assert scheme.find_server("b") is None
    assert scheme.find_route("sales") is named
    assert scheme.find_route("other") is default
    assert scheme.default_route() is default
    assert scheme.find_user("bob") is scheme.users[0]
    assert scheme.find_user("eve") is None


def test_find_route_without_default() -> None:
    scheme = Scheme()
    scheme.add_route("sales")

    assert scheme.find_route("other") is None


def test_describe() -> None:
    scheme = Scheme(config_file="x.conf", pooling="session", routing="forward")
    server = scheme.add_server("main")
    server.host = "db"
    server.port = 5432
    scheme.add_route(is_default=True)
    scheme.add_user("alice")

    lines = scheme.describe()

    assert lines[0] == "using configuration file 'x.conf'"
    assert "pooling 'session'" in lines
    assert "  host *" in lines
    assert "  <main> db:5432" in lines
    assert "  mode forward" in lines
    assert "  default" in lines
    assert "  <alice>" in lines
    assert not any("password" in line for line in lines)
