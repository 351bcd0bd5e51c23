"""
Recursive descent parser for the odissey configuration syntax.

Pulls tokens one at a time from a token source and fills in a Scheme.
The first malformed token aborts the whole parse with a located error.
"""

from enum import Enum, auto
from typing import Any, Callable

from .errors import ConfigSyntaxError, report
from .keywords import Keyword
from .lexer import Lexer, Token, TokenSource, TokenType
from .scheme import Scheme, SchemeRoute, SchemeServer, SchemeUser


class Value(Enum):
    """Kind of value a field keyword must be followed by."""
    STRING = auto()
    NUMBER = auto()
    YES_NO = auto()


class Item(Enum):
    """What a token means at the start of a block-level statement."""
    FIELD = auto()          # known field keyword
    NAMED_ENTRY = auto()    # bare string opening a named sub-block
    DEFAULT_ENTRY = auto()  # `default` opening the default route
    CLOSE = auto()          # '}'
    END = auto()            # end of input
    LEXICAL_ERROR = auto()  # the lexer could not tokenize the input
    UNKNOWN = auto()


# Field keyword -> (attribute name, value kind), one table per block
ROOT_FIELDS: dict[Keyword, tuple[str, Value]] = {
    Keyword.DAEMONIZE: ("daemonize", Value.YES_NO),
    Keyword.LOG_VERBOSITY: ("log_verbosity", Value.NUMBER),
    Keyword.LOG_FILE: ("log_file", Value.STRING),
    Keyword.PID_FILE: ("pid_file", Value.STRING),
    Keyword.SYSLOG: ("syslog", Value.YES_NO),
    Keyword.SYSLOG_IDENT: ("syslog_ident", Value.STRING),
    Keyword.SYSLOG_FACILITY: ("syslog_facility", Value.STRING),
    Keyword.POOLING: ("pooling", Value.STRING),
}

LISTEN_FIELDS: dict[Keyword, tuple[str, Value]] = {
    Keyword.HOST: ("host", Value.STRING),
    Keyword.PORT: ("port", Value.NUMBER),
    Keyword.BACKLOG: ("backlog", Value.NUMBER),
    Keyword.NODELAY: ("nodelay", Value.YES_NO),
    Keyword.KEEPALIVE: ("keepalive", Value.NUMBER),
    Keyword.CLIENT_MAX: ("client_max", Value.NUMBER),
    Keyword.WORKERS: ("workers", Value.NUMBER),
}

SERVER_FIELDS: dict[Keyword, tuple[str, Value]] = {
    Keyword.HOST: ("host", Value.STRING),
    Keyword.PORT: ("port", Value.NUMBER),
}

ROUTING_FIELDS: dict[Keyword, tuple[str, Value]] = {
    Keyword.MODE: ("routing", Value.STRING),
}

ROUTE_FIELDS: dict[Keyword, tuple[str, Value]] = {
    Keyword.ROUTE: ("route", Value.STRING),
    Keyword.CLIENT_MAX: ("client_max", Value.NUMBER),
    Keyword.POOL_MIN: ("pool_min", Value.NUMBER),
    Keyword.POOL_MAX: ("pool_max", Value.NUMBER),
    Keyword.DATABASE: ("database", Value.STRING),
    Keyword.USER: ("user", Value.STRING),
    Keyword.PASSWORD: ("password", Value.STRING),
    Keyword.TTL: ("ttl", Value.NUMBER),
}

USER_FIELDS: dict[Keyword, tuple[str, Value]] = {
    Keyword.PASSWORD: ("password", Value.STRING),
}

Expected = TokenType | Keyword | str


class ConfigParser:
    """
    Recursive descent parser for odissey configuration.

    Grammar:
        config        := 'odissey' '{' stmt* '}'
        stmt          := root_field | listen | server | routing | users
        listen        := 'listen' '{' listen_field* '}'
        server        := 'server' STRING '{' ('host' | 'port')* '}'
        routing       := 'routing' '{' ('mode' STRING | route)* '}'
        route         := (STRING | 'default') '{' route_field* '}'
        users         := 'users' '{' (STRING '{' 'password' STRING '}')* '}'

    Every block must be closed explicitly. A field may be repeated; the last
    value wins.
    """

    def __init__(self, source: TokenSource, scheme: Scheme, filename: str = "<string>"):
        self.source = source
        self.scheme = scheme
        self.filename = filename

    def _error(self, token: Token | None, message: str) -> ConfigSyntaxError:
        line = token.line if token is not None else self.source.line
        return report(self.filename, line, message)

    def _pop(self) -> Token:
        return self.source.next_token()

    def _next(self, expected: Expected) -> Token:
        """Pop one token and require it to be of the expected kind."""
        token = self._pop()
        if token.type == TokenType.ERROR:
            raise self._error(token, str(token.value))

        if isinstance(expected, TokenType):
            matches = token.type == expected
        elif isinstance(expected, Keyword):
            matches = token.is_keyword(expected)
        else:
            matches = token.is_punct(expected)

        if not matches:
            raise self._error(token, f"expected '{self._name_of(expected)}'")
        return token

    @staticmethod
    def _name_of(expected: Expected) -> str:
        if isinstance(expected, TokenType):
            return {
                TokenType.NAME: "name",
                TokenType.STRING: "string",
                TokenType.NUMBER: "number",
                TokenType.EOF: "eof",
            }.get(expected, str(expected))
        return str(expected)

    def _next_yes_no(self) -> bool:
        token = self._pop()
        if token.is_keyword(Keyword.YES):
            return True
        if token.is_keyword(Keyword.NO):
            return False
        raise self._error(token, "expected yes/no")

    def _read_value(self, kind: Value) -> Any:
        if kind is Value.YES_NO:
            return self._next_yes_no()
        if kind is Value.NUMBER:
            return self._next(TokenType.NUMBER).value
        return self._next(TokenType.STRING).value

    @staticmethod
    def _classify(token: Token, fields: dict[Keyword, tuple[str, Value]]) -> Item:
        if token.type == TokenType.KEYWORD:
            if token.value in fields:
                return Item.FIELD
            if token.value is Keyword.DEFAULT:
                return Item.DEFAULT_ENTRY
            return Item.UNKNOWN
        if token.type == TokenType.STRING:
            return Item.NAMED_ENTRY
        if token.is_punct("}"):
            return Item.CLOSE
        if token.type == TokenType.EOF:
            return Item.END
        if token.type == TokenType.ERROR:
            return Item.LEXICAL_ERROR
        return Item.UNKNOWN

    def _parse_block(
        self,
        target: Any,
        fields: dict[Keyword, tuple[str, Value]],
        blocks: dict[Keyword, Callable[[], None]] | None = None,
        named: Callable[[Token], None] | None = None,
        default: Callable[[], None] | None = None,
    ) -> None:
        """
        Parse statements up to and including the closing brace.

        Args:
            target: Object whose attributes receive field values
            fields: Field keywords accepted in this block
            blocks: Keywords opening a nested block
            named: Handler for a bare string opening a named sub-block
            default: Handler for `default` opening the default entry
        """
        blocks = blocks or {}
        while True:
            token = self._pop()
            if token.type == TokenType.KEYWORD and token.value in blocks:
                blocks[token.value]()
                continue

            item = self._classify(token, fields)
            if item is Item.FIELD:
                attr, kind = fields[token.value]
                setattr(target, attr, self._read_value(kind))
            elif item is Item.NAMED_ENTRY and named is not None:
                named(token)
            elif item is Item.DEFAULT_ENTRY and default is not None:
                default()
            elif item is Item.CLOSE:
                return
            elif item is Item.END:
                raise self._error(token, "unexpected end of config file")
            elif item is Item.LEXICAL_ERROR:
                raise self._error(token, str(token.value))
            else:
                raise self._error(token, "unknown option")

    def parse(self) -> Scheme:
        """
        Parse the whole configuration into the scheme.

        Returns:
            The populated scheme

        Raises:
            ConfigSyntaxError: On the first malformed token
        """
        self.scheme.config_file = self.filename
        self._next(Keyword.ODISSEY)
        self._next("{")
        self._parse_block(
            self.scheme,
            ROOT_FIELDS,
            blocks={
                Keyword.LISTEN: self._parse_listen,
                Keyword.SERVER: self._parse_server,
                Keyword.ROUTING: self._parse_routing,
                Keyword.USERS: self._parse_users,
            },
        )
        return self.scheme

    def _parse_listen(self) -> None:
        self._next("{")
        self._parse_block(self.scheme, LISTEN_FIELDS)

    def _parse_server(self) -> SchemeServer:
        # The name comes before the brace: server "name" { ... }
        name = self._next(TokenType.STRING)
        server = self.scheme.add_server(name.value)
        self._next("{")
        self._parse_block(server, SERVER_FIELDS)
        return server

    def _parse_routing(self) -> None:
        self._next("{")
        self._parse_block(
            self.scheme,
            ROUTING_FIELDS,
            named=self._parse_route,
            default=self._parse_default_route,
        )

    def _parse_route(self, name: Token | None) -> SchemeRoute:
        if name is None:
            route = self.scheme.add_route(is_default=True)
        else:
            route = self.scheme.add_route(name.value)
        self._next("{")
        self._parse_block(route, ROUTE_FIELDS)
        return route

    def _parse_default_route(self) -> None:
        self._parse_route(None)

    def _parse_users(self) -> None:
        self._next("{")
        self._parse_block(self.scheme, {}, named=self._parse_user)

    def _parse_user(self, name: Token) -> SchemeUser:
        user = self.scheme.add_user(name.value)
        self._next("{")
        self._parse_block(user, USER_FIELDS)
        return user


def parse_config(source: str, filename: str = "<string>") -> Scheme:
    """
    Convenience function to parse a configuration string.

    Args:
        source: Configuration source text
        filename: Filename for error messages

    Returns:
        Parsed Scheme
    """
    parser = ConfigParser(Lexer(source, filename), Scheme(), filename)
    return parser.parse()
