"""
Configuration parsing for the odissey block syntax.
"""

from .errors import ConfigError, ConfigSyntaxError
from .keywords import KEYWORDS, Keyword
from .lexer import Lexer, Token, TokenType
from .loader import ConfigLoader, load_config
from .parser import ConfigParser, parse_config
from .scheme import Scheme, SchemeRoute, SchemeServer, SchemeUser

__all__ = [
    "ConfigError",
    "ConfigSyntaxError",
    "KEYWORDS",
    "Keyword",
    "Lexer",
    "Token",
    "TokenType",
    "ConfigLoader",
    "load_config",
    "ConfigParser",
    "parse_config",
    "Scheme",
    "SchemeRoute",
    "SchemeServer",
    "SchemeUser",
]
