"""
Lexer (tokenizer) for the odissey configuration syntax.

Supports:
- Keywords (looked up in the keyword table) and bare names
- Quoted strings (double or single quotes with escape sequences)
- Unsigned decimal integers
- Single-character punctuation such as braces
- Single-line (#) and multi-line (/* */) comments

Malformed input never raises: the lexer hands out an ERROR token carrying
the diagnostic and lets the parser decide how to fail.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Protocol
import string

from .keywords import Keyword, lookup


class TokenType(Enum):
    """Token types for the odissey config syntax."""

    # Words
    KEYWORD = auto()       # reserved word from the keyword table
    NAME = auto()          # any other identifier

    # Literals
    STRING = auto()        # "quoted string"
    NUMBER = auto()        # 6432

    # Delimiters
    PUNCT = auto()         # { } and any other punctuation character

    # Special
    EOF = auto()           # end of input
    ERROR = auto()         # lexer error token

    def __str__(self) -> str:
        return self.name.lower()


@dataclass
class Token:
    """A single token from the lexer."""

    type: TokenType
    value: Keyword | str | int
    line: int
    column: int
    raw: str = ""  # Original text representation

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"

    def is_keyword(self, keyword: Keyword) -> bool:
        return self.type == TokenType.KEYWORD and self.value is keyword

    def is_punct(self, char: str) -> bool:
        return self.type == TokenType.PUNCT and self.value == char


class TokenSource(Protocol):
    """Anything the parser can pull tokens from."""

    line: int

    def next_token(self) -> Token:
        ...


PUNCTUATION = frozenset(string.punctuation) - {'"', "'", "_", "#"}
IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")


class Lexer:
    """
    Tokenizer for the odissey configuration syntax.

    Example config:
        odissey {
            daemonize no
            listen {
                host "127.0.0.1"
                port 6432
            }
        }
    """

    ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "\\": "\\"}

    def __init__(self, source: str, filename: str = "<string>"):
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1

    def _current(self) -> str:
        """Get current character or empty string if at end."""
        if self.pos >= len(self.source):
            return ""
        return self.source[self.pos]

    def _peek(self, offset: int = 1) -> str:
        """Peek at character at offset from current position."""
        pos = self.pos + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def _advance(self) -> str:
        """Advance position and return current character."""
        if self.pos >= len(self.source):
            return ""

        char = self.source[self.pos]
        self.pos += 1

        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def _error(self, message: str, line: int | None = None) -> Token:
        token = Token(TokenType.ERROR, message, line or self.line, self.column)
        # Nothing after a lexical error is tokenized
        self.pos = len(self.source)
        return token

    def _skip_whitespace(self) -> None:
        char = self._current()
        while char and char in " \t\r\n\f\v":
            self._advance()
            char = self._current()

    def _skip_comment(self) -> bool | None:
        """
        Skip single-line or multi-line comment.

        Returns True if a comment was skipped, False if there was none and
        None if a multi-line comment runs to the end of input.
        """
        if self._current() == "#":
            while self._current() and self._current() != "\n":
                self._advance()
            return True

        if self._current() == "/" and self._peek() == "*":
            self._advance()  # skip /
            self._advance()  # skip *

            while self.pos < len(self.source):
                if self._current() == "*" and self._peek() == "/":
                    self._advance()
                    self._advance()
                    return True
                self._advance()

            return None

        return False

    def _read_string(self) -> Token:
        """Read a quoted string literal."""
        start_line = self.line
        start_col = self.column
        quote_char = self._advance()

        result = []
        raw = [quote_char]

        while self._current() and self._current() != quote_char:
            if self._current() == "\n":
                return self._error("unterminated string", start_line)

            char = self._advance()
            raw.append(char)

            if char == "\\":
                escape_char = self._advance()
                if not escape_char:
                    return self._error("unterminated string", start_line)
                raw.append(escape_char)
                result.append(self.ESCAPES.get(escape_char, escape_char))
            else:
                result.append(char)

        if not self._current():
            return self._error("unterminated string", start_line)

        raw.append(self._advance())

        return Token(
            type=TokenType.STRING,
            value="".join(result),
            line=start_line,
            column=start_col,
            raw="".join(raw),
        )

    def _read_number(self) -> Token:
        start_col = self.column
        start_pos = self.pos

        while self._current() and self._current() in string.digits:
            self._advance()

        raw = self.source[start_pos:self.pos]
        return Token(TokenType.NUMBER, int(raw), self.line, start_col, raw)

    def _read_identifier(self) -> Token:
        """Read a keyword or a bare name."""
        start_col = self.column
        start_pos = self.pos

        # First character already validated as letter or underscore
        while self._current() and self._current() in IDENT_CHARS:
            self._advance()

        raw = self.source[start_pos:self.pos]
        keyword = lookup(raw)
        if keyword is not None:
            return Token(TokenType.KEYWORD, keyword, self.line, start_col, raw)
        return Token(TokenType.NAME, raw, self.line, start_col, raw)

    def next_token(self) -> Token:
        """Get the next token from the source."""
        while True:
            self._skip_whitespace()
            skipped = self._skip_comment()
            if skipped is None:
                return self._error("unterminated comment")
            if not skipped:
                break

        if self.pos >= len(self.source):
            return Token(TokenType.EOF, "", self.line, self.column)

        char = self._current()

        if char == '"' or char == "'":
            return self._read_string()

        if char in string.digits:
            return self._read_number()

        if char in string.ascii_letters or char == "_":
            return self._read_identifier()

        if char in PUNCTUATION:
            start_col = self.column
            self._advance()
            return Token(TokenType.PUNCT, char, self.line, start_col, char)

        return self._error(f"bad symbol {char!r}")

    def tokenize(self) -> Iterator[Token]:
        """Generate tokens up to and including EOF or the first error."""
        while True:
            token = self.next_token()
            yield token
            if token.type in (TokenType.EOF, TokenType.ERROR):
                break

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()


def tokenize(source: str, filename: str = "<string>") -> list[Token]:
    """Convenience function to tokenize a source string."""
    return list(Lexer(source, filename))
