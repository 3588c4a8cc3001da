"""Turns source text into tokens, one at a time."""

from __future__ import annotations

from rlox.token import Token, TokenType

_KEYWORDS: dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fn": TokenType.FUN,
    "if": TokenType.IF,
    "null": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "let": TokenType.VAR,
    "while": TokenType.WHILE,
}

_SINGLE_CHAR: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    "*": TokenType.STAR,
}

# character -> (type when followed by '=', type otherwise)
_WITH_EQUAL: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG_EQUAL, TokenType.BANG),
    "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    "<": (TokenType.LESS_EQUAL, TokenType.LESS),
    ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
}

_NUL = "\0"


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_alpha(c: str) -> bool:
    return c.isalpha() or c == "_"


class Scanner:
    """An on-demand lexer over a source string."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._start = 0
        self._current = 0
        self._line = 1

    def scan_token(self) -> Token:
        """Return the next token; at the end of input, an EOF token every time."""
        self._skip_whitespace()
        self._start = self._current

        if self._is_at_end():
            return self._make_token(TokenType.EOF)

        c = self._advance()
        if c in _SINGLE_CHAR:
            return self._make_token(_SINGLE_CHAR[c])
        if c in _WITH_EQUAL:
            with_equal, plain = _WITH_EQUAL[c]
            return self._make_token(with_equal if self._matches("=") else plain)
        if c == "/":
            is_slash = self._matches("/")
            if self._matches("="):
                return self._make_token(TokenType.SLASH_EQUAL)
            if is_slash:
                raise RuntimeError("Comment not skipped!")
            return self._make_token(TokenType.SLASH)
        if c == '"':
            return self._string()
        if _is_digit(c):
            return self._number()
        if _is_alpha(c):
            return self._identifier()
        return self._make_error_token("Unexpected character")

    def substr(self, start: int, end: int) -> str:
        """Return the source characters from start up to end."""
        return self._source[start:end]

    def _length(self) -> int:
        return self._current - self._start

    def _make_token(self, token_type: TokenType, literal: str | None = None) -> Token:
        return Token(token_type, self._line, self._start, self._length(), literal)

    def _make_error_token(self, message: str) -> Token:
        return Token(
            TokenType.ERROR, self._line, self._start, self._length(), message=message
        )

    def _is_at_end(self) -> bool:
        return self._current >= len(self._source)

    def _advance(self) -> str:
        c = self._source[self._current]
        self._current += 1
        return c

    def _matches(self, expected: str) -> bool:
        if self._is_at_end() or self._source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _peek(self) -> str:
        return _NUL if self._is_at_end() else self._source[self._current]

    def _peek_next(self) -> str:
        if self._current + 1 >= len(self._source):
            return _NUL
        return self._source[self._current + 1]

    def _skip_whitespace(self) -> None:
        while True:
            c = self._peek()
            if c in (" ", "\r", "\t"):
                self._advance()
            elif c == "\n":
                self._line += 1
                self._advance()
            elif c == "/" and self._peek_next() == "/":
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                return

    def _string(self) -> Token:
        while not self._is_at_end() and self._peek() != '"':
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._is_at_end():
            return self._make_error_token("Unclosed string literal")

        self._advance()
        literal = self.substr(self._start + 1, self._current - 1)
        return self._make_token(TokenType.STRING, literal)

    def _number(self) -> Token:
        while _is_digit(self._peek()):
            self._advance()

        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        literal = self.substr(self._start, self._current)
        return self._make_token(TokenType.NUMBER, literal)

    def _identifier(self) -> Token:
        while _is_alpha(self._peek()) or _is_digit(self._peek()):
            self._advance()
        literal = self.substr(self._start, self._current)
        return self._make_token(_KEYWORDS.get(literal, TokenType.IDENTIFIER), literal)