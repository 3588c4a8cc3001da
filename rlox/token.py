"""Token kinds and the tokens produced by the scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Every kind of token the scanner can produce.

    The value of each member is the label used when a token is shown.
    """

    LEFT_PAREN = "LeftParen"
    RIGHT_PAREN = "RightParen"
    LEFT_BRACE = "LeftBrace"
    RIGHT_BRACE = "RightBrace"
    COMMA = "COMMA"
    DOT = "DOT"
    MINUS = "MINUS"
    PLUS = "PLUS"
    SEMICOLON = "SEMICOLON"
    SLASH = "SLASH"
    STAR = "STAR"
    BANG = "BANG"
    BANG_EQUAL = "BangEqual"
    EQUAL = "EQUAL"
    EQUAL_EQUAL = "EqualEqual"
    GREATER = "GREATER"
    GREATER_EQUAL = "GreaterEqual"
    LESS = "LESS"
    LESS_EQUAL = "LessEqual"
    SLASH_EQUAL = "SlashEqual"
    IDENTIFIER = "IDENTIFIER"
    STRING = "STRING"
    NUMBER = "NUMBER"
    AND = "AND"
    CLASS = "CLASS"
    ELSE = "ELSE"
    FALSE = "FALSE"
    FUN = "FUN"
    FOR = "FOR"
    IF = "IF"
    NIL = "NIL"
    OR = "OR"
    PRINT = "PRINT"
    RETURN = "RETURN"
    SUPER = "SUPER"
    THIS = "THIS"
    TRUE = "TRUE"
    VAR = "VAR"
    WHILE = "WHILE"
    EOF = "EOF"
    ERROR = "Error"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """A lexeme located in the source text.

    Error tokens must carry a message; no other token may.
    """

    token_type: TokenType
    line: int
    start: int
    length: int
    literal: str | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        if self.token_type is TokenType.ERROR:
            if self.message is None:
                raise ValueError("Error token with empty message")
        elif self.message is not None:
            raise ValueError("Non-error token with message")

    def __str__(self) -> str:
        if self.literal is None:
            return str(self.token_type)
        return f"{self.token_type}({self.literal})"