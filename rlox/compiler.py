"""Single-pass Pratt compiler from expression source text to bytecode."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional

from rlox.chunk import Chunk, OpCode, OpKind
from rlox.errors import ParsingError
from rlox.scanner import Scanner
from rlox.token import Token, TokenType
from rlox.value import Value


@dataclass
class Parser:
    """The two tokens the compiler looks at: the one just consumed and the next."""

    current: Optional[Token] = None
    previous: Optional[Token] = None


class Precedence(IntEnum):
    """Binding strength of operators, weakest first."""

    NONE = 0
    ASSIGNMENT = 1
    OR = 2
    AND = 3
    EQ = 4
    COMP = 5
    TERM = 6
    FACTOR = 7
    UNARY = 8
    CALL = 9
    PRIMARY = 10

    def next(self) -> Precedence:
        """Return the next stronger level, wrapping to ASSIGNMENT past the top."""
        try:
            return Precedence(self + 1)
        except ValueError:
            return Precedence.ASSIGNMENT

    def __str__(self) -> str:
        return self.name if self is Precedence.NONE else self.name.capitalize()


_ParseFn = Callable[["Compiler"], None]


@dataclass(frozen=True)
class _ParseRule:
    prefix: Optional[_ParseFn] = None
    infix: Optional[_ParseFn] = None
    precedence: Precedence = Precedence.NONE


_NO_RULE = _ParseRule()

_BINARY_OPS: dict[TokenType, OpKind] = {
    TokenType.PLUS: OpKind.ADD,
    TokenType.MINUS: OpKind.SUB,
    TokenType.SLASH: OpKind.DIV,
    TokenType.STAR: OpKind.MUL,
}


class Compiler:
    """Compiles one expression from source text into a chunk."""

    def __init__(self, source: str, debug_mode: bool = False) -> None:
        self._scanner = Scanner(source)
        self._parser = Parser()
        self._chunk: Optional[Chunk] = None
        self._debug = debug_mode

    def compile(self, chunk: Chunk) -> None:
        """Emit the program's instructions into chunk.

        Errors are reported on standard output and then raised as ParsingError.
        """
        self._chunk = chunk
        self._advance()
        self._expression()
        self._consume(TokenType.EOF, "Expected end of expression")

    # -- token handling -------------------------------------------------

    @property
    def _current(self) -> Token:
        assert self._parser.current is not None
        return self._parser.current

    @property
    def _previous(self) -> Token:
        assert self._parser.previous is not None
        return self._parser.previous

    def _debug_string(self) -> str:
        current = self._parser.current
        previous = self._parser.previous
        return (
            f"current: {current if current is not None else 'None'}, "
            f"previous: {previous if previous is not None else 'None'}"
        )

    def _advance(self) -> None:
        self._parser.previous = self._parser.current
        token = self._scanner.scan_token()
        self._parser.current = token
        if self._debug:
            print(f"Called advance(), {self._debug_string()}")
        if token.token_type is TokenType.ERROR:
            assert token.message is not None
            self._error_at(token, token.message)

    def _consume(self, token_type: TokenType, message: str) -> None:
        if self._current.token_type is token_type:
            self._advance()
        else:
            self._error_at(self._current, message)

    def _error_at(self, token: Token, message: str) -> None:
        if token.token_type is TokenType.EOF:
            where = " at end"
        elif token.token_type is TokenType.ERROR:
            where = ""
        else:
            lexeme = self._scanner.substr(token.start, token.start + token.length)
            where = f" at '{lexeme}'"
        print(f"[line {token.line}] Error{where}: {message}")
        raise ParsingError()

    # -- emitting -------------------------------------------------------

    def _line(self) -> int:
        return self._previous.line

    def _emit(self, kind: OpKind, const_idx: Optional[int] = None) -> None:
        op_code = OpCode(kind, self._line(), const_idx)
        if self._debug:
            print(f"Emitted opcode: {op_code}")
        assert self._chunk is not None
        self._chunk.push(op_code)

    def _emit_const(self, value: Value) -> None:
        assert self._chunk is not None
        self._emit(OpKind.CONST, self._chunk.push_const(value))

    # -- grammar --------------------------------------------------------

    def _expression(self) -> None:
        if self._debug:
            print(f"Called expression(), {self._debug_string()}")
        self._parse_precedence(Precedence.ASSIGNMENT)

    def _number(self) -> None:
        literal = self._previous.literal
        assert literal is not None
        value = Value(float(literal))
        if self._debug:
            print(f"Called number() for {value}")
        self._emit_const(value)

    def _grouping(self) -> None:
        self._expression()
        self._consume(TokenType.RIGHT_PAREN, "Expected ')'")

    def _unary(self) -> None:
        op_type = self._previous.token_type
        self._parse_precedence(Precedence.UNARY)
        if self._debug:
            print(f"Called unary for op {op_type}, {self._debug_string()}")
        if op_type is TokenType.MINUS:
            self._emit(OpKind.NEGATE)

    def _binary(self) -> None:
        op_type = self._previous.token_type
        next_precedence = _rule(op_type).precedence.next()
        if self._debug:
            print(
                f"Called binary {op_type}, {self._debug_string()}, "
                f"next precedence = {next_precedence}"
            )
        self._parse_precedence(next_precedence)
        kind = _BINARY_OPS.get(op_type)
        if kind is None:
            raise ValueError("Unsupported binary token")
        self._emit(kind)

    def _describe(self, precedence: Precedence) -> str:
        current = _rule(self._current.token_type).precedence
        return (
            f"precedence: {precedence}({int(precedence)}), "
            f"current precedence: {current}({int(current)})"
        )

    def _parse_precedence(self, precedence: Precedence) -> None:
        if self._debug:
            print(
                f"Called parse_precedence() with precedence = {precedence}, "
                f"{self._debug_string()}"
            )
        self._advance()
        prefix = _rule(self._previous.token_type).prefix
        if prefix is None:
            self._error_at(self._previous, "Expected expression")
            return
        prefix(self)

        if precedence > _rule(self._current.token_type).precedence:
            print(
                f"Skipping infix rule loop, {self._debug_string()}, "
                f"{self._describe(precedence)}"
            )

        while precedence <= _rule(self._current.token_type).precedence:
            if self._debug:
                print(
                    f"Inside infix rule loop, {self._describe(precedence)}, "
                    f"{self._debug_string()}"
                )
            self._advance()
            infix = _rule(self._previous.token_type).infix
            if infix is None:
                continue
            if self._debug:
                print(f"Calling infix rule for {self._previous}")
            infix(self)


_RULES: dict[TokenType, _ParseRule] = {
    TokenType.LEFT_PAREN: _ParseRule(prefix=Compiler._grouping),
    TokenType.MINUS: _ParseRule(
        prefix=Compiler._unary, infix=Compiler._binary, precedence=Precedence.TERM
    ),
    TokenType.PLUS: _ParseRule(infix=Compiler._binary, precedence=Precedence.TERM),
    TokenType.SLASH: _ParseRule(infix=Compiler._binary, precedence=Precedence.FACTOR),
    TokenType.STAR: _ParseRule(infix=Compiler._binary, precedence=Precedence.FACTOR),
    TokenType.NUMBER: _ParseRule(prefix=Compiler._number),
}


def _rule(token_type: TokenType) -> _ParseRule:
    return _RULES.get(token_type, _NO_RULE)