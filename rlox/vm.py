"""A stack-based virtual machine that executes compiled chunks."""

from __future__ import annotations

import math
import operator
from typing import Callable, Optional

from rlox.chunk import Chunk, OpCode, OpKind
from rlox.errors import EmptyChunkError, MissingValueError, OperationNotSupportedError
from rlox.value import BinOpKind, Value


def _divide(a: float, b: float) -> float:
    """Divide with IEEE 754 semantics: division by zero gives inf or NaN."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


_CALCULATIONS: dict[BinOpKind, Callable[[float, float], float]] = {
    BinOpKind.ADD: operator.add,
    BinOpKind.SUB: operator.sub,
    BinOpKind.MUL: operator.mul,
    BinOpKind.DIV: _divide,
}

_BINARY_KINDS: dict[OpKind, BinOpKind] = {
    OpKind.ADD: BinOpKind.ADD,
    OpKind.SUB: BinOpKind.SUB,
    OpKind.MUL: BinOpKind.MUL,
    OpKind.DIV: BinOpKind.DIV,
}


class VirtualMachine:
    """Runs the instructions of one chunk against a value stack."""

    def __init__(self, chunk: Chunk, debug_trace: bool = False) -> None:
        if chunk.is_empty():
            raise EmptyChunkError()
        self._chunk = chunk
        self._ip = 0
        self._debug = debug_trace
        self._stack: list[Value] = []

    def exec(self) -> None:
        """Execute instructions until the end of the chunk."""
        if self._debug:
            print("Executing this chunk:")
            print(self._chunk)
            print()

        while (instruction := self._chunk.get(self._ip)) is not None:
            if self._debug:
                print(instruction)
            self._execute(instruction)
            self._ip += 1

    def stack_top(self) -> Optional[Value]:
        """Return the value on top of the stack, or None if it is empty."""
        return self._stack[-1] if self._stack else None

    def _execute(self, instruction: OpCode) -> None:
        if instruction.kind is OpKind.CONST:
            assert instruction.const_idx is not None
            value = self._chunk.get_const(instruction.const_idx)
            if value is None:
                raise IndexError(f"No constant at index {instruction.const_idx}")
            if self._debug:
                print(f"Pushed const: {value}")
            self._stack.append(value)
        elif instruction.kind is OpKind.NEGATE:
            value = self._pop()
            self._stack.append(Value(-value.value))
        else:
            self._binary(_BINARY_KINDS[instruction.kind])

    def _pop(self) -> Value:
        try:
            return self._stack.pop()
        except IndexError:
            raise MissingValueError() from None

    def _binary(self, kind: BinOpKind) -> None:
        b = self._pop()
        a = self._pop()
        for operand in (a, b):
            if not operand.is_supported_binop(kind):
                raise OperationNotSupportedError(str(operand), str(kind))
        self._stack.append(Value(_CALCULATIONS[kind](a.value, b.value)))