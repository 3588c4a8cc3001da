"""Bytecode instructions and the chunks that hold them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from rlox.value import Value


class OpKind(Enum):
    """The instruction set; each value is the instruction's display name."""

    CONST = "OP_CONST"
    NEGATE = "OP_NEGATE"
    ADD = "OP_ADD"
    SUB = "OP_SUB"
    MUL = "OP_MUL"
    DIV = "OP_DIV"


@dataclass(frozen=True)
class OpCode:
    """One instruction with the source line it came from.

    Only CONST instructions carry a constant index.
    """

    kind: OpKind
    line: int
    const_idx: int | None = None

    def __post_init__(self) -> None:
        if self.kind is OpKind.CONST:
            if self.const_idx is None:
                raise ValueError("OP_CONST needs a constant index")
        elif self.const_idx is not None:
            raise ValueError(f"{self.kind.value} takes no constant index")

    def __str__(self) -> str:
        args = "" if self.const_idx is None else str(self.const_idx)
        return f"{self.kind.value:<12} {args:<6} L{self.line}"


@dataclass
class Chunk:
    """A sequence of instructions and the constants they refer to."""

    code: list[OpCode] = field(default_factory=list)
    constants: list[Value] = field(default_factory=list)

    def push(self, op_code: OpCode) -> None:
        self.code.append(op_code)

    def push_const(self, value: Value) -> int:
        """Store a constant and return its index."""
        self.constants.append(value)
        return len(self.constants) - 1

    def is_empty(self) -> bool:
        return not self.code

    def get(self, index: int) -> OpCode | None:
        """Return the instruction at index, or None past the end."""
        if 0 <= index < len(self.code):
            return self.code[index]
        return None

    def get_const(self, index: int) -> Value | None:
        """Return the constant at index, or None if there is none."""
        if 0 <= index < len(self.constants):
            return self.constants[index]
        return None

    def __len__(self) -> int:
        return len(self.code)

    def __str__(self) -> str:
        return "\n".join(
            f"{offset}   {op_code}" for offset, op_code in enumerate(self.code)
        )