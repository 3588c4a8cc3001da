"""Runtime values and binary operator kinds."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class BinOpKind(Enum):
    """The arithmetic binary operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    def __str__(self) -> str:
        return self.value


_SUPPORTED_BINOPS: dict[str, frozenset[BinOpKind]] = {
    "float": frozenset(BinOpKind),
}


def _format_float(number: float) -> str:
    """Show a float in plain decimal notation, without a needless '.0'."""
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    text = format(Decimal(repr(number)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass(frozen=True)
class Value:
    """A floating-point runtime value."""

    value: float

    @property
    def type_name(self) -> str:
        return "float"

    def is_supported_binop(self, kind: BinOpKind) -> bool:
        """Tell whether the operator can be applied to this value."""
        return kind in _SUPPORTED_BINOPS.get(self.type_name, frozenset())

    def __str__(self) -> str:
        return f"<value {_format_float(self.value)} of type {self.type_name}>"