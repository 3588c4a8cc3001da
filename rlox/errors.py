"""Exceptions raised while compiling and running programs."""

from __future__ import annotations


class LoxError(Exception):
    """Base class of every error the interpreter raises."""


class LoxRuntimeError(LoxError):
    """An error raised while a chunk is executed."""


class MissingValueError(LoxRuntimeError):
    """The value stack held fewer values than an instruction needed."""

    def __init__(self) -> None:
        super().__init__("Missing value error")


class OperationNotSupportedError(LoxRuntimeError):
    """An operator was applied to a value that does not support it."""

    def __init__(self, value_type: str, operation_type: str) -> None:
        self.value_type = value_type
        self.operation_type = operation_type
        super().__init__(
            f"Operation {operation_type} is not supported "
            f"for value of type {value_type}"
        )


class EmptyChunkError(LoxError):
    """A chunk with no instructions was handed to the virtual machine."""

    def __init__(self) -> None:
        super().__init__("Empty chunk error")


class ParsingError(LoxError):
    """The source could not be compiled."""

    def __init__(self) -> None:
        super().__init__("Error while parsing")