"""Compile and run a piece of source text."""

from __future__ import annotations

from typing import Optional

from rlox.chunk import Chunk
from rlox.compiler import Compiler
from rlox.value import Value
from rlox.vm import VirtualMachine


def interpret(source: str, debug: bool = False) -> Optional[Value]:
    """Compile source, execute it and return the value left on the stack.

    Raises ParsingError for bad source and runtime errors from the VM.
    """
    chunk = Chunk()
    compiler = Compiler(source, debug)

    if debug:
        print("Compiling...")
    compiler.compile(chunk)

    vm = VirtualMachine(chunk, debug)
    if debug:
        print()
    vm.exec()

    result = vm.stack_top()
    if debug:
        print(f"Result: {result}")
    return result