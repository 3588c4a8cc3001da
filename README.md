# rlox

rlox is a small Lox-flavoured language that runs on a bytecode virtual machine. It reads
source text and splits it into tokens. It compiles one expression into a chunk of opcodes and
then runs that chunk on a stack-based virtual machine.

The language covers arithmetic expressions:

- number literals such as `3` and `2.5`
- unary minus: `-x`
- the binary operators `+`, `-`, `*` and `/`, with the usual precedence
- parentheses for grouping
- `//` line comments

All numbers are floats. Division by zero gives `inf`, `-inf` or `NaN`. It does not raise an
error.

## Installation

```
pip install .
```

## Command line

To run a source file:

```
rlox program.lox
```

With no file name, `rlox` starts an interactive prompt. It evaluates each line you type and stops
at the end of input:

```
rlox
```

`rlox --version` prints the version.

Debug output is always on. For each expression the tool prints:

- the parser trace
- the emitted opcodes
- the chunk listing
- the result, for example `Result: <value 7 of type float>`

If a file cannot be read, or compiling or running fails, the command prints the error and exits
with status 1. At the prompt the first error also ends the session.

## Library use

`interpret` compiles and runs source text. It returns the `Value` left on top of the stack:

```python
from rlox.interpret import interpret

result = interpret("1 + 2 * 3")
print(result)        # <value 7 of type float>
print(result.value)  # 7.0
```

You can also run each stage yourself:

```python
from rlox.chunk import Chunk
from rlox.compiler import Compiler
from rlox.vm import VirtualMachine

chunk = Chunk()
Compiler("(1 + 2) * -3", debug_mode=False).compile(chunk)
print(chunk)

vm = VirtualMachine(chunk, debug_trace=False)
vm.exec()
print(vm.stack_top())   # <value -9 of type float>
```

Even with `debug_mode=False`, the compiler prints a "Skipping infix rule loop" line each time it
leaves an operator loop early.

`rlox.scanner.Scanner` can be used alone. Each call to `scan_token()` returns the next `Token`.
At the end of input it returns an EOF token every time.

## Errors

Errors are raised as exceptions from `rlox.errors`:

- `ParsingError`: the source could not be compiled. The compiler first prints a message such as
  `[line 1] Error at end: Expected expression`.
- `EmptyChunkError`: a `VirtualMachine` was given a chunk with no code.
- `MissingValueError`: an instruction needed a value, but the stack was empty.
- `OperationNotSupportedError`: an operator was used on a value that does not support it.

All of them derive from `LoxError`. The runtime errors also derive from `LoxRuntimeError`.

## What it does not do

The scanner recognises the language's other tokens. These include strings, identifiers,
comparison operators and keywords such as `let`, `fn`, `if`, `while`, `print` and `null`. The
compiler does not accept any of them yet.

There are no statements, variables, functions or printing, and a program is a single
expression.

## Development

```
pip install -e ".[test]"
pytest
```