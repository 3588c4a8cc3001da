"""A scanner, bytecode compiler and stack-based virtual machine for arithmetic Lox expressions."""

__version__ = "0.0.1"