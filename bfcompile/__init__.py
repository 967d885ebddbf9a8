"""Compile Brainfuck and its extended dialects to C, and build it with gcc."""

__version__ = "0.3.0"
__all__ = ["cli", "generator", "lexer", "parser"]