"""Build a tree of instructions from a flat token list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from bfcompile.lexer import Token, TokenType


@dataclass(frozen=True)
class Instruction:
    """One node of the program tree.

    Loops (``LOOP_START``) and saved loops (``SAVE_LOOP_TRIGGER``) carry the
    instructions between their brackets in ``body``; other commands have an
    empty body.
    """

    type: TokenType
    body: tuple[Instruction, ...] = ()


class ParseError(ValueError):
    """Raised for unbalanced brackets or a ``*`` not followed by ``[``."""

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"Syntax Error: {message} at line {line}, column {column}")
        self.line = line
        self.column = column


_BLOCK_KINDS = (TokenType.LOOP_START, TokenType.SAVE_LOOP_TRIGGER)


class Parser:
    """Turns tokens into a list of :class:`Instruction` trees.

    Parsing stops at the first ``END_OF_FILE`` token or at the end of the
    token list, whichever comes first.
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = list(tokens)

    def _end_position(self, index: int) -> tuple[int, int]:
        if index < len(self.tokens):
            token = self.tokens[index]
        elif self.tokens:
            token = self.tokens[-1]
        else:
            return 1, 1
        return token.line, token.column

    def _at_end(self, index: int) -> bool:
        return index >= len(self.tokens) or self.tokens[index].type is TokenType.END_OF_FILE

    def parse(self) -> list[Instruction]:
        """Return the top-level instructions of the program."""
        program: list[Instruction] = []
        # Each open block: its kind and the instructions gathered so far.
        open_blocks: list[tuple[TokenType, list[Instruction]]] = []
        index = 0

        while not self._at_end(index):
            token = self.tokens[index]
            index += 1
            current = open_blocks[-1][1] if open_blocks else program

            if token.type is TokenType.SAVE_LOOP_TRIGGER:
                if self._at_end(index) or self.tokens[index].type is not TokenType.LOOP_START:
                    where = " inside loop" if open_blocks else ""
                    raise ParseError(
                        f"Expected '[' after '*'{where}", token.line, token.column
                    )
                index += 1
                open_blocks.append((TokenType.SAVE_LOOP_TRIGGER, []))
            elif token.type is TokenType.LOOP_START:
                open_blocks.append((TokenType.LOOP_START, []))
            elif token.type is TokenType.LOOP_END:
                if not open_blocks:
                    raise ParseError("Unmatched ']'", token.line, token.column)
                kind, body = open_blocks.pop()
                parent = open_blocks[-1][1] if open_blocks else program
                parent.append(Instruction(kind, tuple(body)))
            else:
                current.append(Instruction(token.type))

        if open_blocks:
            line, column = self._end_position(index)
            raise ParseError("Unmatched '['", line, column)

        return program


def parse(tokens: Sequence[Token]) -> list[Instruction]:
    """Parse ``tokens`` into a list of instructions."""
    return Parser(tokens).parse()