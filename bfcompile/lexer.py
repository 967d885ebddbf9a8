"""Turn program text into a flat list of positioned tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Kinds of token the lexer can produce."""

    INCREMENT_POINTER = ">"
    DECREMENT_POINTER = "<"
    INCREMENT_VALUE = "+"
    DECREMENT_VALUE = "-"
    OUTPUT = "."
    INPUT = ","
    LOOP_START = "["
    LOOP_END = "]"
    PRINT_POSITION = "?"
    OUTPUT_AS_NUM = "'"
    INPUT_AS_NUM = '"'
    SAVE_LOOP_TRIGGER = "*"
    RUN_LOOP = "&"
    END_OF_FILE = ""


_V1_COMMANDS = frozenset(
    {
        TokenType.INCREMENT_POINTER,
        TokenType.DECREMENT_POINTER,
        TokenType.INCREMENT_VALUE,
        TokenType.DECREMENT_VALUE,
        TokenType.OUTPUT,
        TokenType.INPUT,
        TokenType.LOOP_START,
        TokenType.LOOP_END,
        TokenType.PRINT_POSITION,
    }
)
_V2_COMMANDS = _V1_COMMANDS | {TokenType.OUTPUT_AS_NUM, TokenType.INPUT_AS_NUM}
_V3_COMMANDS = _V2_COMMANDS | {TokenType.SAVE_LOOP_TRIGGER, TokenType.RUN_LOOP}


class Dialect(Enum):
    """Language revision, deciding which command characters are recognised.

    V1 knows the classic eight commands plus ``?`` (print tape position).
    V2 adds ``'`` (print cell as number) and ``"`` (read number into cell).
    V3 adds ``*`` (save the following loop) and ``&`` (run a saved loop).
    """

    V1 = "v1"
    V2 = "v2"
    V3 = "v3"

    @property
    def commands(self) -> dict[str, TokenType]:
        """Map each command character of this dialect to its token type."""
        kinds = {
            Dialect.V1: _V1_COMMANDS,
            Dialect.V2: _V2_COMMANDS,
            Dialect.V3: _V3_COMMANDS,
        }[self]
        return {kind.value: kind for kind in kinds}


@dataclass(frozen=True)
class Token:
    """A command with the 1-based line and column where it starts."""

    type: TokenType
    line: int
    column: int


class Lexer:
    """Scans source text; every character that is not a command is a comment."""

    def __init__(self, source: str, dialect: Dialect = Dialect.V3) -> None:
        self.source = source
        self.dialect = dialect

    def tokenize(self) -> list[Token]:
        """Return all tokens in order, always ending with an END_OF_FILE token."""
        commands = self.dialect.commands
        tokens: list[Token] = []
        line = 1
        column = 1
        for char in self.source:
            kind = commands.get(char)
            if kind is not None:
                tokens.append(Token(kind, line, column))
            if char == "\n":
                line += 1
                column = 1
            else:
                column += 1
        tokens.append(Token(TokenType.END_OF_FILE, line, column))
        return tokens


def tokenize(source: str, dialect: Dialect = Dialect.V3) -> list[Token]:
    """Tokenize ``source`` under ``dialect``."""
    return Lexer(source, dialect).tokenize()