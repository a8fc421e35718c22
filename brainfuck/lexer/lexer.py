"""
Brainfuck Lexer - Filters source code into a list of operations.

Only eight characters are meaningful:
- > <  move the data pointer
- + -  change the value of the current cell
- . ,  output / input the current cell
- [ ]  loop on the current cell

Every other character is a comment and is dropped.
"""

from enum import Enum, auto
from typing import List, Tuple


class Op(Enum):
    """Brainfuck operations."""
    INCREMENT_DP = auto()        # >
    DECREMENT_DP = auto()        # <
    INCREMENT_VALUE = auto()     # +
    DECREMENT_VALUE = auto()     # -
    OUTPUT = auto()              # .
    INPUT = auto()               # ,
    JUMP_FORWARD = auto()        # [
    JUMP_BACKWARD = auto()       # ]

    @property
    def symbol(self) -> str:
        """Source character for this operation."""
        return _OP_SYMBOLS[self]

    def __repr__(self):
        return f"Op.{self.name}"


SYMBOLS = {
    '>': Op.INCREMENT_DP,
    '<': Op.DECREMENT_DP,
    '+': Op.INCREMENT_VALUE,
    '-': Op.DECREMENT_VALUE,
    '.': Op.OUTPUT,
    ',': Op.INPUT,
    '[': Op.JUMP_FORWARD,
    ']': Op.JUMP_BACKWARD,
}

_OP_SYMBOLS = {op: ch for ch, op in SYMBOLS.items()}


def format_ops(ops: List[Op]) -> str:
    """Render an operation list back to canonical source text."""
    return ''.join(op.symbol for op in ops)


class Lexer:
    """Tokenizes brainfuck source code."""

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.ops: List[Op] = []
        self.locations: List[Tuple[int, int]] = []  # (line, column) of each op

    def advance(self) -> str:
        """Consume and return current character."""
        ch = self.source[self.pos]
        self.pos += 1

        if ch == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return ch

    def tokenize(self) -> List[Op]:
        """Filter the source into a list of operations."""
        while self.pos < len(self.source):
            line, column = self.line, self.column
            op = SYMBOLS.get(self.advance())
            if op is None:
                continue
            self.ops.append(op)
            self.locations.append((line, column))

        return self.ops

    def location(self, index: int) -> Tuple[int, int]:
        """Source (line, column) of the operation at index."""
        return self.locations[index]
