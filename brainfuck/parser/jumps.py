"""
Jump validation for brainfuck operation lists.

Each '[' must have exactly one matching ']' and vice versa. Matching is done
with a stack of pending '[' positions in a single left-to-right pass.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from ..errors import MismatchedJumpError, UnclosedJumpError
from ..lexer import Op


@dataclass(frozen=True)
class JumpPosition:
    """Start and end positions of a matching '[' and ']' pair."""
    start: int
    end: int


class JumpTable:
    """Matched jump pairs with direct lookup in both directions."""

    def __init__(self, positions: Optional[List[JumpPosition]] = None):
        self.positions: List[JumpPosition] = []
        self.forward: Dict[int, int] = {}   # start -> end
        self.backward: Dict[int, int] = {}  # end -> start
        for position in positions or []:
            self.add(position)

    def add(self, position: JumpPosition):
        self.positions.append(position)
        self.forward[position.start] = position.end
        self.backward[position.end] = position.start

    def clear(self):
        self.positions.clear()
        self.forward.clear()
        self.backward.clear()

    def end_for(self, start: int) -> Optional[int]:
        """Position of the ']' matching the '[' at start."""
        return self.forward.get(start)

    def start_for(self, end: int) -> Optional[int]:
        """Position of the '[' matching the ']' at end."""
        return self.backward.get(end)

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[JumpPosition]:
        return iter(self.positions)

    def __repr__(self):
        return f"JumpTable({self.positions!r})"


def validate_jumps(ops: List[Op]) -> JumpTable:
    """
    Match every jump in ops.

    Args:
        ops: Operation list produced by the lexer

    Returns:
        JumpTable with one JumpPosition per '[' / ']' pair

    Raises:
        MismatchedJumpError: a ']' has no pending '['
        UnclosedJumpError: a '[' is never closed
    """
    table = JumpTable()
    stack: List[int] = []

    for index, op in enumerate(ops):
        if op is Op.JUMP_FORWARD:
            stack.append(index)
        elif op is Op.JUMP_BACKWARD:
            if not stack:
                raise MismatchedJumpError(index)
            table.add(JumpPosition(stack.pop(), index))

    if stack:
        raise UnclosedJumpError(len(stack), stack[0])

    return table
