"""
Brainfuck memory tape.

A fixed number of signed 8-bit cells and a single data pointer. Cell values
wrap around (127 + 1 == -128); the data pointer does not, and moving it off
either end of the tape aborts the process.
"""

from array import array

from ..errors import abort


DATA_SIZE = 30000

CELL_MIN = -128
CELL_MAX = 127


def to_signed_byte(value: int) -> int:
    """Truncate value to 8 bits and reinterpret it as signed."""
    value &= 0xFF
    return value - 0x100 if value > CELL_MAX else value


class Tape:
    """Fixed-size array of signed byte cells with a data pointer."""

    def __init__(self, size: int = DATA_SIZE):
        if size < 1:
            raise ValueError(f"Tape size must be at least 1, got {size}")
        self.size = size
        self.cells = array('b', bytes(size))
        self.pointer = 0

    @property
    def value(self) -> int:
        """Value of the cell under the data pointer."""
        return self.cells[self.pointer]

    @value.setter
    def value(self, value: int):
        self.cells[self.pointer] = to_signed_byte(value)

    def move_right(self):
        if self.pointer == self.size - 1:
            abort(f"Cannot increment data pointer above data size {self.size}.")
        self.pointer += 1

    def move_left(self):
        if self.pointer == 0:
            abort("Cannot decrement data pointer below 0.")
        self.pointer -= 1

    def increment(self):
        value = self.cells[self.pointer]
        self.cells[self.pointer] = CELL_MIN if value == CELL_MAX else value + 1

    def decrement(self):
        value = self.cells[self.pointer]
        self.cells[self.pointer] = CELL_MAX if value == CELL_MIN else value - 1

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, index: int) -> int:
        return self.cells[index]

    def __repr__(self):
        return f"Tape(size={self.size}, pointer={self.pointer}, value={self.value})"
