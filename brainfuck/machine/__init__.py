"""Brainfuck machine - tape, console I/O and the executor."""

from .tape import Tape, DATA_SIZE, to_signed_byte
from .console import read_char
from .executor import Executor

__all__ = [
    'Tape', 'DATA_SIZE', 'to_signed_byte',
    'read_char',
    'Executor',
]
