"""
Brainfuck executor.

Runs a validated operation list against a tape. The instruction pointer starts
at 0 on every run; the tape and its data pointer are owned by the caller and
keep their state between runs.
"""

import sys
from typing import Callable, List, Optional, TextIO

from ..errors import JumpResolutionError, abort
from ..lexer import Op
from ..parser import JumpTable
from .console import read_char as console_read_char
from .tape import Tape


class Executor:
    """Fetch-decode-execute loop over an operation list."""

    def __init__(self, tape: Tape, output: Optional[TextIO] = None,
                 read_char: Optional[Callable[[], str]] = None):
        self.tape = tape
        self.output = output
        self.read_char = read_char or console_read_char
        self.inst_pointer = 0
        self.steps = 0

    def run(self, ops: List[Op], jumps: JumpTable):
        """
        Execute ops from the first operation until the list is exhausted.

        Raises:
            JumpResolutionError: a jump has no entry in the jump table
        """
        tape = self.tape
        self.inst_pointer = 0
        self.steps = 0

        # Jumps move the instruction pointer themselves, everything else
        # advances it by one.
        while self.inst_pointer < len(ops):
            op = ops[self.inst_pointer]
            self.steps += 1

            if op is Op.INCREMENT_DP:
                tape.move_right()
            elif op is Op.DECREMENT_DP:
                tape.move_left()
            elif op is Op.INCREMENT_VALUE:
                tape.increment()
            elif op is Op.DECREMENT_VALUE:
                tape.decrement()
            elif op is Op.OUTPUT:
                self.output_value()
            elif op is Op.INPUT:
                self.input_value()
            elif op is Op.JUMP_FORWARD:
                self.jump_forward(jumps)
                continue
            elif op is Op.JUMP_BACKWARD:
                self.jump_backward(jumps)
                continue

            self.inst_pointer += 1

    def output_value(self):
        out = self.output if self.output is not None else sys.stdout
        print(self.tape.value, file=out)

    def input_value(self):
        try:
            ch = self.read_char()
        except (OSError, EOFError, UnicodeDecodeError) as e:
            abort(f"Invalid character input: {e}")
        self.tape.value = ord(ch)

    def jump_forward(self, jumps: JumpTable):
        # On a zero cell, skip to just past the matching ']'.
        if self.tape.value == 0:
            end = jumps.end_for(self.inst_pointer)
            if end is None:
                raise JumpResolutionError(self.inst_pointer)
            self.inst_pointer = end + 1
        else:
            self.inst_pointer += 1

    def jump_backward(self, jumps: JumpTable):
        # On a non-zero cell, go back to just past the matching '['.
        if self.tape.value != 0:
            start = jumps.start_for(self.inst_pointer)
            if start is None:
                raise JumpResolutionError(self.inst_pointer)
            self.inst_pointer = start + 1
        else:
            self.inst_pointer += 1
