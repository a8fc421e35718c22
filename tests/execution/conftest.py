"""
Test helpers for end-to-end interpreter tests.

- ProgramRun: runs source on a fresh Interpreter and captures its streams
- AssertProgram: fluent API for checking output, validation and aborts
"""

import pytest
from dataclasses import dataclass
from io import StringIO
from typing import Callable, List, Optional

from brainfuck.errors import EXIT_FATAL
from brainfuck.interpreter import Interpreter


def char_reader(text: str) -> Callable[[], str]:
    """Build a read_char callable that serves text and then hits EOF."""
    chars = iter(text)

    def read_char() -> str:
        try:
            return next(chars)
        except StopIteration:
            raise EOFError("reached end of input")

    return read_char


@dataclass
class ProgramRun:
    """Result of running a program."""
    success: bool
    output: str
    interpreter: Interpreter


class AssertProgram:
    """
    Fluent assertion helper for brainfuck programs.

    Usage:
        AssertProgram("++.").outputs("2\\n")
        AssertProgram(",.").with_input("A").outputs("65\\n")
        AssertProgram("][").does_not_validate()
    """

    def __init__(self, code: str):
        self.code = code
        self.input_text = ""
        self.cells: Optional[int] = None

    def with_input(self, text: str) -> 'AssertProgram':
        self.input_text += text
        return self

    def with_cells(self, cells: int) -> 'AssertProgram':
        self.cells = cells
        return self

    def _make_interpreter(self, output: StringIO) -> Interpreter:
        kwargs = {}
        if self.cells is not None:
            kwargs['data_size'] = self.cells
        return Interpreter(output=output, read_char=char_reader(self.input_text), **kwargs)

    def run(self) -> ProgramRun:
        output = StringIO()
        interpreter = self._make_interpreter(output)
        success = interpreter.compile(self.code)
        return ProgramRun(success, output.getvalue(), interpreter)

    def outputs(self, expected: str) -> ProgramRun:
        """Assert that the program runs cleanly and prints exactly expected."""
        result = self.run()
        assert result.success, f"Program {self.code!r} reported an error"
        assert result.output == expected, \
            f"Expected output {expected!r}, got {result.output!r}"
        return result

    def outputs_values(self, *values: int) -> ProgramRun:
        """Assert the sequence of printed cell values."""
        return self.outputs(''.join(f"{v}\n" for v in values))

    def leaves_cell(self, index: int, expected: int) -> ProgramRun:
        result = self.run()
        assert result.success, f"Program {self.code!r} reported an error"
        actual = result.interpreter.tape[index]
        assert actual == expected, f"Expected cell {index} to be {expected}, got {actual}"
        return result

    def does_not_validate(self) -> ProgramRun:
        """Assert that jump validation fails and nothing runs."""
        result = self.run()
        assert not result.success, f"Expected {self.code!r} to fail validation"
        assert result.output == ""
        assert result.interpreter.tape.pointer == 0
        return result

    def aborts(self) -> str:
        """Assert that the program ends the process; returns the output so far."""
        output = StringIO()
        interpreter = self._make_interpreter(output)
        with pytest.raises(SystemExit) as excinfo:
            interpreter.compile(self.code)
        assert excinfo.value.code == EXIT_FATAL
        return output.getvalue()


def run_session(*lines: str, input_text: str = "") -> List[str]:
    """Compile each line in turn on one interpreter; returns output per line."""
    output = StringIO()
    interpreter = Interpreter(output=output, read_char=char_reader(input_text))
    outputs = []
    for line in lines:
        start = output.tell()
        interpreter.compile(line)
        outputs.append(output.getvalue()[start:])
    return outputs
