"""
Main brainfuck interpreter.

Coordinates lexing, jump validation and execution. One Interpreter owns one
tape for its whole lifetime: every compile() call replaces the operation list
and jump table but keeps the tape and data pointer, so a REPL session behaves
like a single program typed in pieces.
"""

import sys
import time
from typing import Callable, List, Optional, TextIO

from .errors import BrainfuckError, JumpResolutionError
from .lexer import Lexer, Op, format_ops
from .machine import DATA_SIZE, Executor, Tape
from .parser import JumpTable, validate_jumps


SOURCE_SUFFIX = ".bf"


def format_elapsed(seconds: float) -> str:
    """Format a duration the way a human reads it (s, ms or µs)."""
    if seconds >= 1:
        return f"{seconds:.3f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds * 1e6:.3f}µs"


class Interpreter:
    """Main brainfuck interpreter class."""

    def __init__(self, data_size: int = DATA_SIZE, verbose: bool = False,
                 output: Optional[TextIO] = None,
                 read_char: Optional[Callable[[], str]] = None):
        self.verbose = verbose
        self.tape = Tape(data_size)
        self.ops: List[Op] = []
        self.jumps = JumpTable()
        self.executor = Executor(self.tape, output=output, read_char=read_char)

    @property
    def data_pointer(self) -> int:
        return self.tape.pointer

    def log(self, message: str):
        """Print log message if verbose mode is enabled."""
        if self.verbose:
            print(f"[brainfuck] {message}", file=sys.stderr)

    def compile(self, code: str, filename: str = "<input>") -> bool:
        """
        Compile and run brainfuck code.

        Args:
            code: Program text; non-command characters are ignored
            filename: Name used in error locations

        Returns:
            True if the program validated and ran to completion, False if an
            error was reported
        """
        start = time.perf_counter()

        # Only the program is replaced; the tape carries over between calls.
        self.ops.clear()
        self.jumps.clear()

        self.log("Lexing...")
        lexer = Lexer(code, filename)
        self.ops = lexer.tokenize()
        self.log(f"  {len(self.ops)} ops")

        self.log("Validating jumps...")
        try:
            self.jumps = validate_jumps(self.ops)
        except BrainfuckError as e:
            self.report(e, lexer)
            print("Execution stopped due to mismatched jump instructions.", file=sys.stderr)
            return False
        self.log(f"  {len(self.jumps)} jump pairs")

        if self.verbose:
            print(f"Compilation succeeded in {format_elapsed(time.perf_counter() - start)}")

        self.log(f"Running {format_ops(self.ops)[:60]}")
        try:
            self.executor.run(self.ops, self.jumps)
        except JumpResolutionError as e:
            self.report(e, lexer)
            print("Error occurred during execution.", file=sys.stderr)
            return False

        self.log(f"  {self.executor.steps} steps, data pointer at {self.data_pointer}")
        return True

    def compile_file(self, input_path: str) -> bool:
        """
        Read a brainfuck source file and run it.

        Returns:
            False if the file could not be read, True otherwise. Errors in the
            program itself are reported but do not fail the file run.
        """
        try:
            self.log(f"Reading {input_path}...")
            with open(input_path, 'r', encoding='utf-8') as f:
                source = f.read()
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error reading file: {e}", file=sys.stderr)
            return False

        self.compile(source, str(input_path))
        return True

    def report(self, error: BrainfuckError, lexer: Lexer):
        """Print an error with the source location of its operation."""
        if error.index is not None and error.index < len(lexer.locations):
            line, column = lexer.location(error.index)
            print(f"{lexer.filename}:{line}:{column}: {error}", file=sys.stderr)
        else:
            print(error, file=sys.stderr)


def main(argv: Optional[List[str]] = None):
    """Command-line interface for the interpreter."""
    import argparse

    parser = argparse.ArgumentParser(
        prog='brainfuck',
        description='Brainfuck interpreter - run a .bf file, or start a REPL with no file'
    )
    parser.add_argument('file', nargs='?', help=f'Brainfuck source file ({SOURCE_SUFFIX})')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Report compilation time and interpreter stages')
    parser.add_argument('--cells', type=_cell_count, default=DATA_SIZE,
                        metavar='N',
                        help=f'Number of tape cells (default: {DATA_SIZE})')

    args = parser.parse_args(argv)

    if args.file is None:
        from .repl import REPL
        REPL(Interpreter(data_size=args.cells, verbose=args.verbose)).run()
        return

    if not args.file.endswith(SOURCE_SUFFIX):
        print(f"Error: file {args.file} was not a `{SOURCE_SUFFIX}` file.", file=sys.stderr)
        sys.exit(1)

    interpreter = Interpreter(data_size=args.cells, verbose=args.verbose)
    success = interpreter.compile_file(args.file)

    sys.exit(0 if success else 1)


def _cell_count(value: str) -> int:
    import argparse

    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid cell count: {value!r}")
    if count < 1:
        raise argparse.ArgumentTypeError(f"cell count must be at least 1, got {count}")
    return count


if __name__ == '__main__':
    main()
