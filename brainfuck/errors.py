"""
Errors raised while compiling and running brainfuck programs.

Recoverable problems are exceptions derived from BrainfuckError; the session
driver reports them and carries on. Tape overruns and console input failures
are fatal and go through abort(), which ends the process.
"""

import sys
from typing import Optional


EXIT_FATAL = 101


class BrainfuckError(Exception):
    """Base exception for recoverable interpreter errors."""

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.index = index


class MismatchedJumpError(BrainfuckError):
    """A ']' was found with no pending '['."""

    def __init__(self, index: int):
        super().__init__(f"Found mismatched jump instruction at Op {index}.", index)


class UnclosedJumpError(BrainfuckError):
    """One or more '[' were still open at the end of the program."""

    def __init__(self, count: int, index: int):
        super().__init__(f"Found {count} unclosed jump instruction(s), first at Op {index}.", index)
        self.count = count


class JumpResolutionError(BrainfuckError):
    """A jump had no matching position at run time."""

    def __init__(self, index: int):
        super().__init__(
            f"No jump position found for jump at Op index {index}, "
            f"there was a problem during compilation.", index)


def abort(message: str):
    """Terminate the process on an unrecoverable machine fault."""
    sys.stdout.flush()
    print(f"fatal: {message}", file=sys.stderr)
    raise SystemExit(EXIT_FATAL)
