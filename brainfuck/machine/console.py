"""
Raw console input for the ',' operation.

Reads exactly one character without waiting for a newline. The terminal is
switched to raw mode for the duration of a single read and restored
afterwards, so no terminal state is held between reads.
"""

import sys

try:
    # Unix-like systems
    import tty
    import termios
    PLATFORM = "unix"
except ImportError:
    try:
        # Windows
        import msvcrt
        PLATFORM = "windows"
    except ImportError:
        # No raw console available; terminals are read like any other stream
        PLATFORM = "unsupported"


CTRL_C = '\x03'


def read_char(stream=None) -> str:
    """
    Read one character from the console.

    Args:
        stream: Text stream to read from (defaults to sys.stdin)

    Returns:
        The character read

    Raises:
        EOFError: input is exhausted
        InterruptedError: Ctrl-C was pressed during a raw read
        OSError: the device could not be read
        UnicodeDecodeError: the input is not valid in the stream's encoding
    """
    stream = stream if stream is not None else sys.stdin

    if not stream.isatty() or PLATFORM == "unsupported":
        ch = stream.read(1)
    else:
        if PLATFORM == "unix":
            ch = _read_raw_unix(stream)
        else:
            ch = msvcrt.getwch()
        # Raw mode delivers Ctrl-C as a character instead of a signal.
        if ch == CTRL_C:
            raise InterruptedError("read interrupted by Ctrl-C")

    if not ch:
        raise EOFError("reached end of input")
    return ch


def _read_raw_unix(stream) -> str:
    fd = stream.fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        # TCSADRAIN keeps type-ahead that arrived before the read.
        tty.setraw(fd, termios.TCSADRAIN)
        return stream.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
