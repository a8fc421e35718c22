"""
Brainfuck REPL
Interactive Read-Eval-Print Loop
"""

import sys
from typing import Optional, TextIO

from .interpreter import Interpreter


class REPL:
    def __init__(self, interpreter: Optional[Interpreter] = None,
                 stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.interpreter = interpreter or Interpreter()
        self.stdin = stdin
        self.stdout = stdout
        self.prompt = "> "

    def run(self):
        """Start the REPL. Never returns; the session ends with SystemExit."""
        stdin = self.stdin if self.stdin is not None else sys.stdin
        stdout = self.stdout if self.stdout is not None else sys.stdout

        print("Welcome to brainfuck!", file=stdout)

        while True:
            try:
                stdout.write(self.prompt)
                stdout.flush()

                try:
                    line = stdin.readline()
                except OSError as e:
                    print(f"Error: {e}", file=stdout)
                    continue

                # End of input
                if not line:
                    print(file=stdout)
                    sys.exit(0)

                if line.strip() == "exit":
                    sys.exit(0)

                self.interpreter.compile(line)

            except KeyboardInterrupt:
                print("\nKeyboardInterrupt", file=stdout)
