"""
End-to-end tests for the brainfuck interpreter.

These tests verify that programs:
- Produce the expected output lines
- Read input one character at a time
- Fail validation on unbalanced jumps
- Abort on tape overruns
- Keep tape state between compile calls in one session
"""
