"""
Brainfuck interpreter - runs brainfuck programs on a fixed-size signed byte tape.

This package provides the lexer, jump validator, tape machine and session
driver used by both the interactive REPL and whole-file execution.
"""

__version__ = "0.1.0"
__author__ = "Brainfuck Interpreter Project"
