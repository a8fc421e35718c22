"""Brainfuck Lexer - Filters source text into operations."""

from .lexer import Lexer, Op, SYMBOLS, format_ops

__all__ = ['Lexer', 'Op', 'SYMBOLS', 'format_ops']
