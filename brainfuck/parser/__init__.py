"""Brainfuck Parser - Validates jumps and builds the jump table."""

from .jumps import JumpPosition, JumpTable, validate_jumps

__all__ = ['JumpPosition', 'JumpTable', 'validate_jumps']
