#!/usr/bin/env python3
"""
Brainfuck interpreter entry point.

Usage: python brainfuck.py [file.bf [-v/--verbose]] [--cells N]
"""

from brainfuck.interpreter import main

if __name__ == '__main__':
    main()
