#!/usr/bin/env python3
"""
🐄 tewisay - Escape Sequence Helpers
====================================

Bubble rows are framed by border glyphs. When a line of input leaves a
color open, the next row reopens it so multi-line colored text keeps its
color across the frame. open_escape() finds the sequence to reopen.
"""

import logging

from tewi_config import ESCAPE_INTRODUCER, ESCAPE_TERMINATOR

logger = logging.getLogger('tewi_ansi')


def open_escape(line: str) -> str:
    """
    Return the last escape sequence on a line.

    The sequence runs from the last ESC through the first 'm' after it, or
    to the end of the line when no 'm' follows. A sequence that was closed
    later on the same line is still returned; only one trailing style run
    per line is tracked.

    Examples:
        >>> open_escape("\\x1b[31mred")
        '\\x1b[31m'
        >>> open_escape("plain")
        ''
        >>> open_escape("cut \\x1b[3")
        '\\x1b[3'
    """
    start = line.rfind(ESCAPE_INTRODUCER)
    if start == -1:
        return ''

    end = line.find(ESCAPE_TERMINATOR, start)
    if end == -1:
        return line[start:]
    return line[start:end + 1]
