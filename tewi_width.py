#!/usr/bin/env python3
"""
🐄 tewisay - Width Calculation Module
=====================================

Measures how many terminal columns a line of bubble text occupies, so every
row of the bubble can be padded to the same width.

Escape Handling
===============
An ESC character opens an escape sequence and everything up to and including
the next 'm' is treated as non-printing. A sequence that never terminates
swallows the rest of the line. Invalid or control code points count as zero
columns; wide glyphs count two.

Example Usage
=============
```python
from tewi_width import get_width, get_widths

width = get_width("Hello")                     # 5
width = get_width("\\x1b[31mred\\x1b[0m")        # 3
widths = get_widths(["你好", "ok"])            # [4, 2]
```
"""

import logging
from collections import OrderedDict
from typing import Dict, List, Optional

from wcwidth import wcwidth

from tewi_config import get_cache_config, ESCAPE_INTRODUCER, ESCAPE_TERMINATOR

logger = logging.getLogger('tewi_width')

# Printable ASCII is one column, C0 and C1 controls are none
_ASCII_WIDTHS: Dict[int, int] = {
    **{code: 0 for code in range(0, 32)},
    **{code: 1 for code in range(32, 127)},
    **{code: 0 for code in range(0x7F, 0xA0)},
}


class WidthCalculator:
    """
    Text width calculator.

    Whole lines are kept in a small LRU cache, since a bubble measures each
    line once for the frame width and again while padding its row.
    """

    def __init__(self, cache_size: Optional[int] = None):
        if cache_size is None:
            cache_size = get_cache_config().default_size

        self._cache_size = max(1, cache_size)
        self._line_cache: 'OrderedDict[str, int]' = OrderedDict()
        self._codepoint_cache = dict(_ASCII_WIDTHS)

        logger.debug(f"WidthCalculator initialized with cache_size={self._cache_size}")

    def get_width(self, text: str) -> int:
        """
        Get visual width of text in terminal columns.

        Args:
            text: Text to measure, possibly with escape sequences

        Returns:
            Visual width in columns (0 for empty text)
        """
        if not text:
            return 0

        if text in self._line_cache:
            self._line_cache.move_to_end(text)
            return self._line_cache[text]

        width = self._calculate_width(text)

        self._line_cache[text] = width
        if len(self._line_cache) > self._cache_size:
            self._line_cache.popitem(last=False)
        return width

    def get_widths(self, texts: List[str]) -> List[int]:
        """Get widths for multiple strings."""
        return [self.get_width(text) for text in texts]

    def _calculate_width(self, text: str) -> int:
        total_width = 0
        in_escape = False

        for char in text:
            if char == ESCAPE_INTRODUCER:
                in_escape = True
            if in_escape:
                if char == ESCAPE_TERMINATOR:
                    in_escape = False
                continue

            code = ord(char)
            char_width = self._codepoint_cache.get(code)
            if char_width is None:
                # wcwidth reports -1 for control and undefined code points
                char_width = max(0, wcwidth(char))
                self._codepoint_cache[code] = char_width
            total_width += char_width

        return total_width

    def cached_lines(self) -> int:
        """Number of lines currently held in the cache."""
        return len(self._line_cache)

    def clear_cache(self):
        """Clear all cached widths."""
        self._line_cache.clear()


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

_default_calculator = None


def _get_default_calculator() -> WidthCalculator:
    global _default_calculator

    if _default_calculator is None:
        _default_calculator = WidthCalculator()
    return _default_calculator


def get_width(text: str) -> int:
    """
    Get visual width of text using default calculator.

    Example:
        >>> get_width("Hello")
        5
        >>> get_width("你好")
        4
        >>> get_width("\\x1b[1mbold\\x1b[0m")
        4
    """
    return _get_default_calculator().get_width(text)


def get_widths(texts: List[str]) -> List[int]:
    """
    Get widths for multiple strings using default calculator.

    Example:
        >>> get_widths(["Hello", "World"])
        [5, 5]
    """
    return _get_default_calculator().get_widths(texts)


def clear_default_cache():
    """Drop the default calculator so the next call rebuilds it from config."""
    global _default_calculator
    _default_calculator = None
