#!/usr/bin/env python3
"""
🐄 tewisay - Border Styles
==========================

Border Style Catalog
====================
Each style is a 3x3 frame of glyphs plus the "line" glyph that the figure
uses to point back at the bubble:

    top_left     top     top_right
    left         middle  right
    bottom_left  bottom  bottom_right

The catalog is built once at import and exposed read-only.

Available Styles
================
- say:        plain ASCII speech bubble
- classicish: cowsay-like angle brackets
- think:      parenthesised thought bubble with an 'o' trail
- unicode:    box drawing (default)
- thick:      heavy box drawing
- rounded:    box drawing with rounded corners
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping

from tewi_errors import UnknownStyleError

logger = logging.getLogger('tewi_borders')


@dataclass(frozen=True)
class BorderStyle:
    """Ten glyphs of a bubble border."""

    top_left: str
    top: str
    top_right: str

    left: str
    middle: str
    right: str

    bottom_left: str
    bottom: str
    bottom_right: str

    line: str


BORDER_STYLES: Mapping[str, BorderStyle] = MappingProxyType({
    'say': BorderStyle(
        ' ', '_', ' ',
        '|', ' ', '|',
        ' ', '─', ' ',
        '\\',
    ),
    'classicish': BorderStyle(
        ' ', '_', ' ',
        '<', ' ', '>',
        ' ', '-', ' ',
        '\\',
    ),
    'think': BorderStyle(
        ' ', '_', ' ',
        '(', ' ', ')',
        ' ', '─', ' ',
        'o',
    ),
    'unicode': BorderStyle(
        '┌', '─', '┐',
        '│', ' ', '│',
        '└', '─', '┘',
        '╲',
    ),
    'thick': BorderStyle(
        '┏', '━', '┓',
        '┃', ' ', '┃',
        '┗', '━', '┛',
        '╲',
    ),
    'rounded': BorderStyle(
        '╭', '─', '╮',
        '│', ' ', '│',
        '╰', '─', '╯',
        '╲',
    ),
})


def get_border_style(name: str) -> BorderStyle:
    """
    Look up a border style by name.

    Raises:
        UnknownStyleError: if the catalog has no such style
    """
    try:
        return BORDER_STYLES[name]
    except KeyError:
        logger.debug(f"Border style '{name}' not in {list_border_styles()}")
        raise UnknownStyleError(name) from None


def list_border_styles() -> List[str]:
    """All style names in sorted order."""
    return sorted(BORDER_STYLES)
