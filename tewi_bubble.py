#!/usr/bin/env python3
"""
🐄 tewisay - Bubble Renderer
============================

Bubble Layout
=============
A bubble is a top rule, one framed row per input line and a bottom rule:

    ┌───────┐
    │ Hello │
    └───────┘

Rows are padded with the style's middle glyph to the widest line plus one
middle glyph of margin on each side. Rules are tiled with their own glyph
until they cover the same interior width. All widths are display columns
(see tewi_width), so wide glyphs and colored text line up.

Color Continuity
================
If a line leaves an escape sequence open, the next row starts by reopening
it before the left border glyph and ends with a reset after the right border
glyph. The reopened style therefore also colors that row's border.

Module Interface
================
- render_bubble(): Render a complete bubble for a style and lines
- render_row(): Render one framed row and return the next escape carry
- preview_borders(): Sample bubble for every catalog style
"""

import logging
from typing import List, Sequence, Tuple

from tewi_ansi import open_escape
from tewi_config import STYLE_RESET
from tewi_borders import BorderStyle, BORDER_STYLES, list_border_styles
from tewi_width import get_width

logger = logging.getLogger('tewi_bubble')


def _tile(glyph: str, columns: int) -> str:
    """Repeat glyph until it covers at least columns display columns."""
    # A zero-width glyph steps one column so tiling always terminates
    step = get_width(glyph) or 1
    count = 0
    covered = 0
    while covered < columns:
        count += 1
        covered += step
    return glyph * count


def _rule(left: str, fill: str, right: str, columns: int) -> str:
    return left + _tile(fill, columns) + right


def render_row(style: BorderStyle, line: str, max_width: int,
               carry: str = '') -> Tuple[str, str]:
    """
    Render one framed bubble row.

    Args:
        style: Border style to frame with
        line: Text of the row
        max_width: Display width of the widest line in the bubble
        carry: Escape sequence left open by the previous line

    Returns:
        (row text including its line break, carry for the next row)
    """
    fill_width = get_width(style.middle)
    pad_to = max_width - (get_width(line) - fill_width)

    parts = [carry, style.left, style.middle, line, _tile(style.middle, pad_to),
             style.right]
    if carry:
        parts.append(STYLE_RESET)
    parts.append('\n')

    return ''.join(parts), open_escape(line)


def render_bubble(style: BorderStyle, lines: Sequence[str]) -> str:
    """
    Render lines inside a bubble.

    Args:
        style: Border style to frame with
        lines: Lines of text, possibly containing escape sequences

    Returns:
        Bubble text without a trailing line break
    """
    max_width = max((get_width(line) for line in lines), default=0)
    frame_width = max_width + 2 * get_width(style.middle)

    logger.debug(f"Rendering {len(lines)} line(s), max_width={max_width}, "
                 f"frame_width={frame_width}")

    out = [_rule(style.top_left, style.top, style.top_right, frame_width), '\n']

    carry = ''
    for line in lines:
        row, carry = render_row(style, line, max_width, carry)
        out.append(row)

    out.append(_rule(style.bottom_left, style.bottom, style.bottom_right, frame_width))
    return ''.join(out)


def preview_borders() -> List[str]:
    """
    Render a sample of every border style, sorted by name.

    Each sample is the style's name in a bubble followed by a line holding
    the style's pointer glyph, the way a figure would hang below it.
    """
    samples = []
    for name in list_border_styles():
        style = BORDER_STYLES[name]
        samples.append(f"{render_bubble(style, [name])}\n    {style.line}")
    return samples
