#!/usr/bin/env python3
"""
🐄 tewisay - Image Snapshot
===========================

Terminal Snapshot Rendering
===========================
Draws the finished bubble and figure onto an image, the way they would
appear in a terminal, so the output can be shared as a PNG or GIF.

Technical Implementation
========================
- Text is laid out on a character grid; wide glyphs take two cells
- SGR sequences set colors: reset, bold, reverse, 30-37/90-97 foregrounds,
  40-47/100-107 backgrounds, 24-bit 38;2;r;g;b and 48;2;r;g;b
- Cell backgrounds are filled into a numpy RGB buffer, glyphs are drawn
  on top with Pillow
- Fonts are tried from ImageConfig.font_candidates, then Pillow's default

Example Usage
=============
```python
from tewi_image import render_image

img = render_image(bubble + figure)
img.save("tewi.png")
```
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFont
from wcwidth import wcwidth

from tewi_errors import SnapshotError
from tewi_config import (
    ImageConfig, RGBColor, get_image_config,
    ESCAPE_INTRODUCER, ESCAPE_TERMINATOR,
)

logger = logging.getLogger('tewi_image')

# xterm default palette for the 16 basic colors
ANSI_COLORS = {
    0: (0, 0, 0),
    1: (205, 0, 0),
    2: (0, 205, 0),
    3: (205, 205, 0),
    4: (0, 0, 238),
    5: (205, 0, 205),
    6: (0, 205, 205),
    7: (229, 229, 229),
    8: (127, 127, 127),
    9: (255, 0, 0),
    10: (0, 255, 0),
    11: (255, 255, 0),
    12: (92, 92, 255),
    13: (255, 0, 255),
    14: (0, 255, 255),
    15: (255, 255, 255),
}


@dataclass
class Cell:
    """A single character cell with color information."""

    char: str
    fg: RGBColor
    bg: RGBColor
    bold: bool = False
    # Trailing half of a wide glyph; nothing is drawn for it
    continuation: bool = False


@dataclass
class _Style:
    fg: RGBColor
    bg: RGBColor
    bold: bool = False
    reverse: bool = False

    def colors(self) -> Tuple[RGBColor, RGBColor]:
        if self.reverse:
            return self.bg, self.fg
        return self.fg, self.bg


def _parse_params(body: str) -> List[int]:
    """Numeric SGR parameters; empty or malformed fields read as 0."""
    return [int(p) if p.isdigit() else 0 for p in body.split(';')]


def _clamp_rgb(values: List[int]) -> RGBColor:
    r, g, b = (min(255, v) for v in values)
    return (r, g, b)


class SnapshotRenderer:
    """
    Renders terminal text with SGR colors to a PIL image.
    """

    def __init__(self, config: Optional[ImageConfig] = None):
        self.config = config or get_image_config()
        self.font = self._load_font()

    def _load_font(self) -> ImageFont.ImageFont:
        """Load the first available monospace font"""
        for candidate in self.config.font_candidates:
            try:
                font = ImageFont.truetype(candidate, self.config.font_size)
            except OSError:
                logger.debug(f"Font not available: {candidate}")
                continue
            logger.info(f"Loaded font {candidate}")
            return font

        logger.warning("No monospace font found - using Pillow default")
        return ImageFont.load_default()

    def _apply_sgr(self, style: _Style, params: List[int]):
        """Update style in place from one SGR parameter list"""
        default_fg = self.config.foreground
        default_bg = self.config.background

        i = 0
        while i < len(params):
            code = params[i]
            if code == 0:
                style.fg, style.bg = default_fg, default_bg
                style.bold = style.reverse = False
            elif code == 1:
                style.bold = True
            elif code == 22:
                style.bold = False
            elif code == 7:
                style.reverse = True
            elif code == 27:
                style.reverse = False
            elif 30 <= code <= 37:
                style.fg = ANSI_COLORS[code - 30]
            elif 90 <= code <= 97:
                style.fg = ANSI_COLORS[code - 90 + 8]
            elif code == 39:
                style.fg = default_fg
            elif 40 <= code <= 47:
                style.bg = ANSI_COLORS[code - 40]
            elif 100 <= code <= 107:
                style.bg = ANSI_COLORS[code - 100 + 8]
            elif code == 49:
                style.bg = default_bg
            elif code in (38, 48) and i + 1 < len(params):
                mode = params[i + 1]
                if mode == 2 and i + 4 < len(params):
                    color = _clamp_rgb(params[i + 2:i + 5])
                    if code == 38:
                        style.fg = color
                    else:
                        style.bg = color
                    i += 5
                    continue
                if mode == 5:
                    # 256-color palette entries are not mapped
                    i += 3
                    continue
            i += 1

    def layout(self, text: str) -> List[List[Cell]]:
        """
        Lay text out on a character grid.

        Args:
            text: Terminal text, lines separated by newlines

        Returns:
            One list of cells per line
        """
        style = _Style(self.config.foreground, self.config.background)
        rows: List[List[Cell]] = []

        for line in text.split('\n'):
            row: List[Cell] = []
            i = 0
            while i < len(line):
                char = line[i]
                if char == ESCAPE_INTRODUCER:
                    end = line.find(ESCAPE_TERMINATOR, i)
                    if end == -1:
                        break
                    body = line[i + 1:end]
                    if body.startswith('['):
                        self._apply_sgr(style, _parse_params(body[1:]))
                    i = end + 1
                    continue

                width = wcwidth(char)
                if width > 0:
                    fg, bg = style.colors()
                    row.append(Cell(char, fg, bg, style.bold))
                    if width == 2:
                        row.append(Cell('', fg, bg, style.bold, continuation=True))
                i += 1

            rows.append(row)

        return rows

    def render(self, text: str) -> Image.Image:
        """
        Render terminal text to an RGB image.

        Args:
            text: Terminal text with optional SGR sequences

        Returns:
            PIL image sized to the text plus padding
        """
        rows = self.layout(text)
        cw = self.config.char_width
        ch = self.config.char_height
        pad = self.config.padding

        columns = max((len(row) for row in rows), default=0) or 1
        width = columns * cw + 2 * pad
        height = max(len(rows), 1) * ch + 2 * pad

        buffer = np.full((height, width, 3), self.config.background, dtype=np.uint8)
        for y, row in enumerate(rows):
            for x, cell in enumerate(row):
                if cell.bg != self.config.background:
                    top = pad + y * ch
                    left = pad + x * cw
                    buffer[top:top + ch, left:left + cw] = cell.bg

        img = Image.fromarray(buffer)
        draw = ImageDraw.Draw(img)
        for y, row in enumerate(rows):
            for x, cell in enumerate(row):
                if cell.continuation or cell.char == ' ':
                    continue
                position = (pad + x * cw, pad + y * ch)
                if cell.bold:
                    draw.text(position, cell.char, font=self.font, fill=cell.fg,
                              stroke_width=1, stroke_fill=cell.fg)
                else:
                    draw.text(position, cell.char, font=self.font, fill=cell.fg)

        logger.debug(f"Rendered snapshot {width}x{height} ({columns} columns, "
                     f"{len(rows)} rows)")
        return img


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

def render_image(text: str, config: Optional[ImageConfig] = None) -> Image.Image:
    """Render terminal text to an image with a fresh renderer"""
    return SnapshotRenderer(config).render(text)


def save_image(text: str, path: str, config: Optional[ImageConfig] = None):
    """
    Render terminal text and save it; the format follows the extension.

    Raises:
        OSError: if the file cannot be written
        SnapshotError: if Pillow has no writer for the extension
    """
    img = render_image(text, config)
    try:
        img.save(path)
    except ValueError as e:
        raise SnapshotError(f"cannot save snapshot {path}: {e}") from e
    logger.info(f"Saved snapshot to {path}")
