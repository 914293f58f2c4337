#!/usr/bin/env python3
"""
🐄 tewisay - Figure Template Engine
===================================

Template Format
===============
A cowfile is a Perl-style heredoc. Only the figure lines are kept:

    # comment lines are dropped
    $the_cow = <<EOC;        <- directive, dropped
            $thoughts   ^__^
             $thoughts  (eyes)\\_______
                (__)\\       )\\/\\
                 tongue ||----w |
                    ||     ||
    EOC                      <- terminator, dropped

Placeholders
============
- $thoughts: pointer glyph of the chosen border style
- eyes:      eyes string (default "oo")
- tongue:    tongue string (default two spaces)
- \\\\:        a single backslash
- \\@:        a bare at-sign

All placeholders are replaced in one pass, so text coming from a
replacement is never substituted again.
"""

import logging
import re
from enum import Enum
from typing import Sequence

logger = logging.getLogger('tewi_cow')


class LineKind(Enum):
    """Classification of a raw template line"""
    CONTENT = "content"
    DIRECTIVE = "directive"
    COMMENT = "comment"


DIRECTIVE_PREFIXES = ('$the_cow', 'EOC')
COMMENT_PREFIX = '#'

_PLACEHOLDER_PATTERN = re.compile(r'\$thoughts|\\\\|\\@|eyes|tongue')


def classify_line(line: str) -> LineKind:
    """Tell figure content apart from template metadata."""
    if line.startswith(DIRECTIVE_PREFIXES):
        return LineKind.DIRECTIVE
    if line.startswith(COMMENT_PREFIX):
        return LineKind.COMMENT
    return LineKind.CONTENT


def substitute_line(line: str, eyes: str, tongue: str, thoughts: str) -> str:
    """Replace every placeholder in a single template line."""
    replacements = {
        '$thoughts': thoughts,
        '\\\\': '\\',
        '\\@': '@',
        'eyes': eyes,
        'tongue': tongue,
    }
    return _PLACEHOLDER_PATTERN.sub(lambda m: replacements[m.group(0)], line)


def fill_cow(template: Sequence[str], eyes: str, tongue: str, thoughts: str) -> str:
    """
    Fill a figure template.

    Args:
        template: Raw template lines
        eyes: Replacement for the eyes placeholder
        tongue: Replacement for the tongue placeholder
        thoughts: Pointer glyph of the border style

    Returns:
        Figure text, every line preceded by a line break
    """
    content = [line for line in template if classify_line(line) is LineKind.CONTENT]
    logger.debug(f"Template has {len(template)} line(s), {len(content)} content")

    return ''.join('\n' + substitute_line(line, eyes, tongue, thoughts)
                   for line in content)
