#!/usr/bin/env python3
"""
🐄 tewisay - Command Line
=========================

Usage
=====
    tewisay [option ...] [text]
    tewithink [option ...] [text]

Text comes from the arguments, joined by spaces, or from standard input
when no arguments are given. tewithink is the same program with the think
border as its default.

Examples
========
    tewisay hello
    fortune | tewisay -b rounded -e ^^
    tewithink -f tes "hmm"
    tewisay -b preview
"""

import argparse
import logging
import os
import sys
from typing import List, Optional, Sequence, TextIO

from tewi_borders import BorderStyle, get_border_style, list_border_styles
from tewi_bubble import render_bubble, preview_borders
from tewi_config import RenderConfig, get_config
from tewi_cow import fill_cow
from tewi_cowfile import read_cow, list_cows
from tewi_errors import TewiError
from tewi_image import save_image

logger = logging.getLogger('tewisay')


def build_parser(prog: str, default_border: str) -> argparse.ArgumentParser:
    render = get_config().render
    parser = argparse.ArgumentParser(
        prog=prog,
        usage='%(prog)s [option ...] [text]',
        description='Put text in a bubble and have a figure say or think it.',
    )
    parser.add_argument('-b', '--border', default=default_border,
                        help='which border to use (try list, preview)')
    parser.add_argument('-e', '--eyes', default=render.eyes, help='change eyes')
    parser.add_argument('-t', '--tongue', default=render.tongue, help='change tongue')
    parser.add_argument('-l', '--list', action='store_true', help='list cowfiles')
    parser.add_argument('-f', '--file', default=render.cowfile, help='cowfile')
    parser.add_argument('--image', metavar='PATH',
                        help='also save the output as an image (png, gif, ...)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='debug logging on stderr')
    parser.add_argument('text', nargs='*', help='text to say')
    return parser


def read_lines(text_args: Sequence[str], stdin: TextIO) -> List[str]:
    """Split the input text into bubble lines."""
    if text_args:
        return ' '.join(text_args).split('\n')

    data = stdin.read()
    if data.endswith('\n'):
        data = data[:-1]
    return data.split('\n')


def tewisay(lines: Sequence[str], style: BorderStyle, template: Sequence[str],
            eyes: str, tongue: str) -> str:
    """Render the bubble and the figure for some lines of text."""
    return render_bubble(style, lines) + fill_cow(template, eyes, tongue, style.line)


def _setup_logging(verbose: bool):
    config = get_config()
    level = logging.DEBUG if verbose else getattr(logging, config.log_level.upper(),
                                                   logging.WARNING)
    logging.basicConfig(level=level, stream=sys.stderr,
                        format='%(name)s: %(levelname)s: %(message)s')


def _run(argv: Optional[Sequence[str]], prog: str, stdin: TextIO, stdout: TextIO) -> int:
    render = get_config().render
    default_border = render.think_border if prog == render.think_program \
        else render.default_border

    # Options may sit between words of the text, as in `tewisay hi -e ^^ there`
    args = build_parser(prog, default_border).parse_intermixed_args(argv)
    _setup_logging(args.verbose)

    if args.list:
        print(' '.join(list_cows()), file=stdout)
        return 0

    if args.border == 'list':
        print(' '.join(list_border_styles()), file=stdout)
        return 0

    if args.border == 'preview':
        for sample in preview_borders():
            print(sample, file=stdout)
        return 0

    # Resolve everything that can fail before reading stdin
    style = get_border_style(args.border)
    template = read_cow(args.file).split('\n')

    lines = read_lines(args.text, stdin)
    output = tewisay(lines, style, template, args.eyes, args.tongue)
    stdout.write(output)

    if args.image:
        save_image(output, args.image)

    return 0


def run(argv: Optional[Sequence[str]] = None, prog: Optional[str] = None,
        stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    """
    Run the command line program.

    Returns:
        Process exit status
    """
    prog = prog or os.path.basename(sys.argv[0])

    try:
        return _run(argv, prog, stdin or sys.stdin, stdout or sys.stdout)
    except (TewiError, OSError) as e:
        logger.debug(f"Failed: {e!r}")
        print(f"{prog}: {e}", file=sys.stderr)
        return 1


def main():
    sys.exit(run())


def think_main():
    sys.exit(run(prog=RenderConfig.think_program))


if __name__ == "__main__":
    main()
