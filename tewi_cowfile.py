#!/usr/bin/env python3
"""
🐄 tewisay - Cowfile Lookup
===========================

Search Path
===========
COWPATH, split on os.pathsep, when it is set and non-empty. Otherwise
~/.cows followed by /usr/share/cows. The first directory holding
<name>.cow wins.

A name containing a path separator, or already ending in .cow, is read as
a path and never searched for.

Cowfiles are decoded as UTF-8; undecodable bytes become U+FFFD, the same
way terminal input is shown.
"""

import os
import logging
from pathlib import Path
from typing import List

from tewi_config import COW_EXTENSION
from tewi_errors import TemplateNotFoundError

logger = logging.getLogger('tewi_cowfile')

SYSTEM_COW_DIR = '/usr/share/cows'


def cow_path() -> List[str]:
    """Directories searched for cowfiles, in order."""
    env_path = os.environ.get('COWPATH', '')
    if env_path:
        return env_path.split(os.pathsep)
    return [os.path.join(os.path.expanduser('~'), '.cows'), SYSTEM_COW_DIR]


def is_literal_path(name: str) -> bool:
    """Whether name refers to a file directly rather than a search path entry."""
    return ('/' in name or os.sep in name
            or name.endswith(COW_EXTENSION))


def read_cow(name: str) -> str:
    """
    Read the raw text of a cowfile.

    Args:
        name: Template name, or a path to a template file

    Returns:
        Template text

    Raises:
        TemplateNotFoundError: if no directory on the search path has it
        OSError: if a file exists but cannot be read
    """
    if is_literal_path(name):
        logger.debug(f"Reading cowfile from path {name}")
        return Path(name).read_text(encoding='utf-8', errors='replace')

    filename = name + COW_EXTENSION
    for directory in cow_path():
        candidate = Path(directory) / filename
        try:
            text = candidate.read_text(encoding='utf-8', errors='replace')
        except FileNotFoundError:
            continue
        logger.debug(f"Found cowfile {candidate}")
        return text

    raise TemplateNotFoundError(filename)


def list_cows() -> List[str]:
    """
    Names of all cowfiles on the search path.

    Directories that do not exist are skipped. Names are listed per
    directory in search order, each directory sorted.
    """
    names = []
    for directory in cow_path():
        try:
            entries = sorted(os.listdir(directory))
        except FileNotFoundError:
            logger.debug(f"Skipping missing cow directory {directory}")
            continue
        for entry in entries:
            stem, ext = os.path.splitext(entry)
            if ext == COW_EXTENSION:
                names.append(stem)
    return names
