#!/usr/bin/env python3
"""
🐄 tewisay - Errors
===================

Every failure the command line reports is one of these or a plain OSError
from reading input, a template file or a template directory. Rendering
itself never raises.
"""


class TewiError(Exception):
    """Base class for tewisay errors."""


class UnknownStyleError(TewiError, LookupError):
    """Requested border style is not in the catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"no such border style: {name}")


class TemplateNotFoundError(TewiError, FileNotFoundError):
    """No template file exists for a name on the search path."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"could not find cowfile: {name}")


class SnapshotError(TewiError):
    """An image snapshot could not be saved."""


class ConfigError(TewiError, ValueError):
    """A configuration value, usually from the environment, is invalid."""
