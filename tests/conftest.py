"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from tewi_borders import BORDER_STYLES, BorderStyle
from tewi_config import ConfigurationManager, ImageConfig, TewiConfig, reload_config
from tewi_width import clear_default_cache

COWS_DIR = Path(__file__).resolve().parent.parent / 'cows'


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts and ends with the built-in configuration."""
    reload_config(TewiConfig())
    clear_default_cache()
    yield
    reload_config(TewiConfig())
    clear_default_cache()


@pytest.fixture
def unicode_style() -> BorderStyle:
    return BORDER_STYLES['unicode']


@pytest.fixture
def bundled_cows(monkeypatch) -> Path:
    """Point COWPATH at the bundled sample cowfiles."""
    monkeypatch.setenv('COWPATH', str(COWS_DIR))
    return COWS_DIR


@pytest.fixture
def image_config() -> ImageConfig:
    """Image settings that always use Pillow's built-in font."""
    return ImageConfig(char_width=8, char_height=16, padding=8, font_candidates=[])


@pytest.fixture
def unbuilt_config(monkeypatch):
    """Forget the configuration manager so the next access reads the environment."""
    monkeypatch.setattr(ConfigurationManager, '_instance', None)
