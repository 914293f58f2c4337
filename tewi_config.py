#!/usr/bin/env python3
"""
🐄 tewisay - Configuration Module
=================================

Centralized Configuration System
=================================
Complete configuration for bubble and figure rendering including:
- Width cache sizing
- Default border style, eyes, tongue and figure template
- Image snapshot cell size, font and colors
- Environment variable overrides

Configuration Overview
======================
Every value has a working default so the renderer runs without any
environment. Overrides are read and validated when the manager is first
used, and again on reload_config(). The figure search path (COWPATH) is
not cached here; tewi_cowfile reads it on every lookup.
"""

import threading
import logging
import os
from typing import Tuple, Optional, List
from dataclasses import dataclass, field

from tewi_errors import ConfigError

# Configure logging
logger = logging.getLogger('tewi_config')

# Type alias for RGB colors
RGBColor = Tuple[int, int, int]

# ============================================================================
# TEXT CONSTANTS
# ============================================================================

ESCAPE_INTRODUCER = '\x1b'
ESCAPE_TERMINATOR = 'm'
STYLE_RESET = '\x1b[0m'

COW_EXTENSION = '.cow'

# ============================================================================
# CACHE CONFIGURATION
# ============================================================================

@dataclass
class CacheConfig:
    """
    Width cache configuration.

    Attributes:
        default_size: Maximum number of cached line widths
    """

    default_size: int = 1000

    def validate(self) -> bool:
        """Validate cache configuration"""
        if self.default_size <= 0:
            raise ConfigError("Cache size must be positive")
        return True


# ============================================================================
# RENDER CONFIGURATION
# ============================================================================

@dataclass
class RenderConfig:
    """Bubble and figure defaults"""

    default_border: str = 'unicode'
    think_border: str = 'think'
    think_program: str = 'tewithink'

    eyes: str = 'oo'
    tongue: str = '  '
    cowfile: str = 'tes'

    def validate(self) -> bool:
        """Validate render configuration"""
        if not self.default_border or not self.think_border:
            raise ConfigError("Border style names must not be empty")
        if not self.cowfile:
            raise ConfigError("Default cowfile must not be empty")
        return True


# ============================================================================
# IMAGE CONFIGURATION
# ============================================================================

@dataclass
class ImageConfig:
    """Image snapshot configuration"""

    # Character cell dimensions (pixels)
    char_width: int = 8
    char_height: int = 16
    font_size: int = 14
    padding: int = 8

    background: RGBColor = (15, 15, 35)
    foreground: RGBColor = (230, 230, 230)

    # Tried in order, then Pillow's built-in font
    font_candidates: List[str] = field(default_factory=lambda: [
        'DejaVuSansMono.ttf',
        '/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf',
        '/usr/share/fonts/dejavu/DejaVuSansMono.ttf',
        '/usr/share/fonts/TTF/DejaVuSansMono.ttf',
        'LiberationMono-Regular.ttf',
    ])

    def validate(self) -> bool:
        """Validate image configuration"""
        if self.char_width <= 0 or self.char_height <= 0:
            raise ConfigError("Character dimensions must be positive")
        if self.font_size <= 0:
            raise ConfigError("Font size must be positive")
        if self.padding < 0:
            raise ConfigError("Padding must not be negative")
        return True


# ============================================================================
# MAIN CONFIGURATION CLASS
# ============================================================================

@dataclass
class TewiConfig:
    """Complete system configuration"""

    cache: CacheConfig = field(default_factory=CacheConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    image: ImageConfig = field(default_factory=ImageConfig)

    debug_mode: bool = False
    log_level: str = "WARNING"

    def validate(self) -> bool:
        """Validate entire configuration"""
        self.cache.validate()
        self.render.validate()
        self.image.validate()
        return True


# ============================================================================
# CONFIGURATION MANAGER (SINGLETON)
# ============================================================================

class ConfigurationManager:
    """
    Singleton configuration manager with runtime reloading.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        config = TewiConfig()
        self._load_environment_overrides(config)
        config.validate()

        self._config = config
        self._config_lock = threading.RLock()

        self._initialized = True
        logger.debug("Configuration manager initialized")

    @staticmethod
    def _env_int(name: str) -> int:
        value = os.environ[name]
        try:
            return int(value)
        except ValueError:
            raise ConfigError(f"{name} must be an integer, not {value!r}") from None

    @staticmethod
    def _load_environment_overrides(config: TewiConfig):
        """Load configuration overrides from environment variables"""

        # Render defaults
        if os.environ.get('TEWI_BORDER'):
            config.render.default_border = os.environ['TEWI_BORDER']
        if 'TEWI_EYES' in os.environ:
            config.render.eyes = os.environ['TEWI_EYES']
        if 'TEWI_TONGUE' in os.environ:
            config.render.tongue = os.environ['TEWI_TONGUE']
        if os.environ.get('TEWI_COWFILE'):
            config.render.cowfile = os.environ['TEWI_COWFILE']

        # Cache settings
        if 'TEWI_CACHE_SIZE' in os.environ:
            config.cache.default_size = ConfigurationManager._env_int('TEWI_CACHE_SIZE')

        # Image settings
        if 'TEWI_FONT_SIZE' in os.environ:
            config.image.font_size = ConfigurationManager._env_int('TEWI_FONT_SIZE')

        # Debug mode
        if 'TEWI_DEBUG' in os.environ:
            config.debug_mode = os.environ['TEWI_DEBUG'].lower() in ('true', '1', 'yes')
            if config.debug_mode:
                config.log_level = "DEBUG"

    @property
    def config(self) -> TewiConfig:
        """Get current configuration"""
        with self._config_lock:
            return self._config

    def reload(self, new_config: Optional[TewiConfig] = None) -> bool:
        """
        Replace the configuration, or rebuild it from the environment.

        Args:
            new_config: New configuration to apply (rebuilt from env if None)

        Returns:
            True if reload successful
        """
        with self._config_lock:
            try:
                if new_config is None:
                    new_config = TewiConfig()
                    self._load_environment_overrides(new_config)
                new_config.validate()
            except ConfigError as e:
                logger.error(f"Configuration reload failed: {e}")
                return False

            self._config = new_config
            logger.debug("Configuration reloaded successfully")
            return True


# ============================================================================
# PUBLIC API FUNCTIONS
# ============================================================================

# The manager is built on first use; a bad override raises ConfigError
# from the first accessor call.

def get_config() -> TewiConfig:
    """Get current system configuration"""
    return ConfigurationManager().config

def reload_config(new_config: Optional[TewiConfig] = None) -> bool:
    """Reload system configuration"""
    return ConfigurationManager().reload(new_config)

def get_cache_config() -> CacheConfig:
    """Get cache configuration"""
    return get_config().cache

def get_render_config() -> RenderConfig:
    """Get render configuration"""
    return get_config().render

def get_image_config() -> ImageConfig:
    """Get image configuration"""
    return get_config().image
