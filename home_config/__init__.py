"""Use a configuration file in the current user's config directory."""

from home_config.config import HandleOptions, configure_logging, get_config_root, resolve_config_path
from home_config.errors import (
    ConfigIOError,
    DecodeError,
    EncodeError,
    HomeConfigError,
    PathResolutionError,
    UnsupportedFormatError,
)
from home_config.formats import ConfigFormat, FormatRegistry
from home_config.handle import ConfigHandle

__version__ = '0.6.0'

__all__ = [
    'ConfigFormat',
    'ConfigHandle',
    'ConfigIOError',
    'DecodeError',
    'EncodeError',
    'FormatRegistry',
    'HandleOptions',
    'HomeConfigError',
    'PathResolutionError',
    'UnsupportedFormatError',
    'configure_logging',
    'get_config_root',
    'resolve_config_path',
]
