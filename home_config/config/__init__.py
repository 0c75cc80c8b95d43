from home_config.config.log import configure_logging, get_logger
from home_config.config.options import DEFAULT_OPTIONS, KNOWN_FORMATS, HandleOptions
from home_config.config.paths import get_config_root, resolve_config_path

__all__ = [
    'DEFAULT_OPTIONS',
    'KNOWN_FORMATS',
    'HandleOptions',
    'configure_logging',
    'get_config_root',
    'get_logger',
    'resolve_config_path',
]
