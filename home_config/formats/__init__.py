from home_config.formats.interfaces import ConfigFormat
from home_config.formats.registry import BUILTIN_FORMATS, FormatRegistry, load_format_class

__all__ = ['BUILTIN_FORMATS', 'ConfigFormat', 'FormatRegistry', 'load_format_class']
