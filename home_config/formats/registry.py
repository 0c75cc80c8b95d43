"""Capability-based format registry with importlib-based loading."""

import importlib
from pathlib import PurePath
from typing import Dict, Iterator, List, Optional, Tuple, Union

from home_config.config.log import get_logger
from home_config.config.options import DEFAULT_OPTIONS, KNOWN_FORMATS, HandleOptions
from home_config.errors import UnsupportedFormatError
from home_config.formats.interfaces import ConfigFormat

logger = get_logger(__name__)

# Format name -> (module, class). A format is available when its module imports,
# i.e. when the codec library behind it is installed.
BUILTIN_FORMATS: Dict[str, Tuple[str, str]] = {
    'json': ('home_config.formats.json', 'JsonFormat'),
    'yaml': ('home_config.formats.yaml', 'YamlFormat'),
    'toml': ('home_config.formats.toml', 'TomlFormat'),
    'hcl': ('home_config.formats.hcl', 'HclFormat'),
}


def load_format_class(name: str) -> type:
    """Import the class implementing a built-in format.

    Raises:
        UnsupportedFormatError: If the name is unknown or its codec library is not installed.
    """
    if name not in BUILTIN_FORMATS:
        raise UnsupportedFormatError(f"Unknown format '{name}'", format_name=name)

    module_name, class_name = BUILTIN_FORMATS[name]
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise UnsupportedFormatError(f"Format '{name}' is not available: {e}", format_name=name) from e
    return getattr(module, class_name)


class FormatRegistry:
    """Registry of the formats enabled for a config handle."""

    def __init__(self):
        self._formats: Dict[str, ConfigFormat] = {}

    @classmethod
    def from_options(cls, options: Optional[HandleOptions] = None) -> 'FormatRegistry':
        """Build a registry holding the formats selected by ``options``.

        Without an explicit ``options.formats`` list, every built-in format whose
        codec library imports is registered and the rest are skipped. Explicitly
        requested formats must be available.
        """
        options = options or DEFAULT_OPTIONS
        registry = cls()

        requested = options.formats
        for name in requested if requested is not None else KNOWN_FORMATS:
            try:
                format_class = load_format_class(name)
            except UnsupportedFormatError:
                if requested is not None:
                    raise
                logger.debug('Skipping format %s: codec library not installed', name)
                continue
            registry.register(format_class.from_options(options))

        return registry

    def register(self, fmt: ConfigFormat) -> None:
        """Register a format, replacing any format with the same name."""
        if not fmt.name:
            raise ValueError(f'Format {fmt!r} has no name')
        self._formats[fmt.name] = fmt
        logger.debug('Registered format %s for extensions %s', fmt.name, ', '.join(fmt.extensions))

    def get(self, name: str) -> ConfigFormat:
        """Get an enabled format by name."""
        fmt = self._formats.get(name.lower())
        if fmt is None:
            enabled = ', '.join(self._formats) or 'none'
            raise UnsupportedFormatError(f"Format '{name}' is not enabled (enabled: {enabled})", format_name=name)
        return fmt

    def for_path(self, path: Union[str, PurePath]) -> ConfigFormat:
        """Pick the enabled format matching the file extension of ``path``."""
        extension = PurePath(path).suffix.lower()
        if not extension:
            raise UnsupportedFormatError(f'Cannot infer a format for {path}: file has no extension', extension=extension)

        matches = [fmt for fmt in self._formats.values() if fmt.matches(extension)]
        if not matches:
            enabled = ', '.join(self._formats) or 'none'
            raise UnsupportedFormatError(f"No enabled format handles '{extension}' files (enabled: {enabled})", extension=extension)
        if len(matches) > 1:
            names = ', '.join(fmt.name for fmt in matches)
            raise UnsupportedFormatError(f"Extension '{extension}' is ambiguous between formats: {names}", extension=extension)
        return matches[0]

    def names(self) -> List[str]:
        return list(self._formats)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._formats

    def __iter__(self) -> Iterator[ConfigFormat]:
        return iter(self._formats.values())

    def __len__(self) -> int:
        return len(self._formats)
