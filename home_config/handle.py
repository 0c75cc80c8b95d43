"""Config file handle: a fixed, absolute path plus read/write helpers."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from home_config.common.models import from_plain, to_plain
from home_config.config.log import get_logger
from home_config.config.options import DEFAULT_OPTIONS, HandleOptions
from home_config.config.paths import resolve_config_path
from home_config.errors import ConfigIOError, DecodeError, EncodeError
from home_config.formats.interfaces import ConfigFormat
from home_config.formats.registry import FormatRegistry

logger = get_logger(__name__)

PathLike = Union[str, os.PathLike]


@dataclass(frozen=True)
class ConfigHandle:
    """Use a configuration file in the current user's config directory.

    The handle only stores a path. Nothing is cached: every read goes to disk
    and every save rewrites the whole file. Writes are neither atomic nor
    locked, so with concurrent writers the last one wins.

    Example::

        config = ConfigHandle.new('app', 'config.json')
        # Linux/macOS: ~/.config/app/config.json ($XDG_CONFIG_HOME honoured)
        # Windows: C:\\Users\\name\\.config\\app\\config.json

        try:
            options = config.parse(Options)
        except HomeConfigError:
            options = Options()
        config.save_value(options)
    """

    path: Path
    app_name: Optional[str] = None
    options: HandleOptions = DEFAULT_OPTIONS
    formats: FormatRegistry = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        path = Path(self.path)
        if not path.is_absolute():
            path = path.absolute()
        object.__setattr__(self, 'path', path)
        if self.formats is None:
            object.__setattr__(self, 'formats', FormatRegistry.from_options(self.options))

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #

    @classmethod
    def new(cls, app_name: str, relative_path: PathLike, options: Optional[HandleOptions] = None) -> 'ConfigHandle':
        """Handle for ``<config root>/<app_name>/<relative_path>``.

        Raises:
            PathResolutionError: If the platform config root cannot be determined.
            ValueError: If ``app_name`` is not a single path segment or ``relative_path`` is absolute.
        """
        path = resolve_config_path(app_name, relative_path)
        return cls(path=path, app_name=app_name, options=options or DEFAULT_OPTIONS)

    @classmethod
    def with_config_dir(cls, app_name: str, relative_path: PathLike, options: Optional[HandleOptions] = None) -> 'ConfigHandle':
        """Same as :meth:`new`; the config root already is the ``.config`` directory."""
        return cls.new(app_name, relative_path, options)

    @classmethod
    def with_file(cls, path: PathLike, options: Optional[HandleOptions] = None) -> 'ConfigHandle':
        """Handle for an explicit file location, with no app-name segment."""
        return cls(path=Path(path), options=options or DEFAULT_OPTIONS)

    # ------------------------------------------------------------------ #
    # Raw I/O
    # ------------------------------------------------------------------ #

    def exists(self) -> bool:
        return self.path.is_file()

    def read_bytes(self) -> bytes:
        """Read the whole file.

        Raises:
            ConfigIOError: If the file cannot be read.
        """
        try:
            data = self.path.read_bytes()
        except OSError as e:
            raise ConfigIOError(f'Failed to read config file {self.path}: {e}', self.path, e) from e
        logger.debug('Read %d bytes from %s', len(data), self.path)
        return data

    def read_to_string(self) -> str:
        """Read the whole file as text, without newline translation.

        Raises:
            ConfigIOError: If the file cannot be read or is not valid text in the configured encoding.
        """
        data = self.read_bytes()
        try:
            return data.decode(self.options.encoding)
        except UnicodeDecodeError as e:
            raise ConfigIOError(f'Config file {self.path} is not valid {self.options.encoding} text: {e}', self.path, e) from e

    def save(self, contents: Union[bytes, bytearray, memoryview, str]) -> None:
        """Create missing parent directories, then overwrite the file with ``contents``.

        Raises:
            ConfigIOError: If a directory cannot be created or the file cannot be written.
            TypeError: If ``contents`` is neither text nor bytes.
        """
        if isinstance(contents, str):
            try:
                data = contents.encode(self.options.encoding)
            except UnicodeEncodeError as e:
                raise ConfigIOError(f'Contents cannot be written as {self.options.encoding} text: {e}', self.path, e) from e
        elif isinstance(contents, (bytes, bytearray, memoryview)):
            data = bytes(contents)
        else:
            raise TypeError(f'Config contents must be str or bytes, got {type(contents).__name__}')

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(data)
        except OSError as e:
            raise ConfigIOError(f'Failed to write config file {self.path}: {e}', self.path, e) from e
        logger.debug('Wrote %d bytes to %s', len(data), self.path)

    # ------------------------------------------------------------------ #
    # Structured I/O
    # ------------------------------------------------------------------ #

    def parse_as(self, format_name: str, model: Optional[Any] = None) -> Any:
        """Read the file and decode it with the named format, optionally into ``model``."""
        return self._parse_with(self.formats.get(format_name), model)

    def save_as(self, value: Any, format_name: str) -> None:
        """Encode ``value`` with the named format and overwrite the file."""
        self._save_with(self.formats.get(format_name), value)

    def parse(self, model: Optional[Any] = None) -> Any:
        """Decode the file with the format implied by its extension.

        Raises:
            UnsupportedFormatError: If no enabled format handles the extension.
            ConfigIOError: If the file cannot be read.
            DecodeError: If the contents are malformed or do not match ``model``.
        """
        return self._parse_with(self.formats.for_path(self.path), model)

    def save_value(self, value: Any) -> None:
        """Encode ``value`` with the format implied by the file extension and overwrite the file."""
        self._save_with(self.formats.for_path(self.path), value)

    def parse_json(self, model: Optional[Any] = None) -> Any:
        return self.parse_as('json', model)

    def save_json(self, value: Any) -> None:
        self.save_as(value, 'json')

    def parse_yaml(self, model: Optional[Any] = None) -> Any:
        return self.parse_as('yaml', model)

    def save_yaml(self, value: Any) -> None:
        self.save_as(value, 'yaml')

    def parse_toml(self, model: Optional[Any] = None) -> Any:
        return self.parse_as('toml', model)

    def save_toml(self, value: Any) -> None:
        self.save_as(value, 'toml')

    def parse_hcl(self, model: Optional[Any] = None) -> Any:
        return self.parse_as('hcl', model)

    def save_hcl(self, value: Any) -> None:
        self.save_as(value, 'hcl')

    def _parse_with(self, fmt: ConfigFormat, model: Optional[Any]) -> Any:
        data = self.read_bytes()
        try:
            value = fmt.decode(data)
        except DecodeError as e:
            e.path = self.path
            raise

        try:
            return from_plain(value, model)
        except ValueError as e:
            raise DecodeError(f'Config file {self.path} does not match {getattr(model, "__name__", model)}: {e}', fmt.name, self.path) from e

    def _save_with(self, fmt: ConfigFormat, value: Any) -> None:
        # Encode fully before touching the file so a failed encode leaves it intact.
        try:
            plain = to_plain(value)
        except (TypeError, ValueError) as e:
            raise EncodeError(f'Cannot convert {type(value).__name__} for {fmt.name}: {e}', fmt.name, self.path) from e

        try:
            contents = fmt.encode(plain)
        except EncodeError as e:
            e.path = self.path
            raise

        self.save(contents)
