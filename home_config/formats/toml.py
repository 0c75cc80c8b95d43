"""TOML format: tomllib (tomli before Python 3.11) for reading, tomli_w for writing."""

import sys
from collections.abc import Mapping
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w

from home_config.errors import DecodeError, EncodeError
from home_config.formats.interfaces import ConfigFormat


class TomlFormat(ConfigFormat):
    name = 'toml'
    extensions = ('.toml',)

    def __init__(self, encoding: str = 'utf-8'):
        self.encoding = encoding

    @classmethod
    def from_options(cls, options) -> 'TomlFormat':
        return cls(encoding=options.encoding)

    def decode(self, data: bytes) -> Any:
        try:
            return tomllib.loads(data.decode(self.encoding))
        except UnicodeDecodeError as e:
            raise DecodeError(f'TOML contents are not valid {self.encoding}: {e}', self.name) from e
        except tomllib.TOMLDecodeError as e:
            raise DecodeError(f'Invalid TOML: {e}', self.name) from e

    def encode(self, value: Any) -> bytes:
        if not isinstance(value, Mapping):
            raise EncodeError(f'TOML documents must be tables, got {type(value).__name__}', self.name)
        try:
            return tomli_w.dumps(value).encode(self.encoding)
        except (TypeError, ValueError) as e:
            raise EncodeError(f'Value cannot be encoded as TOML: {e}', self.name) from e
