"""JSON format backed by orjson."""

from typing import Any

import orjson

from home_config.errors import DecodeError, EncodeError
from home_config.formats.interfaces import ConfigFormat


class JsonFormat(ConfigFormat):
    name = 'json'
    extensions = ('.json',)

    def __init__(self, pretty: bool = True):
        self.pretty = pretty

    @classmethod
    def from_options(cls, options) -> 'JsonFormat':
        return cls(pretty=options.json_pretty)

    def decode(self, data: bytes) -> Any:
        try:
            return orjson.loads(data)
        except orjson.JSONDecodeError as e:
            raise DecodeError(f'Invalid JSON: {e}', self.name) from e

    def encode(self, value: Any) -> bytes:
        option = orjson.OPT_INDENT_2 if self.pretty else 0
        try:
            return orjson.dumps(value, option=option)
        except orjson.JSONEncodeError as e:
            raise EncodeError(f'Value cannot be encoded as JSON: {e}', self.name) from e
