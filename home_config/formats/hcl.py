"""HCL format backed by python-hcl2 7.x.

``hcl2.loads`` strips the quotes of string literals and ``reverse_transform``
emits plain ``str`` values as escaped string literals, so strings map to
Python ``str`` unchanged in both directions.
"""

from collections.abc import Mapping
from typing import Any

import hcl2
from lark.exceptions import LarkError

from home_config.errors import DecodeError, EncodeError
from home_config.formats.interfaces import ConfigFormat


class HclFormat(ConfigFormat):
    name = 'hcl'
    extensions = ('.hcl',)

    def __init__(self, encoding: str = 'utf-8'):
        self.encoding = encoding

    @classmethod
    def from_options(cls, options) -> 'HclFormat':
        return cls(encoding=options.encoding)

    def decode(self, data: bytes) -> Any:
        try:
            return hcl2.loads(data.decode(self.encoding))
        except UnicodeDecodeError as e:
            raise DecodeError(f'HCL contents are not valid {self.encoding}: {e}', self.name) from e
        except LarkError as e:
            raise DecodeError(f'Invalid HCL: {e}', self.name) from e

    def encode(self, value: Any) -> bytes:
        if not isinstance(value, Mapping):
            raise EncodeError(f'HCL documents must be bodies of attributes, got {type(value).__name__}', self.name)
        try:
            return hcl2.writes(hcl2.reverse_transform(dict(value))).encode(self.encoding)
        # reverse_transform raises RuntimeError for values it has no HCL type for
        except (LarkError, RuntimeError, TypeError, ValueError) as e:
            raise EncodeError(f'Value cannot be encoded as HCL: {e}', self.name) from e
