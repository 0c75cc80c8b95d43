"""Core interface for pluggable config file formats."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Tuple

if TYPE_CHECKING:
    from home_config.config.options import HandleOptions


class ConfigFormat(ABC):
    """An encode/decode pair for one structured file format."""

    name: str = ''
    extensions: Tuple[str, ...] = ()

    @classmethod
    def from_options(cls, options: 'HandleOptions') -> 'ConfigFormat':
        """Build the format from handle options."""
        return cls()

    @abstractmethod
    def decode(self, data: bytes) -> Any:
        """Decode raw file contents into plain data.

        Raises:
            DecodeError: If the contents are not valid for this format.
        """
        pass

    @abstractmethod
    def encode(self, value: Any) -> bytes:
        """Encode plain data into raw file contents.

        Raises:
            EncodeError: If the value cannot be represented in this format.
        """
        pass

    def matches(self, extension: str) -> bool:
        """Check whether a file suffix (with leading dot) belongs to this format."""
        return extension.lower() in self.extensions

    def __repr__(self) -> str:
        return f'{type(self).__name__}(name={self.name!r})'
