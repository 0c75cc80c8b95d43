import codecs
from typing import Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

KNOWN_FORMATS = ('json', 'yaml', 'toml', 'hcl')


class HandleOptions(BaseModel):
    """Options shared by a config handle and the formats it enables."""

    model_config = ConfigDict(frozen=True, extra='forbid')

    encoding: str = Field(default='utf-8', description='Text encoding for string reads/writes and text codecs')
    json_pretty: bool = Field(default=True, description='Indent JSON output by two spaces')
    yaml_sort_keys: bool = Field(default=False, description='Sort mapping keys when writing YAML')
    yaml_env_tags: bool = Field(default=False, description='Resolve !env tags when reading YAML (opt-in: lets config files read environment variables)')
    formats: Optional[Tuple[str, ...]] = Field(default=None, description='Enabled format names (None enables every available format)')

    @field_validator('encoding')
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f'Unknown text encoding: {value}') from exc
        return value

    @field_validator('formats')
    @classmethod
    def _check_formats(cls, value: Optional[Sequence[str]]) -> Optional[Tuple[str, ...]]:
        if value is None:
            return None
        normalized = []
        for name in value:
            name = name.lower()
            if name not in KNOWN_FORMATS:
                raise ValueError(f"Unknown format '{name}', expected one of: {', '.join(KNOWN_FORMATS)}")
            if name not in normalized:
                normalized.append(name)
        return tuple(normalized)


DEFAULT_OPTIONS = HandleOptions()
