"""YAML format with !env support, backed by PyYAML."""

from __future__ import annotations

import os
from typing import Any

import yaml

from home_config.errors import DecodeError, EncodeError
from home_config.formats.interfaces import ConfigFormat


class EnvSafeLoader(yaml.SafeLoader):
    """SafeLoader that also resolves ``!env`` tags."""


def _env_constructor(loader: yaml.SafeLoader, node: yaml.Node) -> Any:
    """Resolve ``!env VAR_NAME`` (required) or ``!env [VAR_NAME, default]`` (optional)."""
    if isinstance(node, yaml.ScalarNode):
        var_name = loader.construct_scalar(node)
        if not isinstance(var_name, str):
            raise yaml.constructor.ConstructorError(
                None,
                None,
                f'Environment variable name must be a string, got {type(var_name).__name__}',
                node.start_mark,
            )

        value = os.getenv(var_name)
        if value is None:
            raise yaml.constructor.ConstructorError(None, None, f"Required environment variable '{var_name}' is not set", node.start_mark)
        return value

    if isinstance(node, yaml.SequenceNode):
        values = loader.construct_sequence(node)
        if len(values) != 2:
            raise yaml.constructor.ConstructorError(
                None,
                None,
                f'!env sequence must have exactly 2 elements [var_name, default], got {len(values)}',
                node.start_mark,
            )

        var_name, default_value = values
        if not isinstance(var_name, str):
            raise yaml.constructor.ConstructorError(
                None,
                None,
                f'Environment variable name must be a string, got {type(var_name).__name__}',
                node.start_mark,
            )

        return os.getenv(var_name, default_value)

    raise yaml.constructor.ConstructorError(
        None,
        None,
        f'!env tag expects scalar (var_name) or sequence ([var_name, default]), got {type(node).__name__}',
        node.start_mark,
    )


EnvSafeLoader.add_constructor('!env', _env_constructor)


class YamlFormat(ConfigFormat):
    name = 'yaml'
    extensions = ('.yaml', '.yml')

    def __init__(self, sort_keys: bool = False, env_tags: bool = False):
        self.sort_keys = sort_keys
        self.loader = EnvSafeLoader if env_tags else yaml.SafeLoader

    @classmethod
    def from_options(cls, options) -> 'YamlFormat':
        return cls(sort_keys=options.yaml_sort_keys, env_tags=options.yaml_env_tags)

    def decode(self, data: bytes) -> Any:
        try:
            return yaml.load(data, Loader=self.loader)
        except yaml.YAMLError as e:
            raise DecodeError(f'Invalid YAML: {e}', self.name) from e

    def encode(self, value: Any) -> bytes:
        try:
            return yaml.safe_dump(
                value,
                encoding='utf-8',
                allow_unicode=True,
                default_flow_style=False,
                sort_keys=self.sort_keys,
                indent=2,
            )
        except yaml.YAMLError as e:
            raise EncodeError(f'Value cannot be encoded as YAML: {e}', self.name) from e


__all__ = ['EnvSafeLoader', 'YamlFormat']
