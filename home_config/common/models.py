"""Conversion between typed values and the plain data codecs understand."""

import dataclasses
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, PydanticSchemaGenerationError, TypeAdapter, ValidationError


def _is_structured(value: Any) -> bool:
    return isinstance(value, BaseModel) or (dataclasses.is_dataclass(value) and not isinstance(value, type))


def to_plain(value: Any) -> Any:
    """Dump pydantic models and dataclasses into mappings, recursively.

    Models and dataclasses are dumped in python mode, so native values such as
    ``datetime``, ``date`` and ``float('inf')`` reach the codec unchanged.
    Mappings keep their keys as they are and tuples become lists. Anything
    else passes through; the codec decides whether it can represent it.

    Raises:
        TypeError: If a model or dataclass has no serialization schema.
    """
    if _is_structured(value):
        try:
            adapter = TypeAdapter(type(value))
        except PydanticSchemaGenerationError as exc:
            raise TypeError(f'Cannot serialize value of type {type(value).__name__}') from exc
        value = adapter.dump_python(value, mode='python')
    if isinstance(value, Mapping):
        return {key: to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(item) for item in value]
    return value


def from_plain(data: Any, model: Optional[Any] = None) -> Any:
    """Validate plain data into ``model``; returns ``data`` untouched without one.

    Raises:
        ValueError: If the data does not match ``model``.
    """
    if model is None:
        return data
    try:
        return TypeAdapter(model).validate_python(data)
    except ValidationError as exc:
        raise ValueError(str(exc)) from exc
