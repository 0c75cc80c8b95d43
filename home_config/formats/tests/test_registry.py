from typing import Any

import pytest

from home_config.config.options import HandleOptions
from home_config.errors import UnsupportedFormatError
from home_config.formats.interfaces import ConfigFormat
from home_config.formats.registry import BUILTIN_FORMATS, FormatRegistry, load_format_class


class UpperTextFormat(ConfigFormat):
    """Toy format storing a string upper-cased."""

    name = 'upper'
    extensions = ('.txt',)

    def decode(self, data: bytes) -> Any:
        return data.decode('utf-8').lower()

    def encode(self, value: Any) -> bytes:
        return str(value).upper().encode('utf-8')


class ShoutingTextFormat(UpperTextFormat):
    name = 'shouting'


def test_default_registry_enables_every_installed_format():
    registry = FormatRegistry.from_options()

    assert registry.names() == ['json', 'yaml', 'toml', 'hcl']
    assert len(registry) == 4


def test_explicit_formats_limit_the_registry():
    registry = FormatRegistry.from_options(HandleOptions(formats=['toml', 'json']))

    assert registry.names() == ['toml', 'json']
    assert 'yaml' not in registry
    with pytest.raises(UnsupportedFormatError) as exc_info:
        registry.get('yaml')
    assert exc_info.value.format_name == 'yaml'


def test_formats_are_built_from_options():
    registry = FormatRegistry.from_options(HandleOptions(json_pretty=False, yaml_sort_keys=True))

    assert registry.get('json').pretty is False
    assert registry.get('yaml').sort_keys is True


def test_missing_codec_library_is_skipped(monkeypatch):
    monkeypatch.setitem(BUILTIN_FORMATS, 'hcl', ('home_config.formats._not_installed', 'HclFormat'))

    registry = FormatRegistry.from_options()

    assert 'hcl' not in registry
    assert 'json' in registry


def test_explicitly_requested_missing_codec_raises(monkeypatch):
    monkeypatch.setitem(BUILTIN_FORMATS, 'hcl', ('home_config.formats._not_installed', 'HclFormat'))

    with pytest.raises(UnsupportedFormatError, match="Format 'hcl' is not available"):
        FormatRegistry.from_options(HandleOptions(formats=['hcl']))


def test_load_format_class_rejects_unknown_names():
    with pytest.raises(UnsupportedFormatError, match="Unknown format 'ini'"):
        load_format_class('ini')


@pytest.mark.parametrize('filename,expected', [
    ('config.json', 'json'),
    ('config.yaml', 'yaml'),
    ('config.yml', 'yaml'),
    ('CONFIG.YML', 'yaml'),
    ('settings.toml', 'toml'),
    ('main.hcl', 'hcl'),
    ('nested/dir/app.json', 'json'),
])
def test_for_path_selects_format_by_extension(filename, expected):
    assert FormatRegistry.from_options().for_path(filename).name == expected


@pytest.mark.parametrize('filename,options', [
    ('config.ini', None),
    ('config', None),
    ('config.yaml', HandleOptions(formats=['json'])),
    ('config.json', HandleOptions(formats=[])),
])
def test_for_path_without_enabled_match_raises(filename, options):
    registry = FormatRegistry.from_options(options)

    with pytest.raises(UnsupportedFormatError):
        registry.for_path(filename)


def test_custom_formats_can_be_registered():
    registry = FormatRegistry()
    registry.register(UpperTextFormat())

    fmt = registry.for_path('notes.txt')

    assert fmt.encode('hello') == b'HELLO'
    assert list(registry) == [fmt]


def test_ambiguous_extension_raises():
    registry = FormatRegistry()
    registry.register(UpperTextFormat())
    registry.register(ShoutingTextFormat())

    with pytest.raises(UnsupportedFormatError, match='ambiguous'):
        registry.for_path('notes.txt')


def test_register_rejects_nameless_formats():
    fmt = UpperTextFormat()
    fmt.name = ''

    with pytest.raises(ValueError):
        FormatRegistry().register(fmt)
