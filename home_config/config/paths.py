"""Filesystem helpers for locating per-application configuration files."""

import os
from pathlib import Path, PurePath
from typing import Union

from home_config.config.log import get_logger
from home_config.errors import PathResolutionError

logger = get_logger(__name__)

CONFIG_DIR_NAME = '.config'


def get_config_root() -> Path:
    """Return the per-user configuration root.

    ``$XDG_CONFIG_HOME`` wins on POSIX systems (macOS included) when it holds an
    absolute path; otherwise the root is ``~/.config`` on every platform.
    """

    if os.name != 'nt':
        xdg_config = os.environ.get('XDG_CONFIG_HOME')
        if xdg_config and os.path.isabs(xdg_config):
            return Path(xdg_config)

    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise PathResolutionError(f'Could not determine the home directory: {exc}') from exc

    if not home.is_absolute():
        raise PathResolutionError(f'Home directory is not an absolute path: {home}')
    return home / CONFIG_DIR_NAME


def _validate_app_name(app_name: str) -> None:
    if not app_name or app_name in ('.', '..'):
        raise ValueError(f'Invalid application name: {app_name!r}')
    if len(PurePath(app_name).parts) != 1 or '/' in app_name or os.sep in app_name:
        raise ValueError(f'Application name must be a single path segment, got {app_name!r}')


def resolve_config_path(app_name: str, relative_path: Union[str, os.PathLike]) -> Path:
    """Combine the config root, the application name and a relative file path."""

    _validate_app_name(app_name)
    relative = PurePath(relative_path)
    if not relative.parts:
        raise ValueError('Config file path must not be empty')
    if relative.is_absolute() or relative.anchor:
        raise ValueError(f'Config file path must be relative, got {str(relative)!r}')

    path = get_config_root() / app_name / relative
    logger.debug('Resolved config path for %s: %s', app_name, path)
    return path


__all__ = ['CONFIG_DIR_NAME', 'get_config_root', 'resolve_config_path']
