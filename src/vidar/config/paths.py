"""Directory resolution for property files.

Policy for the base directory, first match wins:
1) ``Config.base_dir`` when set
2) ``<user config dir>/<app_name>`` when ``Config.app_name`` is set
3) the current working directory

The user config dir is ``$XDG_CONFIG_HOME`` (POSIX) or ``%APPDATA%``
(Windows), falling back to ``~/.config``.
"""

import os
from pathlib import Path
from typing import Mapping, Optional

from vidar.config.settings import Config
from vidar.exceptions import ConfigPathError


def _config_root_var() -> str:
    return "APPDATA" if os.name == "nt" else "XDG_CONFIG_HOME"


def get_config_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Get the per-user configuration root.

    Args:
        environ: Environment to consult (defaults to ``os.environ``)

    Raises:
        ConfigPathError: If neither the platform variable nor a home directory
            is available.
    """
    if environ is None:
        environ = os.environ

    root = environ.get(_config_root_var())
    if root:
        return Path(root)

    try:
        home = Path.home()
    except (KeyError, RuntimeError) as e:
        raise ConfigPathError() from e
    return home / ".config"


def resolve_base_dir(config: Config, environ: Optional[Mapping[str, str]] = None) -> Path:
    """Directory in which the config's property files are looked up."""
    if config.base_dir is not None:
        return config.base_dir
    if config.app_name:
        return get_config_path(environ) / config.app_name
    return Path.cwd()


def find_env_file(base_dir: Path, file_name: str, recursive: bool = False) -> Path:
    """Locate ``file_name`` under ``base_dir``.

    With ``recursive``, ancestors of ``base_dir`` are searched too and the
    nearest existing file wins. If nothing is found the path in ``base_dir``
    is returned so that opening it reports the failure.
    """
    candidate = base_dir / file_name
    if not recursive:
        return candidate

    for directory in (base_dir, *base_dir.resolve().parents):
        path = directory / file_name
        if path.is_file():
            return path
    return candidate


__all__ = ["find_env_file", "get_config_path", "resolve_base_dir"]
