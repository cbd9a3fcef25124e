"""Configuration and loading for vidar.

Example:
    from vidar.config import Config, load

    env = load(Config(app_name="billing", load_common=True))
    env.get("url")
"""

from vidar.config.env_loader import EnvLoader, load, merge
from vidar.config.paths import find_env_file, get_config_path, resolve_base_dir
from vidar.config.settings import Config

__all__ = [
    # Load request
    "Config",
    # Loading
    "EnvLoader",
    "load",
    "merge",
    # Directory resolution
    "get_config_path",
    "resolve_base_dir",
    "find_env_file",
]
