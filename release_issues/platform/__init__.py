"""Platform abstraction layer."""

from .paths import HomeError, expand_home, home, user_config_dir, user_config_path

__all__ = [
    "HomeError",
    "expand_home",
    "home",
    "user_config_dir",
    "user_config_path",
]
