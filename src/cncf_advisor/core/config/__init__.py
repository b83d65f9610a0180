"""
Launcher configuration.

Release constants live on the pydantic ``LauncherConfig`` model; host
settings come from the process environment, optionally seeded from the
user env file.
"""

from .env import get_user_env_path, get_xdg_config_home, load_user_env
from .models import LauncherConfig, default_install_dir

__all__ = [
    "LauncherConfig",
    "default_install_dir",
    "get_user_env_path",
    "get_xdg_config_home",
    "load_user_env",
]
