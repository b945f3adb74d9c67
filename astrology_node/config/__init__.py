"""Configuration helpers."""

from .settings import (
    CONFIG_FILENAME,
    Credentials,
    Settings,
    config_path,
    get_config_home,
    get_settings,
    load_settings,
    save_settings,
)

__all__ = [
    "CONFIG_FILENAME",
    "Credentials",
    "Settings",
    "config_path",
    "get_config_home",
    "get_settings",
    "load_settings",
    "save_settings",
]
