from bloglist.configs.settings import (
    CONFIG_MAP,
    DEFAULT_ERROR_MESSAGE,
    Argon2Config,
    Settings,
    settings,
)

__all__ = [
    "Argon2Config",
    "CONFIG_MAP",
    "DEFAULT_ERROR_MESSAGE",
    "Settings",
    "settings",
]
