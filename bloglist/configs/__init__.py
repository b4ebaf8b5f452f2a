from bloglist.configs.settings import (
    CONFIG_MAP,
    DEFAULT_ERROR_MESSAGE,
    Argon2Config,
    LimiterConfig,
    file_logger,
    settings,
)

__all__ = [
    "Argon2Config",
    "DEFAULT_ERROR_MESSAGE",
    "LimiterConfig",
    "file_logger",
    "settings",
    "CONFIG_MAP",
]
