from blog_api.configs.settings import (
    CONFIG_MAP,
    DEFAULT_ERROR_MESSAGE,
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE,
    MAX_PAGE_SIZE,
    LimiterConfig,
    pool_kwargs,
    settings,
)

__all__ = [
    "CONFIG_MAP",
    "DEFAULT_ERROR_MESSAGE",
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE",
    "MAX_PAGE_SIZE",
    "LimiterConfig",
    "pool_kwargs",
    "settings",
]
