"""配置模块。

使用 pydantic-settings 进行分层分级配置管理。
"""

from .settings import (
    ApiSettings,
    CatalogConfig,
    LogSettings,
    MessagingSettings,
    PaginationSettings,
)

__all__ = [
    "ApiSettings",
    "CatalogConfig",
    "LogSettings",
    "MessagingSettings",
    "PaginationSettings",
]
