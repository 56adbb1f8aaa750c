"""Common 层模块。

最基础层，提供：
- 异常基类
- 日志系统
"""

from .exceptions import CatalogKitError
from .logging import (
    LoggerMixin,
    log_exceptions,
    logger,
    redact_credentials,
    setup_logging,
)

__all__ = [
    # 异常
    "CatalogKitError",
    # 日志
    "logger",
    "setup_logging",
    "log_exceptions",
    "LoggerMixin",
    "redact_credentials",
]
