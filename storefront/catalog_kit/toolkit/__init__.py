"""工具包模块。

提供 ApiClient 使用的异步 HTTP 传输。
"""

from .http import (
    HttpClient,
    HttpError,
    HttpHook,
    HttpNetworkError,
    HttpTimeoutError,
    LoggingHook,
)

__all__ = [
    "HttpClient",
    "HttpError",
    "HttpHook",
    "HttpNetworkError",
    "HttpTimeoutError",
    "LoggingHook",
]
