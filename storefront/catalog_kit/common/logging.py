"""日志系统。

基于 loguru：
- setup_logging：控制台 + 可选的按天轮转文件
- 所有消息中的 Bearer token 会被替换为 ***，凭证不会进入日志
- log_exceptions：记录函数抛出的异常后原样抛出
- LoggerMixin：为类提供绑定了类名的 self.logger

HTTP 请求日志由 toolkit.http.LoggingHook 负责。
"""

from __future__ import annotations

import inspect
import re
import sys
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from loguru import logger as _root_logger

F = TypeVar("F", bound=Callable[..., Any])

_BEARER_RE = re.compile(r"(Bearer\s+)[^\s'\",}]+", re.IGNORECASE)

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def redact_credentials(text: str) -> str:
    """隐藏文本中的 Bearer token。"""
    return _BEARER_RE.sub(r"\1***", text)


def _redact_record(record: dict[str, Any]) -> None:
    record["message"] = redact_credentials(record["message"])


# 默认 sink 由 setup_logging 统一配置
_root_logger.remove()
logger = _root_logger.patch(_redact_record)


def setup_logging(log_level: str = "INFO", log_file: str | None = None) -> None:
    """初始化日志。

    重复调用会先移除已有的 sink。

    Args:
        log_level: 日志级别（大小写均可）
        log_file: 日志文件路径，不传则只输出到控制台
    """
    log_level = log_level.upper()
    _root_logger.remove()
    _root_logger.add(sys.stderr, format=CONSOLE_FORMAT, level=log_level, colorize=True)

    if log_file:
        _root_logger.add(
            log_file,
            format=FILE_FORMAT,
            level=log_level,
            rotation="00:00",
            retention="7 days",
            encoding="utf-8",
            enqueue=True,
        )

    logger.info(f"日志系统初始化完成，级别: {log_level}")


def log_exceptions(func: F) -> F:
    """记录异常后原样抛出，同时支持普通函数和协程函数。

    使用示例:
        @log_exceptions
        async def sync_catalog():
            ...
    """
    def _log(exc: Exception) -> None:
        logger.opt(depth=2).exception(
            f"异常捕获: {func.__module__}.{func.__qualname__} | {type(exc).__name__}: {exc}"
        )

    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except Exception as exc:
                _log(exc)
                raise

        return async_wrapper  # type: ignore[return-value]

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except Exception as exc:
            _log(exc)
            raise

    return wrapper  # type: ignore[return-value]


class LoggerMixin:
    """日志混入类。

    使用示例:
        class CatalogSync(LoggerMixin):
            def run(self):
                self.logger.info("开始同步")
    """

    @property
    def logger(self):
        cls = self.__class__
        return logger.bind(name=f"{cls.__module__}.{cls.__name__}")


__all__ = [
    "LoggerMixin",
    "log_exceptions",
    "logger",
    "redact_credentials",
    "setup_logging",
]
