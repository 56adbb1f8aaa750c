"""错误处理模块。"""

from .codes import ErrorCode
from .exceptions import (
    AccountLockedError,
    AlreadyExistsError,
    BaseError,
    BusinessError,
    ForbiddenError,
    NotFoundError,
    RateLimitedError,
    UnauthorizedError,
    ValidationError,
)
from .handlers import (
    BaseErrorHandler,
    ErrorHandler,
    HTTPExceptionHandler,
    RequestValidationErrorHandler,
    build_handler_chain,
    envelope_response,
    register_exception_handlers,
)

__all__ = [
    "ErrorCode",
    # 异常
    "AccountLockedError",
    "AlreadyExistsError",
    "BaseError",
    "BusinessError",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitedError",
    "UnauthorizedError",
    "ValidationError",
    # 处理器
    "BaseErrorHandler",
    "ErrorHandler",
    "HTTPExceptionHandler",
    "RequestValidationErrorHandler",
    "build_handler_chain",
    "envelope_response",
    "register_exception_handlers",
]
