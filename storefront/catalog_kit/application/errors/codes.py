"""错误代码定义。

每个错误代码绑定一个 HTTP 状态码和服务端默认的错误消息。
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """错误代码枚举。

    值为日志中使用的短名；status_code / default_message 与线上响应一致。
    """

    SERVER_ERROR = "server_error"
    VALIDATION_FAILED = "validation_failed"
    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    ACCOUNT_LOCKED = "account_locked"
    RATE_LIMITED = "rate_limited"
    BUSINESS_RULE = "business_rule"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]

    @property
    def default_message(self) -> str:
        return _DEFAULT_MESSAGES[self]


_STATUS_CODES = {
    ErrorCode.SERVER_ERROR: 500,
    ErrorCode.VALIDATION_FAILED: 400,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.DUPLICATE: 400,
    ErrorCode.UNAUTHORIZED: 401,
    ErrorCode.FORBIDDEN: 403,
    ErrorCode.ACCOUNT_LOCKED: 423,
    ErrorCode.RATE_LIMITED: 429,
    ErrorCode.BUSINESS_RULE: 400,
}

_DEFAULT_MESSAGES = {
    ErrorCode.SERVER_ERROR: "Server Error",
    ErrorCode.VALIDATION_FAILED: "Validation failed",
    ErrorCode.NOT_FOUND: "Resource not found",
    ErrorCode.DUPLICATE: "Resource already exists",
    ErrorCode.UNAUTHORIZED: "Not authorized, no token provided",
    ErrorCode.FORBIDDEN: "Access denied",
    ErrorCode.ACCOUNT_LOCKED: (
        "Account is temporarily locked due to multiple failed login attempts. "
        "Please try again later."
    ),
    ErrorCode.RATE_LIMITED: "Too many requests from this IP, please try again later.",
    ErrorCode.BUSINESS_RULE: "Request could not be completed",
}


__all__ = [
    "ErrorCode",
]
