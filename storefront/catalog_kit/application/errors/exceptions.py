"""应用层异常。

服务端在路由或服务中抛出这些异常，由 handlers 转换为失败信封：
    {"success": false, "error": <message>, "details"?: [...]}

每个异常类只声明自己的 ErrorCode，状态码和默认消息都来自错误代码。
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, ClassVar

from storefront.catalog_kit.common.exceptions import CatalogKitError
from storefront.catalog_kit.domain.validation import ValidationResult
from storefront.catalog_kit.schemas import ErrorDetail

from ..interfaces.egress import ResponseBuilder
from .codes import ErrorCode


class BaseError(CatalogKitError):
    """应用层异常基类。

    Attributes:
        code: 错误代码（类属性，子类覆盖）
        message: 错误消息，未传入时使用错误代码的默认消息
        details: 字段级错误详情
    """

    code: ClassVar[ErrorCode] = ErrorCode.SERVER_ERROR

    def __init__(
        self,
        message: str | None = None,
        *,
        details: Iterable[ErrorDetail | Mapping[str, Any]] | None = None,
    ) -> None:
        super().__init__(message or self.code.default_message)
        self.details = [
            detail if isinstance(detail, ErrorDetail) else ErrorDetail.model_validate(detail)
            for detail in details or ()
        ]

    @property
    def status_code(self) -> int:
        return self.code.status_code

    def to_envelope(self) -> dict[str, Any]:
        """转换为失败信封。"""
        return ResponseBuilder.fail(self.message, details=self.details)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "status_code": self.status_code,
            **self.to_envelope(),
        }

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} code={self.code.value} message={self.message}>"


class ValidationError(BaseError):
    """请求数据校验失败（400）。"""

    code = ErrorCode.VALIDATION_FAILED

    @classmethod
    def from_result(cls, result: ValidationResult[Any]) -> ValidationError:
        """从失败的校验结果创建，每条消息一个 detail。"""
        return cls(details=result.to_details())


class NotFoundError(BaseError):
    code = ErrorCode.NOT_FOUND


class AlreadyExistsError(BaseError):
    """重名等唯一性冲突，例如 "Category with this name already exists"。"""

    code = ErrorCode.DUPLICATE


class UnauthorizedError(BaseError):
    code = ErrorCode.UNAUTHORIZED


class ForbiddenError(BaseError):
    code = ErrorCode.FORBIDDEN


class AccountLockedError(BaseError):
    """多次登录失败后账号被临时锁定（423）。"""

    code = ErrorCode.ACCOUNT_LOCKED


class RateLimitedError(BaseError):
    code = ErrorCode.RATE_LIMITED


class BusinessError(BaseError):
    """业务规则不满足。"""

    code = ErrorCode.BUSINESS_RULE


__all__ = [
    "AccountLockedError",
    "AlreadyExistsError",
    "BaseError",
    "BusinessError",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitedError",
    "UnauthorizedError",
    "ValidationError",
]
