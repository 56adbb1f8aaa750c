"""异常处理器。

处理器按责任链排列，第一个 can_handle 的处理器输出失败信封；
都不处理时返回 500 "Server Error" 并记录完整堆栈。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from storefront.catalog_kit.common.logging import logger
from storefront.catalog_kit.schemas import ErrorDetail

from ..interfaces.egress import ResponseBuilder
from .codes import ErrorCode
from .exceptions import BaseError, ValidationError

# 请求位置前缀，不计入字段名
_LOCATION_PREFIXES = frozenset({"body", "query", "path", "header", "cookie"})


def envelope_response(
    status_code: int,
    envelope: dict[str, Any],
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=envelope, headers=headers)


class ErrorHandler(ABC):
    """错误处理器抽象基类（责任链）。"""

    def __init__(self) -> None:
        self._next_handler: ErrorHandler | None = None

    def set_next(self, handler: ErrorHandler) -> ErrorHandler:
        """设置下一个处理器，返回该处理器以便链式调用。"""
        self._next_handler = handler
        return handler

    @abstractmethod
    def can_handle(self, exception: Exception) -> bool:
        pass

    @abstractmethod
    async def handle(self, exception: Exception, request: Request) -> JSONResponse:
        pass

    async def process(self, exception: Exception, request: Request) -> JSONResponse:
        """责任链入口。"""
        if self.can_handle(exception):
            return await self.handle(exception, request)
        if self._next_handler is not None:
            return await self._next_handler.process(exception, request)
        return self.fallback(exception, request)

    def fallback(self, exception: Exception, request: Request) -> JSONResponse:
        logger.exception(f"未处理的异常: {request.method} {request.url.path} | {exception!r}")
        code = ErrorCode.SERVER_ERROR
        return envelope_response(code.status_code, ResponseBuilder.fail(code.default_message))


class BaseErrorHandler(ErrorHandler):
    """应用层异常（BaseError 及其子类）。"""

    def can_handle(self, exception: Exception) -> bool:
        return isinstance(exception, BaseError)

    async def handle(self, exception: BaseError, request: Request) -> JSONResponse:
        logger.warning(f"请求失败: {request.method} {request.url.path} | {exception!r}")
        return envelope_response(exception.status_code, exception.to_envelope())


class RequestValidationErrorHandler(ErrorHandler):
    """FastAPI 请求参数校验失败，统一为 400 "Validation failed"。"""

    def can_handle(self, exception: Exception) -> bool:
        return isinstance(exception, RequestValidationError)

    async def handle(self, exception: RequestValidationError, request: Request) -> JSONResponse:
        error = ValidationError(details=[self._detail(item) for item in exception.errors()])
        logger.warning(f"数据验证失败: {request.method} {request.url.path} | {len(error.details)} 个字段")
        return envelope_response(error.status_code, error.to_envelope())

    @staticmethod
    def _detail(item: dict[str, Any]) -> ErrorDetail:
        loc = [str(part) for part in item.get("loc", ())]
        if loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        return ErrorDetail(field=".".join(loc), message=item.get("msg", ""))


class HTTPExceptionHandler(ErrorHandler):
    """框架抛出的 HTTPException（404 路由不存在、405 等）。"""

    def can_handle(self, exception: Exception) -> bool:
        return isinstance(exception, HTTPException)

    async def handle(self, exception: HTTPException, request: Request) -> JSONResponse:
        logger.warning(f"HTTP异常: {exception.status_code} {request.url.path} | {exception.detail}")
        return envelope_response(
            exception.status_code,
            ResponseBuilder.fail(str(exception.detail)),
            headers=getattr(exception, "headers", None),
        )


def build_handler_chain() -> ErrorHandler:
    """默认处理器链：应用异常 -> 请求校验 -> HTTP 异常。"""
    chain = BaseErrorHandler()
    chain.set_next(RequestValidationErrorHandler()).set_next(HTTPExceptionHandler())
    return chain


def register_exception_handlers(app: FastAPI, chain: ErrorHandler | None = None) -> ErrorHandler:
    """为 FastAPI 应用注册异常处理器，返回使用的处理器链。"""
    chain = chain or build_handler_chain()

    async def _dispatch(request: Request, exc: Exception) -> JSONResponse:
        return await chain.process(exc, request)

    for exc_class in (BaseError, RequestValidationError, HTTPException, Exception):
        app.add_exception_handler(exc_class, _dispatch)
    return chain


__all__ = [
    "BaseErrorHandler",
    "ErrorHandler",
    "HTTPExceptionHandler",
    "RequestValidationErrorHandler",
    "build_handler_chain",
    "envelope_response",
    "register_exception_handlers",
]
