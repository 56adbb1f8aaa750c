"""异步 HTTP 传输层。

ApiClient 的底层传输，基于 httpx：
- 连接池复用（延迟创建 httpx.AsyncClient）
- 请求/响应钩子（默认记录调试日志，敏感请求头打码）
- 传输失败转换为 HttpTimeoutError / HttpNetworkError

任何状态码都正常返回，不做重试，默认不设超时；取消由调用方负责。
"""

from __future__ import annotations

import json as jsonlib
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

import httpx

from storefront.catalog_kit.common.exceptions import CatalogKitError
from storefront.catalog_kit.common.logging import logger

SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "set-cookie"})


class HttpError(CatalogKitError):
    """传输失败（请求没有得到任何响应）。

    Attributes:
        method: 请求方法
        url: 完整请求地址
    """

    def __init__(self, message: str, *, method: str = "", url: str = "") -> None:
        super().__init__(message)
        self.method = method
        self.url = url


class HttpTimeoutError(HttpError):
    pass


class HttpNetworkError(HttpError):
    pass


@dataclass
class HttpRequest:
    """即将发送的请求，钩子可以修改它。"""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    json: Any = None


@dataclass(frozen=True)
class HttpResponse:
    """收到的响应。

    Attributes:
        raw: httpx 原始响应
        elapsed_seconds: 从发送到收到完整响应的耗时
    """

    raw: httpx.Response
    elapsed_seconds: float

    @property
    def status_code(self) -> int:
        return self.raw.status_code

    @property
    def reason_phrase(self) -> str:
        return self.raw.reason_phrase

    @property
    def url(self) -> str:
        return str(self.raw.url)

    @property
    def text(self) -> str:
        return self.raw.text

    @property
    def is_success(self) -> bool:
        """只有 2xx 算成功。"""
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """解析 JSON 响应体，失败时抛出 ValueError。"""
        return jsonlib.loads(self.text)


def mask_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """隐藏敏感请求头的值。"""
    return {
        key: "***" if key.lower() in SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }


class HttpHook(Protocol):
    """请求钩子。"""

    async def on_request(self, request: HttpRequest) -> None: ...

    async def on_response(self, request: HttpRequest, response: HttpResponse) -> None: ...


class LoggingHook:
    """以 DEBUG 级别记录请求和响应。"""

    async def on_request(self, request: HttpRequest) -> None:
        logger.debug(f"HTTP请求: {request.method} {request.url} | Headers: {mask_headers(request.headers)}")

    async def on_response(self, request: HttpRequest, response: HttpResponse) -> None:
        logger.debug(
            f"HTTP响应: {request.method} {request.url} -> {response.status_code} | "
            f"耗时: {response.elapsed_seconds:.3f}s"
        )


class HttpClient:
    """异步 HTTP 客户端。

    使用示例:
        async with HttpClient("http://localhost:5050/api") as http:
            response = await http.request("GET", "/categories")

        # 测试中注入 transport
        http = HttpClient("http://test/api", transport=httpx.MockTransport(handler))
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        timeout: float | None = None,
        max_connections: int = 100,
        transport: httpx.AsyncBaseTransport | None = None,
        hooks: list[HttpHook] | None = None,
    ) -> None:
        """
        Args:
            base_url: 基础地址，请求路径直接拼接在其后
            timeout: 超时秒数，None 表示不设超时
            max_connections: 连接池大小
            transport: 自定义 httpx transport
            hooks: 请求钩子（默认只有 LoggingHook）
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = httpx.Timeout(timeout)
        self._limits = httpx.Limits(max_connections=max_connections)
        self._transport = transport
        self.hooks: list[HttpHook] = list(hooks) if hooks is not None else [LoggingHook()]
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    def build_url(self, path: str) -> str:
        """拼接完整地址。"""
        return f"{self._base_url}{path}"

    def _session(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                limits=self._limits,
                transport=self._transport,
            )
        return self._client

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        json: Any = None,
    ) -> HttpResponse:
        """发送请求。

        Raises:
            HttpTimeoutError: 请求超时
            HttpNetworkError: 连接失败等传输错误
        """
        request = HttpRequest(method.upper(), self.build_url(path), dict(headers or {}), json)
        for hook in self.hooks:
            await hook.on_request(request)

        started = time.perf_counter()
        try:
            raw = await self._session().request(
                request.method,
                request.url,
                headers=request.headers,
                json=request.json,
            )
        except httpx.TimeoutException as exc:
            logger.warning(f"HTTP请求超时: {request.method} {request.url}")
            raise HttpTimeoutError(f"Request timed out: {request.url}", method=request.method, url=request.url) from exc
        except httpx.HTTPError as exc:
            logger.warning(f"HTTP请求失败: {request.method} {request.url} | {type(exc).__name__}: {exc}")
            raise HttpNetworkError(f"Network error: {exc}", method=request.method, url=request.url) from exc

        response = HttpResponse(raw=raw, elapsed_seconds=time.perf_counter() - started)
        for hook in self.hooks:
            await hook.on_response(request, response)
        return response

    async def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> HttpClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"<HttpClient base_url={self._base_url}>"


__all__ = [
    "HttpClient",
    "HttpError",
    "HttpHook",
    "HttpNetworkError",
    "HttpRequest",
    "HttpResponse",
    "HttpTimeoutError",
    "LoggingHook",
    "mask_headers",
]
