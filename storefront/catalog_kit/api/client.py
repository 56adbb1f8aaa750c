"""API 客户端契约。

所有前端调用共用的请求/响应契约：
- request：无认证请求
- authenticated_request：自动注入 Bearer token 的请求
- build_query：按"布尔为真才出现"的约定构建查询字符串
- 非 2xx 响应统一折叠成一个 ApiError

不做重试、不设超时、不做缓存。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Optional
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError as PydanticValidationError

from storefront.catalog_kit.application.config import ApiSettings
from storefront.catalog_kit.common.exceptions import CatalogKitError
from storefront.catalog_kit.common.logging import LoggerMixin
from storefront.catalog_kit.schemas import ApiResponse, ErrorDetail
from storefront.catalog_kit.toolkit.http import HttpClient, HttpError, HttpResponse

ERROR_PREFIX = "API request failed"
DEFAULT_HEADERS = {"Content-Type": "application/json"}


class CredentialStore(ABC):
    """凭证存储接口。
    
    保存登录后得到的 Bearer token，登录时写入、登出时清除、每次认证请求时读取。
    """
    
    @abstractmethod
    def get(self) -> Optional[str]:
        """读取 token，不存在时返回 None。"""
        pass
    
    @abstractmethod
    def set(self, token: str) -> None:
        """写入 token（后写覆盖先写）。"""
        pass
    
    @abstractmethod
    def clear(self) -> None:
        """清除 token。"""
        pass


class InMemoryCredentialStore(CredentialStore):
    """内存凭证存储。
    
    每个实例相互隔离，测试可以并发使用不同的凭证。
    """
    
    def __init__(self, token: Optional[str] = None, key: str = "adminToken") -> None:
        self.key = key
        self._values: dict[str, str] = {}
        if token:
            self.set(token)
    
    def get(self) -> Optional[str]:
        return self._values.get(self.key)
    
    def set(self, token: str) -> None:
        self._values[self.key] = token
    
    def clear(self) -> None:
        self._values.pop(self.key, None)
    
    def __repr__(self) -> str:
        state = "set" if self.get() else "empty"
        return f"<InMemoryCredentialStore key={self.key} token={state}>"


class ApiError(CatalogKitError):
    """API 请求失败。
    
    str(error) 即组合后的完整消息，例如:
        "API request failed: Validation failed (name: required, price: invalid)"
    
    Attributes:
        message: 组合后的完整消息
        reason: 服务端给出的原始错误（error / message / 状态描述）
        status_code: HTTP 状态码，网络错误时为 0
        details: 字段级错误详情
    """
    
    def __init__(
        self,
        message: str,
        *,
        reason: str = "",
        status_code: int = 0,
        details: Optional[list[ErrorDetail]] = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.status_code = status_code
        self.details = details or []
    
    @classmethod
    def from_response(cls, response: HttpResponse) -> ApiError:
        """从失败响应创建异常。
        
        错误体无法解析为 JSON 时按空对象处理。
        """
        try:
            payload = response.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, Mapping):
            payload = {}
        
        reason = payload.get("error") or payload.get("message") or response.reason_phrase
        details = parse_error_details(payload.get("details"))
        return cls(
            compose_error_message(str(reason), details),
            reason=str(reason),
            status_code=response.status_code,
            details=details,
        )
    
    def __repr__(self) -> str:
        return f"<ApiError status_code={self.status_code} message={self.message}>"


def parse_error_details(raw: Any) -> list[ErrorDetail]:
    """解析错误体中的 details 列表，忽略无法识别的项。"""
    return ErrorDetail.parse_list(raw)


def compose_error_message(reason: str, details: Optional[list[ErrorDetail]] = None) -> str:
    """组合错误消息，字段错误以 "field: message" 形式逗号拼接。"""
    message = f"{ERROR_PREFIX}: {reason}"
    if details:
        message += f" ({', '.join(detail.describe() for detail in details)})"
    return message


def build_query(params: Optional[Mapping[str, Any]] = None) -> str:
    """构建查询字符串（不含 "?"）。
    
    - None、False、空字符串不出现
    - True 序列化为 "true"
    - 其余值转为字符串，保持插入顺序
    
    使用示例:
        build_query({"category": "shoes", "featured": True, "premium": False})
        # "category=shoes&featured=true"
    """
    if not params:
        return ""
    
    pairs = []
    for key, value in params.items():
        if value is None or value is False or value == "":
            continue
        pairs.append((key, "true" if value is True else str(value)))
    return urlencode(pairs)


def with_query(endpoint: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """在路径后追加查询字符串（没有参数时原样返回）。"""
    query = build_query(params)
    return f"{endpoint}?{query}" if query else endpoint


class ApiClient(LoggerMixin):
    """API 客户端。
    
    使用示例:
        credentials = InMemoryCredentialStore()
        async with ApiClient("http://localhost:5050/api", credentials=credentials) as api:
            categories = await api.request("/categories")
            profile = await api.authenticated_request("/auth/profile")
    """
    
    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        credentials: Optional[CredentialStore] = None,
        settings: Optional[ApiSettings] = None,
        http_client: Optional[HttpClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """初始化客户端。
        
        Args:
            base_url: API 基础地址（默认取 settings.base_url）
            credentials: 凭证存储（默认新建一个空的内存存储）
            settings: API 配置
            http_client: 自定义 HTTP 客户端
            transport: 自定义 httpx transport（测试用）
        """
        self.settings = settings or ApiSettings()
        self.credentials = credentials or InMemoryCredentialStore(key=self.settings.token_key)
        self._http = http_client or HttpClient(
            base_url if base_url is not None else self.settings.base_url,
            transport=transport,
        )
    
    @property
    def base_url(self) -> str:
        return self._http.base_url
    
    async def request(
        self,
        endpoint: str,
        *,
        method: str = "GET",
        json: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> ApiResponse[Any]:
        """发送无认证请求。
        
        Args:
            endpoint: 接口路径（拼接在 base_url 之后）
            method: HTTP 方法
            json: 请求体
            headers: 额外请求头（可覆盖默认的 Content-Type）
            
        Returns:
            ApiResponse: 响应信封
            
        Raises:
            ApiError: 非 2xx 响应或网络错误
        """
        merged = httpx.Headers(DEFAULT_HEADERS)
        merged.update(dict(headers or {}))
        
        try:
            response = await self._http.request(method, endpoint, headers=dict(merged), json=json)
        except HttpError as exc:
            self.logger.warning(f"API请求失败: {method} {endpoint} | {exc}")
            raise ApiError(compose_error_message(exc.message), reason=exc.message) from exc
        
        if not response.is_success:
            error = ApiError.from_response(response)
            self.logger.warning(f"API请求失败: {method} {endpoint} | 状态: {response.status_code} | {error}")
            raise error
        
        return self._parse_envelope(response)
    
    async def authenticated_request(
        self,
        endpoint: str,
        *,
        method: str = "GET",
        json: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> ApiResponse[Any]:
        """发送认证请求。
        
        凭证存储中有 token 时注入 Authorization 头，没有时静默跳过；
        认证失败只会以服务端 401 的形式出现。
        """
        auth_headers: dict[str, str] = {}
        token = self.credentials.get()
        if token:
            auth_headers["Authorization"] = f"Bearer {token}"
        auth_headers.update(headers or {})
        return await self.request(endpoint, method=method, json=json, headers=auth_headers)
    
    def _parse_envelope(self, response: HttpResponse) -> ApiResponse[Any]:
        """解析成功响应为信封。非对象的 JSON 放入 data。"""
        try:
            payload = response.json()
        except ValueError as exc:
            raise ApiError(
                compose_error_message("Invalid JSON response"),
                reason="Invalid JSON response",
                status_code=response.status_code,
            ) from exc
        
        if not isinstance(payload, Mapping):
            payload = {"data": payload}
        
        try:
            return ApiResponse[Any].model_validate(payload)
        except PydanticValidationError as exc:
            raise ApiError(
                compose_error_message("Malformed response envelope"),
                reason="Malformed response envelope",
                status_code=response.status_code,
            ) from exc
    
    async def close(self) -> None:
        """关闭底层 HTTP 客户端。"""
        await self._http.close()
    
    async def __aenter__(self) -> ApiClient:
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
    
    def __repr__(self) -> str:
        return f"<ApiClient base_url={self.base_url}>"


__all__ = [
    "ApiClient",
    "ApiError",
    "CredentialStore",
    "InMemoryCredentialStore",
    "build_query",
    "compose_error_message",
    "parse_error_details",
    "with_query",
]
