"""共享基础Schema。

提供所有 API 调用共用的响应信封模型。

线上格式:
    {"success": bool, "data"?: any, "message"?: str, "error"?: str}
    校验失败时附带 {"details": [{"field": str, "message": str}, ...]}
    列表接口附带 {"pagination": {"page", "limit", "total", "totalPages", ...}}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from storefront.catalog_kit.domain.pagination import PaginationMeta

# 泛型类型变量
T = TypeVar("T")


class ErrorDetail(BaseModel):
    """字段级错误详情。
    
    Attributes:
        field: 错误字段
        message: 错误消息
        value: 导致错误的值
    """
    
    model_config = ConfigDict(extra="allow")
    
    field: Optional[str] = Field(default=None, description="错误字段")
    message: str = Field(default="", description="错误消息")
    value: Any = Field(default=None, description="导致错误的值")
    
    def describe(self) -> str:
        """返回 "field: message" 形式的描述，没有字段名时只返回消息。"""
        return f"{self.field}: {self.message}" if self.field else self.message
    
    @classmethod
    def parse_list(cls, raw: Any) -> list[ErrorDetail]:
        """解析服务端的 details 列表，忽略非对象项。"""
        if not isinstance(raw, list):
            return []
        details = []
        for item in raw:
            if isinstance(item, ErrorDetail):
                details.append(item)
                continue
            if not isinstance(item, Mapping):
                continue
            try:
                details.append(cls.model_validate(item))
            except PydanticValidationError:
                field = item.get("field")
                details.append(cls(
                    field=None if field is None else str(field),
                    message=str(item.get("message", "")),
                ))
        return details


class ApiResponse(BaseModel, Generic[T]):
    """响应信封模型。
    
    客户端解析服务端响应时使用。未声明的键（如登录接口的 token）
    保留在 model_extra 中。
    
    Attributes:
        success: 是否成功（缺省视为成功）
        data: 响应数据
        message: 响应消息
        error: 错误消息
        pagination: 分页信息（列表接口）
        details: 字段级错误详情（校验失败）
    """
    
    model_config = ConfigDict(extra="allow")
    
    success: bool = Field(default=True, description="是否成功")
    data: Optional[T] = Field(default=None, description="响应数据")
    message: Optional[str] = Field(default=None, description="响应消息")
    error: Optional[str] = Field(default=None, description="错误消息")
    pagination: Optional[PaginationMeta] = Field(default=None, description="分页信息")
    details: Optional[list[ErrorDetail]] = Field(default=None, description="错误详情")
    
    # 可选部分形状不对时不影响整个信封的解析
    @field_validator("message", "error", mode="before")
    @classmethod
    def stringify_text(cls, v: Any) -> Optional[str]:
        return v if v is None or isinstance(v, str) else str(v)
    
    @field_validator("pagination", mode="before")
    @classmethod
    def lenient_pagination(cls, v: Any) -> Any:
        return v if isinstance(v, (Mapping, PaginationMeta)) else None
    
    @field_validator("details", mode="before")
    @classmethod
    def lenient_details(cls, v: Any) -> Optional[list[ErrorDetail]]:
        return None if v is None else ErrorDetail.parse_list(v)
    
    def extra(self, key: str, default: Any = None) -> Any:
        """读取信封之外的顶层字段。"""
        return (self.model_extra or {}).get(key, default)
    
    def to_dict(self) -> dict[str, Any]:
        """转换为线上格式的字典（只包含显式设置的字段）。"""
        return self.model_dump(by_alias=True, exclude_unset=True)


def create_api_response(
    success: bool,
    data: Any = None,
    message: Optional[str] = None,
    error: Optional[str] = None,
) -> dict[str, Any]:
    """创建响应信封。
    
    - success 始终存在
    - message / error 只有在为真值时才出现（空字符串会被省略）
    - data 只要不是 None 就会出现（0、False、空列表、空字符串都保留）
    
    使用示例:
        create_api_response(True, [], "ok")   # {"success": True, "message": "ok", "data": []}
        create_api_response(True, None, "")   # {"success": True}
    
    Args:
        success: 是否成功
        data: 响应数据
        message: 响应消息
        error: 错误消息
        
    Returns:
        dict: 响应信封
    """
    response: dict[str, Any] = {"success": success}
    
    if message:
        response["message"] = message
    if data is not None:
        response["data"] = data
    if error:
        response["error"] = error
    
    return response


__all__ = [
    "ApiResponse",
    "ErrorDetail",
    "create_api_response",
]
