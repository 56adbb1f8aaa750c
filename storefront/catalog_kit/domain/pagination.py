"""分页计算。

从原始（可能非法的）页码、每页数量和总数推导分页窗口。
所有非法输入都会被修正为最接近的合法值，不会抛出异常。
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from storefront.catalog_kit.utils.coercion import clamp, coerce_int

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

_INT_TEXT_RE = re.compile(r"^\s*[+-]?\d+\s*$", re.ASCII)


class PaginationWindow(BaseModel):
    """分页窗口。
    
    序列化时使用 camelCase 键名（totalPages、hasNextPage、hasPrevPage）。
    
    Attributes:
        page: 当前页码（从1开始）
        limit: 每页数量
        total: 总记录数
        total_pages: 总页数
        skip: 跳过的记录数
        has_next_page: 是否有下一页
        has_prev_page: 是否有上一页
    """
    
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
    
    page: int = Field(..., ge=1, description="当前页码")
    limit: int = Field(..., ge=1, description="每页数量")
    total: int = Field(..., ge=0, description="总记录数")
    total_pages: int = Field(..., ge=0, description="总页数")
    skip: int = Field(..., ge=0, description="跳过的记录数")
    has_next_page: bool = Field(..., description="是否有下一页")
    has_prev_page: bool = Field(..., description="是否有上一页")
    
    def to_dict(self) -> dict[str, Any]:
        """转换为线上格式的字典。"""
        return self.model_dump(by_alias=True)


class PaginationMeta(BaseModel):
    """列表接口返回的 pagination 对象。
    
    只反映服务端实际发送的内容：缺失的字段为 None，不补默认值；
    无法识别的值（例如 NaN 序列化成的 null）记为 None；
    其他形状的键（如订单接口的 pages）保留在 model_extra 中。
    """
    
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )
    
    page: int | None = Field(default=None, description="当前页码")
    limit: int | None = Field(default=None, description="每页数量")
    total: int | None = Field(default=None, description="总记录数")
    total_pages: int | None = Field(default=None, description="总页数")
    has_next_page: bool | None = Field(default=None, description="是否有下一页")
    has_prev_page: bool | None = Field(default=None, description="是否有上一页")
    
    @field_validator("page", "limit", "total", "total_pages", mode="before")
    @classmethod
    def lenient_int(cls, v: Any) -> int | None:
        if isinstance(v, bool):
            return None
        if isinstance(v, int):
            return v
        if isinstance(v, float) and v.is_integer():
            return int(v)
        if isinstance(v, str) and _INT_TEXT_RE.match(v):
            return int(v)
        return None
    
    @field_validator("has_next_page", "has_prev_page", mode="before")
    @classmethod
    def lenient_bool(cls, v: Any) -> bool | None:
        return v if isinstance(v, bool) else None
    
    @classmethod
    def from_window(cls, window: PaginationWindow) -> PaginationMeta:
        """从分页窗口创建。"""
        return cls(
            page=window.page,
            limit=window.limit,
            total=window.total,
            total_pages=window.total_pages,
            has_next_page=window.has_next_page,
            has_prev_page=window.has_prev_page,
        )
    
    def to_dict(self) -> dict[str, Any]:
        """转换为线上格式的字典。"""
        return self.model_dump(by_alias=True, exclude_none=True)


def calculate_pagination(
    page: Any = None,
    limit: Any = None,
    total: Any = 0,
    *,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT,
) -> PaginationWindow:
    """计算分页窗口。
    
    - page 解析为整数，无效或小于1时为1
    - limit 解析为整数，无效时取 default_limit，再限制在 [1, max_limit]
    - total 解析为整数，无效时为0
    - page 可以超过总页数，此时得到一个空页（has_next_page 为 False）
    
    使用示例:
        calculate_pagination(0, 500, 23).to_dict()
        # {"page": 1, "limit": 100, "total": 23, "totalPages": 1,
        #  "skip": 0, "hasNextPage": False, "hasPrevPage": False}
    
    Args:
        page: 页码（任意类型）
        limit: 每页数量（任意类型）
        total: 总记录数
        default_limit: 默认每页数量
        max_limit: 每页数量上限
        
    Returns:
        PaginationWindow: 分页窗口
    """
    page_num = clamp(coerce_int(page, DEFAULT_PAGE), 1)
    limit_num = clamp(coerce_int(limit, default_limit), 1, max_limit)
    total_num = clamp(coerce_int(total, 0), 0)
    
    total_pages = -(-total_num // limit_num)
    
    return PaginationWindow(
        page=page_num,
        limit=limit_num,
        total=total_num,
        total_pages=total_pages,
        skip=(page_num - 1) * limit_num,
        has_next_page=page_num < total_pages,
        has_prev_page=page_num > 1,
    )


__all__ = [
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "PaginationMeta",
    "PaginationWindow",
    "calculate_pagination",
]
