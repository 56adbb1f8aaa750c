"""响应出口。

服务端统一通过 ResponseBuilder 输出响应信封，保证线上格式与客户端契约一致。
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from storefront.catalog_kit.domain.pagination import PaginationMeta, PaginationWindow
from storefront.catalog_kit.schemas import ErrorDetail, create_api_response


class ResponseBuilder:
    """响应信封构建器。"""
    
    @staticmethod
    def success(data: Any = None, message: Optional[str] = None) -> dict[str, Any]:
        """成功响应。"""
        return create_api_response(True, data, message)
    
    @staticmethod
    def fail(
        error: str,
        *,
        message: Optional[str] = None,
        details: Optional[Iterable[ErrorDetail | Mapping[str, Any]]] = None,
    ) -> dict[str, Any]:
        """失败响应。
        
        Args:
            error: 错误消息
            message: 附加说明
            details: 字段级错误详情
        """
        response = create_api_response(False, None, message, error)
        rendered = [ResponseBuilder._render_detail(detail) for detail in details or ()]
        if rendered:
            response["details"] = rendered
        return response
    
    @staticmethod
    def paginated(
        items: list[Any],
        window: PaginationWindow,
        message: Optional[str] = None,
    ) -> dict[str, Any]:
        """分页列表响应。"""
        response = create_api_response(True, items, message)
        response["pagination"] = PaginationMeta.from_window(window).to_dict()
        return response
    
    @staticmethod
    def _render_detail(detail: ErrorDetail | Mapping[str, Any]) -> dict[str, Any]:
        if isinstance(detail, ErrorDetail):
            return detail.model_dump(exclude_none=True)
        return dict(detail)


__all__ = [
    "ResponseBuilder",
]
