"""响应模型。

统一导出响应信封相关的模型和构建函数，方便使用。
"""

from storefront.catalog_kit.application.interfaces.egress import ResponseBuilder
from storefront.catalog_kit.domain.pagination import PaginationMeta
from storefront.catalog_kit.schemas import ApiResponse, ErrorDetail, create_api_response

__all__ = [
    "ApiResponse",
    "ErrorDetail",
    "PaginationMeta",
    "ResponseBuilder",
    "create_api_response",
]
