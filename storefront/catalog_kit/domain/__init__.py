"""领域层。

提供分页计算与输入校验。
"""

from .pagination import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    PaginationMeta,
    PaginationWindow,
    calculate_pagination,
)
from .validation import (
    AdminLoginInput,
    CategoryInput,
    PaginationQuery,
    ProductInput,
    ValidationResult,
    validate_payload,
)

__all__ = [
    # 分页
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "PaginationMeta",
    "PaginationWindow",
    "calculate_pagination",
    # 校验
    "AdminLoginInput",
    "CategoryInput",
    "PaginationQuery",
    "ProductInput",
    "ValidationResult",
    "validate_payload",
]
