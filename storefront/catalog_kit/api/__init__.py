"""API 客户端契约与资源接口。"""

from .client import (
    ApiClient,
    ApiError,
    CredentialStore,
    InMemoryCredentialStore,
    build_query,
    compose_error_message,
    with_query,
)
from .resources import (
    AdminAuthApi,
    AdminCategoriesApi,
    AdminOrdersApi,
    AdminProductsApi,
    AdminResourceApi,
    AdminReviewsApi,
    CatalogApi,
    CategoryApi,
    ProductApi,
    PublicApi,
)

__all__ = [
    # 客户端
    "ApiClient",
    "ApiError",
    "CredentialStore",
    "InMemoryCredentialStore",
    "build_query",
    "compose_error_message",
    "with_query",
    # 资源接口
    "AdminAuthApi",
    "AdminCategoriesApi",
    "AdminOrdersApi",
    "AdminProductsApi",
    "AdminResourceApi",
    "AdminReviewsApi",
    "CatalogApi",
    "CategoryApi",
    "ProductApi",
    "PublicApi",
]
