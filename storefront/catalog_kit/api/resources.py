"""资源 API 分组。

按资源划分的接口集合，全部委托给 ApiClient：
- PublicApi / CategoryApi / ProductApi：公开接口（无认证）
- AdminAuthApi：管理员登录、登出、资料
- AdminResourceApi 及其子类：后台 CRUD（认证）
"""

from __future__ import annotations

from typing import Any, Optional
from urllib.parse import urlencode

from storefront.catalog_kit.schemas import ApiResponse

from .client import ApiClient, build_query, with_query


class PublicApi:
    """公开商城接口。"""
    
    def __init__(self, client: ApiClient) -> None:
        self.client = client
    
    async def get_products(
        self,
        category: Optional[str] = None,
        featured: bool = False,
        custom: bool = False,
    ) -> ApiResponse[Any]:
        query = {"category": category, "featured": featured, "custom": custom}
        return await self.client.request(with_query("/products", query))
    
    async def get_categories(self) -> ApiResponse[Any]:
        return await self.client.request("/categories")
    
    async def get_product(self, slug: str) -> ApiResponse[Any]:
        return await self.client.request(f"/products/{slug}")
    
    async def get_category(self, slug: str) -> ApiResponse[Any]:
        return await self.client.request(f"/categories/{slug}")
    
    async def get_category_products(self, category_slug: str) -> ApiResponse[Any]:
        return await self.client.request(f"/categories/{category_slug}/products")
    
    async def get_custom_products(self, limit: Optional[int] = None) -> ApiResponse[Any]:
        return await self.client.request(with_query("/products/custom", {"limit": limit or None}))
    
    async def search_products(self, query: str, limit: Optional[int] = None) -> ApiResponse[Any]:
        # q 总是出现，即使为空字符串
        endpoint = f"/search?{urlencode({'q': query})}"
        extra = build_query({"limit": limit or None})
        if extra:
            endpoint = f"{endpoint}&{extra}"
        return await self.client.request(endpoint)


class CategoryApi:
    """分类接口。"""
    
    def __init__(self, client: ApiClient) -> None:
        self.client = client
    
    async def get_all(self) -> ApiResponse[Any]:
        return await self.client.request("/categories")
    
    async def get_by_id(self, category_id: str) -> ApiResponse[Any]:
        return await self.client.request(f"/categories/{category_id}")
    
    async def get_by_slug(self, slug: str) -> ApiResponse[Any]:
        return await self.client.request(f"/categories/slug/{slug}")


class ProductApi:
    """商品接口。"""
    
    def __init__(self, client: ApiClient) -> None:
        self.client = client
    
    async def get_all(
        self,
        category: Optional[str] = None,
        featured: bool = False,
        premium: bool = False,
    ) -> ApiResponse[Any]:
        query = {"category": category, "featured": featured, "premium": premium}
        return await self.client.request(with_query("/products", query))
    
    async def get_by_id(self, product_id: str) -> ApiResponse[Any]:
        return await self.client.request(f"/products/{product_id}")
    
    async def get_by_slug(self, slug: str) -> ApiResponse[Any]:
        return await self.client.request(f"/products/slug/{slug}")
    
    async def get_by_category(self, category_slug: str) -> ApiResponse[Any]:
        return await self.client.request(f"/products/category/{category_slug}")


class AdminAuthApi:
    """管理员认证接口。
    
    登录成功后把 token 写入客户端的凭证存储，登出时清除。
    """
    
    def __init__(self, client: ApiClient) -> None:
        self.client = client
    
    async def login(self, username: str, password: str) -> ApiResponse[Any]:
        response = await self.client.request(
            "/auth/login",
            method="POST",
            json={"username": username, "password": password},
        )
        token = response.extra("token")
        if not token and isinstance(response.data, dict):
            token = response.data.get("token")
        if token:
            self.client.credentials.set(str(token))
        return response
    
    def logout(self) -> None:
        self.client.credentials.clear()
    
    async def verify_token(self) -> ApiResponse[Any]:
        return await self.client.authenticated_request("/auth/verify")
    
    async def get_profile(self) -> ApiResponse[Any]:
        return await self.client.authenticated_request("/auth/profile")
    
    async def update_profile(self, data: dict[str, Any]) -> ApiResponse[Any]:
        return await self.client.authenticated_request("/auth/profile", method="PUT", json=data)


class AdminResourceApi:
    """后台资源 CRUD 接口。
    
    Attributes:
        resource: 资源路径名（如 "categories"）
    """
    
    resource: str = ""
    
    def __init__(self, client: ApiClient, resource: Optional[str] = None) -> None:
        self.client = client
        if resource:
            self.resource = resource
    
    @property
    def base_path(self) -> str:
        return f"/admin/{self.resource}"
    
    async def get_all(self, **filters: Any) -> ApiResponse[Any]:
        return await self.client.authenticated_request(with_query(self.base_path, filters))
    
    async def get_by_id(self, item_id: str) -> ApiResponse[Any]:
        return await self.client.authenticated_request(f"{self.base_path}/{item_id}")
    
    async def create(self, data: dict[str, Any]) -> ApiResponse[Any]:
        return await self.client.authenticated_request(self.base_path, method="POST", json=data)
    
    async def update(self, item_id: str, data: dict[str, Any]) -> ApiResponse[Any]:
        return await self.client.authenticated_request(f"{self.base_path}/{item_id}", method="PUT", json=data)
    
    async def delete(self, item_id: str) -> ApiResponse[Any]:
        return await self.client.authenticated_request(f"{self.base_path}/{item_id}", method="DELETE")


class AdminCategoriesApi(AdminResourceApi):
    resource = "categories"


class AdminProductsApi(AdminResourceApi):
    resource = "products"


class AdminOrdersApi(AdminResourceApi):
    resource = "orders"
    
    async def update_status(self, order_id: str, data: dict[str, Any]) -> ApiResponse[Any]:
        return await self.client.authenticated_request(
            f"{self.base_path}/{order_id}/status", method="PATCH", json=data
        )
    
    async def get_stats(self) -> ApiResponse[Any]:
        return await self.client.authenticated_request(f"{self.base_path}/stats")


class AdminReviewsApi(AdminResourceApi):
    resource = "reviews"
    
    async def toggle_visibility(self, review_id: str) -> ApiResponse[Any]:
        return await self.client.authenticated_request(f"{self.base_path}/{review_id}/visibility", method="PATCH")
    
    async def add_reply(self, review_id: str, reply: str) -> ApiResponse[Any]:
        return await self.client.authenticated_request(
            f"{self.base_path}/{review_id}/reply", method="PATCH", json={"adminReply": reply}
        )
    
    async def get_stats(self) -> ApiResponse[Any]:
        return await self.client.authenticated_request(f"{self.base_path}/stats")


class CatalogApi:
    """按资源分组的接口集合。
    
    使用示例:
        api = CatalogApi(ApiClient(credentials=InMemoryCredentialStore()))
        await api.auth.login("admin", "secret1")
        await api.admin_products.get_all(featured=True)
    """
    
    def __init__(self, client: ApiClient) -> None:
        self.client = client
        self.public = PublicApi(client)
        self.categories = CategoryApi(client)
        self.products = ProductApi(client)
        self.auth = AdminAuthApi(client)
        self.admin_categories = AdminCategoriesApi(client)
        self.admin_products = AdminProductsApi(client)
        self.admin_orders = AdminOrdersApi(client)
        self.admin_reviews = AdminReviewsApi(client)


__all__ = [
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
