"""End-to-end tests: ApiClient against a FastAPI app speaking the envelope."""

import httpx
import pytest
from fastapi import FastAPI, Request

from storefront.catalog_kit.api import ApiClient, ApiError, CatalogApi
from storefront.catalog_kit.application import create_app
from storefront.catalog_kit.application.config import CatalogConfig, PaginationSettings
from storefront.catalog_kit.application.errors import UnauthorizedError, ValidationError
from storefront.catalog_kit.application.interfaces import ResponseBuilder
from storefront.catalog_kit.domain import ProductInput, validate_payload
from storefront.catalog_kit.utils import generate_slug

TOKEN = "t-123"
PRODUCTS = [{"name": f"Product {i}", "slug": f"product-{i}"} for i in range(1, 24)]


def build_app() -> FastAPI:
    app = create_app(CatalogConfig(pagination=PaginationSettings(max_limit=20)), title="Test Catalog")

    @app.get("/api/products")
    async def list_products(page: str | None = None, limit: str | None = None):
        window = app.state.config.pagination.calculate(page, limit, len(PRODUCTS))
        items = PRODUCTS[window.skip:window.skip + window.limit]
        return ResponseBuilder.paginated(items, window)

    @app.post("/api/auth/login")
    async def login(request: Request):
        body = await request.json()
        if body.get("password") != "secret1":
            raise UnauthorizedError("Invalid credentials")
        return {"success": True, "token": TOKEN, "data": {"username": body["username"]}}

    @app.post("/api/admin/products")
    async def create_product(request: Request):
        if request.headers.get("Authorization") != f"Bearer {TOKEN}":
            raise UnauthorizedError()
        result = validate_payload(ProductInput, await request.json())
        if not result.is_valid:
            raise ValidationError.from_result(result)
        product = result.value.model_dump(by_alias=True)
        product["slug"] = generate_slug(result.value.name)
        return ResponseBuilder.success(product, "Product created successfully")

    return app


@pytest.fixture
async def api(credentials):
    transport = httpx.ASGITransport(app=build_app())
    client = ApiClient("http://testserver/api", credentials=credentials, transport=transport)
    async with client:
        yield CatalogApi(client)


class TestEndToEnd:
    """Client and server agree on the envelope."""

    async def test_paginated_listing(self, api):
        response = await api.client.request("/products?page=3&limit=10")

        assert len(response.data) == 3
        assert response.pagination.total_pages == 3
        assert response.pagination.has_next_page is False
        assert response.pagination.has_prev_page is True

    async def test_limit_is_capped_by_settings(self, api):
        response = await api.client.request("/products?limit=500")

        assert response.pagination.limit == 20
        assert len(response.data) == 20

    async def test_login_then_create(self, api, credentials):
        await api.auth.login("admin", "secret1")
        assert credentials.get() == TOKEN

        response = await api.admin_products.create(
            {
                "name": "Yoga Mat Pro",
                "description": "Non-slip mat for daily practice",
                "price": "₹2,499",
                "category": "fitness",
                "images": ["https://cdn.example.com/mat.jpg"],
            }
        )

        assert response.message == "Product created successfully"
        assert response.data["slug"] == "yoga-mat-pro"

    async def test_create_without_login_is_unauthorized(self, api):
        with pytest.raises(ApiError) as exc_info:
            await api.admin_products.create({"name": "Yoga Mat"})

        assert exc_info.value.status_code == 401
        assert str(exc_info.value) == "API request failed: Not authorized, no token provided"

    async def test_validation_details_reach_the_client(self, api):
        await api.auth.login("admin", "secret1")

        with pytest.raises(ApiError) as exc_info:
            await api.admin_products.create({"name": "Yoga Mat Pro", "price": "2499"})

        message = str(exc_info.value)
        assert message.startswith("API request failed: Validation failed (")
        assert "price: Price must be in format ₹X,XXX" in message
        assert exc_info.value.status_code == 400

    async def test_bad_login(self, api, credentials):
        with pytest.raises(ApiError, match="Invalid credentials"):
            await api.auth.login("admin", "wrong")

        assert credentials.get() is None
