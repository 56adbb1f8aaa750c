"""Global pytest fixtures for the catalog kit."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from storefront.catalog_kit.api import ApiClient, InMemoryCredentialStore
from tests.helpers import BASE_URL, RecordingTransport


@pytest.fixture
def credentials() -> InMemoryCredentialStore:
    return InMemoryCredentialStore()


@pytest.fixture
def make_client(credentials: InMemoryCredentialStore):
    """Factory building an ApiClient over a recording mock transport.

    Example:
        ```py
        client, transport = make_client(ok([]))
        await client.request("/categories")
        assert transport.last.url.path == "/api/categories"
        ```
    """

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> tuple[ApiClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        return ApiClient(BASE_URL, credentials=credentials, transport=transport), transport

    return _make
