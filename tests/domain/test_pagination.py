"""Unit tests for domain.pagination."""

import math

import pytest

from storefront.catalog_kit.domain.pagination import PaginationMeta, calculate_pagination


class TestCalculatePagination:
    """Test suite for calculate_pagination."""

    def test_clamps_page_and_limit(self):
        window = calculate_pagination(0, 500, 23)

        assert window.to_dict() == {
            "page": 1,
            "limit": 100,
            "total": 23,
            "totalPages": 1,
            "skip": 0,
            "hasNextPage": False,
            "hasPrevPage": False,
        }

    def test_middle_page(self):
        window = calculate_pagination(2, 10, 45)

        assert window.total_pages == 5
        assert window.skip == 10
        assert window.has_next_page is True
        assert window.has_prev_page is True

    def test_defaults_when_absent(self):
        window = calculate_pagination()

        assert (window.page, window.limit, window.total, window.total_pages) == (1, 10, 0, 0)
        assert window.has_next_page is False
        assert window.has_prev_page is False

    def test_string_inputs_are_parsed(self):
        window = calculate_pagination("3", "20", 100)

        assert (window.page, window.limit, window.skip, window.total_pages) == (3, 20, 40, 5)

    def test_page_beyond_last_page_is_an_empty_window(self):
        window = calculate_pagination(10, 10, 23)

        assert window.page == 10
        assert window.total_pages == 3
        assert window.skip == 90
        assert window.has_next_page is False
        assert window.has_prev_page is True

    @pytest.mark.parametrize(
        ("limit", "expected"),
        [(0, 10), ("0", 10), (-5, 1), ("abc", 10), (None, 10), (101, 100), (2.7, 2)],
    )
    def test_limit_coercion(self, limit, expected):
        assert calculate_pagination(1, limit, 50).limit == expected

    @pytest.mark.parametrize(("page", "expected"), [(-4, 1), ("x", 1), (None, 1), (2.7, 2), ("5th", 5)])
    def test_page_coercion(self, page, expected):
        assert calculate_pagination(page, 10, 50).page == expected

    @pytest.mark.parametrize(("total", "expected"), [("abc", 0), (-5, 0), ("40", 40), (None, 0)])
    def test_total_coercion(self, total, expected):
        assert calculate_pagination(1, 10, total).total == expected

    def test_custom_limits(self):
        window = calculate_pagination(1, None, 10, default_limit=20, max_limit=50)

        assert window.limit == 20
        assert calculate_pagination(1, 80, 10, default_limit=20, max_limit=50).limit == 50

    @pytest.mark.parametrize("page", [-3, 0, 1, 2, 5])
    @pytest.mark.parametrize("limit", [-5, 0, 1, 50, 100, 101, 1000])
    @pytest.mark.parametrize("total", [0, 1, 99, 100, 1000])
    def test_window_properties(self, page, limit, total):
        window = calculate_pagination(page, limit, total)

        assert 1 <= window.page
        assert 1 <= window.limit <= 100
        assert window.skip == (window.page - 1) * window.limit
        assert window.total_pages == math.ceil(total / window.limit)


class TestPaginationMeta:
    """Test suite for the list-endpoint pagination object."""

    def test_from_window(self):
        meta = PaginationMeta.from_window(calculate_pagination(2, 10, 45))

        assert meta.to_dict() == {
            "page": 2,
            "limit": 10,
            "total": 45,
            "totalPages": 5,
            "hasNextPage": True,
            "hasPrevPage": True,
        }

    def test_parses_wire_format_without_flags(self):
        meta = PaginationMeta.model_validate({"page": 1, "limit": 10, "total": 3, "totalPages": 1})

        assert meta.total_pages == 1
        assert meta.to_dict() == {"page": 1, "limit": 10, "total": 3, "totalPages": 1}

    def test_null_fields_stay_unset(self):
        """page=abc 时服务端的 parseInt 得到 NaN，序列化为 null。"""
        meta = PaginationMeta.model_validate({"page": None, "limit": None, "total": 3, "totalPages": None})

        assert meta.page is None
        assert meta.limit is None
        assert meta.total == 3
        assert meta.to_dict() == {"total": 3}

    def test_missing_fields_are_not_invented(self):
        meta = PaginationMeta.model_validate({"total": 45, "page": 2, "pages": 5})

        assert meta.limit is None
        assert meta.total_pages is None
        assert meta.model_extra == {"pages": 5}
        assert meta.to_dict() == {"total": 45, "page": 2, "pages": 5}

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("2", 2),
            (" 7 ", 7),
            (3.0, 3),
            (3.5, None),
            ("abc", None),
            (True, None),
            ([1], None),
            ({"n": 1}, None),
        ],
    )
    def test_unrecognized_numbers_become_none(self, raw, expected):
        assert PaginationMeta.model_validate({"page": raw}).page == expected

    def test_non_boolean_flags_become_none(self):
        meta = PaginationMeta.model_validate({"hasNextPage": "yes", "hasPrevPage": False})

        assert meta.has_next_page is None
        assert meta.has_prev_page is False
