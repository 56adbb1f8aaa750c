"""Unit tests for the response envelope."""

import pytest

from storefront.catalog_kit import response
from storefront.catalog_kit.schemas import ApiResponse, ErrorDetail, create_api_response


class TestCreateApiResponse:
    """Test suite for create_api_response."""

    def test_success_with_data_and_message(self):
        assert create_api_response(True, [], "ok") == {"success": True, "message": "ok", "data": []}

    def test_empty_message_and_none_data_are_omitted(self):
        assert create_api_response(True, None, "") == {"success": True}

    def test_error_envelope(self):
        assert create_api_response(False, error="Not found") == {"success": False, "error": "Not found"}

    @pytest.mark.parametrize("data", [0, False, "", [], {}])
    def test_falsy_data_is_kept(self, data):
        assert create_api_response(True, data) == {"success": True, "data": data}

    def test_key_order(self):
        envelope = create_api_response(False, {"id": 1}, "msg", "err")

        assert list(envelope) == ["success", "message", "data", "error"]


class TestApiResponse:
    """Test suite for envelope parsing."""

    def test_success_defaults_to_true(self):
        assert ApiResponse.model_validate({"data": [1, 2]}).success is True

    def test_keeps_unknown_top_level_keys(self):
        parsed = ApiResponse.model_validate({"success": True, "token": "abc", "data": {"id": 1}})

        assert parsed.extra("token") == "abc"
        assert parsed.extra("missing", "fallback") == "fallback"

    def test_parses_pagination_and_details(self):
        parsed = ApiResponse.model_validate(
            {
                "success": False,
                "error": "Validation failed",
                "details": [{"field": "name", "message": "required", "value": ""}],
                "pagination": {"page": 1, "limit": 10, "total": 0, "totalPages": 0},
            }
        )

        assert parsed.details[0].describe() == "name: required"
        assert parsed.pagination.total_pages == 0

    @pytest.mark.parametrize("pagination", ["page 1", 3, [1, 2], True])
    def test_non_object_pagination_is_dropped(self, pagination):
        parsed = ApiResponse.model_validate({"success": True, "data": [], "pagination": pagination})

        assert parsed.pagination is None
        assert parsed.data == []

    def test_unrecognized_details_are_skipped(self):
        parsed = ApiResponse.model_validate(
            {
                "success": False,
                "error": "Validation failed",
                "details": ["oops", {"message": "Name is required"}, {"field": 7, "message": ["x"]}],
            }
        )

        assert [detail.describe() for detail in parsed.details] == ["Name is required", "7: ['x']"]

    def test_non_list_details_become_empty(self):
        assert ApiResponse.model_validate({"success": False, "details": "bad"}).details == []

    def test_non_string_message_is_stringified(self):
        parsed = ApiResponse.model_validate({"success": True, "message": 42, "error": None})

        assert parsed.message == "42"
        assert parsed.error is None

    def test_to_dict_only_includes_set_fields(self):
        parsed = ApiResponse.model_validate({"success": True, "data": None})

        assert parsed.to_dict() == {"success": True, "data": None}


class TestErrorDetail:
    """Test suite for ErrorDetail."""

    def test_allows_extra_keys(self):
        detail = ErrorDetail.model_validate({"field": "price", "message": "bad", "path": "body.price"})

        assert detail.describe() == "price: bad"
        assert detail.model_extra == {"path": "body.price"}

    def test_describe_without_field(self):
        assert ErrorDetail(message="Invalid data").describe() == "Invalid data"
        assert ErrorDetail(field="", message="Invalid data").describe() == "Invalid data"

    def test_parse_list_keeps_missing_field_as_none(self):
        details = ErrorDetail.parse_list([{"message": "required"}, {"field": None, "message": 5}])

        assert [detail.field for detail in details] == [None, None]
        assert [detail.message for detail in details] == ["required", "5"]


def test_response_module_reexports():
    assert response.create_api_response is create_api_response
    assert response.ApiResponse is ApiResponse
    assert response.ResponseBuilder.success([1]) == {"success": True, "data": [1]}
