"""Tests for APIError."""

from rocketchat_livechat import APIError


def test_carries_code_message_type_and_details():
    error = APIError(404, "Visitor not found", "API", {"success": False})

    assert error.code == 404
    assert error.message == "Visitor not found"
    assert error.error_type == "API"
    assert error.details == {"success": False}
    assert str(error) == "Visitor not found"


def test_details_default_to_none():
    error = APIError(400, "Visitor token is required.", "SDK")

    assert error.details is None


def test_type_helpers():
    assert APIError(500, "boom", "API").is_api_error
    assert not APIError(500, "boom", "API").is_sdk_error
    assert APIError(400, "missing", "SDK").is_sdk_error


def test_is_an_exception():
    assert isinstance(APIError(0, "Request failed: x", "API"), Exception)
    assert "code=0" in repr(APIError(0, "Request failed: x", "API"))
