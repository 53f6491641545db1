"""Tests for the Visitor resource."""

import pytest

from rocketchat_livechat import APIError, CustomField, VisitorInfo

BASE = "https://chat.test/api/v1/livechat"


class TestRegisterVisitor:
    async def test_posts_visitor_and_returns_body(self, livechat, mock_server):
        mock_server.respond(201, json={"visitor": {"_id": "v1"}})

        result = await livechat.visitor.register_visitor(
            {"name": "A", "email": "a@b.com", "token": "t1"}
        )

        assert result == {"visitor": {"_id": "v1"}}
        request = mock_server.last_request
        assert request.method == "POST"
        assert str(request.url) == f"{BASE}/visitor"
        assert mock_server.last_json() == {"name": "A", "email": "a@b.com", "token": "t1"}

    async def test_accepts_model_with_optional_fields(self, livechat, mock_server):
        visitor = VisitorInfo(
            name="A",
            email="a@b.com",
            token="t1",
            department="sales",
            customFields=[CustomField(key="plan", value="pro", overwrite=True)],
        )

        await livechat.visitor.register_visitor(visitor)

        assert mock_server.last_json() == {
            "name": "A",
            "email": "a@b.com",
            "token": "t1",
            "department": "sales",
            "customFields": [{"key": "plan", "value": "pro", "overwrite": True}],
        }

    @pytest.mark.parametrize(
        "visitor",
        [
            {"email": "a@b.com", "token": "t1"},
            {"name": "A", "token": "t1"},
            {"name": "A", "email": "a@b.com", "token": ""},
            VisitorInfo(name="A", email="a@b.com"),
        ],
    )
    async def test_missing_required_field(self, livechat, mock_server, visitor):
        with pytest.raises(APIError) as exc_info:
            await livechat.visitor.register_visitor(visitor)

        assert exc_info.value.code == 400
        assert exc_info.value.error_type == "SDK"
        assert exc_info.value.message == "Name, email, and token are required."
        assert mock_server.requests == []


class TestGetVisitor:
    async def test_gets_by_token(self, livechat, mock_server):
        mock_server.respond(200, json={"visitor": {"token": "t1"}})

        result = await livechat.visitor.get_visitor("t1")

        assert result == {"visitor": {"token": "t1"}}
        assert mock_server.last_request.method == "GET"
        assert str(mock_server.last_request.url) == f"{BASE}/visitor/t1"

    async def test_token_is_path_encoded(self, livechat, mock_server):
        await livechat.visitor.get_visitor("a/b c")

        assert mock_server.last_request.url.raw_path == (
            b"/api/v1/livechat/visitor/a%2Fb%20c"
        )

    async def test_empty_token(self, livechat, mock_server):
        with pytest.raises(APIError) as exc_info:
            await livechat.visitor.get_visitor("")

        assert exc_info.value.code == 400
        assert exc_info.value.error_type == "SDK"
        assert exc_info.value.message == "Visitor token is required."
        assert mock_server.requests == []

    async def test_not_found_is_api_error(self, livechat, mock_server):
        mock_server.respond(400, json={"success": False, "error": "invalid-token"})

        with pytest.raises(APIError) as exc_info:
            await livechat.visitor.get_visitor("t1")

        assert exc_info.value.code == 400
        assert exc_info.value.error_type == "API"
        assert exc_info.value.message == "invalid-token"


class TestDeleteVisitor:
    async def test_deletes_by_token(self, livechat, mock_server):
        mock_server.respond(200, json={"visitor": {"_id": "v1", "ts": "now"}})

        await livechat.visitor.delete_visitor("t1")

        assert mock_server.last_request.method == "DELETE"
        assert str(mock_server.last_request.url) == f"{BASE}/visitor/t1"

    async def test_empty_token(self, livechat, mock_server):
        with pytest.raises(APIError) as exc_info:
            await livechat.visitor.delete_visitor("")

        assert exc_info.value.message == "Visitor token is required."
        assert mock_server.requests == []
