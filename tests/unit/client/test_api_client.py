"""Unit tests for ReelApiClient against a mocked transport."""

import httpx
import pytest

from reel.client.api import INVALID_RESPONSE, NETWORK_ERROR, ReelApiClient
from reel.client.error import ApiRequestError
from reel.config import ClientSettings


def client_for(handler, auth_token=None) -> ReelApiClient:
    return ReelApiClient(
        "http://api.test", auth_token=auth_token, transport=httpx.MockTransport(handler)
    )


class TestReelApiClient:
    @pytest.mark.asyncio
    async def test_sends_auth_cookie_and_body(self):
        # Arrange
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["cookie"] = request.headers.get("cookie")
            seen["body"] = request.content
            seen["path"] = request.url.path
            return httpx.Response(200, json={"comment_id": "c-1", "likes": 4})

        api = client_for(handler, auth_token="token-123")

        # Act
        result = await api.update_likes("c-1", increment=True)

        # Assert
        assert result.likes == 4
        assert seen["path"] == "/comments/c-1/likes"
        assert "auth_token=token-123" in seen["cookie"]
        assert b'"increment":true' in seen["body"].replace(b" ", b"")

    @pytest.mark.asyncio
    async def test_error_body_becomes_api_request_error(self):
        def handler(request):
            return httpx.Response(
                403, json={"kind": "forbidden", "error": "Not authorized to delete this comment"}
            )

        with pytest.raises(ApiRequestError) as exc_info:
            await client_for(handler).delete_comment("c-1")

        assert exc_info.value.kind == "forbidden"
        assert exc_info.value.message == "Not authorized to delete this comment"
        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_non_json_error_has_no_message(self):
        def handler(request):
            return httpx.Response(502, text="Bad Gateway")

        with pytest.raises(ApiRequestError) as exc_info:
            await client_for(handler).get_thread("t-1")

        assert exc_info.value.kind == "http_502"
        assert exc_info.value.message is None

    @pytest.mark.asyncio
    async def test_transport_failure_is_network_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ApiRequestError) as exc_info:
            await client_for(handler).get_comments("t-1")

        assert exc_info.value.kind == NETWORK_ERROR
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_html_success_page_is_invalid_response(self):
        def handler(request):
            return httpx.Response(200, text="<html>Sign in to the proxy</html>")

        with pytest.raises(ApiRequestError) as exc_info:
            await client_for(handler).get_thread("t-1")

        assert exc_info.value.kind == INVALID_RESPONSE
        assert exc_info.value.status_code == 200

    @pytest.mark.asyncio
    async def test_success_body_with_wrong_shape_is_invalid_response(self):
        def handler(request):
            return httpx.Response(200, json={"comment_id": "c-1"})

        with pytest.raises(ApiRequestError) as exc_info:
            await client_for(handler).update_likes("c-1", increment=True)

        assert exc_info.value.kind == INVALID_RESPONSE

    @pytest.mark.asyncio
    async def test_create_reply_omits_unset_ids(self):
        seen = {}

        def handler(request):
            seen["body"] = request.content
            return httpx.Response(
                201,
                json={
                    "comment_id": "c-2",
                    "thread_id": "t-1",
                    "author_id": "u-1",
                    "content": "top",
                    "likes": 0,
                    "created_at": "2025-01-01T10:00:00",
                },
            )

        result = await client_for(handler).create_comment("t-1", "top")

        assert result.comment_id == "c-2"
        assert b"parent_id" not in seen["body"]

    def test_from_settings(self):
        api = ReelApiClient.from_settings(
            ClientSettings(api_base_url="http://localhost:8000/", timeout=5.0)
        )

        assert api.base_url == "http://localhost:8000"
        assert api.timeout == 5.0

    def test_from_settings_requires_base_url(self):
        with pytest.raises(ValueError):
            ReelApiClient.from_settings(ClientSettings())
