"""HTTP client for the Reel Talk API."""

from typing import Any, TypeVar

import httpx
import logfire
from pydantic import BaseModel, ValidationError

from reel.application.usecase.comment import (
    CommentItem,
    DeleteCommentResponse,
    GetAuthorCommentsResponse,
    GetCommentsResponse,
    GetRepliesResponse,
    UpdateLikesResponse,
)
from reel.application.usecase.thread import GetThreadResponse
from reel.client.error import ApiRequestError
from reel.config import ClientSettings

NETWORK_ERROR = "network_error"
INVALID_RESPONSE = "invalid_response"

ModelT = TypeVar("ModelT", bound=BaseModel)


class ReelApiClient:
    """Async client for the Reel Talk REST API.

    Each call opens its own httpx.AsyncClient; there are no retries.
    The session token is sent as the auth_token cookie.
    """

    def __init__(
        self,
        base_url: str,
        auth_token: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize API client.

        Args:
            base_url: API base URL (e.g. http://localhost:8000)
            auth_token: JWT session token, None for anonymous access
            timeout: Request timeout in seconds
            transport: Custom httpx transport (ASGI app or mock in tests)
        """
        self.base_url = base_url.rstrip("/")
        self.auth_token = auth_token
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(
        cls, settings: ClientSettings, auth_token: str | None = None
    ) -> "ReelApiClient":
        """Create a client from client settings."""
        if not settings.api_base_url:
            raise ValueError("Client api_base_url must be configured")
        return cls(
            base_url=settings.api_base_url,
            auth_token=auth_token,
            timeout=settings.timeout,
        )

    async def _request(
        self, method: str, path: str, json: dict[str, Any] | None = None
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Raises:
            ApiRequestError: On non-2xx responses and transport failures
        """
        cookies = {"auth_token": self.auth_token} if self.auth_token else None

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                cookies=cookies,
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                response = await client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logfire.error(
                "API request failed", method=method, path=path, error=str(e)
            )
            raise ApiRequestError(NETWORK_ERROR, None, None) from e

        if response.is_success:
            try:
                return response.json()
            except ValueError as e:
                logfire.error(
                    "API response is not JSON",
                    method=method,
                    path=path,
                    status_code=response.status_code,
                )
                raise ApiRequestError(
                    INVALID_RESPONSE, None, response.status_code
                ) from e

        kind, message = _parse_error(response)
        logfire.warn(
            "API request rejected",
            method=method,
            path=path,
            status_code=response.status_code,
            kind=kind,
            error=message,
        )
        raise ApiRequestError(kind, message, response.status_code)

    async def get_thread(self, thread_id: str) -> GetThreadResponse:
        """Fetch a thread."""
        data = await self._request("GET", f"/threads/{thread_id}")
        return _decode(GetThreadResponse, data)

    async def get_comments(self, thread_id: str) -> GetCommentsResponse:
        """Fetch the top-level comments of a thread."""
        data = await self._request("GET", f"/threads/{thread_id}/comments")
        return _decode(GetCommentsResponse, data)

    async def get_replies(self, comment_id: str) -> GetRepliesResponse:
        """Fetch the replies of a top-level comment."""
        data = await self._request("GET", f"/comments/{comment_id}/replies")
        return _decode(GetRepliesResponse, data)

    async def get_comment(self, comment_id: str) -> CommentItem:
        """Fetch a single comment."""
        data = await self._request("GET", f"/comments/{comment_id}")
        return _decode(CommentItem, data)

    async def get_user_comments(self, user_id: str) -> GetAuthorCommentsResponse:
        """Fetch every comment written by a user."""
        data = await self._request("GET", f"/users/{user_id}/comments")
        return _decode(GetAuthorCommentsResponse, data)

    async def create_comment(
        self,
        thread_id: str,
        content: str,
        parent_id: str | None = None,
        reply_to_id: str | None = None,
    ) -> CommentItem:
        """Post a comment, or a reply when parent_id is given."""
        body: dict[str, Any] = {"content": content}
        if parent_id:
            body["parent_id"] = parent_id
        if reply_to_id:
            body["reply_to_id"] = reply_to_id
        data = await self._request("POST", f"/threads/{thread_id}/comments", json=body)
        return _decode(CommentItem, data)

    async def update_comment(self, comment_id: str, content: str) -> CommentItem:
        """Edit a comment's content."""
        data = await self._request(
            "PATCH", f"/comments/{comment_id}", json={"content": content}
        )
        return _decode(CommentItem, data)

    async def delete_comment(self, comment_id: str) -> DeleteCommentResponse:
        """Delete a comment."""
        data = await self._request("DELETE", f"/comments/{comment_id}")
        return _decode(DeleteCommentResponse, data)

    async def update_likes(self, comment_id: str, increment: bool) -> UpdateLikesResponse:
        """Like or unlike a comment."""
        data = await self._request(
            "PUT", f"/comments/{comment_id}/likes", json={"increment": increment}
        )
        return _decode(UpdateLikesResponse, data)


def _parse_error(response: httpx.Response) -> tuple[str, str | None]:
    """Extract (kind, message) from an error response body."""
    try:
        body = response.json()
    except ValueError:
        return f"http_{response.status_code}", None

    if not isinstance(body, dict):
        return f"http_{response.status_code}", None

    kind = body.get("kind") or f"http_{response.status_code}"
    message = body.get("error")
    return kind, message if isinstance(message, str) and message else None


def _decode(model: type[ModelT], data: Any) -> ModelT:
    """Validate a success body against the expected response model."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logfire.error(
            "API response does not match schema",
            model=model.__name__,
            error=str(e),
        )
        raise ApiRequestError(INVALID_RESPONSE, None, None) from e
