"""
Shared request plumbing for the Livechat resources.

Every resource (Visitor, Room, Messages, Agents, Config) extends BaseAPI and
goes through BaseAPI.request(), so transport and server failures always
surface as APIError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Literal, NoReturn
from urllib.parse import quote

import httpx

from rocketchat_livechat.errors import APIError

logger = logging.getLogger(__name__)

LIVECHAT_API_PATH = "/api/v1/livechat"

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]


@dataclass
class APIConfig:
    """Connection settings shared by all resources."""

    server_url: str


class BaseAPI:
    """
    Base class for Livechat resources.

    Holds the livechat base URL and, optionally, an httpx.AsyncClient shared
    with the other resources. Without a client, each request opens its own
    short-lived one.
    """

    def __init__(
        self,
        server_url: str | APIConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ):
        if isinstance(server_url, APIConfig):
            server_url = server_url.server_url
        self.server_url = f"{server_url.rstrip('/')}{LIVECHAT_API_PATH}"
        self._http_client = http_client

    async def request(self, endpoint: str, method: HttpMethod, **options: Any) -> Any:
        """
        Send a request to the Livechat API and return the decoded JSON body.

        Args:
            endpoint: Path relative to the livechat base URL (e.g. "/visitor")
            method: HTTP verb
            **options: Forwarded verbatim to httpx (headers, json, files, params...)

        Raises:
            APIError: On non-success status or transport failure
        """
        url = f"{self.server_url}{endpoint}"
        logger.debug(f"{method} {url}")

        try:
            response = await self._send(method, url, **options)
            logger.debug(f"{method} {url} -> {response.status_code}")

            if not response.is_success:
                try:
                    error_data = response.json()
                except ValueError:
                    error_data = None
                raise self._create_api_error(response.status_code, error_data)

            if not response.content:
                return None
            return response.json()
        except APIError:
            raise
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Request to {url} failed: {e}")
            raise APIError(0, f"Request failed: {e}", "API", e) from e

    async def _send(self, method: str, url: str, **options: Any) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.request(method, url, **options)

        async with httpx.AsyncClient() as client:
            return await client.request(method, url, **options)

    def _create_api_error(self, status: int, error_data: Any) -> APIError:
        """Build an APIError from a non-success response body."""
        if error_data is None or error_data == "":
            message = "No error details provided."
        elif isinstance(error_data, str):
            message = error_data
        elif isinstance(error_data, dict) and error_data.get("message"):
            message = str(error_data["message"])
        elif isinstance(error_data, dict) and error_data.get("error"):
            message = str(error_data["error"])
        else:
            message = "Unknown error occurred."

        logger.warning(f"Livechat API error {status}: {message}")
        return APIError(status, message, "API", error_data)

    def _handle_sdk_error(self, code: int, message: str) -> NoReturn:
        """Raise an SDK-side error (e.g. a missing required argument)."""
        raise APIError(code, message, "SDK")

    @staticmethod
    def _path(segment: str) -> str:
        """Percent-encode a value used as a URL path segment."""
        return quote(str(segment), safe="")

    @staticmethod
    def _compact(**fields: Any) -> dict[str, Any]:
        """Drop fields whose value is None."""
        return {key: value for key, value in fields.items() if value is not None}
