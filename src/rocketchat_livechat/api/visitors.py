"""Livechat visitor endpoints."""

from __future__ import annotations

import logging
from typing import Any

from rocketchat_livechat.client.base import BaseAPI
from rocketchat_livechat.types import VisitorInfo, to_payload

logger = logging.getLogger(__name__)


class Visitor(BaseAPI):
    async def register_visitor(self, visitor: VisitorInfo | dict[str, Any]) -> Any:
        """
        Create a new visitor.

        Endpoint: POST /visitor

        Args:
            visitor: Visitor data; name, email and token are required

        Returns:
            The visitor creation response
        """
        payload = to_payload(visitor)
        if (
            not payload.get("name")
            or not payload.get("email")
            or not payload.get("token")
        ):
            self._handle_sdk_error(400, "Name, email, and token are required.")

        logger.debug(f"Registering visitor {payload['token']}")
        return await self.request("/visitor", "POST", json=payload)

    async def get_visitor(self, token: str) -> Any:
        """
        Retrieve visitor information.

        Endpoint: GET /visitor/{token}
        """
        if not token:
            self._handle_sdk_error(400, "Visitor token is required.")

        return await self.request(f"/visitor/{self._path(token)}", "GET")

    async def delete_visitor(self, token: str) -> Any:
        """
        Delete a visitor.

        Endpoint: DELETE /visitor/{token}
        """
        if not token:
            self._handle_sdk_error(400, "Visitor token is required.")

        return await self.request(f"/visitor/{self._path(token)}", "DELETE")
