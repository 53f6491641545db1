"""Livechat widget configuration endpoint."""

from __future__ import annotations

from typing import Any

from rocketchat_livechat.client.base import BaseAPI


class Config(BaseAPI):
    async def get_config(
        self, token: str | None = None, department: str | None = None
    ) -> Any:
        """
        Retrieve Livechat configuration settings.

        Endpoint: GET /config

        Args:
            token: The visitor token (optional)
            department: The visitor's department (optional)
        """
        params = {}
        if token:
            params["token"] = token
        if department:
            params["department"] = department

        return await self.request("/config", "GET", params=params or None)
