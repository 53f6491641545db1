"""Livechat agent endpoints."""

from __future__ import annotations

from typing import Any

from rocketchat_livechat.client.base import BaseAPI


class Agents(BaseAPI):
    async def get_agent_info(self, rid: str, token: str) -> Any:
        """
        Retrieve information about the agent serving a room.

        Endpoint: GET /agent.info/{rid}/{token}
        """
        if not rid:
            self._handle_sdk_error(400, "Room ID (rid) is required.")
        if not token:
            self._handle_sdk_error(400, "Visitor token is required.")

        return await self.request(
            f"/agent.info/{self._path(rid)}/{self._path(token)}", "GET"
        )

    async def get_next_agent(self, token: str) -> Any:
        """
        Retrieve the next available agent.

        Endpoint: GET /agent.next/{token}
        """
        if not token:
            self._handle_sdk_error(400, "Visitor token is required for getNextAgent.")

        return await self.request(f"/agent.next/{self._path(token)}", "GET")
