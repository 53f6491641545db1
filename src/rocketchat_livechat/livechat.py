"""
RocketChatLivechat - single entry point to the Livechat REST resources.
"""

from __future__ import annotations

import httpx

from rocketchat_livechat.api import Agents, Config, Messages, Room, Visitor
from rocketchat_livechat.client.base import APIConfig
from rocketchat_livechat.config import load_livechat_config


class RocketChatLivechat:
    """
    Livechat client exposing one instance of each resource.

    All resources share the same server URL and, when given, the same
    httpx.AsyncClient. The caller owns that client and is responsible for
    closing it.

    Example:
        livechat = RocketChatLivechat("https://chat.example.com")
        await livechat.visitor.register_visitor(
            {"name": "Ada", "email": "ada@example.com", "token": "t1"}
        )
        room = await livechat.room.get_room("t1")
    """

    def __init__(
        self,
        server_url: str | APIConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.agents = Agents(server_url, http_client=http_client)
        self.config = Config(server_url, http_client=http_client)
        self.visitor = Visitor(server_url, http_client=http_client)
        self.room = Room(server_url, http_client=http_client)
        self.messages = Messages(server_url, http_client=http_client)

    @classmethod
    def from_config(
        cls,
        profile: str = "default",
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> RocketChatLivechat:
        """Build a client from ROCKETCHAT_SERVER_URL or livechat_config.yaml."""
        return cls(load_livechat_config(profile), http_client=http_client)
