"""Livechat message endpoints."""

from __future__ import annotations

from typing import Any

from rocketchat_livechat.client.base import BaseAPI
from rocketchat_livechat.types import MessageAgent, to_payload


class Messages(BaseAPI):
    async def send_message(
        self,
        token: str,
        rid: str,
        msg: str,
        _id: str | None = None,
        agent: MessageAgent | dict[str, str] | None = None,
    ) -> Any:
        """
        Send a new message in a Livechat room.

        Endpoint: POST /message

        Args:
            token: The visitor token (required)
            rid: The room ID (required)
            msg: The message text (required)
            _id: Optional custom message ID
            agent: Optional agent details (agentId, username)
        """
        if not token or not rid or not msg:
            self._handle_sdk_error(400, "Token, room ID, and message are required.")

        body = self._compact(
            token=token,
            rid=rid,
            msg=msg,
            _id=_id,
            agent=to_payload(agent) if agent is not None else None,
        )
        return await self.request("/message", "POST", json=body)

    async def update_message(
        self,
        _id: str,
        token: str | None = None,
        rid: str | None = None,
        msg: str | None = None,
    ) -> Any:
        """
        Update a specific Livechat message.

        Endpoint: PUT /message/{_id}
        """
        if not _id:
            self._handle_sdk_error(400, "Message ID is required.")

        return await self.request(
            f"/message/{self._path(_id)}",
            "PUT",
            json=self._compact(token=token, rid=rid, msg=msg),
        )

    async def get_message(self, _id: str, token: str, rid: str) -> Any:
        """
        Retrieve a specific Livechat message.

        Endpoint: GET /message/{_id}
        """
        if not _id or not token or not rid:
            self._handle_sdk_error(400, "Message ID, token, and room ID are required.")

        return await self.request(
            f"/message/{self._path(_id)}",
            "GET",
            params={"token": token, "rid": rid},
        )

    async def delete_message(self, _id: str, token: str, rid: str) -> Any:
        """
        Remove a specific Livechat message.

        Endpoint: DELETE /message/{_id}
        """
        if not _id or not token or not rid:
            self._handle_sdk_error(400, "Message ID, token, and room ID are required.")

        return await self.request(
            f"/message/{self._path(_id)}",
            "DELETE",
            json={"token": token, "rid": rid},
        )

    async def get_message_history(
        self,
        rid: str,
        token: str,
        ls: str | None = None,
        end: str | None = None,
        limit: int | None = None,
    ) -> Any:
        """
        Get the message history of a conversation.

        Endpoint: GET /messages.history/{rid}

        Falsy optional filters (including limit=0) are left out of the query.

        Args:
            rid: The room ID (required)
            token: The visitor token (required)
            ls: Timestamp to start loading messages from
            end: Timestamp to stop loading messages at
            limit: Number of messages to load
        """
        if not rid or not token:
            self._handle_sdk_error(400, "Room ID and visitor token are required.")

        params: dict[str, str] = {"token": token}
        if ls:
            params["ls"] = ls
        if end:
            params["end"] = end
        if limit:
            params["limit"] = str(limit)

        return await self.request(
            f"/messages.history/{self._path(rid)}", "GET", params=params
        )

    async def send_offline_message(
        self,
        name: str,
        email: str,
        message: str,
        department: str,
        host: str,
    ) -> Any:
        """
        Send an offline message when no agent is available.

        Endpoint: POST /offline.message

        Args:
            name: The visitor's name
            email: The visitor's email
            message: The offline message text
            department: The department name
            host: The username of the agent
        """
        if not name or not email or not message or not department or not host:
            self._handle_sdk_error(
                400, "Name, email, message, department, and host are required."
            )

        return await self.request(
            "/offline.message",
            "POST",
            json={
                "name": name,
                "email": email,
                "message": message,
                "department": department,
                "host": host,
            },
        )
