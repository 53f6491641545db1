"""Livechat room endpoints: lookup, closing, surveys and file uploads."""

from __future__ import annotations

import logging
from typing import IO, Any, Sequence, Union

from rocketchat_livechat.client.base import BaseAPI
from rocketchat_livechat.types import SurveyAnswer, to_payload

logger = logging.getLogger(__name__)

# Anything httpx accepts as a multipart file: raw bytes, an open binary file,
# or a (filename, content) / (filename, content, content_type) tuple.
UploadFile = Union[bytes, IO[bytes], tuple]


class Room(BaseAPI):
    async def get_room(
        self,
        token: str,
        rid: str | None = None,
        agent_id: str | None = None,
    ) -> Any:
        """
        Retrieve room information.

        Endpoint: GET /room

        Args:
            token: The visitor token (required)
            rid: The room ID (optional)
            agent_id: The agent ID (optional)

        Returns:
            The room details
        """
        if not token:
            self._handle_sdk_error(400, "Visitor token is required.")

        params = {"token": token}
        if rid:
            params["rid"] = rid
        if agent_id:
            params["agentId"] = agent_id

        return await self.request("/room", "GET", params=params)

    async def close_room(self, rid: str, token: str) -> Any:
        """
        Close a livechat room.

        Endpoint: POST /room.close
        """
        if not rid or not token:
            self._handle_sdk_error(400, "Room ID and visitor token are required.")

        return await self.request(
            "/room.close", "POST", json={"rid": rid, "token": token}
        )

    async def submit_survey(
        self,
        rid: str,
        token: str,
        data: Sequence[SurveyAnswer | dict[str, Any]],
    ) -> Any:
        """
        Submit a room survey (feedback).

        Endpoint: POST /room.survey

        Args:
            rid: The room ID (required)
            token: The visitor token (required)
            data: Survey answers, each with a name and a value (must not be empty)
        """
        if not rid or not token or not data:
            self._handle_sdk_error(
                400, "Room ID, visitor token, and survey data are required."
            )

        answers = [to_payload(answer) for answer in data]
        return await self.request(
            "/room.survey", "POST", json={"rid": rid, "token": token, "data": answers}
        )

    async def upload_file(
        self,
        rid: str,
        file: UploadFile,
        token: str,
        description: str | None = None,
    ) -> Any:
        """
        Upload a file to a Livechat room.

        Endpoint: POST /upload/{rid}

        The body is sent as multipart form data; the visitor token travels in
        the x-visitor-token header.

        Args:
            rid: The room ID (required)
            file: The file to upload (required)
            token: The visitor token (required)
            description: Optional file description
        """
        if not rid or not file or not token:
            self._handle_sdk_error(
                400, "Room ID, file, and visitor token are required."
            )

        form = {"description": description} if description else None
        logger.debug(f"Uploading file to room {rid}")
        return await self.request(
            f"/upload/{self._path(rid)}",
            "POST",
            files={"file": file},
            data=form,
            headers={"x-visitor-token": token},
        )
