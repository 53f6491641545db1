"""
Request payload models for the Livechat API.

Field names follow the Livechat wire format (camelCase). Required fields are
Optional here on purpose: presence is checked by the resource methods so a
missing value surfaces as an SDK APIError, not a pydantic ValidationError.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class CustomField(BaseModel):
    """Visitor custom field."""

    key: str
    value: str
    overwrite: bool = False


class VisitorInfo(BaseModel):
    """Visitor registration payload for POST /visitor."""

    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    email: Optional[str] = None
    token: Optional[str] = None
    department: Optional[str] = None
    phone: Optional[str] = None
    customFields: Optional[list[CustomField]] = None


class SurveyAnswer(BaseModel):
    """Single answer of a room survey."""

    name: str
    value: str


class MessageAgent(BaseModel):
    """Agent a message is sent on behalf of."""

    agentId: str
    username: str


def to_payload(value: BaseModel | dict[str, Any]) -> dict[str, Any]:
    """Serialize a model (or pass through a dict) dropping unset optional fields."""
    if isinstance(value, BaseModel):
        return value.model_dump(exclude_none=True)
    return {key: item for key, item in value.items() if item is not None}
