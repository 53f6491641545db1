"""
Rocket.Chat Livechat SDK - async client for the Omnichannel Livechat REST API.

Resources:
    Visitor: register, fetch and delete visitors
    Room: fetch and close rooms, submit surveys, upload files
    Messages: send, update, fetch and delete messages, history, offline messages
    Agents: agent serving a room, next available agent
    Config: widget configuration

Errors:
    APIError: raised for server errors, transport failures ("API") and
        missing required arguments ("SDK")

Example:
    from rocketchat_livechat import RocketChatLivechat, APIError

    livechat = RocketChatLivechat("https://chat.example.com")
    try:
        visitor = await livechat.visitor.get_visitor("visitor-token")
    except APIError as e:
        print(e.code, e.message, e.error_type)
"""

from .api import Agents, Config, Messages, Room, Visitor
from .client import APIConfig, BaseAPI
from .errors import APIError, ErrorType
from .livechat import RocketChatLivechat
from .types import CustomField, MessageAgent, SurveyAnswer, VisitorInfo

__all__ = [
    # Facade
    "RocketChatLivechat",
    "APIConfig",
    # Resources
    "Agents",
    "Config",
    "Messages",
    "Room",
    "Visitor",
    "BaseAPI",
    # Errors
    "APIError",
    "ErrorType",
    # Payload models
    "CustomField",
    "MessageAgent",
    "SurveyAnswer",
    "VisitorInfo",
]

__version__ = "0.0.1"
