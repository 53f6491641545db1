"""
Livechat REST resources.

Each resource maps one group of /api/v1/livechat endpoints to coroutines.
"""

from rocketchat_livechat.api.agents import Agents
from rocketchat_livechat.api.config import Config
from rocketchat_livechat.api.messages import Messages
from rocketchat_livechat.api.rooms import Room
from rocketchat_livechat.api.visitors import Visitor

__all__ = ["Agents", "Config", "Messages", "Room", "Visitor"]
