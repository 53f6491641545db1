"""Request plumbing shared by the Livechat resources."""

from rocketchat_livechat.client.base import (
    LIVECHAT_API_PATH,
    APIConfig,
    BaseAPI,
    HttpMethod,
)

__all__ = ["LIVECHAT_API_PATH", "APIConfig", "BaseAPI", "HttpMethod"]
