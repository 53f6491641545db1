"""
Livechat configuration utilities.

Usage:
    from rocketchat_livechat.config import load_livechat_config

    server_url = load_livechat_config("default")
"""

from rocketchat_livechat.config.loader import (
    SERVER_URL_ENV,
    get_config_path,
    load_livechat_config,
)

__all__ = ["SERVER_URL_ENV", "get_config_path", "load_livechat_config"]
