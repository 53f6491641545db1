"""
Livechat configuration management utilities.

Loads the Rocket.Chat server URL from the ROCKETCHAT_SERVER_URL environment
variable or from a livechat_config.yaml file at the project root.
"""

import logging
import os
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

SERVER_URL_ENV = "ROCKETCHAT_SERVER_URL"


def get_config_path() -> Path:
    """
    Get the path to the Livechat configuration file.

    Looks for livechat_config.yaml in the current working directory (project root).
    """
    return Path(os.getcwd()) / "livechat_config.yaml"


def load_livechat_config(profile: str = "default") -> str:
    """
    Load the Rocket.Chat server URL for a profile.

    The ROCKETCHAT_SERVER_URL environment variable wins when set. Otherwise
    the profile is read from livechat_config.yaml:

        default:
          server_url: https://chat.example.com

    Args:
        profile: The key identifying the server in the config file

    Returns:
        The server base URL (without the /api/v1/livechat suffix)

    Raises:
        FileNotFoundError: If livechat_config.yaml doesn't exist
        ValueError: If the profile or its server_url is missing or empty
        RuntimeError: If the file can't be parsed
    """
    env_url = os.environ.get(SERVER_URL_ENV)
    if env_url:
        logger.debug(f"Using server URL from {SERVER_URL_ENV}")
        return env_url

    config_path = get_config_path()
    logger.debug(f"Loading config from: {config_path}")

    if not config_path.exists():
        raise FileNotFoundError(
            f"livechat_config.yaml not found at {config_path}. "
            f"Copy livechat_config.yaml.example to livechat_config.yaml "
            f"or set {SERVER_URL_ENV}."
        )

    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}

        profile_config = config.get(profile, {})

        if not profile_config:
            raise ValueError(
                f"Profile '{profile}' not found in {config_path}. "
                f"Please add the server configuration."
            )

        server_url = profile_config.get("server_url")
        if not server_url:
            raise ValueError(
                f"Missing required field 'server_url' for profile '{profile}' "
                f"in {config_path}"
            )

        return server_url
    except ValueError:
        raise
    except Exception as e:
        raise RuntimeError(f"Error loading livechat config: {e}") from e
