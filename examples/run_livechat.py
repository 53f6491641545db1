#!/usr/bin/env python3
"""
Walk through a Livechat session: register a visitor, open a room, chat, close.

Usage:
    uv run python examples/run_livechat.py
    uv run python examples/run_livechat.py --profile staging
    uv run python examples/run_livechat.py --log-level DEBUG

Setup:
1. Copy .env.example to .env and set ROCKETCHAT_SERVER_URL, or
2. Copy livechat_config.yaml.example to livechat_config.yaml
"""

import argparse
import asyncio
import logging
import uuid

import httpx
from dotenv import load_dotenv

from rocketchat_livechat import APIError, RocketChatLivechat

# Load environment from .env
load_dotenv()


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure logging."""
    log_level = level.upper()
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("rocketchat_livechat").setLevel(
        getattr(logging, log_level, logging.INFO)
    )
    return logging.getLogger(__name__)


async def run_session(profile: str, logger: logging.Logger) -> None:
    token = f"visitor-{uuid.uuid4()}"

    async with httpx.AsyncClient(timeout=15) as http_client:
        livechat = RocketChatLivechat.from_config(profile, http_client=http_client)

        config = await livechat.config.get_config(token=token)
        logger.info(f"Livechat enabled: {config.get('config', {}).get('enabled')}")

        await livechat.visitor.register_visitor(
            {"name": "Example Visitor", "email": "visitor@example.com", "token": token}
        )
        room = await livechat.room.get_room(token)
        rid = room["room"]["_id"]
        logger.info(f"Opened room {rid}")

        await livechat.messages.send_message(token, rid, "Hello from the SDK!")
        history = await livechat.messages.get_message_history(rid, token, limit=20)
        for message in history.get("messages", []):
            logger.info(f"[{message.get('u', {}).get('username')}]: {message.get('msg')}")

        await livechat.room.close_room(rid, token)
        await livechat.visitor.delete_visitor(token)
        logger.info("Session closed")


def main() -> None:
    parser = argparse.ArgumentParser(description="Run a sample Livechat session")
    parser.add_argument("--profile", default="default", help="Config profile name")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    args = parser.parse_args()

    logger = setup_logging(args.log_level)
    try:
        asyncio.run(run_session(args.profile, logger))
    except APIError as e:
        logger.error(f"Livechat {e.error_type} error {e.code}: {e.message}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
