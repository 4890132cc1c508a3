"""ASGI entry point for Granian multi-worker support.

Configuration is loaded from the DEPOSITADDR_CONFIG environment variable set
by the main process.
"""

from __future__ import annotations

import json
import logging
import os
from typing import TYPE_CHECKING, Any

import msgspec

from .config import Config
from .server import create_app

if TYPE_CHECKING:
    from collections.abc import Callable

    from litestar import Litestar
    from litestar.types import LifeSpanScope, Scope

logger = logging.getLogger(__name__)


def load_config_from_env() -> Config | None:
    """Load configuration from environment variable."""
    config_json = os.environ.get("DEPOSITADDR_CONFIG")
    if not config_json:
        return None

    try:
        return msgspec.convert(json.loads(config_json), Config)
    except (json.JSONDecodeError, msgspec.ValidationError) as e:
        logger.error(f"Failed to load config from environment: {e}")
        return None


def store_config_in_env(config: Config) -> None:
    """Store configuration in environment variable for worker processes."""
    os.environ["DEPOSITADDR_CONFIG"] = msgspec.json.encode(config).decode()


_app_instance: Litestar | None = None


def get_app() -> Litestar:
    """Get or create the Litestar app instance."""
    global _app_instance
    if _app_instance is None:
        config = load_config_from_env()
        if config is None:
            raise RuntimeError(
                "Configuration not found. Use 'python -m depositaddr' to start the server.",
            )

        logging.basicConfig(
            level=getattr(logging, config.normalized_log_level),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

        _app_instance = create_app(config)

    return _app_instance


async def app(
    scope: Scope | LifeSpanScope,
    receive: Callable[..., Any],
    send: Callable[..., Any],
) -> None:
    """ASGI application entry point."""
    litestar_app = get_app()
    await litestar_app(scope, receive, send)
