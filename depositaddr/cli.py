"""Command line entry point for the deposit address service."""

import logging
import sys

from .config import Config, get_config
from .server import run_server

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_level: str) -> None:
    """Configure root logging at ``log_level``."""
    logging.basicConfig(level=getattr(logging, log_level), format=LOG_FORMAT)


def log_startup(config: Config) -> None:
    network = config.default_network
    logger.info(
        f"Deriving {network.value} deposit addresses (bech32 prefix {network.hrp!r}) "
        f"with {config.workers} worker(s)"
    )
    logger.info(f"Metrics on http://{config.metrics_host}:{config.metrics_port}/metrics")


def main(argv: list[str] | None = None) -> int:
    """Parse configuration and run the server until interrupted.

    Returns the process exit code: 1 for configuration or server errors.
    """
    try:
        config = get_config(argv)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(config.normalized_log_level)
    log_startup(config)

    try:
        run_server(config)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception:
        logger.exception("Server error")
        return 1
    return 0
