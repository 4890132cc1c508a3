"""Configuration management using msgspec Struct."""

import argparse
import os

import msgspec

from .networks import Network

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config(msgspec.Struct, frozen=True):
    """Application configuration using msgspec Struct."""

    # HTTP server settings
    host: str = "127.0.0.1"
    port: int = 8080

    # Logging
    log_level: str = "INFO"

    # Metrics settings
    metrics_host: str = "127.0.0.1"
    metrics_port: int = 8081

    # Default network for address encoding
    network: str = Network.MAINNET.value

    # Granian worker processes
    workers: int = 1

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.port < 1 or self.port > 65535:
            raise ValueError(f"port must be between 1 and 65535, got {self.port}")

        if self.metrics_port < 1 or self.metrics_port > 65535:
            raise ValueError(f"metrics_port must be between 1 and 65535, got {self.metrics_port}")

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {VALID_LOG_LEVELS}, got {self.log_level}")

        valid_networks = [n.value for n in Network]
        if self.network.lower() not in valid_networks:
            raise ValueError(f"network must be one of {valid_networks}, got {self.network}")

        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")

    @property
    def normalized_log_level(self) -> str:
        """Return normalized uppercase log level."""
        return self.log_level.upper()

    @property
    def default_network(self) -> Network:
        return Network.parse(self.network)


def get_config(argv: list[str] | None = None) -> Config:
    """Parse command line arguments and return configuration.

    When DEPOSITADDR_FROM_ENV is set, configuration is read from
    DEPOSITADDR_* environment variables instead.
    """
    if os.environ.get("DEPOSITADDR_FROM_ENV") is not None:
        return _get_config_from_env()

    parser = argparse.ArgumentParser(
        description="depositaddr - Segwit deposit address derivation service",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument("--host", default="127.0.0.1", help="HTTP server host")
    parser.add_argument("-p", "--port", type=int, default=8080, help="HTTP server port")
    parser.add_argument(
        "--log-level",
        choices=list(VALID_LOG_LEVELS),
        default="INFO",
        help="Logging level",
    )
    parser.add_argument("--metrics-port", type=int, default=8081, help="Port for metrics server")
    parser.add_argument("--metrics-host", default="127.0.0.1", help="Host for metrics server")
    parser.add_argument(
        "--network",
        choices=[n.value for n in Network],
        default=Network.MAINNET.value,
        help="Default network for derived addresses",
    )
    parser.add_argument("--workers", type=int, default=1, help="Number of Granian workers")

    args = parser.parse_args(argv)

    config_dict: dict[str, object] = {
        "host": args.host,
        "port": args.port,
        "log_level": args.log_level,
        "metrics_port": args.metrics_port,
        "metrics_host": args.metrics_host,
        "network": args.network,
        "workers": args.workers,
    }

    try:
        config = msgspec.convert(config_dict, Config)
    except msgspec.ValidationError as e:
        raise ValueError(f"Configuration validation error: {e}")

    return config


def _get_config_from_env() -> Config:
    """Load configuration from DEPOSITADDR_* environment variables."""
    config_dict: dict[str, object] = {
        "host": os.getenv("DEPOSITADDR_HOST", "0.0.0.0"),
        "port": int(os.getenv("DEPOSITADDR_PORT", "8080")),
        "log_level": os.getenv("DEPOSITADDR_LOG_LEVEL", "INFO"),
        "metrics_port": int(os.getenv("DEPOSITADDR_METRICS_PORT", "8081")),
        "metrics_host": os.getenv("DEPOSITADDR_METRICS_HOST", "127.0.0.1"),
        "network": os.getenv("DEPOSITADDR_NETWORK", Network.MAINNET.value),
        "workers": int(os.getenv("DEPOSITADDR_WORKERS", "1")),
    }

    try:
        config = msgspec.convert(config_dict, Config)
    except msgspec.ValidationError as e:
        raise ValueError(f"Configuration validation error: {e}")

    return config
