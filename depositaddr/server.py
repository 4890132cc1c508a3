"""Litestar server setup with Granian ASGI server."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from granian import Granian
from granian.constants import Interfaces
from litestar import Litestar
from litestar.datastructures import State
from litestar.di import Provide

from .deriver import Deriver
from .handlers import get_routers
from .metrics import MetricsServer, cleanup_multiproc_dir, enable_multiproc_registry

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from .config import Config

logger = logging.getLogger(__name__)


def provide_deriver(state: State) -> Deriver:
    """Provide the Deriver from application state.

    Handlers receive the Deriver via dependency injection instead of
    accessing request.app.state directly.
    """
    result: Deriver = state["deriver"]
    return result


def create_app(
    config: Config | None = None,
    deriver: Deriver | None = None,
) -> Litestar:
    """Create and configure the Litestar application."""
    if deriver is None:
        deriver = Deriver(config.default_network) if config is not None else Deriver()

    @asynccontextmanager
    async def lifespan(_app: Litestar) -> AsyncGenerator[None]:
        logger.info(f"Starting depositaddr server (network={deriver.network.value})")
        yield
        logger.info("Stopping depositaddr server")

    return Litestar(
        route_handlers=get_routers(),
        lifespan=[lifespan],
        debug=False,
        state=State({"deriver": deriver}),
        dependencies={
            "deriver": Provide(provide_deriver, sync_to_thread=False),
        },
        signature_types=[Deriver],
    )


def run_server(config: Config) -> None:
    """Run the Litestar server with Granian."""
    logger.info(f"Starting depositaddr on {config.host}:{config.port}")

    # Inherited by worker processes, which import metrics after this is set
    os.environ["DEPOSITADDR_WORKERS"] = str(config.workers)

    if config.workers > 1:
        # The metrics module was imported before the worker count was parsed
        multiproc_dir = enable_multiproc_registry()
        logger.info(
            f"Enabled Prometheus multi-process metrics mode "
            f"({config.workers} workers, dir={multiproc_dir})"
        )

    from . import asgi

    asgi.store_config_in_env(config)

    server = Granian(
        target="depositaddr.asgi:app",
        address=config.host,
        port=config.port,
        interface=Interfaces.ASGI,
        workers=config.workers,
        log_level=config.log_level.lower(),
    )

    cleanup_multiproc_dir()

    # Metrics are served from the main process, not the workers
    metrics_server = MetricsServer(host=config.metrics_host, port=config.metrics_port)
    metrics_server.start()

    try:
        server.serve()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    finally:
        metrics_server.stop()
