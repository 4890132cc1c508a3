"""Prometheus metrics for depositaddr with standalone HTTP server.

This module defines and exposes all Prometheus metrics used by depositaddr.
Metrics are served on a separate port using prometheus_client's built-in HTTP server.

Multi-process support:
When running with multiple Granian workers, each process has its own memory space.
Prometheus client supports multi-process mode via files in PROMETHEUS_MULTIPROC_DIR.
"""

from __future__ import annotations

import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import TYPE_CHECKING

from litestar import Controller, get
from litestar.response import Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    Info,
    generate_latest,
    start_http_server,
)
from prometheus_client.multiprocess import MultiProcessCollector

if TYPE_CHECKING:
    from http.server import ThreadingHTTPServer
    from wsgiref.simple_server import WSGIServer

logger = logging.getLogger(__name__)


def setup_multiproc_dir() -> Path | None:
    """Set up Prometheus multi-process directory if needed.

    Returns:
        Path to the multi-process directory, or None in single worker mode.
    """
    if "PROMETHEUS_MULTIPROC_DIR" in os.environ:
        return Path(os.environ["PROMETHEUS_MULTIPROC_DIR"])

    workers = int(os.environ.get("DEPOSITADDR_WORKERS", "1"))
    if workers <= 1:
        return None

    multiproc_dir = Path(tempfile.gettempdir()) / "depositaddr_metrics"
    multiproc_dir.mkdir(parents=True, exist_ok=True)
    os.environ["PROMETHEUS_MULTIPROC_DIR"] = str(multiproc_dir)

    logger.info(
        f"Multi-process mode detected ({workers} workers). "
        f"Using PROMETHEUS_MULTIPROC_DIR: {multiproc_dir}"
    )
    return multiproc_dir


def cleanup_multiproc_dir() -> None:
    """Remove metrics files left over from a previous run."""
    multiproc_dir = os.environ.get("PROMETHEUS_MULTIPROC_DIR")
    if not multiproc_dir:
        return

    for file_path in Path(multiproc_dir).glob("*.db"):
        try:
            file_path.unlink()
            logger.debug(f"Cleaned up stale metrics file: {file_path}")
        except OSError as e:
            logger.warning(f"Could not remove stale metrics file {file_path}: {e}")


REGISTRY = CollectorRegistry()
_multiproc_collector: MultiProcessCollector | None = None


def enable_multiproc_registry() -> Path | None:
    """Attach a MultiProcessCollector to REGISTRY when running multiple workers.

    The collector is registered at most once. The main process calls this
    again from run_server once the worker count from the CLI is known.

    Returns:
        Path to the multi-process directory, or None in single worker mode.
    """
    global _multiproc_collector
    multiproc_dir = setup_multiproc_dir()
    if multiproc_dir is not None and _multiproc_collector is None:
        # Aggregates metrics from all worker processes
        _multiproc_collector = MultiProcessCollector(REGISTRY, path=str(multiproc_dir))  # type: ignore[no-untyped-call]
    return multiproc_dir


enable_multiproc_registry()


# Application info
APP_INFO = Info(
    "depositaddr_build_info",
    "Build information about depositaddr",
    registry=REGISTRY,
)
APP_INFO.info({"version": "0.1.0", "name": "depositaddr"})

# Derivation metrics
DERIVATION_REQUESTS_TOTAL = Counter(
    "derivation_requests_total",
    "Total number of derivation requests",
    ["operation"],
    registry=REGISTRY,
)

DERIVATION_DURATION_SECONDS = Histogram(
    "derivation_duration_seconds",
    "Time spent performing derivations",
    ["operation"],
    buckets=[0.00001, 0.00005, 0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1],
    registry=REGISTRY,
)

DERIVATION_ERRORS_TOTAL = Counter(
    "derivation_errors_total",
    "Total number of failed derivations",
    ["error_type"],
    registry=REGISTRY,
)


def get_metrics_output() -> bytes:
    """Generate Prometheus-formatted metrics output."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for Prometheus metrics."""
    return CONTENT_TYPE_LATEST


class MetricsController(Controller):  # type: ignore[misc]
    """Prometheus metrics HTTP endpoint.

    In production, metrics are served on a separate port via
    :class:`MetricsServer`; this controller is mounted for tests.
    """

    path = "/"

    @get("/metrics")  # type: ignore[untyped-decorator]
    async def metrics(self) -> Response:
        """Handler for the /metrics endpoint."""
        return Response(
            content=get_metrics_output(),
            media_type=get_metrics_content_type(),
        )


class MetricsServer:
    """Standalone Prometheus metrics HTTP server using prometheus_client.start_http_server."""

    def __init__(self, host: str = "127.0.0.1", port: int = 8081) -> None:
        self._host = host
        self._port = port
        self._httpd: WSGIServer | ThreadingHTTPServer | None = None
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        """Start the metrics server in a background thread."""
        self._thread = threading.Thread(
            target=self._run_server,
            daemon=True,
        )
        self._thread.start()
        logger.info(
            f"Metrics server started at http://{self._host}:{self._port}/metrics",
        )

    def _run_server(self) -> None:
        try:
            server, _ = start_http_server(
                port=self._port,
                addr=self._host,
                registry=REGISTRY,
            )
            self._httpd = server
        except Exception:
            logger.exception("Failed to start metrics server")
            raise

    def stop(self) -> None:
        """Stop the metrics server."""
        if self._httpd is not None:
            try:
                self._httpd.shutdown()
                self._httpd.server_close()
            except Exception:
                logger.exception("Error stopping metrics server")
            finally:
                self._httpd = None

        if self._thread is not None:
            self._thread.join(timeout=2)
            self._thread = None

        logger.info("Metrics server stopped")
