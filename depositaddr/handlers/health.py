"""Health check endpoints."""

from __future__ import annotations

from litestar import Controller, get

from depositaddr.deriver import Deriver  # noqa: TC001

from .base import HealthResponse


class HealthController(Controller):  # type: ignore[misc]
    """Health check endpoints."""

    path = "/"

    @get("/health")  # type: ignore[untyped-decorator]
    async def health(self, deriver: Deriver) -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy", network=deriver.network.value)
