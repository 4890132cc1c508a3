"""HTTP route handlers for the deposit address API with Litestar.

This package provides controller modules for different API endpoints:
- health: Health check endpoints
- deposit: Aux data, tweak, public key and address derivation
"""

from litestar import Router

from .deposit import DepositController
from .health import HealthController


def get_routers() -> list[Router]:
    """Get all routers for the application."""
    return [
        Router(path="/", route_handlers=[HealthController]),
        Router(path="/", route_handlers=[DepositController]),
    ]


__all__ = [
    "DepositController",
    "HealthController",
    "get_routers",
]
