"""Ordering domain API package."""

from ordering.api.routes import api_order_router, order_router

__all__ = ["order_router", "api_order_router"]
