"""Ordering bounded context: shopping carts and the orders placed from them."""

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
