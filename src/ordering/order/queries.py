"""Read-side order queries."""

import math

import structlog
from protean.utils.globals import current_domain

from identity.session.port import UserSession
from identity.user.repository import find_user
from ordering.domain import ordering
from ordering.order.order import Order
from ordering.projections.order_detail import OrderDetail, OrderPage, OrderSummary
from shared.config import get_settings
from shared.errors import AuthenticationRequired, InvalidPageRequest

logger = structlog.get_logger(__name__)


def get_order_by_id(order_id) -> OrderDetail | None:
    """Return the order with its items and buyer, or None if there is no such order."""
    with ordering.domain_context():
        order = current_domain.repository_for(Order).find_by_id(order_id)
    if order is None:
        logger.debug("order_not_found", order_id=str(order_id))
        return None
    return OrderDetail.from_order(order, find_user(order.user_id))


def get_my_orders(session: UserSession | None, page: int = 1, limit: int | None = None) -> OrderPage:
    """Return one page of the caller's orders, newest first.

    Raises:
        AuthenticationRequired: when nobody is signed in.
        InvalidPageRequest: when ``page`` or ``limit`` is below 1.
    """
    if session is None or not session.user_id:
        raise AuthenticationRequired()

    limit = limit if limit is not None else get_settings().page_size
    if page < 1:
        raise InvalidPageRequest("page must be 1 or greater")
    if limit < 1:
        raise InvalidPageRequest("limit must be 1 or greater")

    with ordering.domain_context():
        repo = current_domain.repository_for(Order)
        orders = repo.list_for_user(session.user_id, limit=limit, offset=(page - 1) * limit)
        total = repo.count_for_user(session.user_id)

    return OrderPage(
        data=[OrderSummary.from_order(order) for order in orders],
        total_pages=math.ceil(total / limit),
    )
