"""Repository for the Order aggregate.

Lookups return the whole aggregate, line items included.
"""

from protean.exceptions import ObjectNotFoundError

from ordering.domain import ordering
from ordering.order.order import Order


@ordering.repository(part_of=Order)
class OrderRepository:
    def insert_order(self, order: Order) -> Order:
        self.add(order)
        return order

    def insert_order_item(self, order: Order, **line) -> None:
        order.add_line(**line)
        self.add(order)

    def find_by_id(self, order_id) -> Order | None:
        if not order_id:
            return None
        try:
            return self.get(str(order_id))
        except ObjectNotFoundError:
            return None

    def count_for_user(self, user_id) -> int:
        return self._dao.query.filter(user_id=str(user_id)).all().total

    def list_for_user(self, user_id, limit: int, offset: int) -> list[Order]:
        """Return one page of the user's orders, most recent first."""
        results = (
            self._dao.query.filter(user_id=str(user_id))
            .order_by("-created_at")
            .offset(offset)
            .limit(limit)
            .all()
        )
        return list(results.items)
