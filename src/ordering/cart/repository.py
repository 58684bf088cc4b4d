"""Repository for the Cart aggregate."""

from ordering.cart.cart import Cart
from ordering.domain import ordering


@ordering.repository(part_of=Cart)
class CartRepository:
    def get_for_user(self, user_id) -> Cart | None:
        """Return the user's most recent cart, or None."""
        if not user_id:
            return None
        results = self._dao.query.filter(user_id=str(user_id)).order_by("-created_at").limit(1).all()
        return results.first if results.items else None

    def clear(self, cart: Cart) -> Cart:
        cart.clear()
        self.add(cart)
        return cart
