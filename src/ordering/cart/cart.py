"""Shopping Cart aggregate: the items a signed-in user intends to buy.

Checkout does not delete the cart. It removes every item and zeroes every
price, so the same cart is reused for the next purchase.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, HasMany, Identifier, Integer, String

from ordering.domain import ordering
from shared.money import ZERO, format_money


@ordering.entity(part_of="Cart")
class CartItem:
    """A product line in the cart, priced at the time it was added."""

    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    slug = String(required=True, max_length=255)
    image = String(max_length=1024)
    quantity = Integer(required=True, min_value=1)
    price = String(required=True, max_length=20)
    position = Integer(default=0)


@ordering.aggregate
class Cart:
    user_id = Identifier()
    items = HasMany(CartItem)
    items_price = String(max_length=20, default=format_money(ZERO))
    shipping_price = String(max_length=20, default=format_money(ZERO))
    tax_price = String(max_length=20, default=format_money(ZERO))
    total_price = String(max_length=20, default=format_money(ZERO))
    created_at = DateTime(default=lambda: datetime.now(UTC))

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def line_items(self) -> list[CartItem]:
        """Items in the order they were put in the cart."""
        return sorted(self.items, key=lambda item: item.position or 0)

    def add_item(self, product_id, name, slug, quantity, price, image=None):
        self.add_items(
            CartItem(
                product_id=product_id,
                name=name,
                slug=slug,
                image=image,
                quantity=quantity,
                price=str(price),
                position=len(self.items),
            )
        )

    def clear(self):
        """Remove every item and zero all prices."""
        for item in list(self.items):
            self.remove_items(item)
        self.items_price = self.shipping_price = self.tax_price = self.total_price = format_money(ZERO)
