"""Order aggregate: the persisted snapshot of a cart at checkout.

Shipping address, payment method and every price are copied when the order
is created. Later edits to the user's profile or to product prices never
reach an existing order. Prices are kept as two-decimal strings.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from ordering.domain import ordering
from shared.config import get_settings
from shared.money import format_money, to_money

PRICE_FIELDS = ("items_price", "shipping_price", "tax_price", "total_price")


def _price(field_name, value) -> str:
    try:
        amount = to_money(value)
    except ValueError as exc:
        raise ValidationError({field_name: [str(exc)]}) from exc
    if amount < 0:
        raise ValidationError({field_name: ["Price cannot be negative"]})
    return format_money(amount)


@ordering.value_object(part_of="Order")
class ShippingAddress:
    """Where the order ships, captured at checkout time."""

    full_name = String(required=True, min_length=3, max_length=255)
    street_address = String(required=True, min_length=3, max_length=255)
    city = String(required=True, min_length=3, max_length=100)
    postal_code = String(required=True, min_length=3, max_length=20)
    country = String(required=True, min_length=3, max_length=100)
    lat = Float()
    lng = Float()


@ordering.entity(part_of="Order")
class OrderItem:
    """A line item; ``price`` is the unit price captured at checkout."""

    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    slug = String(required=True, max_length=255)
    image = String(max_length=1024)
    quantity = Integer(required=True, min_value=1)
    price = String(required=True, max_length=20)
    position = Integer(default=0)


@ordering.aggregate
class Order:
    user_id = Identifier(required=True)
    items = HasMany(OrderItem)
    shipping_address = ValueObject(ShippingAddress, required=True)
    payment_method = String(required=True, max_length=50)
    items_price = String(required=True, max_length=20)
    shipping_price = String(required=True, max_length=20)
    tax_price = String(required=True, max_length=20)
    total_price = String(required=True, max_length=20)
    # Fulfillment state, written downstream of order creation
    is_paid = Boolean(default=False)
    paid_at = DateTime()
    is_delivered = Boolean(default=False)
    delivered_at = DateTime()
    created_at = DateTime(default=lambda: datetime.now(UTC))

    @classmethod
    def create(cls, user_id, shipping_address, payment_method, **prices):
        """Build a new order header. Items are added with ``add_line``."""
        methods = get_settings().payment_methods
        if payment_method not in methods:
            raise ValidationError(
                {"payment_method": [f"Invalid payment method, expected one of: {', '.join(methods)}"]}
            )

        return cls(
            user_id=user_id,
            shipping_address=ShippingAddress(**shipping_address),
            payment_method=payment_method,
            **{name: _price(name, prices.get(name)) for name in PRICE_FIELDS},
        )

    @property
    def line_items(self) -> list[OrderItem]:
        return sorted(self.items, key=lambda item: item.position or 0)

    def add_line(self, product_id, name, slug, quantity, price, image=None) -> OrderItem:
        item = OrderItem(
            product_id=product_id,
            name=name,
            slug=slug,
            image=image,
            quantity=quantity,
            price=_price("price", price),
            position=len(self.items),
        )
        self.add_items(item)
        return item
