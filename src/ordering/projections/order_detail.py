"""Order read models: detail (with items and buyer) and summary views.

Built from loaded Order aggregates; money is rendered as two-decimal strings
in JSON.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, PlainSerializer

from shared.money import format_money

MoneyValue = Annotated[Decimal, PlainSerializer(format_money, return_type=str, when_used="json")]


class OrderItemView(BaseModel):
    product_id: str
    name: str
    slug: str
    image: str | None = None
    quantity: int
    price: MoneyValue


class BuyerView(BaseModel):
    name: str
    email: str


class OrderSummary(BaseModel):
    """Lightweight listing view used by order history pages."""

    id: str
    user_id: str
    payment_method: str
    items_price: MoneyValue
    shipping_price: MoneyValue
    tax_price: MoneyValue
    total_price: MoneyValue
    is_paid: bool = False
    paid_at: datetime | None = None
    is_delivered: bool = False
    delivered_at: datetime | None = None
    created_at: datetime

    @classmethod
    def _fields_from(cls, order) -> dict:
        return {
            "id": str(order.id),
            "user_id": str(order.user_id),
            "payment_method": order.payment_method,
            "items_price": order.items_price,
            "shipping_price": order.shipping_price,
            "tax_price": order.tax_price,
            "total_price": order.total_price,
            "is_paid": bool(order.is_paid),
            "paid_at": order.paid_at,
            "is_delivered": bool(order.is_delivered),
            "delivered_at": order.delivered_at,
            "created_at": order.created_at,
        }

    @classmethod
    def from_order(cls, order) -> "OrderSummary":
        return cls(**cls._fields_from(order))


class OrderDetail(OrderSummary):
    shipping_address: dict
    items: list[OrderItemView]
    user: BuyerView | None = None

    @classmethod
    def from_order(cls, order, user=None) -> "OrderDetail":
        return cls(
            **cls._fields_from(order),
            shipping_address={k: v for k, v in order.shipping_address.to_dict().items() if v is not None},
            items=[
                OrderItemView(
                    product_id=str(item.product_id),
                    name=item.name,
                    slug=item.slug,
                    image=item.image,
                    quantity=item.quantity,
                    price=item.price,
                )
                for item in order.line_items
            ],
            user=BuyerView(name=user.name, email=user.email) if user else None,
        )


class OrderPage(BaseModel):
    data: list[OrderSummary]
    total_pages: int
