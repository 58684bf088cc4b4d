"""Order creation: command, handler, and the checkout workflow around them.

Steps, each short-circuiting the rest:
    1. Require an authenticated session
    2. Cart missing or empty           → Redirect("/cart")
    3. No shipping address on file     → Redirect("/shipping-address")
       No payment method on file       → Redirect("/payment-method")
    4. Process CreateOrder: validate the order, insert it and its line items,
       and empty the cart, all in the handler's unit of work
    5. Redirect("/order/<id>")

Any other failure comes back as ``Failure(message)``. Redirects are returned
values, so the catch-all below can never swallow or reformat them.
"""

import json

import structlog
from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from identity.session.port import UserSession
from identity.user.repository import find_user
from ordering.cart.cart import Cart
from ordering.domain import ordering
from ordering.order.order import Order
from shared.errors import AuthenticationRequired, PersistenceFailure, UserNotFound, format_error
from shared.navigation import (
    CART_PATH,
    PAYMENT_METHOD_PATH,
    SHIPPING_ADDRESS_PATH,
    Failure,
    Outcome,
    Redirect,
    Success,
    order_path,
)

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class CreateOrder:
    user_id = Identifier(required=True)
    cart_id = Identifier(required=True)
    shipping_address = Text(required=True)  # JSON: address dict
    payment_method = String(required=True, max_length=50)


@ordering.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        carts = current_domain.repository_for(Cart)
        orders = current_domain.repository_for(Order)

        cart = carts.get(command.cart_id)
        shipping_address = (
            json.loads(command.shipping_address)
            if isinstance(command.shipping_address, str)
            else command.shipping_address
        )

        order = orders.insert_order(
            Order.create(
                user_id=command.user_id,
                shipping_address=shipping_address,
                payment_method=command.payment_method,
                items_price=cart.items_price,
                shipping_price=cart.shipping_price,
                tax_price=cart.tax_price,
                total_price=cart.total_price,
            )
        )
        for item in cart.line_items:
            orders.insert_order_item(
                order,
                product_id=item.product_id,
                name=item.name,
                slug=item.slug,
                image=item.image,
                quantity=item.quantity,
                price=item.price,
            )

        carts.clear(cart)
        return str(order.id)


def create_order(session: UserSession | None, redirect_on_success: bool = True) -> Outcome:
    """Place an order from the signed-in user's cart.

    Args:
        session: The caller's session, or None when nobody is signed in.
        redirect_on_success: Return ``Redirect("/order/<id>")`` when True,
            ``Success(order_id)`` otherwise.
    """
    try:
        if session is None or not session.user_id:
            raise AuthenticationRequired()

        with ordering.domain_context():
            cart = current_domain.repository_for(Cart).get_for_user(session.user_id)
            if cart is None or cart.is_empty:
                return Redirect(CART_PATH)

            user = find_user(session.user_id)
            if user is None:
                raise UserNotFound()
            if not user.address:
                return Redirect(SHIPPING_ADDRESS_PATH)
            if not user.payment_method:
                return Redirect(PAYMENT_METHOD_PATH)

            command = CreateOrder(
                user_id=str(user.id),
                cart_id=str(cart.id),
                shipping_address=json.dumps(user.address.to_dict()),
                payment_method=user.payment_method,
            )
            order_id = current_domain.process(command, asynchronous=False)

        if not order_id:
            raise PersistenceFailure()
    except Exception as exc:
        logger.warning(
            "order_creation_failed",
            user_id=session.user_id if session else None,
            error_type=exc.__class__.__name__,
            error=str(exc),
        )
        return Failure(format_error(exc))

    logger.info("order_created", order_id=order_id, user_id=session.user_id)
    if redirect_on_success:
        return Redirect(order_path(order_id))
    return Success(order_id)
