"""Shared BDD fixtures and step definitions for order checkout."""

from identity.domain import identity
from identity.user.user import User
from ordering.cart.cart import Cart
from ordering.cart.repository import CartRepository
from protean import current_domain
from pytest_bdd import given, parsers, then

_CART_LINES = [
    {"product_id": "prod-001", "name": "Polo Shirt", "slug": "polo-shirt", "quantity": 2, "price": "29.999"},
    {"product_id": "prod-002", "name": "Denim Jacket", "slug": "denim-jacket", "quantity": 1, "price": "59.5"},
    {"product_id": "prod-003", "name": "Wool Socks", "slug": "wool-socks", "quantity": 3, "price": "4.25"},
]


def _update_profile(user_id, **changes):
    with identity.domain_context():
        repo = identity.repository_for(User)
        user = repo.get(user_id)
        for field, value in changes.items():
            setattr(user, field, value)
        repo.add(user)


def _cart_of(shopper) -> Cart:
    return current_domain.repository_for(Cart).get_for_user(shopper.id)


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a signed-in shopper", target_fixture="shopper")
def _(make_user):
    return make_user()


@given("the shopper has no shipping address")
def _(shopper):
    _update_profile(shopper.id, address=None)


@given("the shopper has no payment method")
def _(shopper):
    _update_profile(shopper.id, payment_method=None)


@given("the shopper has an empty cart")
def _(shopper, make_cart):
    make_cart(shopper.id, items=[])


@given(parsers.cfparse("the shopper has a cart with {count:d} items"))
def _(shopper, make_cart, count):
    make_cart(shopper.id, items=_CART_LINES[:count])


@given("the cart cannot be emptied")
def _(monkeypatch):
    def fail(self, cart):
        raise RuntimeError("cart update failed")

    monkeypatch.setattr(CartRepository, "clear", fail)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the shopper is redirected to "{path}"'))
def _(outcome, path):
    assert outcome.path == path


@then("no order is stored")
def _(count_orders):
    assert count_orders() == 0


@then("the shopper's cart is empty")
def _(shopper):
    cart = _cart_of(shopper)
    assert cart.is_empty
    assert cart.total_price == "0.00"


@then(parsers.cfparse("the shopper's cart still has {count:d} items"))
def _(shopper, count):
    cart = _cart_of(shopper)
    assert len(cart.items) == count
    assert cart.total_price == "147.43"
