import os
from datetime import UTC, datetime
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Point configuration at the test environment, initialize both domains on
    in-memory providers and push the ordering domain context. The activated
    domain can then be referred to elsewhere as `current_domain`.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ["SESSION_PROVIDER"] = "fake"
    for name in ("DATABASE_URL", "PAYMENT_METHODS", "PAGE_SIZE"):
        os.environ.pop(name, None)

    from ordering.domain import ordering
    from shared.domains import init_domains

    init_domains()
    ordering.domain_context().push()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)
        elif "/bdd/" in str(test_path):
            item.add_marker(pytest.mark.bdd)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Fixture to automatically cleanup infrastructure after every test"""
    from identity.session import reset_session_provider
    from shared.config import reset_settings
    from shared.domains import DOMAINS

    reset_settings()
    reset_session_provider()

    yield

    reset_settings()
    reset_session_provider()

    for domain in DOMAINS.values():
        with domain.domain_context():
            from protean import current_domain

            # Clear all databases
            for _, provider in current_domain.providers.items():
                provider._data_reset()

            for _, broker in current_domain.brokers.items():
                broker._data_reset()

            # Drain event stores
            current_domain.event_store.store._data_reset()


# ---------------------------------------------------------------------------
# Data builders
# ---------------------------------------------------------------------------
def default_address(**overrides):
    address = {
        "full_name": "Jane Buyer",
        "street_address": "123 Main St",
        "city": "Springfield",
        "postal_code": "62701",
        "country": "USA",
    }
    address.update(overrides)
    return address


def default_items():
    return [
        {
            "product_id": "prod-001",
            "name": "Polo Shirt",
            "slug": "polo-shirt",
            "quantity": 2,
            "price": "29.999",
            "image": "/images/polo.jpg",
        },
        {
            "product_id": "prod-002",
            "name": "Denim Jacket",
            "slug": "denim-jacket",
            "quantity": 1,
            "price": "59.5",
            "image": None,
        },
    ]


@pytest.fixture()
def make_user():
    """Register a user in the identity domain. Pass ``address=None`` for no address."""
    from identity.domain import identity
    from identity.user.user import Address, User

    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        fields = {
            "name": "Jane Buyer",
            "email": f"buyer-{counter['n']}@example.com",
            "address": default_address(),
            "payment_method": "PayPal",
        }
        fields.update(overrides)
        if isinstance(fields["address"], dict):
            fields["address"] = Address(**fields["address"])

        with identity.domain_context():
            user = User(**fields)
            identity.repository_for(User).add(user)
        return user

    return _make


@pytest.fixture()
def make_cart():
    from ordering.cart.cart import Cart
    from ordering.domain import ordering

    def _make(user_id, items=None, **overrides):
        fields = {
            "user_id": str(user_id),
            "items_price": "119.50",
            "shipping_price": "10.00",
            "tax_price": "17.93",
            "total_price": "147.43",
        }
        fields.update(overrides)

        with ordering.domain_context():
            cart = Cart(**fields)
            for item in default_items() if items is None else items:
                cart.add_item(**item)
            ordering.repository_for(Cart).add(cart)
        return cart

    return _make


@pytest.fixture()
def make_order():
    """Store an order directly, bypassing the checkout workflow."""
    from ordering.domain import ordering
    from ordering.order.order import Order

    def _make(user_id, created_at=None, **overrides):
        prices = {
            "items_price": "10.00",
            "shipping_price": "0.00",
            "tax_price": "1.50",
            "total_price": "11.50",
        }
        prices.update(overrides)

        with ordering.domain_context():
            order = Order.create(
                user_id=str(user_id),
                shipping_address=default_address(),
                payment_method="Stripe",
                **prices,
            )
            order.created_at = created_at or datetime.now(UTC)
            order.add_line(product_id="prod-009", name="Socks", slug="socks", quantity=1, price="10.00")
            ordering.repository_for(Order).add(order)
        return order

    return _make


@pytest.fixture()
def load_cart():
    """Reload a cart from storage."""
    from ordering.cart.cart import Cart
    from ordering.domain import ordering

    def _load(cart_id):
        with ordering.domain_context():
            return ordering.repository_for(Cart).get(str(cart_id))

    return _load


@pytest.fixture()
def load_order():
    from ordering.domain import ordering
    from ordering.order.order import Order

    def _load(order_id):
        with ordering.domain_context():
            return ordering.repository_for(Order).get(str(order_id))

    return _load


@pytest.fixture()
def count_orders():
    """Count stored orders, optionally for one user."""
    from ordering.domain import ordering
    from ordering.order.order import Order

    def _count(user_id=None):
        with ordering.domain_context():
            query = ordering.repository_for(Order)._dao.query
            if user_id is not None:
                query = query.filter(user_id=str(user_id))
            return query.all().total

    return _count
