"""Application tests for the user repository."""

from identity.domain import identity
from identity.user.repository import find_user
from identity.user.user import User


class TestUserRepository:
    def test_find_existing_user(self, make_user):
        user = make_user(name="Jane Buyer")

        loaded = find_user(user.id)

        assert loaded.name == "Jane Buyer"
        assert loaded.address.city == "Springfield"
        assert loaded.payment_method == "PayPal"

    def test_find_unknown_user(self):
        assert find_user("nobody") is None

    def test_find_without_id(self):
        assert find_user(None) is None
        assert find_user("") is None

    def test_add_assigns_id(self):
        with identity.domain_context():
            user = User(name="New Buyer", email="new@example.com")
            identity.repository_for(User).add(user)
        assert user.id is not None

        loaded = find_user(user.id)
        assert loaded.address is None
        assert loaded.payment_method is None

    def test_name_defaults(self):
        with identity.domain_context():
            assert User(email="anon@example.com").name == "NO_NAME"
