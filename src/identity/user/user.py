"""User aggregate: identity plus the shipping and payment details used at checkout.

The identity context owns users; ordering only reads them.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Float, String, ValueObject

from identity.domain import identity


@identity.value_object(part_of="User")
class Address:
    """The shipping address a user keeps on file.

    Stored as entered; ordering validates it again when an order is placed.
    """

    full_name = String(max_length=255)
    street_address = String(max_length=255)
    city = String(max_length=100)
    postal_code = String(max_length=20)
    country = String(max_length=100)
    lat = Float()
    lng = Float()


@identity.aggregate
class User:
    name = String(max_length=255, default="NO_NAME")
    email = String(required=True, max_length=255, unique=True)
    address = ValueObject(Address)
    payment_method = String(max_length=50)
    created_at = DateTime(default=lambda: datetime.now(UTC))
