"""Workflow outcomes: navigation, success and failure as plain values.

A ``Redirect`` tells the caller to present another view. It is not an error
and never goes through exception handling; callers branch on the type of the
returned outcome.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Redirect:
    path: str


@dataclass(frozen=True)
class Success:
    value: Any = None


@dataclass(frozen=True)
class Failure:
    message: str

    def to_dict(self) -> dict:
        return {"success": False, "message": self.message}


Outcome = Redirect | Success | Failure


# Navigation targets
CART_PATH = "/cart"
SHIPPING_ADDRESS_PATH = "/shipping-address"
PAYMENT_METHOD_PATH = "/payment-method"


def order_path(order_id) -> str:
    return f"/order/{order_id}"
