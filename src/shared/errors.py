"""Error taxonomy shared by the storefront contexts, and user-facing formatting."""

import re

from protean.exceptions import ValidationError as DomainValidationError
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

ERROR_NOT_AUTHENTICATED = "User is not authenticated"
ERROR_USER_NOT_FOUND = "User not found"
ERROR_ORDER_NOT_CREATED = "Order not created"

_UNIQUE_COLUMNS = re.compile(r"UNIQUE constraint failed: ([\w., ]+)|Key \(([^)]+)\)=")


class StorefrontError(Exception):
    """Base class for errors raised by storefront code."""

    default_message = "Something went wrong"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class AuthenticationRequired(StorefrontError):
    """No authenticated caller is present."""

    default_message = ERROR_NOT_AUTHENTICATED


class UserNotFound(StorefrontError):
    default_message = ERROR_USER_NOT_FOUND


class PersistenceFailure(StorefrontError):
    """The order transaction committed nothing usable."""

    default_message = ERROR_ORDER_NOT_CREATED


class InvalidPageRequest(StorefrontError):
    """A listing was asked for a page or page size below 1."""

    default_message = "Invalid page request"


def _field_messages(messages: dict) -> list[str]:
    lines = []
    for field, errors in messages.items():
        for error in errors if isinstance(errors, (list, tuple)) else [errors]:
            lines.append(f"{field}: {error}" if field and field != "_entity" else str(error))
    return lines


def format_error(error: Exception) -> str:
    """Turn an exception into a message fit for an inline UI notice.

    Validation errors list each failing field; unique-constraint violations
    name the duplicated field; everything else falls back to ``str(error)``.
    """
    if isinstance(error, DomainValidationError):
        return ". ".join(_field_messages(error.messages))

    if isinstance(error, ValidationError):
        messages = []
        for detail in error.errors():
            field = ".".join(str(part) for part in detail["loc"])
            messages.append(f"{field}: {detail['msg']}" if field else detail["msg"])
        return ". ".join(messages)

    if isinstance(error, IntegrityError):
        match = _UNIQUE_COLUMNS.search(str(error.orig))
        if match:
            # Composite keys list every column; the last one is the clashing field
            column = (match.group(1) or match.group(2)).split(",")[-1].strip()
            field = column.split(".")[-1]
            return f"{field.replace('_', ' ').capitalize()} already exists"
        return "Database integrity error"

    return str(error) or error.__class__.__name__
