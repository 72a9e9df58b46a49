"""
Shared domain building blocks for the demo programs.

Every demo keys its entities by an integer identifier and reports expected
failures through one small error hierarchy. The errors are plain exceptions
so they can ride inside a ``Result`` and still be raised with ``unwrap()``.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ErrorKind(str, Enum):
    """Kinds of expected, recoverable domain failures."""

    DUPLICATE_ITEM = "duplicate_item"
    ITEM_NOT_FOUND = "item_not_found"
    INVALID_QUANTITY = "invalid_quantity"
    INSUFFICIENT_FUNDS = "insufficient_funds"


class Entity(BaseModel):
    """Anything stored in a keyed repository."""

    model_config = ConfigDict(validate_assignment=True)

    id: int


class DomainError(Exception):
    """Base class for failures that are part of normal control flow."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DuplicateItemError(DomainError):
    kind = ErrorKind.DUPLICATE_ITEM

    @classmethod
    def for_id(cls, item_id: int) -> "DuplicateItemError":
        return cls(f"Item with ID {item_id} already exists.")


class ItemNotFoundError(DomainError):
    kind = ErrorKind.ITEM_NOT_FOUND

    @classmethod
    def for_id(cls, item_id: int) -> "ItemNotFoundError":
        return cls(f"Item with ID {item_id} not found.")


class InvalidQuantityError(DomainError):
    kind = ErrorKind.INVALID_QUANTITY


class InsufficientFundsError(DomainError):
    kind = ErrorKind.INSUFFICIENT_FUNDS
