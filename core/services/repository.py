"""
In-memory repositories and the Result type shared by every demo.

Key patterns demonstrated:
- Generic containers parameterised over the stored entity type
- Explicit Result values for expected failures instead of raised exceptions
- Copy-on-read listings so callers cannot mutate repository state
"""

from collections.abc import Callable
from typing import Generic, TypeVar

from core.domain.models import DuplicateItemError, Entity, ItemNotFoundError
from core.observability import logger

# Generic Result type for explicit error handling
ValueT = TypeVar("ValueT")
ErrorT = TypeVar("ErrorT", bound=BaseException)


class Result(Generic[ValueT, ErrorT]):
    """
    Explicit error handling without exceptions for expected failures.

    Why: Makes error paths visible in type system, forces handling decisions.
    When to use: When failure is expected business logic, not exceptional.
    """

    def __init__(self, value: ValueT | None = None, error: ErrorT | None = None) -> None:
        if value is not None and error is not None:
            raise ValueError("Result cannot have both value and error")
        if value is None and error is None:
            raise ValueError("Result must have either value or error")
        self._value: ValueT | None = value
        self._error: ErrorT | None = error

    @classmethod
    def ok(cls, value: ValueT) -> "Result[ValueT, ErrorT]":
        return cls(value=value)

    @classmethod
    def err(cls, error: ErrorT) -> "Result[ValueT, ErrorT]":
        return cls(error=error)

    def is_ok(self) -> bool:
        return self._error is None

    def is_err(self) -> bool:
        return self._error is not None

    def unwrap(self) -> ValueT:
        if self._error is not None:
            raise self._error
        return self._value  # type: ignore

    def unwrap_or(self, default: ValueT) -> ValueT:
        return self._value if self._error is None else default  # type: ignore

    def unwrap_err(self) -> ErrorT:
        if self._error is None:
            raise ValueError("Called unwrap_err() on an Ok value")
        return self._error

    def __repr__(self) -> str:
        if self._error is not None:
            return f"Result.err({self._error!r})"
        return f"Result.ok({self._value!r})"


T = TypeVar("T")
EntityT = TypeVar("EntityT", bound=Entity)


class Repository(Generic[T]):
    """Ordered list-backed repository with predicate lookups."""

    def __init__(self, name: str = "repository") -> None:
        self._items: list[T] = []
        self.logger = logger.bind(repository=name)

    def add(self, item: T) -> None:
        self._items.append(item)
        self.logger.debug("item_added", size=len(self._items))

    def get_all(self) -> list[T]:
        """Return a copy of the stored items in insertion order."""
        return list(self._items)

    def get_by_id(self, predicate: Callable[[T], bool]) -> T | None:
        """Return the first item matching ``predicate``, or None."""
        return next((item for item in self._items if predicate(item)), None)

    def remove(self, predicate: Callable[[T], bool]) -> bool:
        """Remove the first item matching ``predicate``; report whether one was found."""
        for index, item in enumerate(self._items):
            if predicate(item):
                del self._items[index]
                self.logger.debug("item_removed", size=len(self._items))
                return True
        return False

    def __len__(self) -> int:
        return len(self._items)


class KeyedRepository(Generic[EntityT]):
    """
    Identifier-keyed repository enforcing uniqueness on insert.

    Every operation that can fail returns a Result; nothing here raises for
    duplicate or missing identifiers.
    """

    def __init__(self, name: str = "repository") -> None:
        self._items: dict[int, EntityT] = {}
        self.name = name
        self.logger = logger.bind(repository=name)

    def add(self, item: EntityT) -> Result[EntityT, DuplicateItemError]:
        if item.id in self._items:
            self.logger.info("duplicate_item_rejected", item_id=item.id)
            return Result.err(DuplicateItemError.for_id(item.id))
        self._items[item.id] = item
        self.logger.debug("item_added", item_id=item.id)
        return Result.ok(item)

    def get(self, item_id: int) -> Result[EntityT, ItemNotFoundError]:
        item = self._items.get(item_id)
        if item is None:
            self.logger.info("item_not_found", item_id=item_id)
            return Result.err(ItemNotFoundError.for_id(item_id))
        return Result.ok(item)

    def remove(self, item_id: int) -> Result[EntityT, ItemNotFoundError]:
        item = self._items.pop(item_id, None)
        if item is None:
            self.logger.info("item_not_found", item_id=item_id)
            return Result.err(ItemNotFoundError.for_id(item_id))
        self.logger.debug("item_removed", item_id=item_id)
        return Result.ok(item)

    def list_all(self) -> list[EntityT]:
        """Snapshot of stored items in insertion order."""
        return list(self._items.values())

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __len__(self) -> int:
        return len(self._items)
