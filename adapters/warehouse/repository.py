"""Inventory repository: keyed storage plus validated quantity updates."""

from typing import TypeVar

from adapters.warehouse.domain import InventoryItem
from core.domain.models import InvalidQuantityError, ItemNotFoundError
from core.services.repository import KeyedRepository, Result

ItemT = TypeVar("ItemT", bound=InventoryItem)


class InventoryRepository(KeyedRepository[ItemT]):
    """Keyed store of one inventory item variant."""

    def update_quantity(
        self, item_id: int, new_quantity: int
    ) -> Result[ItemT, InvalidQuantityError | ItemNotFoundError]:
        """
        Set the stored quantity of ``item_id`` to ``new_quantity``.

        A negative quantity is rejected before the lookup, leaving the item
        untouched.
        """
        if new_quantity < 0:
            self.logger.info("invalid_quantity_rejected", item_id=item_id, quantity=new_quantity)
            return Result.err(InvalidQuantityError("Quantity cannot be negative."))

        found = self.get(item_id)
        if found.is_err():
            return Result.err(found.unwrap_err())

        item = found.unwrap()
        item.quantity = new_quantity
        self.logger.info("quantity_updated", item_id=item_id, quantity=new_quantity)
        return Result.ok(item)
