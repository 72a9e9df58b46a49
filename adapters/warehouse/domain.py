"""
Warehouse inventory domain models.

Both item variants share the InventoryItem base (id, name, mutable quantity)
and carry a ``kind`` tag so mixed collections can be told apart without
isinstance checks.
"""

import calendar
import datetime as dt
from enum import Enum
from typing import Literal

from pydantic import Field

from core.domain.models import Entity


class ItemKind(str, Enum):
    """Inventory item variants."""

    ELECTRONICS = "Electronics"
    GROCERY = "Grocery"


class InventoryItem(Entity):
    """Stock-keeping unit. Quantity is validated on every assignment."""

    kind: ItemKind
    name: str = Field(min_length=1)
    quantity: int = Field(ge=0)

    def describe(self, date_format: str = "%d/%m/%Y") -> str:
        return f"[{self.kind.value}] #{self.id} {self.name} x{self.quantity}"

    def __str__(self) -> str:
        return self.describe()


class ElectronicItem(InventoryItem):
    kind: Literal[ItemKind.ELECTRONICS] = ItemKind.ELECTRONICS
    brand: str
    warranty_months: int = Field(ge=0)

    def describe(self, date_format: str = "%d/%m/%Y") -> str:
        base = super().describe(date_format)
        return f"{base} Brand:{self.brand} Warranty:{self.warranty_months}m"


class GroceryItem(InventoryItem):
    kind: Literal[ItemKind.GROCERY] = ItemKind.GROCERY
    expiry_date: dt.date

    def describe(self, date_format: str = "%d/%m/%Y") -> str:
        return f"{super().describe(date_format)} Expires:{self.expiry_date.strftime(date_format)}"


def add_months(start: dt.date, months: int) -> dt.date:
    """Shift ``start`` by whole months, clamping to the last day of the target month."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return dt.date(year, month, day)
