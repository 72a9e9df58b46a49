"""
Warehouse demo: two inventory repositories and the failure cases they report.

Run with: python -m adapters.warehouse.app
"""

from datetime import date

from adapters.warehouse.domain import ElectronicItem, GroceryItem, add_months
from adapters.warehouse.repository import InventoryRepository, ItemT
from core.config import DisplayConfig, get_config
from core.console import echo
from core.observability import configure_logging, logger


class WarehouseManager:
    """
    Seeds electronics and groceries, then exercises the repositories.

    Stock changes go through ``increase_stock`` and ``remove_item_by_id``,
    which report failures as a message and never let them escape.
    """

    def __init__(self, display: DisplayConfig | None = None, today: date | None = None) -> None:
        self.display = display or DisplayConfig()
        self.today = today or date.today()
        self.electronics: InventoryRepository[ElectronicItem] = InventoryRepository("electronics")
        self.groceries: InventoryRepository[GroceryItem] = InventoryRepository("groceries")
        self.logger = logger.bind(component="warehouse_manager")

    def seed_data(self) -> None:
        seeded = [
            self.electronics.add(
                ElectronicItem(id=1, name="Laptop", quantity=10, brand="Dell", warranty_months=24)
            ),
            self.electronics.add(
                ElectronicItem(id=2, name="Phone", quantity=25, brand="Samsung", warranty_months=12)
            ),
            self.groceries.add(
                GroceryItem(
                    id=1, name="Rice (5kg)", quantity=50, expiry_date=add_months(self.today, 12)
                )
            ),
            self.groceries.add(
                GroceryItem(
                    id=2, name="Milk (1L)", quantity=80, expiry_date=add_months(self.today, 6)
                )
            ),
        ]
        # Seed ids are distinct per repository
        for result in seeded:
            result.unwrap()

    def print_all_items(self, repo: InventoryRepository[ItemT]) -> None:
        for item in repo.list_all():
            echo(item.describe(self.display.date_format))

    def increase_stock(
        self, repo: InventoryRepository[ItemT], item_id: int, quantity: int
    ) -> bool:
        found = repo.get(item_id)
        if found.is_err():
            echo(f"[IncreaseStock Error] {found.unwrap_err().message}")
            return False

        item = found.unwrap()
        updated = repo.update_quantity(item_id, item.quantity + quantity)
        if updated.is_err():
            echo(f"[IncreaseStock Error] {updated.unwrap_err().message}")
            return False

        echo(f"Updated quantity for ID {item_id} to {updated.unwrap().quantity}")
        return True

    def remove_item_by_id(self, repo: InventoryRepository[ItemT], item_id: int) -> bool:
        removed = repo.remove(item_id)
        if removed.is_err():
            echo(f"[RemoveItem Error] {removed.unwrap_err().message}")
            return False

        echo(f"Removed item with ID {item_id}")
        return True

    def demo(self) -> None:
        echo("-- Groceries --")
        self.print_all_items(self.groceries)

        echo()
        echo("-- Electronics --")
        self.print_all_items(self.electronics)

        echo()
        echo("-- Stock Updates --")
        self.increase_stock(self.groceries, 1, 20)

        echo()
        echo("-- Exception Demos --")
        duplicate = self.electronics.add(
            ElectronicItem(id=1, name="Tablet", quantity=5, brand="Apple", warranty_months=18)
        )
        if duplicate.is_err():
            echo(f"Duplicate add: {duplicate.unwrap_err().message}")

        self.remove_item_by_id(self.groceries, 999)

        invalid = self.electronics.update_quantity(2, -10)
        if invalid.is_err():
            echo(f"Invalid qty: {invalid.unwrap_err().message}")

        self.logger.info(
            "warehouse_demo_completed",
            electronics=len(self.electronics),
            groceries=len(self.groceries),
        )


def main() -> None:
    config = get_config()
    configure_logging(config.logging)
    manager = WarehouseManager(display=config.display)
    manager.seed_data()
    manager.demo()


if __name__ == "__main__":
    main()
