"""
Run all three demos once, each under its own heading.

Run with: python run_demos.py
"""

from collections.abc import Callable

from rich.rule import Rule

from adapters.finance.app import FinanceApp
from adapters.health.app import HealthSystemApp
from adapters.warehouse.app import WarehouseManager
from core.config import DisplayConfig, get_config
from core.console import console
from core.observability import configure_logging, logger


def _run_finance(display: DisplayConfig) -> None:
    FinanceApp(display=display).run()


def _run_health(display: DisplayConfig) -> None:
    HealthSystemApp(display=display).run()


def _run_warehouse(display: DisplayConfig) -> None:
    manager = WarehouseManager(display=display)
    manager.seed_data()
    manager.demo()


DEMOS: list[tuple[str, Callable[[DisplayConfig], None]]] = [
    ("Finance", _run_finance),
    ("Health System", _run_health),
    ("Warehouse", _run_warehouse),
]


def main() -> None:
    config = get_config()
    configure_logging(config.logging)
    logger.info("configuration_loaded", environment=config.environment)

    for title, run in DEMOS:
        console.print(Rule(title))
        run(config.display)
        console.print()


if __name__ == "__main__":
    main()
