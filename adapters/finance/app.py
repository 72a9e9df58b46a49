"""
Finance demo: process three transactions through different payment rails
and apply them to a savings account.

Run with: python -m adapters.finance.app
"""

from datetime import date
from decimal import Decimal

from adapters.finance.domain import Account, ProcessorKind, Transaction, TransactionProcessor
from core.config import DisplayConfig, get_config
from core.console import echo
from core.observability import configure_logging, logger
from core.services.repository import Repository


class FinanceApp:
    """Seeds an account and transactions, then runs the fixed script once."""

    def __init__(self, display: DisplayConfig | None = None, today: date | None = None) -> None:
        self.display = display or DisplayConfig()
        self.today = today or date.today()
        self.transactions: Repository[Transaction] = Repository("transactions")
        self.logger = logger.bind(component="finance_app")

    def processor(self, kind: ProcessorKind) -> TransactionProcessor:
        return TransactionProcessor(
            kind=kind,
            currency=self.display.currency,
            date_format=self.display.date_format,
        )

    def apply(self, account: Account, transaction: Transaction) -> None:
        """Apply a transaction and print the outcome; a refusal is reported, not raised."""
        result = account.apply_transaction(transaction)
        if result.is_ok():
            echo(account.describe_deduction(transaction.amount))
        else:
            echo(result.unwrap_err().message)

    def run(self) -> Account:
        account = Account.savings("SA-001", Decimal("1000"))

        t1 = Transaction(id=1, date=self.today, amount=Decimal("150"), category="Groceries")
        t2 = Transaction(id=2, date=self.today, amount=Decimal("300"), category="Utilities")
        t3 = Transaction(id=3, date=self.today, amount=Decimal("200"), category="Entertainment")

        echo(self.processor(ProcessorKind.MOBILE_MONEY).process(t1))
        echo(self.processor(ProcessorKind.BANK_TRANSFER).process(t2))
        echo(self.processor(ProcessorKind.CRYPTO_WALLET).process(t3))

        for transaction in (t1, t2, t3):
            self.apply(account, transaction)
            self.transactions.add(transaction)

        self.logger.info(
            "finance_demo_completed",
            transactions=len(self.transactions),
            final_balance=str(account.balance),
        )
        return account


def main() -> None:
    config = get_config()
    configure_logging(config.logging)
    FinanceApp(display=config.display).run()


if __name__ == "__main__":
    main()
