"""
Finance domain models: transactions, payment processors and accounts.

Processors and accounts are single models tagged with a kind enum rather
than class hierarchies. The tag is chosen at construction and selects the
behaviour of ``process`` and ``apply_transaction``.
"""

import datetime as dt
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from core.domain.models import InsufficientFundsError
from core.observability import logger
from core.services.repository import Result

CENTS = Decimal("0.01")


def format_money(amount: Decimal) -> str:
    """Two-decimal rendering; ties round away from zero."""
    return f"{amount.quantize(CENTS, rounding=ROUND_HALF_UP):.2f}"


class Transaction(BaseModel):
    """A single money movement."""

    model_config = ConfigDict(frozen=True)

    id: int
    date: dt.date
    amount: Decimal
    category: str


class ProcessorKind(str, Enum):
    """Payment rails a transaction can be processed through."""

    BANK_TRANSFER = "BankTransfer"
    MOBILE_MONEY = "MobileMoney"
    CRYPTO_WALLET = "CryptoWallet"


class TransactionProcessor(BaseModel):
    """Processes transactions through one payment rail."""

    model_config = ConfigDict(frozen=True)

    kind: ProcessorKind
    currency: str = "GHS"
    date_format: str = "%d/%m/%Y"

    def process(self, transaction: Transaction) -> str:
        """Return the processing line for ``transaction``."""
        line = (
            f"[{self.kind.value}] Processing {transaction.category} of "
            f"{self.currency} {format_money(transaction.amount)} on "
            f"{transaction.date.strftime(self.date_format)}."
        )
        logger.info(
            "transaction_processed",
            processor=self.kind.value,
            transaction_id=transaction.id,
            amount=str(transaction.amount),
        )
        return line


class AccountKind(str, Enum):
    """STANDARD always applies a debit; SAVINGS refuses to overdraw."""

    STANDARD = "standard"
    SAVINGS = "savings"


class Account(BaseModel):
    """Account whose balance is debited by applied transactions."""

    model_config = ConfigDict(validate_assignment=True)

    account_number: str = Field(min_length=1)
    balance: Decimal
    kind: AccountKind = AccountKind.STANDARD

    @classmethod
    def savings(cls, account_number: str, initial_balance: Decimal) -> "Account":
        return cls(account_number=account_number, balance=initial_balance, kind=AccountKind.SAVINGS)

    def apply_transaction(
        self, transaction: Transaction
    ) -> Result[Decimal, InsufficientFundsError]:
        """
        Debit the transaction amount from the balance.

        Returns:
            Result[Decimal]: the new balance, or InsufficientFundsError when a
            savings account would be overdrawn (balance left untouched).
        """
        log = logger.bind(account_number=self.account_number, transaction_id=transaction.id)

        if self.kind is AccountKind.SAVINGS and transaction.amount > self.balance:
            log.warning(
                "insufficient_funds",
                amount=str(transaction.amount),
                balance=str(self.balance),
            )
            return Result.err(InsufficientFundsError("Insufficient funds"))

        self.balance = self.balance - transaction.amount
        log.info("transaction_applied", new_balance=str(self.balance))
        return Result.ok(self.balance)

    def describe_deduction(self, amount: Decimal) -> str:
        return (
            f"[Account {self.account_number}] Deducted {format_money(amount)}. "
            f"New balance: {format_money(self.balance)}"
        )
