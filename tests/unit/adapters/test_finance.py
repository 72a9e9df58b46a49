"""Tests for the finance demo: processors, account kinds and the scripted run."""

from datetime import date
from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from adapters.finance.app import FinanceApp
from adapters.finance.domain import (
    Account,
    AccountKind,
    ProcessorKind,
    Transaction,
    TransactionProcessor,
    format_money,
)
from core.config import DisplayConfig
from core.domain.models import ErrorKind, InsufficientFundsError

TODAY = date(2026, 10, 19)

money = st.decimals(
    min_value=0, max_value=1_000_000, places=2, allow_nan=False, allow_infinity=False
)


def _txn(amount: Decimal | str, txn_id: int = 1) -> Transaction:
    return Transaction(id=txn_id, date=TODAY, amount=Decimal(amount), category="Test")


class TestTransaction:
    def test_transaction_is_immutable(self) -> None:
        txn = _txn("10")
        with pytest.raises(ValueError, match="frozen"):
            txn.amount = Decimal("20")  # type: ignore


class TestTransactionProcessor:
    @pytest.mark.parametrize(
        "kind, label",
        [
            (ProcessorKind.BANK_TRANSFER, "BankTransfer"),
            (ProcessorKind.MOBILE_MONEY, "MobileMoney"),
            (ProcessorKind.CRYPTO_WALLET, "CryptoWallet"),
        ],
    )
    def test_processors_differ_only_by_label(self, kind: ProcessorKind, label: str) -> None:
        txn = Transaction(id=1, date=TODAY, amount=Decimal("150"), category="Groceries")

        line = TransactionProcessor(kind=kind).process(txn)

        assert line == f"[{label}] Processing Groceries of GHS 150.00 on 19/10/2026."

    def test_processor_uses_display_settings(self) -> None:
        processor = TransactionProcessor(
            kind=ProcessorKind.BANK_TRANSFER, currency="USD", date_format="%Y-%m-%d"
        )
        line = processor.process(_txn("7.5"))
        assert line == "[BankTransfer] Processing Test of USD 7.50 on 2026-10-19."

    def test_amount_ties_round_away_from_zero(self) -> None:
        line = TransactionProcessor(kind=ProcessorKind.BANK_TRANSFER).process(_txn("0.125"))
        assert line == "[BankTransfer] Processing Test of GHS 0.13 on 19/10/2026."


@pytest.mark.parametrize(
    "amount, expected",
    [
        ("0.125", "0.13"),
        ("0.135", "0.14"),
        ("-0.125", "-0.13"),
        ("2.5", "2.50"),
        ("0.124", "0.12"),
    ],
)
def test_format_money_rounds_half_up(amount: str, expected: str) -> None:
    assert format_money(Decimal(amount)) == expected


class TestAccount:
    def test_standard_account_always_applies(self) -> None:
        account = Account(account_number="AC-1", balance=Decimal("100"))

        result = account.apply_transaction(_txn("250"))

        assert result.unwrap() == Decimal("-150")
        assert account.balance == Decimal("-150")

    def test_savings_account_refuses_overdraft(self) -> None:
        account = Account.savings("SA-1", Decimal("100"))

        result = account.apply_transaction(_txn("100.01"))

        assert result.is_err()
        error = result.unwrap_err()
        assert isinstance(error, InsufficientFundsError)
        assert error.kind is ErrorKind.INSUFFICIENT_FUNDS
        assert account.balance == Decimal("100")

    def test_savings_account_can_drain_to_zero(self) -> None:
        account = Account.savings("SA-1", Decimal("100"))
        assert account.apply_transaction(_txn("100")).unwrap() == Decimal("0")
        assert account.kind is AccountKind.SAVINGS

    @given(balance=money, amount=money)
    def test_savings_balance_never_goes_negative(self, balance: Decimal, amount: Decimal) -> None:
        account = Account.savings("SA-P", balance)

        result = account.apply_transaction(_txn(amount))

        if amount > balance:
            assert result.is_err()
            assert account.balance == balance
        else:
            assert account.balance == balance - amount
            assert account.balance >= 0

    def test_describe_deduction(self) -> None:
        account = Account.savings("SA-001", Decimal("1000"))
        account.apply_transaction(_txn("150"))
        assert account.describe_deduction(Decimal("150")) == (
            "[Account SA-001] Deducted 150.00. New balance: 850.00"
        )

    def test_describe_deduction_rounds_half_up(self) -> None:
        account = Account(account_number="AC-2", balance=Decimal("10.005"))
        assert account.describe_deduction(Decimal("0.005")) == (
            "[Account AC-2] Deducted 0.01. New balance: 10.01"
        )


class TestFinanceApp:
    def test_run_prints_expected_lines(self, capsys: pytest.CaptureFixture[str]) -> None:
        account = FinanceApp(display=DisplayConfig(), today=TODAY).run()

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "[MobileMoney] Processing Groceries of GHS 150.00 on 19/10/2026.",
            "[BankTransfer] Processing Utilities of GHS 300.00 on 19/10/2026.",
            "[CryptoWallet] Processing Entertainment of GHS 200.00 on 19/10/2026.",
            "[Account SA-001] Deducted 150.00. New balance: 850.00",
            "[Account SA-001] Deducted 300.00. New balance: 550.00",
            "[Account SA-001] Deducted 200.00. New balance: 350.00",
        ]
        assert f"{account.balance:.2f}" == "350.00"

    def test_run_records_transactions(self) -> None:
        app = FinanceApp(today=TODAY)
        app.run()

        recorded = app.transactions.get_all()
        assert [t.id for t in recorded] == [1, 2, 3]

    def test_refused_transaction_prints_message(self, capsys: pytest.CaptureFixture[str]) -> None:
        app = FinanceApp(today=TODAY)
        account = Account.savings("SA-9", Decimal("10"))

        app.apply(account, _txn("11"))

        assert capsys.readouterr().out.splitlines() == ["Insufficient funds"]
        assert account.balance == Decimal("10")
