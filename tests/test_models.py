import sys
import os
from decimal import Decimal

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from errors import InsufficientFunds
from models import (
    Chargeback,
    ClientAccount,
    Deposit,
    Dispute,
    ProcessingStats,
    TransactionType,
    Withdrawal,
)


class TestTransaction:
    def test_create_deposit(self):
        transaction = Deposit(client_id=1, transaction_id=1, amount=Decimal("100.0"))
        assert transaction.transaction_type == TransactionType.DEPOSIT
        assert transaction.client_id == 1
        assert transaction.transaction_id == 1
        assert transaction.amount == Decimal("100.0")

    def test_create_dispute_no_amount(self):
        transaction = Dispute(client_id=1, transaction_id=1)
        assert transaction.transaction_type == TransactionType.DISPUTE
        assert not hasattr(transaction, "amount")

    def test_variants_with_same_payload_differ(self):
        deposit = Deposit(client_id=1, transaction_id=1, amount=Decimal("1"))
        withdrawal = Withdrawal(client_id=1, transaction_id=1, amount=Decimal("1"))
        assert deposit != withdrawal
        assert deposit == Deposit(client_id=1, transaction_id=1, amount=Decimal("1"))

    def test_repr(self):
        assert repr(Deposit(1, 2, Decimal("1.5"))) == "Deposit(client=1, tx=2, amount=1.5)"
        assert repr(Chargeback(1, 2)) == "Chargeback(client=1, tx=2)"


class TestClientAccount:
    def test_default_values(self):
        account = ClientAccount(client_id=1)
        assert account.available == Decimal("0")
        assert account.held == Decimal("0")
        assert account.locked is False

    def test_total_property(self):
        account = ClientAccount(
            client_id=1,
            available=Decimal("100"),
            held=Decimal("50"),
        )
        assert account.total == Decimal("150")

    def test_hold_and_release_keep_total(self):
        account = ClientAccount(client_id=1, available=Decimal("100"))
        account.hold(Decimal("40"))
        assert account.available == Decimal("60")
        assert account.held == Decimal("40")
        assert account.total == Decimal("100")

        account.release_hold(Decimal("40"))
        assert account.available == Decimal("100")
        assert account.held == Decimal("0")

    def test_remove_held_reduces_total(self):
        account = ClientAccount(client_id=1, available=Decimal("10"), held=Decimal("5"))
        account.remove_held(Decimal("5"))
        assert account.held == Decimal("0")
        assert account.total == Decimal("10")


class TestProcessingStats:
    def test_counts(self):
        stats = ProcessingStats()
        stats.record_success()
        stats.record_success()
        stats.record_failure(InsufficientFunds(1))

        assert stats.processed == 2
        assert stats.failed == 1
        assert stats.failures_by_error["InsufficientFunds"] == 1
