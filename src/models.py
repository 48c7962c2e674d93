from collections import Counter
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import ClassVar


class TransactionType(Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    DISPUTE = "dispute"
    RESOLVE = "resolve"
    CHARGEBACK = "chargeback"


@dataclass(frozen=True)
class Transaction:
    """
    Base of the transaction variants.
    Referential variants (dispute, resolve, chargeback) carry only the id
    of the deposit or withdrawal they point at.
    """

    transaction_type: ClassVar[TransactionType]

    client_id: int
    transaction_id: int

    def __repr__(self) -> str:
        return f"{type(self).__name__}(client={self.client_id}, tx={self.transaction_id})"


@dataclass(frozen=True)
class AmountTransaction(Transaction):
    """A monetary transaction, recorded in the client's history."""

    amount: Decimal

    def __repr__(self) -> str:
        return f"{type(self).__name__}(client={self.client_id}, tx={self.transaction_id}, amount={self.amount})"


@dataclass(frozen=True, repr=False)
class Deposit(AmountTransaction):
    transaction_type = TransactionType.DEPOSIT


@dataclass(frozen=True, repr=False)
class Withdrawal(AmountTransaction):
    transaction_type = TransactionType.WITHDRAWAL


@dataclass(frozen=True, repr=False)
class Dispute(Transaction):
    transaction_type = TransactionType.DISPUTE


@dataclass(frozen=True, repr=False)
class Resolve(Transaction):
    transaction_type = TransactionType.RESOLVE


@dataclass(frozen=True, repr=False)
class Chargeback(Transaction):
    transaction_type = TransactionType.CHARGEBACK


@dataclass
class ClientAccount:
    client_id: int
    available: Decimal = Decimal("0")
    held: Decimal = Decimal("0")
    locked: bool = False

    @property
    def total(self) -> Decimal:
        return self.available + self.held

    def credit(self, amount: Decimal) -> None:
        self.available += amount

    def debit(self, amount: Decimal) -> None:
        self.available -= amount

    def hold(self, amount: Decimal) -> None:
        self.available -= amount
        self.held += amount

    def release_hold(self, amount: Decimal) -> None:
        self.held -= amount
        self.available += amount

    def remove_held(self, amount: Decimal) -> None:
        self.held -= amount


class ProcessingStats:
    """Counters for tracking processing statistics."""

    def __init__(self):
        self.processed = 0
        self.failed = 0
        self.failures_by_error: Counter = Counter()

    def record_success(self):
        self.processed += 1

    def record_failure(self, error: Exception):
        self.failed += 1
        self.failures_by_error[type(error).__name__] += 1
