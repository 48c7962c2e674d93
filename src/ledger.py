import logging
from decimal import Decimal
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Set

from errors import (
    ClientLocked,
    DuplicateTransactionId,
    InsufficientFunds,
    TransactionAlreadyDisputed,
    TransactionChargedBack,
    TransactionDoesNotExist,
    TransactionNotDisputed,
    WrongReferenceTransactionType,
)
from models import (
    AmountTransaction,
    Chargeback,
    ClientAccount,
    Deposit,
    Dispute,
    Resolve,
    Transaction,
    Withdrawal,
)

logger = logging.getLogger(__name__)


class ClientLedger:
    """
    Per-client transaction state machine.
    Owns the client's balances, the log of deposits and withdrawals, and the
    set of deposits currently under dispute.

    Every check runs before any balance is touched, so a rejected
    transaction leaves the ledger unchanged.
    """

    def __init__(self, client_id: int):
        self._account = ClientAccount(client_id=client_id)
        self._history: Dict[int, AmountTransaction] = {}
        self._disputed: Set[int] = set()
        self._charged_back: Set[int] = set()

    @property
    def client_id(self) -> int:
        return self._account.client_id

    @property
    def available(self) -> Decimal:
        return self._account.available

    @property
    def held(self) -> Decimal:
        return self._account.held

    @property
    def total(self) -> Decimal:
        return self._account.total

    @property
    def locked(self) -> bool:
        return self._account.locked

    @property
    def history(self) -> Mapping[int, AmountTransaction]:
        return MappingProxyType(self._history)

    @property
    def disputed(self) -> FrozenSet[int]:
        return frozenset(self._disputed)

    def apply(self, transaction: Transaction) -> None:
        """
        Apply a single transaction to this client.

        Raises:
            LedgerError: the transaction is not valid in the current state
        """
        match transaction:
            case Deposit():
                self._handle_deposit(transaction)
            case Withdrawal():
                self._handle_withdrawal(transaction)
            case Dispute():
                self._handle_dispute(transaction)
            case Resolve():
                self._handle_resolve(transaction)
            case Chargeback():
                self._handle_chargeback(transaction)
            case _:
                raise TypeError(f"Unsupported transaction {transaction!r}")

    def _handle_deposit(self, transaction: Deposit) -> None:
        self._check_can_move_funds(transaction)

        self._account.credit(transaction.amount)
        self._history[transaction.transaction_id] = transaction

    def _handle_withdrawal(self, transaction: Withdrawal) -> None:
        self._check_can_move_funds(transaction)
        if self._account.available < transaction.amount:
            raise InsufficientFunds(self.client_id)

        self._account.debit(transaction.amount)
        self._history[transaction.transaction_id] = transaction

    def _handle_dispute(self, transaction: Dispute) -> None:
        original = self._get_original(transaction)
        if not isinstance(original, Deposit):
            raise WrongReferenceTransactionType(transaction.transaction_id)
        if transaction.transaction_id in self._charged_back:
            raise TransactionChargedBack(transaction.transaction_id)
        if transaction.transaction_id in self._disputed:
            raise TransactionAlreadyDisputed(transaction.transaction_id)

        # available may go negative when the deposit was already spent
        amount = original.amount
        self._account.hold(amount)
        self._disputed.add(transaction.transaction_id)

    def _handle_resolve(self, transaction: Resolve) -> None:
        amount = self._get_disputed_amount(transaction)

        self._account.release_hold(amount)
        self._disputed.discard(transaction.transaction_id)

    def _handle_chargeback(self, transaction: Chargeback) -> None:
        amount = self._get_disputed_amount(transaction)

        self._account.remove_held(amount)
        self._account.locked = True
        self._disputed.discard(transaction.transaction_id)
        self._charged_back.add(transaction.transaction_id)
        logger.info(f"Client {self.client_id} locked after chargeback of tx {transaction.transaction_id}")

    def _check_can_move_funds(self, transaction: AmountTransaction) -> None:
        if self._account.locked:
            raise ClientLocked(self.client_id)
        if transaction.transaction_id in self._history:
            raise DuplicateTransactionId(transaction.transaction_id)

    def _get_original(self, transaction: Transaction) -> AmountTransaction:
        original = self._history.get(transaction.transaction_id)
        if original is None:
            raise TransactionDoesNotExist(transaction.transaction_id, self.client_id)
        return original

    def _get_disputed_amount(self, transaction: Transaction) -> Decimal:
        """Amount of the disputed deposit a resolve or chargeback refers to."""
        original = self._get_original(transaction)
        if transaction.transaction_id not in self._disputed:
            raise TransactionNotDisputed(transaction.transaction_id)
        if not isinstance(original, Deposit):
            raise WrongReferenceTransactionType(transaction.transaction_id)
        return original.amount

    def __repr__(self) -> str:
        return (
            f"ClientLedger(client={self.client_id}, available={self.available}, "
            f"held={self.held}, locked={self.locked})"
        )
