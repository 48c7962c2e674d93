from decimal import Decimal


class PaymentsError(Exception):
    """Base class for every error raised by the payments engine."""


class InvalidHeader(PaymentsError):
    """The input has no usable header row. Processing cannot start."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid input header: {reason}")


class RecordError(PaymentsError):
    """
    A single input record was rejected.
    The record is skipped and processing continues with the next one.
    """


class MalformedRecord(RecordError):
    def __init__(self, line: int, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"Malformed record: {reason}")


class DecodingError(RecordError):
    """A structurally valid record does not describe a known transaction."""


class UnknownTransactionType(DecodingError):
    def __init__(self, transaction_type: str):
        self.transaction_type = transaction_type
        super().__init__(f"`{transaction_type}` is not a known transaction type")


class AmountMissing(DecodingError):
    def __init__(self, transaction_type: str):
        self.transaction_type = transaction_type
        super().__init__(f"Transaction type `{transaction_type}` needs amount value")


class InvalidAmount(DecodingError):
    def __init__(self, amount: Decimal):
        self.amount = amount
        super().__init__(f"`{amount}` is not valid value. Amount has to be non-zero, positive, finite value")


class LedgerError(RecordError):
    """A transaction was refused by the client's ledger. The ledger is left unchanged."""


class ClientLocked(LedgerError):
    def __init__(self, client_id: int):
        self.client_id = client_id
        super().__init__(f"Client ID `{client_id}` is locked")


class DuplicateTransactionId(LedgerError):
    def __init__(self, transaction_id: int):
        self.transaction_id = transaction_id
        super().__init__(f"Transaction id `{transaction_id}` already exists")


class InsufficientFunds(LedgerError):
    def __init__(self, client_id: int):
        self.client_id = client_id
        super().__init__(f"Withdrawal operation on client `{client_id}` would result in a negative amount")


class TransactionDoesNotExist(LedgerError):
    def __init__(self, transaction_id: int, client_id: int):
        self.transaction_id = transaction_id
        self.client_id = client_id
        super().__init__(f"Referenced transaction ID `{transaction_id}` does not exist under client `{client_id}`")


class WrongReferenceTransactionType(LedgerError):
    def __init__(self, transaction_id: int):
        self.transaction_id = transaction_id
        super().__init__(f"Wrong reference transaction type: transaction ID `{transaction_id}` is not a deposit")


class TransactionAlreadyDisputed(LedgerError):
    def __init__(self, transaction_id: int):
        self.transaction_id = transaction_id
        super().__init__(f"Transaction ID `{transaction_id}` is already disputed")


class TransactionNotDisputed(LedgerError):
    def __init__(self, transaction_id: int):
        self.transaction_id = transaction_id
        super().__init__(f"Transaction ID `{transaction_id}` is not disputed")


class TransactionChargedBack(LedgerError):
    """
    A charged-back deposit is final. Disputing it again would hold, and a
    second chargeback would remove, the same funds twice.
    """

    def __init__(self, transaction_id: int):
        self.transaction_id = transaction_id
        super().__init__(f"Transaction ID `{transaction_id}` was charged back and can not be disputed again")
