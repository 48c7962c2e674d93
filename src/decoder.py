from errors import AmountMissing, InvalidAmount, UnknownTransactionType
from models import (
    Chargeback,
    Deposit,
    Dispute,
    Resolve,
    Transaction,
    TransactionType,
    Withdrawal,
)
from records import InputRecord

AMOUNT_TRANSACTIONS = {
    TransactionType.DEPOSIT: Deposit,
    TransactionType.WITHDRAWAL: Withdrawal,
}

REFERENCE_TRANSACTIONS = {
    TransactionType.DISPUTE: Dispute,
    TransactionType.RESOLVE: Resolve,
    TransactionType.CHARGEBACK: Chargeback,
}


def decode(record: InputRecord) -> Transaction:
    """
    Convert an input record into a typed Transaction.

    The type is matched case-sensitively. Deposits and withdrawals need a
    finite, positive amount; an amount on a dispute, resolve or chargeback
    is ignored.

    Raises:
        UnknownTransactionType: type is not one of the five known kinds
        AmountMissing: deposit or withdrawal without an amount
        InvalidAmount: amount is zero, negative, NaN or infinite
    """
    try:
        transaction_type = TransactionType(record.type)
    except ValueError:
        raise UnknownTransactionType(record.type) from None

    if transaction_type in REFERENCE_TRANSACTIONS:
        return REFERENCE_TRANSACTIONS[transaction_type](
            client_id=record.client,
            transaction_id=record.tx,
        )

    amount = record.amount
    if amount is None:
        raise AmountMissing(record.type)
    if not amount.is_finite() or amount <= 0:
        raise InvalidAmount(amount)

    return AMOUNT_TRANSACTIONS[transaction_type](
        client_id=record.client,
        transaction_id=record.tx,
        amount=amount,
    )
