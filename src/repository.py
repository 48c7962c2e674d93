from typing import Dict, Iterator, Optional

from ledger import ClientLedger
from models import Transaction


class Repository:
    """
    All client ledgers, keyed by client id.
    Ledgers are created on first sight of a client and live until the end of the run.
    """

    def __init__(self):
        self._ledgers: Dict[int, ClientLedger] = {}

    def apply(self, transaction: Transaction) -> None:
        """Route a transaction to its client's ledger. LedgerErrors propagate unchanged."""
        ledger = self._get_or_create_ledger(transaction.client_id)
        ledger.apply(transaction)

    def snapshot(self) -> Iterator[ClientLedger]:
        """Iterate over every ledger. Order is unspecified."""
        yield from self._ledgers.values()

    def get(self, client_id: int) -> Optional[ClientLedger]:
        return self._ledgers.get(client_id)

    def _get_or_create_ledger(self, client_id: int) -> ClientLedger:
        if client_id not in self._ledgers:
            self._ledgers[client_id] = ClientLedger(client_id)
        return self._ledgers[client_id]

    def __contains__(self, client_id: int) -> bool:
        return client_id in self._ledgers

    def __len__(self) -> int:
        return len(self._ledgers)
