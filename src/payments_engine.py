import csv
import logging
from typing import Dict, Iterable, List, Optional, TextIO

from decoder import decode
from errors import InvalidHeader, MalformedRecord, RecordError
from ledger import ClientLedger
from models import ProcessingStats
from output import write_snapshot
from records import discover_field_order, parse_record
from repository import Repository

logger = logging.getLogger(__name__)


class PaymentsEngine:
    """
    Reads transaction records in input order and applies them to the client ledgers.
    Rejected records are logged and skipped; they never stop the run.
    """

    def __init__(self, repository: Optional[Repository] = None):
        self._repository = repository if repository is not None else Repository()
        self._stats = ProcessingStats()

    @property
    def repository(self) -> Repository:
        return self._repository

    @property
    def stats(self) -> ProcessingStats:
        return self._stats

    def process_file(self, filepath: str) -> Dict[int, ClientLedger]:
        """Process CSV file and return final ledger states."""
        with open(filepath, "r", encoding="utf-8-sig", newline="") as f:
            return self.process_stream(f)

    def process_stream(self, stream: Iterable[str]) -> Dict[int, ClientLedger]:
        """
        Process every record of a CSV stream.

        Raises:
            InvalidHeader: the stream has a header without type, client or tx columns
            OSError: the stream could not be read
        """
        logger.info("Starting processing")

        reader = csv.reader(stream)
        try:
            header = next(reader, None)
        except csv.Error as e:
            raise InvalidHeader(str(e)) from e

        if header is None:
            logger.warning("Input is empty, no transactions processed")
        else:
            field_order = discover_field_order(header)
            self._process_rows(reader, field_order)

        return {ledger.client_id: ledger for ledger in self._repository.snapshot()}

    def write_snapshot(self, stream: TextIO) -> None:
        """Write the final balances of every known client."""
        write_snapshot(self._repository.snapshot(), stream)

    def _process_rows(self, reader, field_order: Dict[str, int]) -> None:
        while True:
            try:
                fields = next(reader)
            except StopIteration:
                break
            except csv.Error as e:
                self._reject(MalformedRecord(reader.line_num, str(e)), reader.line_num)
                continue

            if not fields:
                continue
            self._process_row(fields, field_order, reader.line_num)

    def _process_row(self, fields: List[str], field_order: Dict[str, int], line: int) -> None:
        try:
            record = parse_record(field_order, fields, line)
            transaction = decode(record)
            self._repository.apply(transaction)
        except RecordError as e:
            self._reject(e, line)
        else:
            self._stats.record_success()

    def _reject(self, error: RecordError, line: int) -> None:
        self._stats.record_failure(error)
        logger.error(f"line {line}: {error}")

