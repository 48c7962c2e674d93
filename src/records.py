from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Optional

from errors import InvalidHeader, MalformedRecord

REQUIRED_FIELDS = ("type", "client", "tx")
OPTIONAL_FIELDS = ("amount",)

MAX_CLIENT_ID = 2**16 - 1
MAX_TRANSACTION_ID = 2**32 - 1


@dataclass(frozen=True)
class InputRecord:
    """One input row with client and tx already parsed. The type is still raw text."""

    type: str
    client: int
    tx: int
    amount: Optional[Decimal] = None


def discover_field_order(header: List[str]) -> Dict[str, int]:
    """Map the known column names to their position in the header row."""
    positions = {}
    for index, name in enumerate(header):
        name = name.strip()
        if name in REQUIRED_FIELDS + OPTIONAL_FIELDS and name not in positions:
            positions[name] = index

    missing = [name for name in REQUIRED_FIELDS if name not in positions]
    if missing:
        raise InvalidHeader(f"missing column(s) {', '.join(missing)} in {header!r}")
    return positions


def parse_record(field_order: Dict[str, int], fields: List[str], line: int) -> InputRecord:
    """Parse a raw csv row into an InputRecord. Raises MalformedRecord."""
    normalized = {name: _field(fields, index) for name, index in field_order.items()}

    record_type = normalized["type"]
    if not record_type:
        raise MalformedRecord(line, "missing transaction type")

    client = _parse_int(normalized["client"], "client", MAX_CLIENT_ID, line)
    tx = _parse_int(normalized["tx"], "tx", MAX_TRANSACTION_ID, line)

    amount = None
    amount_str = normalized.get("amount", "")
    if amount_str:
        if not amount_str.isascii() or "_" in amount_str:
            raise MalformedRecord(line, f"amount `{amount_str}` is not a number")
        try:
            amount = Decimal(amount_str)
        except InvalidOperation:
            raise MalformedRecord(line, f"amount `{amount_str}` is not a number") from None

    return InputRecord(type=record_type, client=client, tx=tx, amount=amount)


def _field(fields: List[str], index: int) -> str:
    # Flexible rows: trailing columns may be absent
    if index >= len(fields):
        return ""
    return fields[index].strip()


def _parse_int(value: str, name: str, maximum: int, line: int) -> int:
    if not value:
        raise MalformedRecord(line, f"missing {name}")
    digits = value[1:] if value.startswith("+") else value
    if not (digits.isascii() and digits.isdigit()):
        raise MalformedRecord(line, f"{name} `{value}` is not an unsigned integer")
    parsed = int(value)
    if not 0 <= parsed <= maximum:
        raise MalformedRecord(line, f"{name} `{value}` is out of range 0..{maximum}")
    return parsed
