import csv
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from typing import Iterable, List, TextIO

from ledger import ClientLedger

OUTPUT_FIELDS = ["client", "available", "held", "total", "locked"]

SCALE = Decimal("0.0001")


def format_decimal(value: Decimal) -> str:
    """Format decimal as fixed-point with exactly 4 decimal places."""
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the 4 fractional ones
        ctx.prec = max(ctx.prec, value.adjusted() + 6)
        quantized = value.quantize(SCALE, rounding=ROUND_HALF_EVEN)
    if quantized.is_zero():
        quantized = quantized.copy_abs()
    return f"{quantized:f}"


def format_snapshot_row(ledger: ClientLedger) -> List[str]:
    return [
        str(ledger.client_id),
        format_decimal(ledger.available),
        format_decimal(ledger.held),
        format_decimal(ledger.total),
        str(ledger.locked).lower(),
    ]


def write_snapshot(ledgers: Iterable[ClientLedger], stream: TextIO) -> None:
    """Write the header and one row per ledger."""
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(OUTPUT_FIELDS)
    for ledger in ledgers:
        writer.writerow(format_snapshot_row(ledger))
