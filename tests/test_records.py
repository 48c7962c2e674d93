import sys
import os
from decimal import Decimal

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from errors import InvalidHeader, MalformedRecord
from records import InputRecord, discover_field_order, parse_record

FIELD_ORDER = {"type": 0, "client": 1, "tx": 2, "amount": 3}


class TestDiscoverFieldOrder:
    def test_trimmed_header(self):
        assert discover_field_order(["type", " client", " tx", " amount"]) == FIELD_ORDER

    def test_reordered_columns(self):
        assert discover_field_order(["tx", "amount", "type", "client"]) == {
            "tx": 0, "amount": 1, "type": 2, "client": 3,
        }

    def test_amount_column_optional(self):
        assert discover_field_order(["type", "client", "tx"]) == {"type": 0, "client": 1, "tx": 2}

    def test_missing_required_column(self):
        with pytest.raises(InvalidHeader) as exc_info:
            discover_field_order(["type", "client", "amount"])
        assert "tx" in exc_info.value.reason


class TestParseRecord:
    def test_full_row_is_trimmed(self):
        record = parse_record(FIELD_ORDER, ["deposit", " 1", " 2 ", " 1.5 "], line=2)
        assert record == InputRecord(type="deposit", client=1, tx=2, amount=Decimal("1.5"))

    def test_short_row(self):
        record = parse_record(FIELD_ORDER, ["dispute", "1", "2"], line=2)
        assert record.amount is None

    def test_empty_amount(self):
        record = parse_record(FIELD_ORDER, ["dispute", "1", "2", ""], line=2)
        assert record.amount is None

    def test_extra_fields_ignored(self):
        record = parse_record(FIELD_ORDER, ["deposit", "1", "2", "3", "junk"], line=2)
        assert record.amount == Decimal("3")

    def test_boundaries(self):
        record = parse_record(FIELD_ORDER, ["deposit", "65535", "4294967295", "1"], line=2)
        assert record.client == 65535
        assert record.tx == 4294967295

        record = parse_record(FIELD_ORDER, ["deposit", "0", "0", "1"], line=2)
        assert record.client == 0
        assert record.tx == 0

        record = parse_record(FIELD_ORDER, ["deposit", "+7", "+8", "1"], line=2)
        assert record.client == 7
        assert record.tx == 8

    @pytest.mark.parametrize("fields", [
        ["deposit", "65536", "1", "1"],
        ["deposit", "-1", "1", "1"],
        ["deposit", "1", "4294967296", "1"],
        ["deposit", "abc", "1", "1"],
        ["deposit", "1", "1.5", "1"],
        ["deposit", "1", "1", "one"],
        ["deposit", "1_000", "1", "1"],
        ["deposit", "1", "1_000", "1"],
        ["deposit", "\u0661", "1", "1"],
        ["deposit", "+-1", "1", "1"],
        ["deposit", "1", "1", "1_000.5"],
        ["deposit", "1", "1", "\u0661.5"],
        ["deposit", "1"],
        ["", "1", "1", "1"],
        [],
    ])
    def test_malformed(self, fields):
        with pytest.raises(MalformedRecord) as exc_info:
            parse_record(FIELD_ORDER, fields, line=5)
        assert exc_info.value.line == 5
