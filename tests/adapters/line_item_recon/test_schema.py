"""Tests for the declared report columns and cell coercion."""

from __future__ import annotations

import pytest

from artspeople.adapters.line_item_recon.errors import FormatError, HeaderMismatchError
from artspeople.adapters.line_item_recon.schema import (
    EXPECTED_HEADER,
    LINE_ITEM_COLUMNS,
    parse_int,
    parse_money_cents,
    parse_order_id,
    validate_header,
)


class TestParseMoneyCents:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("$25.00", 2500),
            ("$1,234.50", 123450),
            ("0.29", 29),
            ("5", 500),
            ("-$3.10", -310),
            ("($12.00)", -1200),
            ("", 0),
            ("   ", 0),
        ],
    )
    def test_parses_amounts(self, raw: str, expected: int) -> None:
        assert parse_money_cents(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        ["abc", "$", "NaN", "Infinity", "--5", "(-5)", "1e3", "1_000", "\u0661\u0662"],
    )
    def test_rejects_non_amounts(self, raw: str) -> None:
        with pytest.raises(ValueError, match="invalid money amount"):
            parse_money_cents(raw)


class TestParseOrderId:
    def test_parses_integer(self) -> None:
        assert parse_order_id("0") == 0
        assert parse_order_id(" 4711 ") == 4711
        assert parse_order_id("+1000") == 1000

    @pytest.mark.parametrize(
        "raw", ["", "1.5", "-1", "A100", "1_000", "\u0661\u0662", "1e3", "--1"]
    )
    def test_rejects_invalid(self, raw: str) -> None:
        with pytest.raises(ValueError):
            parse_order_id(raw)


class TestValidateHeader:
    def test_columns_are_declared_in_report_order(self) -> None:
        assert [col.attribute for col in LINE_ITEM_COLUMNS] == [
            "order_id",
            "order_date",
            "customer",
            "item",
            "item_type",
            "quantity",
            "price_cents",
            "total_cents",
        ]

    def test_accepts_expected_header(self) -> None:
        validate_header(list(EXPECTED_HEADER))

    def test_ignores_bom_and_whitespace(self) -> None:
        header = ["\ufeffOrder #", " Order Date", *EXPECTED_HEADER[2:]]

        validate_header(header)

    def test_reordered_header_raises(self) -> None:
        header = ["Customer", "Order #", *EXPECTED_HEADER[2:]]

        with pytest.raises(HeaderMismatchError) as exc_info:
            validate_header(header)

        error = exc_info.value
        assert isinstance(error, FormatError)
        assert error.expected == EXPECTED_HEADER
        assert error.actual == tuple(header)
        assert error.line_number == 1

    def test_missing_column_raises(self) -> None:
        with pytest.raises(HeaderMismatchError):
            validate_header(list(EXPECTED_HEADER[:-1]))


class TestParseInt:
    def test_parses_signed_ascii_digits(self) -> None:
        assert parse_int(" 12 ") == 12
        assert parse_int("-3") == -3

    @pytest.mark.parametrize(
        "raw", ["1_0", "\u0661\u0662", "1.0", "1e1", "", "+-1"]
    )
    def test_rejects_non_plain_integers(self, raw: str) -> None:
        with pytest.raises(ValueError, match="invalid integer"):
            parse_int(raw)
