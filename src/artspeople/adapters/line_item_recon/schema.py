"""Declared column layout of the Line Item Reconciliation Report."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
import re
from typing import Any, Literal

from artspeople.adapters.line_item_recon.errors import HeaderMismatchError
from artspeople.core.config import DEFAULT_DATE_FORMAT

ColumnKind = Literal["order_id", "date", "text", "int", "money"]

_BOM = "\ufeff"
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_AMOUNT_RE = re.compile(r"[0-9]+(\.[0-9]*)?|\.[0-9]+")


@dataclass(frozen=True, slots=True)
class ColumnSpec:
    """One positional column: header label, LineItem attribute and type."""

    header: str
    attribute: str
    kind: ColumnKind


LINE_ITEM_COLUMNS: tuple[ColumnSpec, ...] = (
    ColumnSpec("Order #", "order_id", "order_id"),
    ColumnSpec("Order Date", "order_date", "date"),
    ColumnSpec("Customer", "customer", "text"),
    ColumnSpec("Item", "item", "text"),
    ColumnSpec("Item Type", "item_type", "text"),
    ColumnSpec("Quantity", "quantity", "int"),
    ColumnSpec("Price", "price_cents", "money"),
    ColumnSpec("Total", "total_cents", "money"),
)

EXPECTED_HEADER: tuple[str, ...] = tuple(col.header for col in LINE_ITEM_COLUMNS)


def validate_header(header: Sequence[str]) -> None:
    """Check a header row against the declared columns.

    Cells are compared after stripping whitespace; a UTF-8 byte order mark
    on the first cell is ignored.

    Raises:
        HeaderMismatchError: If the labels or their order differ.
    """
    actual = [cell.strip() for cell in header]
    if actual:
        actual[0] = actual[0].lstrip(_BOM).strip()
    if tuple(actual) != EXPECTED_HEADER:
        raise HeaderMismatchError(EXPECTED_HEADER, actual)


def parse_int(value: str) -> int:
    """Parse a plain ASCII decimal integer cell, with an optional sign."""
    text = value.strip()
    if not _INTEGER_RE.fullmatch(text):
        raise ValueError(f"invalid integer: {value!r}")
    return int(text)


def parse_order_id(value: str) -> int:
    order_id = parse_int(value)
    if order_id < 0:
        raise ValueError(f"order id must be non-negative, got {order_id}")
    return order_id


def parse_date(value: str, date_format: str = DEFAULT_DATE_FORMAT) -> date:
    return datetime.strptime(value.strip(), date_format).date()


def parse_money_cents(value: str) -> int:
    """Parse a money cell (e.g. "$1,234.50", "(12.00)") into integer cents.

    A blank cell is 0 cents. One sign is allowed: a leading "-" or
    accounting parentheses, not both.
    """
    text = value.strip()
    if not text:
        return 0

    negative = False
    if text.startswith("(") and text.endswith(")"):
        negative = True
        text = text[1:-1].strip()
    elif text.startswith("-"):
        negative = True
        text = text[1:].strip()

    if text.startswith("$"):
        text = text[1:].strip()
    text = text.replace(",", "")
    if not _AMOUNT_RE.fullmatch(text):
        raise ValueError(f"invalid money amount: {value!r}")

    cents = int((Decimal(text) * 100).to_integral_value())
    return -cents if negative else cents


def coerce_cell(column: ColumnSpec, value: str, *, date_format: str) -> Any:
    """Convert one raw cell to the Python type declared for its column."""
    if column.kind == "order_id":
        return parse_order_id(value)
    if column.kind == "date":
        return parse_date(value, date_format)
    if column.kind == "int":
        return parse_int(value)
    if column.kind == "money":
        return parse_money_cents(value)
    return value.strip()
