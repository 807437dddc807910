"""Line item records parsed from the reconciliation report."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from typing import Any

from artspeople.adapters.line_item_recon.errors import ParseError
from artspeople.adapters.line_item_recon.schema import (
    DEFAULT_DATE_FORMAT,
    LINE_ITEM_COLUMNS,
    coerce_cell,
)


@dataclass(frozen=True, slots=True)
class LineItem:
    """One reconciled line of an Arts People order."""

    order_id: int
    order_date: date
    customer: str
    item: str
    item_type: str
    quantity: int
    price_cents: int  # Unit price
    total_cents: int  # Line total as reported

    @classmethod
    def from_row(
        cls,
        row: Sequence[str],
        *,
        date_format: str = DEFAULT_DATE_FORMAT,
    ) -> LineItem:
        """Build a LineItem from one positional data row.

        Args:
            row: Raw cells in report column order (header already removed)
            date_format: strptime format of the ``Order Date`` column

        Returns:
            Fully coerced LineItem

        Raises:
            ParseError: If the row has the wrong number of cells or any cell
                fails its type coercion
        """
        if len(row) != len(LINE_ITEM_COLUMNS):
            raise ParseError(
                row,
                f"expected {len(LINE_ITEM_COLUMNS)} fields, got {len(row)}",
            )

        values: dict[str, Any] = {}
        for column, raw in zip(LINE_ITEM_COLUMNS, row):
            try:
                values[column.attribute] = coerce_cell(
                    column, raw, date_format=date_format
                )
            except ValueError as exc:
                raise ParseError(row, exc, column=column.header) from exc

        return cls(**values)


def parse_line_item(
    row: Sequence[str], *, date_format: str = DEFAULT_DATE_FORMAT
) -> LineItem:
    """Parse one data row into a LineItem."""
    return LineItem.from_row(row, date_format=date_format)
