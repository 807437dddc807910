"""Parser for the Arts People Line Item Reconciliation Report.

Build a report from the CSV export with ``LineItemReconReport.from_csv``.
"""

from __future__ import annotations

from collections.abc import Mapping
import csv
import io
from types import MappingProxyType
from typing import TextIO

from artspeople.adapters.line_item_recon.entities import LineItem
from artspeople.adapters.line_item_recon.errors import (
    CustomerConflictError,
    FormatError,
    ParseError,
    RowParseError,
)
from artspeople.adapters.line_item_recon.logger import ReportLogger
from artspeople.adapters.line_item_recon.order import Order
from artspeople.adapters.line_item_recon.schema import validate_header
from artspeople.core.config import CustomerPolicy, ReportConfig

# (1-based line number where the record starts, raw cells)
RawLine = tuple[int, list[str]]


class _ReportParser:
    """Reads report rows and groups them into orders for one parse."""

    def __init__(self, config: ReportConfig, report_logger: ReportLogger) -> None:
        self._config = config
        self._log = report_logger

    def read_input(self, report_csv: TextIO | str) -> list[RawLine]:
        stream = io.StringIO(report_csv) if isinstance(report_csv, str) else report_csv
        reader = csv.reader(stream, strict=True)

        lines: list[RawLine] = []
        while True:
            start_line = reader.line_num + 1
            try:
                row = next(reader)
            except StopIteration:
                break
            except csv.Error as exc:
                raise FormatError(
                    f"malformed CSV: {exc}", line_number=reader.line_num
                ) from exc
            if row:
                lines.append((start_line, row))

        if not lines:
            raise FormatError("report is empty; expected a header row")

        _, header = lines[0]
        if self._config.validate_header:
            validate_header(header)
            self._log.header_validated(len(header))
        else:
            # Column meaning is positional; the header is only a label row.
            self._log.header_skipped(header)

        for line_number, row in lines[1:]:
            if len(row) != len(header):
                raise FormatError(
                    f"wrong number of fields: expected {len(header)}, got {len(row)}",
                    line_number=line_number,
                )

        self._log.input_read(len(lines) - 1)
        return lines[1:]

    def parse_raw_lines(self, raw_lines: list[RawLine]) -> dict[int, Order]:
        orders: dict[int, Order] = {}

        for line_number, row in raw_lines:
            try:
                li = LineItem.from_row(row, date_format=self._config.date_format)
            except ParseError as exc:
                self._log.row_rejected(line_number, exc)
                raise RowParseError(
                    row, exc.cause, line_number=line_number, column=exc.column
                ) from exc

            order = orders.get(li.order_id)
            if order is None:
                order = Order(li.order_id)
                orders[li.order_id] = order
            elif li.customer != order.get_customer():
                self._check_customer(order, li, row, line_number)

            order.add_line_item(li)

        return orders

    def _check_customer(
        self,
        order: Order,
        li: LineItem,
        row: list[str],
        line_number: int,
    ) -> None:
        if self._config.customer_policy is CustomerPolicy.STRICT:
            error = CustomerConflictError(
                row,
                line_number=line_number,
                order_id=order.order_id,
                expected=order.get_customer(),
                actual=li.customer,
            )
            self._log.row_rejected(line_number, error)
            raise error
        self._log.customer_conflict(
            order.order_id, order.get_customer(), li.customer, line_number
        )


class LineItemReconReport:
    """Parsed, type-normalized Line Item Reconciliation Report.

    Line items are grouped into orders keyed by order id. Build one from an
    export with ``from_csv``; there is no API to add rows afterwards.
    """

    def __init__(self, orders: Mapping[int, Order]) -> None:
        """Initialize with already grouped orders.

        Args:
            orders: Dict mapping order_id -> Order
        """
        self._orders: dict[int, Order] = dict(orders)

    @classmethod
    def from_csv(
        cls,
        report_csv: TextIO | str,
        config: ReportConfig | None = None,
        *,
        report_logger: ReportLogger | None = None,
    ) -> LineItemReconReport:
        """Parse a full report export.

        Args:
            report_csv: Open text stream or the CSV text itself, header first
            config: Parsing options (defaults to ``ReportConfig()``)
            report_logger: Logger override, mainly for tests

        Returns:
            Fully populated report

        Raises:
            FormatError: If the CSV is malformed or the header is unexpected
            RowParseError: If any data row fails to parse
        """
        report_logger = report_logger or ReportLogger()
        parser = _ReportParser(config or ReportConfig(), report_logger)
        orders = parser.parse_raw_lines(parser.read_input(report_csv))

        report = cls(orders)
        report_logger.report_parsed(report.order_count, report.line_item_count)
        return report

    @property
    def orders(self) -> Mapping[int, Order]:
        """Read-only mapping of order id -> Order."""
        return MappingProxyType(self._orders)

    def get_order(self, order_id: int) -> Order | None:
        return self._orders.get(order_id)

    def list_orders(self) -> list[Order]:
        return list(self._orders.values())

    def get_items(self) -> set[str]:
        """All distinct item names mentioned in the report."""
        items: set[str] = set()
        for order in self._orders.values():
            items |= order.get_items()
        return items

    def get_customers(self) -> set[str]:
        """All distinct customers who have an order in the report."""
        return {order.get_customer() for order in self._orders.values()}

    @property
    def order_count(self) -> int:
        return len(self._orders)

    @property
    def line_item_count(self) -> int:
        return sum(len(order) for order in self._orders.values())
