"""Logging for Line Item Reconciliation Report parsing.

Separates logging logic from parsing logic.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import loguru
from loguru import logger

if TYPE_CHECKING:
    from artspeople.adapters.line_item_recon.errors import ParseError


class ReportLogger:
    """Handles all logging for report parsing."""

    def __init__(self, logger_instance: loguru.Logger = logger) -> None:
        """Initialize logger.

        Args:
            logger_instance: Logger instance to use (defaults to loguru.logger)
        """
        self._logger = logger_instance

    def input_read(self, row_count: int) -> None:
        """Log raw rows read from the input."""
        self._logger.bind(rows=row_count).debug(
            "Read {} data rows from report CSV", row_count
        )

    def header_validated(self, column_count: int) -> None:
        self._logger.bind(columns=column_count).debug(
            "Report header matches {} declared columns", column_count
        )

    def header_skipped(self, header: Sequence[str]) -> None:
        self._logger.bind(header=list(header)).debug(
            "Skipping header row without validation"
        )

    def report_parsed(self, order_count: int, line_item_count: int) -> None:
        """Log parse completion summary."""
        self._logger.bind(orders=order_count, line_items=line_item_count).info(
            "Parsed line item reconciliation report: {} orders, {} line items",
            order_count,
            line_item_count,
        )

    def row_rejected(self, line_number: int, error: ParseError) -> None:
        """Log a row that aborted the parse."""
        self._logger.bind(
            line_number=line_number,
            column=error.column,
        ).warning("Rejected report line {}: {}", line_number, error.cause)

    def customer_conflict(
        self,
        order_id: int,
        expected: str,
        actual: str,
        line_number: int,
    ) -> None:
        """Log rows of one order naming different customers."""
        self._logger.bind(
            order_id=order_id,
            expected=expected,
            actual=actual,
            line_number=line_number,
        ).warning(
            "Order {} has conflicting customers ({!r} vs {!r}) at line {}; "
            "keeping {!r}",
            order_id,
            expected,
            actual,
            line_number,
            expected,
        )
