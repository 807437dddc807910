"""Errors raised while parsing a Line Item Reconciliation Report."""

from __future__ import annotations

from collections.abc import Sequence


class LineItemReconError(Exception):
    """Base error for Line Item Reconciliation Report parsing."""


class FormatError(LineItemReconError):
    """Input is not a well-formed report CSV."""

    def __init__(self, message: str, *, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class HeaderMismatchError(FormatError):
    """Header row does not match the declared report columns."""

    def __init__(self, expected: Sequence[str], actual: Sequence[str]) -> None:
        self.expected = tuple(expected)
        self.actual = tuple(actual)
        super().__init__(
            f"unexpected header {list(self.actual)}; expected {list(self.expected)}",
            line_number=1,
        )


class ParseError(LineItemReconError):
    """A data row could not be turned into a LineItem."""

    def __init__(
        self,
        row: Sequence[str],
        cause: Exception | str,
        *,
        column: str | None = None,
    ) -> None:
        self.row = tuple(row)
        self.column = column
        self.cause = cause
        super().__init__(self._describe())

    def _describe(self) -> str:
        where = f" (column {self.column!r})" if self.column else ""
        return f"failed to parse row {list(self.row)}{where}: {self.cause}"


class RowParseError(ParseError):
    """A row failed while building the report; carries its input line."""

    def __init__(
        self,
        row: Sequence[str],
        cause: Exception | str,
        *,
        line_number: int,
        column: str | None = None,
    ) -> None:
        self.line_number = line_number
        super().__init__(row, cause, column=column)

    def _describe(self) -> str:
        return f"line {self.line_number}: {super()._describe()}"


class CustomerConflictError(RowParseError):
    """Rows of the same order name different customers."""

    def __init__(
        self,
        row: Sequence[str],
        *,
        line_number: int,
        order_id: int,
        expected: str,
        actual: str,
    ) -> None:
        self.order_id = order_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            row,
            f"order {order_id} already belongs to {expected!r}, got {actual!r}",
            line_number=line_number,
            column="Customer",
        )


TokenizeError = FormatError
RowSchemaError = ParseError
