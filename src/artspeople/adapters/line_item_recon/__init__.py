"""Arts People Line Item Reconciliation Report parsing."""

from artspeople.adapters.line_item_recon.entities import LineItem, parse_line_item
from artspeople.adapters.line_item_recon.errors import (
    CustomerConflictError,
    FormatError,
    HeaderMismatchError,
    LineItemReconError,
    ParseError,
    RowParseError,
    RowSchemaError,
    TokenizeError,
)
from artspeople.adapters.line_item_recon.order import Order
from artspeople.adapters.line_item_recon.report import LineItemReconReport

__all__ = [
    "CustomerConflictError",
    "FormatError",
    "HeaderMismatchError",
    "LineItem",
    "LineItemReconError",
    "LineItemReconReport",
    "Order",
    "ParseError",
    "RowParseError",
    "RowSchemaError",
    "TokenizeError",
    "parse_line_item",
]
