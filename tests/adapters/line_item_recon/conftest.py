"""Fixtures for Line Item Reconciliation Report tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

HEADER = "Order #,Order Date,Customer,Item,Item Type,Quantity,Price,Total"


def build_report_csv(*rows: str, header: str = HEADER) -> str:
    return "\n".join((header, *rows)) + "\n"


@pytest.fixture
def report_csv() -> Callable[..., str]:
    """Factory building report CSV text from data row strings."""
    return build_report_csv


@pytest.fixture
def sample_report_csv() -> str:
    """Three orders, two customers, four distinct items."""
    return build_report_csv(
        "100,08/29/2025,Jane Doe,Ticket A,Ticket,2,$25.00,$50.00",
        "100,08/29/2025,Jane Doe,Ticket B,Ticket,1,$30.00,$30.00",
        '101,08/30/2025,John Roe,"Gala, Front Row",Ticket,1,"$1,200.00","$1,200.00"',
        "102,09/01/2025,Jane Doe,Ticket A,Ticket,1,$25.00,$25.00",
        "102,09/01/2025,Jane Doe,Handling Fee,Fee,1,$2.50,$2.50",
    )
