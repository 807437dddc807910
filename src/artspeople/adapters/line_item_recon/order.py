"""Order aggregate grouping the line items of one order."""

from __future__ import annotations

from artspeople.adapters.line_item_recon.entities import LineItem


class Order:
    """All line items sharing an order identifier.

    The Order does not check that appended items carry its identifier;
    the report that builds it groups items by identifier before appending.
    """

    def __init__(self, order_id: int) -> None:
        self.order_id = order_id
        self._line_items: list[LineItem] = []

    def add_line_item(self, item: LineItem) -> None:
        self._line_items.append(item)

    def get_items(self) -> set[str]:
        """Distinct item names in this order."""
        return {li.item for li in self._line_items}

    def get_customer(self) -> str:
        """Customer of this order, taken from its first line item."""
        if not self._line_items:
            return ""
        return self._line_items[0].customer

    @property
    def line_items(self) -> tuple[LineItem, ...]:
        return tuple(self._line_items)

    @property
    def total_cents(self) -> int:
        return sum(li.total_cents for li in self._line_items)

    @property
    def quantity(self) -> int:
        return sum(li.quantity for li in self._line_items)

    def __len__(self) -> int:
        return len(self._line_items)

    def __repr__(self) -> str:
        return (
            f"Order(order_id={self.order_id}, customer={self.get_customer()!r}, "
            f"line_items={len(self._line_items)})"
        )
