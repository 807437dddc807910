from __future__ import annotations

from dataclasses import replace
from pathlib import Path
import sys

from dotenv import load_dotenv
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table
import typer

from artspeople.adapters.line_item_recon import LineItemReconError, LineItemReconReport
from artspeople.core.config import (
    CustomerPolicy,
    ReportConfig,
    ReportConfigError,
    load_report_config_from_env,
)

app = typer.Typer(
    help="Arts People Line Item Reconciliation Report tools.",
    no_args_is_help=True,
)

REPORT_PATH_ARGUMENT = typer.Argument(
    ...,
    exists=True,
    dir_okay=False,
    readable=True,
    help="Path to the exported Line Item Reconciliation Report CSV.",
)
STRICT_CUSTOMERS_OPTION = typer.Option(
    False,
    "--strict-customers",
    help="Fail when rows of one order name different customers.",
)
NO_VALIDATE_HEADER_OPTION = typer.Option(
    False,
    "--no-validate-header",
    help="Skip the header row without checking its column names.",
)
DATE_FORMAT_OPTION = typer.Option(
    None,
    "--date-format",
    help="strptime format of the Order Date column (default %m/%d/%Y).",
)


def _configure_logging(level: str) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        format="{time:YYYY-MM-DD HH:mm:ss} [{level}] {name}: {message}",
        level=level,
    )


def _format_cents(cents: int) -> str:
    sign = "-" if cents < 0 else ""
    return f"{sign}${abs(cents) / 100:,.2f}"


def _render_summary(console: Console, report: LineItemReconReport) -> None:
    table = Table(title="Orders", show_lines=False)
    table.add_column("Order #", justify="right")
    table.add_column("Customer")
    table.add_column("Items", justify="right")
    table.add_column("Qty", justify="right")
    table.add_column("Total", justify="right")

    for order in sorted(report.list_orders(), key=lambda o: o.order_id):
        table.add_row(
            str(order.order_id),
            order.get_customer(),
            str(len(order.get_items())),
            str(order.quantity),
            _format_cents(order.total_cents),
        )

    console.print(table)
    console.print("\n[bold]Summary:[/bold]")
    console.print(f"  Orders: {report.order_count}")
    console.print(f"  Line items: {report.line_item_count}")
    console.print(f"  Customers: {len(report.get_customers())}")
    console.print(f"  Distinct items: {len(report.get_items())}")


@app.callback()
def main_callback() -> None:
    """Load .env before any command runs."""
    load_dotenv(override=False)


@app.command("summary")
def summary(
    report_path: Path = REPORT_PATH_ARGUMENT,
    strict_customers: bool = STRICT_CUSTOMERS_OPTION,
    no_validate_header: bool = NO_VALIDATE_HEADER_OPTION,
    date_format: str | None = DATE_FORMAT_OPTION,
) -> None:
    """Parse a report export and print its orders, customers and items."""
    err_console = Console(stderr=True)
    try:
        config: ReportConfig = load_report_config_from_env()
    except ReportConfigError as exc:
        err_console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    if strict_customers:
        config = replace(config, customer_policy=CustomerPolicy.STRICT)
    if no_validate_header:
        config = replace(config, validate_header=False)
    if date_format:
        config = replace(config, date_format=date_format)

    _configure_logging(config.log_level)

    try:
        with report_path.open("r", encoding="utf-8-sig", newline="") as handle:
            report = LineItemReconReport.from_csv(handle, config)
    except LineItemReconError as exc:
        err_console.print(
            f"[red]Failed to parse {report_path}:[/red] {escape(str(exc))}"
        )
        raise typer.Exit(code=1) from exc

    _render_summary(Console(), report)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
