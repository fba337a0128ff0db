"""Command-line front end — click commands rendering quotes with rich.

Commands:
  auto       price an auto loan (vehicle price minus down payment)
  mortgage   price a mortgage (down payment as % of home price, term in years)
  countries  list supported countries, currencies and regions
"""
from __future__ import annotations

import logging
import sys
from decimal import Decimal, InvalidOperation
from typing import Optional

import click
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .config import (
    DEFAULT_AUTO_APR_PERCENT,
    DEFAULT_AUTO_TERM_MONTHS,
    DEFAULT_COUNTRY,
    DEFAULT_DOWN_PAYMENT_PERCENT,
    DEFAULT_HOME_PRICE,
    DEFAULT_MORTGAGE_RATE_PERCENT,
    DEFAULT_MORTGAGE_TERM_YEARS,
    DEFAULT_VEHICLE_DOWN_PAYMENT,
    DEFAULT_VEHICLE_PRICE,
)
from .fetcher import FetchError, fetch_rate
from .formatting import format_money, format_percent, format_term
from .quotes import AutoLoanInputs, LoanQuote, MortgageInputs, quote_auto_loan, quote_mortgage
from .regions import SUPPORTED_COUNTRIES, Selection, get_profile
from .validation import InvalidLoanTermsError

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True, style="bold red")


# ──────────────────────────────────────────────────────────────────────────────
# Input helpers
# ──────────────────────────────────────────────────────────────────────────────

def _parse_decimal(raw: str, name: str) -> Decimal:
    try:
        value = Decimal(raw.replace(",", ".").replace(" ", ""))
    except InvalidOperation:
        err_console.print(f"Invalid value for --{name}: '{raw}'")
        sys.exit(1)
    if not value.is_finite():
        err_console.print(f"Invalid value for --{name}: '{raw}'")
        sys.exit(1)
    return value


def _resolve_selection(country: str, region: Optional[str]) -> Selection:
    try:
        selection = Selection.for_country(country)
        if region is not None:
            selection = selection.with_region(region)
    except ValueError as exc:
        err_console.print(str(exc))
        sys.exit(1)
    return selection


# ──────────────────────────────────────────────────────────────────────────────
# Result display
# ──────────────────────────────────────────────────────────────────────────────

def display_quote(quote: LoanQuote) -> None:
    cur = quote.currency
    title = "Auto Finance" if quote.kind == "auto" else "Mortgage"
    price_label = "Vehicle price" if quote.kind == "auto" else "Home price"

    console.print()
    console.print(Panel(
        f"[bold green]{title}[/bold green] — {quote.selection.country} / {quote.selection.region}",
        expand=False,
    ))

    result = quote.result
    t = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    t.add_column("Field", style="cyan", no_wrap=True)
    t.add_column("Value", justify="right", no_wrap=True)
    t.add_row(price_label, format_money(quote.price, cur))
    t.add_row("Down payment", format_money(quote.down_payment, cur))
    t.add_row("Amount financed", format_money(quote.principal, cur))
    t.add_row("Rate (APR)", format_percent(quote.terms.annual_rate_percent))
    t.add_row("Term", format_term(quote.terms.term_periods))
    t.add_row("[bold]Monthly payment[/bold]", f"[bold]{format_money(result.periodic_payment, cur)}[/bold]")
    t.add_row("Total interest", format_money(result.total_interest, cur))
    t.add_row("Total paid", format_money(result.total_paid, cur))
    if result.payoff_period < quote.terms.term_periods:
        t.add_row("Paid off after", format_term(result.payoff_period))
    console.print(t)


def display_schedule(quote: LoanQuote) -> None:
    cur = quote.currency
    t = Table(title="Amortization Schedule", box=box.MINIMAL_HEAVY_HEAD)
    for col in ("Month", "Interest", "Principal", "Balance"):
        t.add_column(col, justify="right")

    for row in quote.result.schedule:
        t.add_row(
            str(row.period),
            format_money(row.interest, cur),
            format_money(row.principal, cur),
            format_money(row.balance, cur),
        )
    console.print(t)


def _render(quote_fn, inputs, selection: Selection, schedule: bool) -> None:
    try:
        quote = quote_fn(inputs, selection)
    except InvalidLoanTermsError as exc:
        logger.debug("Rejected %s (field=%s)", inputs, exc.field)
        err_console.print(f"Invalid loan terms: {exc}")
        sys.exit(1)
    display_quote(quote)
    if schedule:
        display_schedule(quote)


# ──────────────────────────────────────────────────────────────────────────────
# Click entry point
# ──────────────────────────────────────────────────────────────────────────────

@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
def main(verbose: bool) -> None:
    """easycalc — mortgage and auto finance calculators."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@main.command()
@click.option("--price", type=str, default=str(DEFAULT_VEHICLE_PRICE), show_default=True, help="Vehicle price")
@click.option("--down", type=str, default=str(DEFAULT_VEHICLE_DOWN_PAYMENT), show_default=True, help="Down payment (absolute amount)")
@click.option("--apr", type=str, default=str(DEFAULT_AUTO_APR_PERCENT), show_default=True, help="APR in percent, e.g. 6.5")
@click.option("--term", type=int, default=DEFAULT_AUTO_TERM_MONTHS, show_default=True, help="Term in months")
@click.option("--country", type=str, default=DEFAULT_COUNTRY, show_default=True, help="Country")
@click.option("--region", type=str, default=None, help="State / province (defaults to the country's first region)")
@click.option("--schedule", is_flag=True, help="Print the month-by-month schedule")
def auto(
    price: str,
    down: str,
    apr: str,
    term: int,
    country: str,
    region: Optional[str],
    schedule: bool,
) -> None:
    """Price an auto loan."""
    selection = _resolve_selection(country, region)
    inputs = AutoLoanInputs(
        vehicle_price=_parse_decimal(price, "price"),
        down_payment=_parse_decimal(down, "down"),
        apr_percent=_parse_decimal(apr, "apr"),
        term_months=term,
    )
    _render(quote_auto_loan, inputs, selection, schedule)


@main.command()
@click.option("--price", type=str, default=str(DEFAULT_HOME_PRICE), show_default=True, help="Home price")
@click.option("--down-pct", type=str, default=str(DEFAULT_DOWN_PAYMENT_PERCENT), show_default=True, help="Down payment in percent of the price")
@click.option("--rate", type=str, default=str(DEFAULT_MORTGAGE_RATE_PERCENT), show_default=True, help="Annual rate in percent, e.g. 6.5")
@click.option("--years", type=int, default=DEFAULT_MORTGAGE_TERM_YEARS, show_default=True, help="Term in years")
@click.option("--country", type=str, default=DEFAULT_COUNTRY, show_default=True, help="Country")
@click.option("--region", type=str, default=None, help="State / province (defaults to the country's first region)")
@click.option("--fetch-rate", "fetch_rate_flag", is_flag=True, help="Use the latest published average mortgage rate (USA, Germany, Italy)")
@click.option("--schedule", is_flag=True, help="Print the month-by-month schedule")
def mortgage(
    price: str,
    down_pct: str,
    rate: str,
    years: int,
    country: str,
    region: Optional[str],
    fetch_rate_flag: bool,
    schedule: bool,
) -> None:
    """Price a mortgage."""
    selection = _resolve_selection(country, region)
    rate_percent = _parse_decimal(rate, "rate")
    if fetch_rate_flag:
        console.print(f"  Fetching latest average mortgage rate for {selection.country}…")
        try:
            rate_percent = fetch_rate(selection.country)
            console.print(f"  [green]Using fetched rate: {format_percent(rate_percent)}[/green]")
        except FetchError as exc:
            err_console.print(f"  Fetch failed: {exc}")
            console.print(f"  [yellow]Falling back to {format_percent(rate_percent)}[/yellow]")

    inputs = MortgageInputs(
        home_price=_parse_decimal(price, "price"),
        down_payment_percent=_parse_decimal(down_pct, "down-pct"),
        rate_percent=rate_percent,
        term_years=years,
    )
    _render(quote_mortgage, inputs, selection, schedule)


@main.command()
def countries() -> None:
    """List supported countries, currencies and regions."""
    t = Table(title="Supported Countries", box=box.SIMPLE, show_header=True, padding=(0, 2))
    t.add_column("Country", style="cyan", no_wrap=True)
    t.add_column("Currency", no_wrap=True)
    t.add_column("Regions", style="dim")
    for name in SUPPORTED_COUNTRIES:
        profile = get_profile(name)
        t.add_row(profile.name, profile.currency, ", ".join(profile.regions))
    console.print(t)
