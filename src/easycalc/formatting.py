"""Display formatting — the only place where amounts get rounded."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from .config import CENT

_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "CAD": "CA$",
    "EUR": "€",
}


def format_money(value: Decimal, currency: str) -> str:
    """'$1,234.57' for currencies with a known symbol, '1,234.57 AED' otherwise."""
    code = currency.upper()
    if not value.is_finite():
        return f"{code} n/a"
    amount = value.quantize(CENT, rounding=ROUND_HALF_UP)
    symbol = _SYMBOLS.get(code)
    if symbol is None:
        return f"{amount:,.2f} {code}"
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_percent(value_percent: Decimal) -> str:
    """Format a rate already expressed in percent: 6.5 → '6.50%'."""
    return f"{value_percent:.2f}%"


def format_term(n: int) -> str:
    years, months = divmod(n, 12)
    if months == 0:
        return f"{n} months ({years} years)"
    return f"{n} months ({years}y {months}m)"
