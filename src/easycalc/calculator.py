"""Core amortization engine — level payment and month-by-month schedule.

All monetary values use decimal.Decimal — float is forbidden.
No rounding happens here: every figure keeps full context precision and
presentation code decides how to display it.

The engine is a total function over its numeric domain. Degenerate inputs
(a zero-period term, extreme negative rates) produce Infinity/NaN instead of
raising; rejecting out-of-domain input is the job of validation.py.
"""
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from decimal import (
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    localcontext,
)
from typing import Iterator, Union

from .config import ENGINE_PRECISION, MONTHS_PER_YEAR, PERCENT, ZERO

Number = Union[Decimal, int, str]


def to_decimal(value: Number) -> Decimal:
    """Coerce ints and numeric strings to Decimal, passing Decimals through."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@contextmanager
def _total_context() -> Iterator[None]:
    # Untrapped signals turn x/0 into Infinity, 0/0 and sNaN operands into NaN.
    with localcontext() as ctx:
        ctx.prec = ENGINE_PRECISION
        ctx.traps[DivisionByZero] = False
        ctx.traps[InvalidOperation] = False
        ctx.traps[Overflow] = False
        yield


@dataclass(frozen=True)
class LoanTerms:
    principal: Decimal
    annual_rate_percent: Decimal
    term_periods: int

    @property
    def periodic_rate(self) -> Decimal:
        return periodic_rate(self.annual_rate_percent)


@dataclass(frozen=True)
class ScheduleRow:
    period: int
    interest: Decimal
    principal: Decimal
    balance: Decimal


@dataclass(frozen=True)
class AmortizationResult:
    schedule: tuple[ScheduleRow, ...]
    periodic_payment: Decimal
    total_interest: Decimal

    @property
    def total_principal(self) -> Decimal:
        return sum((row.principal for row in self.schedule), ZERO)

    @property
    def total_paid(self) -> Decimal:
        return self.total_principal + self.total_interest

    @property
    def payoff_period(self) -> int:
        """Index of the period in which the balance reached zero (or the last period)."""
        return self.schedule[-1].period if self.schedule else 0


def periodic_rate(annual_rate_percent: Number) -> Decimal:
    """Monthly rate as a fraction: 6.5 (%/yr) → 0.0054166…"""
    with _total_context():
        return to_decimal(annual_rate_percent) / PERCENT / MONTHS_PER_YEAR


def solve_payment(
    periodic_rate: Number,
    num_periods: int,
    principal: Number,
) -> Decimal:
    """Return the level payment that fully amortizes *principal*.

    Uses the standard annuity formula:
        PMT = r * P / (1 - (1 + r)^-n)

    Special case: if r == 0, PMT = P / n (straight-line split).
    """
    with _total_context():
        r = to_decimal(periodic_rate)
        p = to_decimal(principal)
        if r == ZERO:
            return p / Decimal(num_periods)
        return (r * p) / (1 - (1 + r) ** -num_periods)


def amortize(
    principal: Number,
    annual_rate_percent: Number,
    term_periods: int,
) -> AmortizationResult:
    """Build the month-by-month amortization schedule.

    Each period first absorbs interest on the outstanding balance; the rest
    of the payment reduces principal, capped at the remaining balance so the
    balance never goes negative. Iteration stops early once the balance hits
    zero, so the schedule holds between 1 and *term_periods* rows.
    """
    rows: list[ScheduleRow] = []
    with _total_context():
        balance = to_decimal(principal)
        r = periodic_rate(annual_rate_percent)
        payment = solve_payment(r, term_periods, balance)

        for period in range(1, term_periods + 1):
            interest = balance * r
            principal_paid = min(payment - interest, balance)
            balance = max(ZERO, balance - principal_paid)
            rows.append(ScheduleRow(period, interest, principal_paid, balance))
            if balance <= ZERO:
                break

        total_interest = sum((row.interest for row in rows), ZERO)

    return AmortizationResult(
        schedule=tuple(rows),
        periodic_payment=payment,
        total_interest=total_interest,
    )


def amortize_terms(terms: LoanTerms) -> AmortizationResult:
    return amortize(terms.principal, terms.annual_rate_percent, terms.term_periods)
