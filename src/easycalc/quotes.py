"""Auto-loan and mortgage front ends for the amortization engine.

Turns form-style inputs into LoanTerms:
- auto loan: principal = max(0, vehicle_price - down_payment), term in months.
- mortgage: down payment is a percentage of the home price, term in years.
Both paths go through validation, so bad form input raises instead of
producing a meaningless schedule.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from .calculator import AmortizationResult, LoanTerms
from .config import (
    DEFAULT_AUTO_APR_PERCENT,
    DEFAULT_AUTO_TERM_MONTHS,
    DEFAULT_DOWN_PAYMENT_PERCENT,
    DEFAULT_HOME_PRICE,
    DEFAULT_MORTGAGE_RATE_PERCENT,
    DEFAULT_MORTGAGE_TERM_YEARS,
    DEFAULT_VEHICLE_DOWN_PAYMENT,
    DEFAULT_VEHICLE_PRICE,
    MONTHS_PER_YEAR,
    PERCENT,
    ZERO,
    QuoteKind,
)
from .regions import Selection
from .validation import amortize_checked

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AutoLoanInputs:
    vehicle_price: Decimal = DEFAULT_VEHICLE_PRICE
    down_payment: Decimal = DEFAULT_VEHICLE_DOWN_PAYMENT
    apr_percent: Decimal = DEFAULT_AUTO_APR_PERCENT
    term_months: int = DEFAULT_AUTO_TERM_MONTHS


@dataclass(frozen=True)
class MortgageInputs:
    home_price: Decimal = DEFAULT_HOME_PRICE
    down_payment_percent: Decimal = DEFAULT_DOWN_PAYMENT_PERCENT
    rate_percent: Decimal = DEFAULT_MORTGAGE_RATE_PERCENT
    term_years: int = DEFAULT_MORTGAGE_TERM_YEARS


@dataclass(frozen=True)
class LoanQuote:
    """A priced loan: what was asked for, what gets financed, and the schedule."""
    kind: QuoteKind
    selection: Selection
    price: Decimal
    down_payment: Decimal
    terms: LoanTerms
    result: AmortizationResult = field(repr=False)

    @property
    def currency(self) -> str:
        return self.selection.currency

    @property
    def principal(self) -> Decimal:
        return self.terms.principal

    @property
    def monthly_payment(self) -> Decimal:
        return self.result.periodic_payment


def financed_amount(price: Decimal, down_payment: Decimal) -> Decimal:
    """Amount left to borrow; a down payment above the price finances nothing."""
    return max(ZERO, price - down_payment)


def quote_auto_loan(inputs: AutoLoanInputs, selection: Selection) -> LoanQuote:
    principal = financed_amount(inputs.vehicle_price, inputs.down_payment)
    terms = LoanTerms(
        principal=principal,
        annual_rate_percent=inputs.apr_percent,
        term_periods=inputs.term_months,
    )
    logger.debug("Auto loan for %s/%s: %s", selection.country, selection.region, terms)
    return LoanQuote(
        kind="auto",
        selection=selection,
        price=inputs.vehicle_price,
        down_payment=inputs.down_payment,
        terms=terms,
        result=amortize_checked(terms),
    )


def quote_mortgage(inputs: MortgageInputs, selection: Selection) -> LoanQuote:
    down_payment = inputs.down_payment_percent / PERCENT * inputs.home_price
    principal = financed_amount(inputs.home_price, down_payment)
    terms = LoanTerms(
        principal=principal,
        annual_rate_percent=inputs.rate_percent,
        term_periods=inputs.term_years * MONTHS_PER_YEAR,
    )
    logger.debug("Mortgage for %s/%s: %s", selection.country, selection.region, terms)
    return LoanQuote(
        kind="mortgage",
        selection=selection,
        price=inputs.home_price,
        down_payment=down_payment,
        terms=terms,
        result=amortize_checked(terms),
    )
