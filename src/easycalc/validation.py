"""Input validation in front of the amortization core.

The core in calculator.py accepts any numeric input and lets degenerate
values propagate. Callers that need rejection instead go through here:

1. term_periods must be an integer in [MIN_TERM_PERIODS, MAX_TERM_PERIODS].
2. principal and annual_rate_percent must be finite and >= 0.
3. The computed payment must be finite.
"""
from __future__ import annotations

from decimal import Decimal

from .calculator import AmortizationResult, LoanTerms, amortize_terms, to_decimal
from .config import MAX_TERM_PERIODS, MIN_TERM_PERIODS, ZERO


class InvalidLoanTermsError(ValueError):
    """Raised when loan terms fall outside the engine's meaningful domain."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class InvalidTermError(InvalidLoanTermsError):
    """term_periods is not a whole number of periods in the accepted range."""


class NegativeInputError(InvalidLoanTermsError):
    """principal or annual rate is below zero."""


class NumericDegenerateError(InvalidLoanTermsError):
    """The inputs produced a non-finite payment or schedule."""


def _check_finite(field: str, value: Decimal) -> None:
    if not value.is_finite():
        raise NumericDegenerateError(field, f"{field} must be a finite number (got {value}).")


def validate_terms(terms: LoanTerms) -> LoanTerms:
    """Return *terms* unchanged, or raise the first applicable error."""
    term = terms.term_periods
    if isinstance(term, bool) or not isinstance(term, int):
        raise InvalidTermError(
            "term_periods", f"term_periods must be a whole number of months (got {term!r})."
        )
    if term < MIN_TERM_PERIODS:
        raise InvalidTermError(
            "term_periods", f"term_periods must be at least {MIN_TERM_PERIODS} (got {term})."
        )
    if term > MAX_TERM_PERIODS:
        raise InvalidTermError(
            "term_periods", f"term_periods cannot exceed {MAX_TERM_PERIODS} months (got {term})."
        )

    principal = to_decimal(terms.principal)
    rate = to_decimal(terms.annual_rate_percent)
    _check_finite("principal", principal)
    _check_finite("annual_rate_percent", rate)

    if principal < ZERO:
        raise NegativeInputError("principal", f"principal must be >= 0 (got {principal}).")
    if rate < ZERO:
        raise NegativeInputError(
            "annual_rate_percent", f"annual rate must be >= 0% (got {rate}%)."
        )
    return terms


def amortize_checked(terms: LoanTerms) -> AmortizationResult:
    """Validate *terms*, run the core, and reject a non-finite outcome."""
    result = amortize_terms(validate_terms(terms))
    if not result.periodic_payment.is_finite():
        raise NumericDegenerateError(
            "periodic_payment",
            f"Loan terms produce a non-finite payment ({result.periodic_payment}).",
        )
    return result
