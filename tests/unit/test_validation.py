"""Unit tests for validation.py — rejected-input error kinds."""
from decimal import Decimal

import pytest

from easycalc.calculator import LoanTerms, amortize
from easycalc.config import MAX_TERM_PERIODS
from easycalc.validation import (
    InvalidLoanTermsError,
    InvalidTermError,
    NegativeInputError,
    NumericDegenerateError,
    amortize_checked,
    validate_terms,
)


def _terms(principal="27000", rate="6.5", months=60) -> LoanTerms:
    return LoanTerms(Decimal(principal), Decimal(rate), months)


class TestValidateTerms:
    def test_valid_terms_returned_unchanged(self):
        terms = _terms()
        assert validate_terms(terms) is terms

    def test_zero_principal_and_zero_rate_are_valid(self):
        validate_terms(_terms(principal="0", rate="0"))

    @pytest.mark.parametrize("months", [0, -1, -360])
    def test_term_below_one(self, months):
        with pytest.raises(InvalidTermError, match="at least 1") as exc_info:
            validate_terms(_terms(months=months))
        assert exc_info.value.field == "term_periods"

    def test_term_above_limit(self):
        with pytest.raises(InvalidTermError, match="cannot exceed"):
            validate_terms(_terms(months=MAX_TERM_PERIODS + 1))

    def test_term_at_limit_is_valid(self):
        validate_terms(_terms(months=MAX_TERM_PERIODS))

    @pytest.mark.parametrize("months", [12.5, "60", True])
    def test_term_must_be_int(self, months):
        with pytest.raises(InvalidTermError, match="whole number"):
            validate_terms(_terms(months=months))

    def test_negative_principal(self):
        with pytest.raises(NegativeInputError, match="principal") as exc_info:
            validate_terms(_terms(principal="-1"))
        assert exc_info.value.field == "principal"

    def test_negative_rate(self):
        with pytest.raises(NegativeInputError, match="rate") as exc_info:
            validate_terms(_terms(rate="-0.5"))
        assert exc_info.value.field == "annual_rate_percent"

    @pytest.mark.parametrize("principal,rate", [("NaN", "6.5"), ("Infinity", "6.5"), ("1000", "NaN"), ("sNaN", "6.5")])
    def test_non_finite_inputs(self, principal, rate):
        with pytest.raises(NumericDegenerateError, match="finite"):
            validate_terms(_terms(principal=principal, rate=rate))

    def test_errors_are_value_errors(self):
        assert issubclass(InvalidLoanTermsError, ValueError)
        for cls in (InvalidTermError, NegativeInputError, NumericDegenerateError):
            assert issubclass(cls, InvalidLoanTermsError)

    def test_term_checked_before_amounts(self):
        with pytest.raises(InvalidTermError):
            validate_terms(_terms(principal="-1", rate="-1", months=0))


class TestAmortizeChecked:
    def test_matches_core_for_valid_terms(self):
        assert amortize_checked(_terms()) == amortize(Decimal("27000"), Decimal("6.5"), 60)

    def test_rejects_what_the_core_would_accept(self):
        # core: empty schedule, non-finite payment
        assert amortize(Decimal("27000"), Decimal("6.5"), 0).schedule == ()
        with pytest.raises(InvalidTermError):
            amortize_checked(_terms(months=0))

    def test_overflowing_payment_is_degenerate(self):
        terms = _terms(principal="1E+20", rate="9E+999990", months=12)
        assert amortize(terms.principal, terms.annual_rate_percent, 12).periodic_payment.is_infinite()
        with pytest.raises(NumericDegenerateError, match="non-finite") as exc_info:
            amortize_checked(terms)
        assert exc_info.value.field == "periodic_payment"
