"""Application-wide constants and configuration defaults.

All tuneable defaults live here so there is a single place to adjust them.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Literal

# ── Type aliases ──────────────────────────────────────────────────────────────

QuoteKind = Literal["auto", "mortgage"]

# ── Numeric convenience ───────────────────────────────────────────────────────

ZERO = Decimal("0")
CENT = Decimal("0.01")
PERCENT = Decimal("100")
MONTHS_PER_YEAR: int = 12

# Significant digits for engine arithmetic; keeps the final balance of a
# MAX_TERM_PERIODS loan at rates up to 100 %/yr within 1e-6 of zero.
ENGINE_PRECISION: int = 50

# ── Input limits (validation layer only, the core is unguarded) ──────────────

MIN_TERM_PERIODS: int = 1
MAX_TERM_PERIODS: int = 600  # 50 years

# ── Selection defaults ────────────────────────────────────────────────────────

DEFAULT_COUNTRY: str = "USA"
DEFAULT_CURRENCY: str = "USD"

# ── Auto finance form defaults ────────────────────────────────────────────────

DEFAULT_VEHICLE_PRICE = Decimal("30000")
DEFAULT_VEHICLE_DOWN_PAYMENT = Decimal("3000")
DEFAULT_AUTO_APR_PERCENT = Decimal("6.5")
DEFAULT_AUTO_TERM_MONTHS: int = 60

# ── Mortgage form defaults ────────────────────────────────────────────────────

DEFAULT_HOME_PRICE = Decimal("400000")
DEFAULT_DOWN_PAYMENT_PERCENT = Decimal("20")
DEFAULT_MORTGAGE_RATE_PERCENT = Decimal("6.5")
DEFAULT_MORTGAGE_TERM_YEARS: int = 30
