"""Online mortgage-rate lookup — ECB / FRED.

Only used when the user asks for it (`easycalc mortgage --fetch-rate`).
Rates are returned in PERCENT (e.g. 6.5 for 6.5 %/yr), the unit the
amortization engine takes.
"""
from __future__ import annotations

import logging
import os
from decimal import Decimal, InvalidOperation

import requests

from .regions import get_profile

logger = logging.getLogger(__name__)

# Timeout for HTTP calls (seconds)
_TIMEOUT = 10

# ISO codes covered by the ECB MFI interest rate statistics
_ECB_COUNTRIES = frozenset({"DE", "IT"})

# ECB Data Portal endpoint template
# Series: MIR.M.{CC}.B.A2C.F.R.A.2250.EUR.N
# monthly · country · new business · housing loans · annualised agreed rate · households · EUR
_ECB_URL = (
    "https://data.ecb.europa.eu/api/v1/data/MIR/"
    "M.{cc}.B.A2C.F.R.A.2250.EUR.N"
    "?lastNObservations=1&format=jsondata"
)

# FRED — 30-year fixed mortgage rate
_FRED_SERIES = "MORTGAGE30US"
_FRED_URL = "https://api.stlouisfed.org/fred/series/observations"


class FetchError(Exception):
    """Raised when an online rate fetch fails for any reason."""


def fetch_rate(country: str) -> Decimal:
    """Fetch the latest average annual mortgage rate for *country*.

    Raises FetchError on any error (unknown country, network, parsing,
    missing data).
    """
    try:
        code = get_profile(country).iso_code
    except ValueError as exc:
        raise FetchError(str(exc)) from exc

    if code in _ECB_COUNTRIES:
        rate = _fetch_ecb(code)
    elif code == "US":
        rate = _fetch_fred()
    else:
        raise FetchError(
            f"No online data source configured for {country}. "
            "Please enter the rate manually with --rate."
        )
    logger.info("Fetched average mortgage rate for %s: %s%%", country, rate)
    return rate


def _fetch_ecb(country_code: str) -> Decimal:
    url = _ECB_URL.format(cc=country_code)
    logger.debug("GET %s", url)
    try:
        resp = requests.get(url, timeout=_TIMEOUT)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(f"ECB API request failed: {exc}") from exc

    try:
        data = resp.json()
        # JSON-stat: dataSets[0].series[<key>].observations[<key>][0]
        series = data["dataSets"][0]["series"]
        series_key = next(iter(series))
        observations = series[series_key]["observations"]
        obs_key = next(iter(observations))
        value = observations[obs_key][0]
        if value is None:
            raise FetchError(f"ECB returned null value for {country_code}.")
        return Decimal(str(value))
    except (KeyError, IndexError, StopIteration, TypeError, ValueError, InvalidOperation) as exc:
        raise FetchError(f"Failed to parse ECB response for {country_code}: {exc}") from exc


def _fetch_fred() -> Decimal:
    """Fetch the US 30-year fixed mortgage rate from FRED."""
    api_key = os.environ.get("FRED_API_KEY")
    if not api_key:
        raise FetchError(
            "FRED_API_KEY environment variable is not set. "
            "Get a free key at https://fred.stlouisfed.org/docs/api/api_key.html"
        )
    params = {
        "series_id": _FRED_SERIES,
        "api_key": api_key,
        "file_type": "json",
        "sort_order": "desc",
        "limit": 1,
    }
    logger.debug("GET %s series=%s", _FRED_URL, _FRED_SERIES)
    try:
        resp = requests.get(_FRED_URL, params=params, timeout=_TIMEOUT)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(f"FRED API request failed: {exc}") from exc

    try:
        data = resp.json()
        observations = data["observations"]
        if not observations:
            raise FetchError("FRED returned no observations.")
        value_str = observations[0]["value"]
        if value_str == ".":
            raise FetchError("FRED returned missing value ('.').")
        return Decimal(value_str)
    except (KeyError, IndexError, ValueError, InvalidOperation) as exc:
        raise FetchError(f"Failed to parse FRED response: {exc}") from exc
