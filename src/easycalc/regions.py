"""Static country catalogue and the country/region selection rule.

Each country carries its display currency and the regions offered for it.
Switching country always resets the region to the first region of the new
country; a region is only accepted when it belongs to the selected country.
"""
from __future__ import annotations

from dataclasses import dataclass

from .config import DEFAULT_COUNTRY, DEFAULT_CURRENCY


class UnsupportedCountryError(ValueError):
    """Raised for a country name missing from the catalogue."""


class UnsupportedRegionError(ValueError):
    """Raised for a region that does not belong to the selected country."""


@dataclass(frozen=True)
class CountryProfile:
    name: str
    iso_code: str
    currency: str
    regions: tuple[str, ...]

    @property
    def default_region(self) -> str:
        return self.regions[0]


# Insertion order is the display order.
_PROFILES: dict[str, CountryProfile] = {
    "USA": CountryProfile(
        name="USA",
        iso_code="US",
        currency="USD",
        regions=("California", "Texas", "New York", "Florida", "Pennsylvania"),
    ),
    "Canada": CountryProfile(
        name="Canada",
        iso_code="CA",
        currency="CAD",
        regions=("Ontario", "Quebec", "British Columbia", "Alberta"),
    ),
    "Germany": CountryProfile(name="Germany", iso_code="DE", currency="EUR", regions=("All Germany",)),
    "Italy": CountryProfile(name="Italy", iso_code="IT", currency="EUR", regions=("All Italy",)),
    "UAE": CountryProfile(name="UAE", iso_code="AE", currency="AED", regions=("Dubai", "Abu Dhabi")),
    "Saudi Arabia": CountryProfile(
        name="Saudi Arabia", iso_code="SA", currency="SAR", regions=("All KSA",)
    ),
    "Qatar": CountryProfile(name="Qatar", iso_code="QA", currency="QAR", regions=("All Qatar",)),
    "Bahrain": CountryProfile(name="Bahrain", iso_code="BH", currency="BHD", regions=("All Bahrain",)),
}

SUPPORTED_COUNTRIES: tuple[str, ...] = tuple(_PROFILES)
_BY_KEY = {name.casefold(): profile for name, profile in _PROFILES.items()}


def get_profile(country: str) -> CountryProfile:
    """Return the profile for *country* (case-insensitive display name).

    Raises UnsupportedCountryError for unknown countries.
    """
    profile = _BY_KEY.get(country.strip().casefold())
    if profile is None:
        raise UnsupportedCountryError(
            f"Unsupported country '{country}'. "
            f"Supported countries: {', '.join(SUPPORTED_COUNTRIES)}"
        )
    return profile


def currency_for(country: str) -> str:
    """Display currency for *country*; USD when the country is unknown."""
    profile = _BY_KEY.get(country.strip().casefold())
    return profile.currency if profile else DEFAULT_CURRENCY


@dataclass(frozen=True)
class Selection:
    """The country/region pair a quote is computed for."""

    country: str
    region: str

    @classmethod
    def for_country(cls, country: str = DEFAULT_COUNTRY) -> "Selection":
        profile = get_profile(country)
        return cls(country=profile.name, region=profile.default_region)

    @property
    def profile(self) -> CountryProfile:
        return get_profile(self.country)

    @property
    def currency(self) -> str:
        return self.profile.currency

    def with_country(self, country: str) -> "Selection":
        """Switch country; the region falls back to the new country's first region."""
        return Selection.for_country(country)

    def with_region(self, region: str) -> "Selection":
        for candidate in self.profile.regions:
            if candidate.casefold() == region.strip().casefold():
                return Selection(country=self.country, region=candidate)
        raise UnsupportedRegionError(
            f"Region '{region}' is not available for {self.country}. "
            f"Choose one of: {', '.join(self.profile.regions)}"
        )
