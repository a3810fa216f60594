"""Static catalog of countries and territories without a postal-code system.

This is reference data only; it does not take part in handler resolution.
A country missing from this set may still be unsupported by the registry.
"""

from __future__ import annotations

from ryandata_postal_utils.core.normalizer import normalize_country

# Countries that do not use postal codes (ISO 3166-1 alpha-2)
COUNTRIES_WITHOUT_POSTAL_CODES: frozenset[str] = frozenset(
    {
        "AE",  # United Arab Emirates
        "AG",  # Antigua and Barbuda
        "AN",  # Netherlands Antilles (former)
        "AO",  # Angola
        "AW",  # Aruba
        "BF",  # Burkina Faso
        "BI",  # Burundi
        "BJ",  # Benin
        "BO",  # Bolivia
        "BS",  # Bahamas
        "BW",  # Botswana
        "BZ",  # Belize
        "CD",  # Democratic Republic of the Congo
        "CF",  # Central African Republic
        "CG",  # Republic of the Congo
        "CI",  # Ivory Coast
        "CK",  # Cook Islands
        "CM",  # Cameroon
        "CW",  # Curacao
        "DJ",  # Djibouti
        "DM",  # Dominica
        "ER",  # Eritrea
        "FJ",  # Fiji
        "GA",  # Gabon
        "GD",  # Grenada
        "GH",  # Ghana
        "GM",  # Gambia
        "GQ",  # Equatorial Guinea
        "GY",  # Guyana
        "HK",  # Hong Kong
        "JM",  # Jamaica
        "KI",  # Kiribati
        "KM",  # Comoros
        "KN",  # Saint Kitts and Nevis
        "KP",  # North Korea
        "ML",  # Mali
        "MO",  # Macau
        "MR",  # Mauritania
        "MW",  # Malawi
        "NR",  # Nauru
        "NU",  # Niue
        "QA",  # Qatar
        "RW",  # Rwanda
        "SB",  # Solomon Islands
        "SC",  # Seychelles
        "SL",  # Sierra Leone
        "SO",  # Somalia
        "SR",  # Suriname
        "SS",  # South Sudan
        "ST",  # Sao Tome and Principe
        "SX",  # Sint Maarten
        "SY",  # Syria
        "TD",  # Chad
        "TG",  # Togo
        "TK",  # Tokelau
        "TL",  # Timor-Leste
        "TO",  # Tonga
        "TV",  # Tuvalu
        "UG",  # Uganda
        "VU",  # Vanuatu
        "YE",  # Yemen
        "ZW",  # Zimbabwe
    }
)

# Placeholder for records that structurally require a postal code
FALLBACK_POSTAL_CODE = "00000"


def has_postal_code(country: str) -> bool:
    """Check whether a country uses postal codes.

    Args:
        country: ISO 3166-1 alpha-2 code, any case.

    Returns:
        False if the country is known to have no postal-code system.
    """
    return normalize_country(country) not in COUNTRIES_WITHOUT_POSTAL_CODES


def fallback_postal_code() -> str:
    """Placeholder postal code for countries without a postal-code system."""
    return FALLBACK_POSTAL_CODE


def countries_without_postal_codes() -> list[str]:
    """Get the sorted list of countries known to have no postal codes."""
    return sorted(COUNTRIES_WITHOUT_POSTAL_CODES)
