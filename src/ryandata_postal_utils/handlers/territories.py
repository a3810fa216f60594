"""Postal code rules for overseas territories and remote dependencies.

Most of these use a single code for the whole territory, or a slice of the
parent country's numbering.
"""

from __future__ import annotations

from ryandata_postal_utils.handlers.base import PatternHandler, SingleCodeHandler, ZipCodeHandler


class AQHandler(SingleCodeHandler):
    hint_text = "This country uses a single postalCode for all addresses."
    codes = {"BIQQ1ZZ": "BIQQ 1ZZ"}


class ASHandler(ZipCodeHandler):
    hint_text = (
        "Mail service in American Samoa is fully integrated with "
        "the United States Postal Service."
    )
    ranges = (("96799", "96799"),)


class BLHandler(SingleCodeHandler):
    hint_text = "This country uses a single postalCode, 97133."
    codes = {"97133": "97133"}


class GSHandler(SingleCodeHandler):
    hint_text = "This country uses a single postalCode for all addresses."
    codes = {"SIQQ1ZZ": "SIQQ 1ZZ"}


class IOHandler(SingleCodeHandler):
    hint_text = "This country uses a single postalCode for all addresses."
    codes = {"BBND1ZZ": "BBND 1ZZ"}


class MFHandler(SingleCodeHandler):
    hint_text = "This country uses a single postalCode, 97150."
    codes = {"97150": "97150"}


class REHandler(PatternHandler):
    hint_text = "PostalCodes consist of 5 digits, starting with 974, without separator."
    pattern = r"974\d{2}"


class SHHandler(SingleCodeHandler):
    hint_text = (
        "Each island uses a single postalCode: STHL 1ZZ (Saint Helena), "
        "ASCN 1ZZ (Ascension) and TDCU 1ZZ (Tristan da Cunha)."
    )
    codes = {
        "STHL1ZZ": "STHL 1ZZ",
        "ASCN1ZZ": "ASCN 1ZZ",
        "TDCU1ZZ": "TDCU 1ZZ",
    }


class TFHandler(PatternHandler):
    hint_text = (
        "French codes in the 98400 range have been reserved, "
        "but do not seem to be in use at the moment."
    )
    pattern = r"984\d{2}"


class WFHandler(PatternHandler):
    hint_text = "PostalCodes consist of 5 digits, without separator."
    pattern = r"\d{5}"
    ranges = (("98600", "98690"),)


class YTHandler(PatternHandler):
    hint_text = "PostalCodes consist of 5 digits, starting with 976."
    pattern = r"976\d{2}"
