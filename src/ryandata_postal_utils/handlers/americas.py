"""Postal code rules for North, Central and South America and the Caribbean."""

from __future__ import annotations

import re
from typing import ClassVar

from ryandata_postal_utils.handlers.base import PatternHandler, SingleCodeHandler, ZipCodeHandler

_FOUR_DIGITS = "PostalCodes consist of 4 digits, without separator."
_FIVE_DIGITS = "PostalCodes consist of 5 digits, without separator."
_SIX_DIGITS = "PostalCodes consist of 6 digits, without separator."


class AIHandler(SingleCodeHandler):
    hint_text = "Anguilla uses a single postalCode for all addresses."
    codes = {"2640": "AI-2640", "AI2640": "AI-2640"}


class ARHandler(PatternHandler):
    hint_text = (
        "The postalCode is either 4 digits, or 1 letter + 4 digits + 3 letters, "
        "with no separators."
    )
    pattern = r"\d{4}|[A-Z]\d{4}[A-Z]{3}"


class BBHandler(PatternHandler):
    hint_text = "Postal codes in Barbados are 5 digit numeric, with BB prefix."
    pattern = r"\d{5}"
    input_prefix = "BB"
    output_prefix = "BB"


class BMHandler(PatternHandler):
    hint_text = (
        "PostalCode formats are AA NN for street addresses, "
        "AA AA for P.O. Box addresses (A=letter, N=digit)."
    )
    pattern = r"([A-Z]{2})([A-Z]{2}|\d{2})"
    template = r"\1 \2"


class BRHandler(PatternHandler):
    hint_text = "Format is 5 digits, hyphen, 3 digits."
    pattern = r"(\d{5})(\d{3})"
    template = r"\1-\2"


class CAHandler(PatternHandler):
    """Canadian postal codes: ``ANA NAN``.

    D, F, I, O, Q and U are never used; W and Z never start a code.
    """

    hint_text = "The format is ANA NAN, where A is a letter and N is a digit."
    pattern = r"([ABCEGHJ-NPRSTVXY]\d[ABCEGHJ-NPRSTV-Z])(\d[ABCEGHJ-NPRSTV-Z]\d)"
    template = r"\1 \2"


class CLHandler(PatternHandler):
    hint_text = "PostalCodes consist of 7 digits, without separator."
    pattern = r"\d{7}"


class COHandler(PatternHandler):
    """Colombian codes: a 2-digit department followed by 4 digits, never 0000."""

    hint_text = "Postal codes in Colombia are 6 digit numeric."
    pattern = r"(\d{2})(?!0000)\d{4}"

    _DEPARTMENTS: ClassVar[frozenset[str]] = frozenset(
        (
            "05 08 11 13 15 17 18 19 20 23 25 27 41 44 47 50 52 54 63 66 68 70 "
            "73 76 81 85 86 88 91 94 95 97 99"
        ).split()
    )

    def _accepts(self, match: re.Match[str]) -> bool:
        return match.group(1) in self._DEPARTMENTS


class CRHandler(ZipCodeHandler):
    hint_text = "Postal codes in Costa Rica are 5 digit numeric."


class CUHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"
    input_prefix = "CP"


class CVHandler(PatternHandler):
    hint_text = _FOUR_DIGITS
    pattern = r"\d{4}"


class DOHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class ECHandler(PatternHandler):
    hint_text = "Postal codes in Ecuador have six numeric digits."
    pattern = r"\d{6}"


class FKHandler(SingleCodeHandler):
    hint_text = "This country uses a single postalCode for all addresses."
    codes = {"FIQQ1ZZ": "FIQQ 1ZZ"}


class GFHandler(PatternHandler):
    hint_text = "PostalCode format is 973NN, where N stands for a digit."
    pattern = r"973\d{2}"


class GLHandler(PatternHandler):
    hint_text = "PostalCodes consist of 4 digits, starting with 39."
    pattern = r"39\d{2}"


class GPHandler(PatternHandler):
    hint_text = "PostalCode format is 971NN, where N stands for a digit."
    pattern = r"971\d{2}"


class GTHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class HTHandler(PatternHandler):
    hint_text = _FOUR_DIGITS
    pattern = r"\d{4}"


class KYHandler(PatternHandler):
    hint_text = (
        "PostalCode format is KYN-NNNN, where N are digits. "
        "The first digit can only be 1 to 3."
    )
    pattern = r"KY([1-3])(\d{4})"
    template = r"KY\1-\2"


class LCHandler(PatternHandler):
    hint_text = "The postalCode format is LCNN NNN, N standing for a digit."
    pattern = r"(LC\d{2})(\d{3})"
    template = r"\1 \2"


class MQHandler(PatternHandler):
    hint_text = "PostalCodes consist of 5 digits, without separator."
    pattern = r"\d{5}"
    ranges = (("97200", "97290"),)


class MSHandler(PatternHandler):
    hint_text = "The format is MSR followed by a space then 4 digits, in the range 1110 to 1350."
    pattern = r"\d{4}"
    input_prefix = "MSR"
    output_prefix = "MSR "
    ranges = (("1110", "1350"),)


class MXHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class NIHandler(PatternHandler):
    hint_text = "Postal codes in Nicaragua are 5 digit numeric."
    pattern = r"\d{5}"


class PEHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class PMHandler(SingleCodeHandler):
    hint_text = "This country uses a single postalCode, 97500."
    codes = {"97500": "97500"}


class PRHandler(ZipCodeHandler):
    hint_text = "Puerto Rico is allocated the US ZIP codes 00600 to 00799 and 00900 to 00999."
    ranges = (("00600", "00799"), ("00900", "00999"))


class TCHandler(SingleCodeHandler):
    hint_text = "This country uses a single postalCode for all addresses: TKCA1ZZ."
    codes = {"TKCA1ZZ": "TKCA 1ZZ"}


class TTHandler(PatternHandler):
    hint_text = _SIX_DIGITS
    pattern = r"\d{6}"


class USHandler(ZipCodeHandler):
    hint_text = "PostalCodes in the USA are called ZIP codes."


class UYHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class VCHandler(PatternHandler):
    hint_text = "The postalCode format is VCNNNN, where N represents a digit."
    pattern = r"\d{4}"
    input_prefix = "VC"
    output_prefix = "VC"


class VEHandler(PatternHandler):
    hint_text = _FOUR_DIGITS
    pattern = r"\d{4}"


class VGHandler(PatternHandler):
    hint_text = (
        "The postalCode format is VG followed by 4 digits, specifically VG1110 through VG1160."
    )
    pattern = r"\d{4}"
    input_prefix = "VG"
    output_prefix = "VG"
    ranges = (("1110", "1160"),)


class VIHandler(ZipCodeHandler):
    hint_text = "U.S. ZIP codes. Range 00801 - 00851."
    ranges = (("00801", "00851"),)
