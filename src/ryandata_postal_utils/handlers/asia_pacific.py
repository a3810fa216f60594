"""Postal code rules for Asia and Oceania."""

from __future__ import annotations

import re
from typing import ClassVar

from ryandata_postal_utils.handlers.base import PatternHandler, PostalCodeHandler, ZipCodeHandler

_THREE_DIGITS = "PostalCodes consist of 3 digits, without separator."
_FOUR_DIGITS = "PostalCodes consist of 4 digits, without separator."
_FIVE_DIGITS = "PostalCodes consist of 5 digits, without separator."
_SIX_DIGITS = "PostalCodes consist of 6 digits, without separator."


class AFHandler(PatternHandler):
    """Afghan codes: the first two digits identify the province (10-43)."""

    hint_text = "PostalCodes consist of 4 digits, without separator."
    pattern = r"(\d{2})\d{2}"

    def _accepts(self, match: re.Match[str]) -> bool:
        return 10 <= int(match.group(1)) <= 43


class AUHandler(PatternHandler):
    hint_text = _FOUR_DIGITS
    pattern = r"\d{4}"


class BDHandler(PatternHandler):
    hint_text = _FOUR_DIGITS
    pattern = r"\d{4}"


class BNHandler(PatternHandler):
    hint_text = "PostalCode format is two letters followed by 4 digits, without separator."
    pattern = r"[A-Z]{2}\d{4}"


class BTHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class CCHandler(PatternHandler):
    hint_text = _FOUR_DIGITS
    pattern = r"\d{4}"


class CNHandler(PatternHandler):
    hint_text = _SIX_DIGITS
    pattern = r"\d{6}"


class FMHandler(ZipCodeHandler):
    hint_text = "U.S. ZIP codes. Range 96941 - 96944."
    ranges = (("96941", "96944"),)


class GUHandler(ZipCodeHandler):
    hint_text = "U.S. ZIP codes. Range 96910 - 96932."
    ranges = (("96910", "96932"),)


class IDHandler(PatternHandler):
    hint_text = "PostalCodes consist of 5 digits, the first of which is not 0."
    pattern = r"[1-9]\d{4}"


class INHandler(PatternHandler):
    hint_text = "PostalCodes consist of 6 digits, without separator."
    pattern = r"[1-9]\d{5}"


class JPHandler(PatternHandler):
    hint_text = "PostalCodes format is NNN-NNNN, where N stands for a digit."
    pattern = r"(\d{3})(\d{4})"
    template = r"\1-\2"


class KGHandler(PatternHandler):
    hint_text = "Postal codes in Kyrgyzstan are 6 digit numeric."
    pattern = r"\d{6}"


class KRHandler(PatternHandler):
    hint_text = "Since 2015, postalCodes consist of 5 digits, without separator."
    pattern = r"\d{5}"


class KZHandler(PatternHandler):
    hint_text = _SIX_DIGITS
    pattern = r"\d{6}"


class LAHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class LKHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class MHHandler(ZipCodeHandler):
    hint_text = "U.S. ZIP codes. Range 96960 - 96970."
    ranges = (("96960", "96970"),)


class MMHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class MNHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class MPHandler(ZipCodeHandler):
    hint_text = "U.S. ZIP codes. Range 96950 - 96952."
    ranges = (("96950", "96952"),)


class MVHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class MYHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class NCHandler(PatternHandler):
    hint_text = "Overseas Collectivity of France. French codes used. Range 98800 - 98890."
    pattern = r"\d{5}"
    ranges = (("98800", "98890"),)


class NFHandler(PatternHandler):
    hint_text = _FOUR_DIGITS
    pattern = r"\d{4}"


class NPHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class NZHandler(PatternHandler):
    hint_text = _FOUR_DIGITS
    pattern = r"\d{4}"


class PFHandler(PatternHandler):
    hint_text = "PostalCode format is 987NN, where N stands for a digit."
    pattern = r"987\d{2}"


class PGHandler(PatternHandler):
    hint_text = _THREE_DIGITS
    pattern = r"\d{3}"


class PHHandler(PatternHandler):
    hint_text = _FOUR_DIGITS
    pattern = r"\d{4}"


class PKHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class PNHandler(PatternHandler):
    hint_text = "This country uses a single postalCode for all addresses."
    pattern = r"(PCRN)(1ZZ)"
    template = r"\1 \2"


class PWHandler(ZipCodeHandler):
    hint_text = "U.S. ZIP codes. All locations 96940."
    ranges = (("96940", "96940"),)


class SGHandler(PatternHandler):
    hint_text = "Postal codes in Singapore consist of six digits, no separator."
    pattern = r"\d{6}"


class THHandler(PatternHandler):
    hint_text = "PostalCodes consist of 5 digits, the first of which is not 0."
    pattern = r"[1-9]\d{4}"


class TJHandler(PatternHandler):
    hint_text = _SIX_DIGITS
    pattern = r"\d{6}"


class TMHandler(PatternHandler):
    hint_text = _SIX_DIGITS
    pattern = r"\d{6}"


class TWHandler(PostalCodeHandler):
    """Taiwanese codes: 3 digits, or the 3+2 form written ``NNN-NN``."""

    hint_text = "Acceptable formats are NNN and NNN-NN, N standing for a digit."

    _PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"(\d{3})(\d{2})?", re.ASCII)

    def _format_impl(self, postal_code: str) -> str | None:
        match = self._PATTERN.fullmatch(postal_code)
        if match is None:
            return None
        area, delivery = match.groups()
        if delivery:
            return f"{area}-{delivery}"
        return area


class UZHandler(PatternHandler):
    hint_text = _SIX_DIGITS
    pattern = r"\d{6}"


class VNHandler(PatternHandler):
    hint_text = "Postal codes are 6 digit numeric."
    pattern = r"\d{6}"


class WSHandler(PatternHandler):
    hint_text = "The postalCode format is WSNNNN, where N represents a digit."
    pattern = r"\d{4}"
    input_prefix = "WS"
    output_prefix = "WS"
