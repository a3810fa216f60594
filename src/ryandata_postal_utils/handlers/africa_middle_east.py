"""Postal code rules for Africa and the Middle East."""

from __future__ import annotations

import re

from ryandata_postal_utils.handlers.base import PatternHandler, ZipCodeHandler

_THREE_DIGITS = "PostalCodes consist of 3 digits, without separator."
_FOUR_DIGITS = "PostalCodes consist of 4 digits, without separator."
_FIVE_DIGITS = "PostalCodes consist of 5 digits, without separator."


class BHHandler(PatternHandler):
    """Bahraini codes: a block number (01-99) preceded by a municipality (1-12)."""

    hint_text = (
        "Valid post code numbers are 101 to 1216 with gaps in the range. "
        "Known as block number formally."
    )
    pattern = r"(1?\d)(\d{2})"

    def _accepts(self, match: re.Match[str]) -> bool:
        municipality, block = match.groups()
        return 1 <= int(municipality) <= 12 and block != "00"


class DZHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class EGHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class ETHandler(PatternHandler):
    hint_text = _FOUR_DIGITS
    pattern = r"\d{4}"


class ILHandler(PatternHandler):
    hint_text = "PostalCodes consist of 7 digits, without separator."
    pattern = r"\d{7}"


class IQHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class IRHandler(PatternHandler):
    hint_text = "PostalCode format is NNNNN NNNNN, where N stands for a digit."
    pattern = r"(\d{5})(\d{5})"
    template = r"\1 \2"


class JOHandler(PatternHandler):
    hint_text = (
        "PostalCodes consist of 5 digits, without separator. According to Wikipedia, "
        "postalCodes are used for deliveries to PO Boxes only."
    )
    pattern = r"\d{5}"


class KEHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class KWHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class LBHandler(PatternHandler):
    hint_text = "PostalCode format is NNNN NNNN, where N stands for a digit."
    pattern = r"(\d{4})(\d{4})"
    template = r"\1 \2"


class LRHandler(PatternHandler):
    hint_text = _FOUR_DIGITS
    pattern = r"\d{4}"


class LSHandler(PatternHandler):
    hint_text = _THREE_DIGITS
    pattern = r"\d{3}"


class MAHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class MGHandler(PatternHandler):
    hint_text = _THREE_DIGITS
    pattern = r"\d{3}"


class MUHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class MZHandler(PatternHandler):
    hint_text = _FOUR_DIGITS
    pattern = r"\d{4}"


class NEHandler(PatternHandler):
    hint_text = _FOUR_DIGITS
    pattern = r"\d{4}"


class NGHandler(PatternHandler):
    hint_text = "Postal codes in Nigeria are numeric, consisting of six digits."
    pattern = r"\d{6}"


class OMHandler(PatternHandler):
    hint_text = _THREE_DIGITS
    pattern = r"\d{3}"


class SAHandler(ZipCodeHandler):
    hint_text = (
        "The postalCode format is NNNNN for PO Boxes and NNNNN-NNNN for home delivery, "
        "N standing for a digit."
    )


class SDHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class SNHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class SZHandler(PatternHandler):
    hint_text = "PostalCode format is ANNN, A standing for a letter and N for a digit."
    pattern = r"[A-Z]\d{3}"


class TNHandler(PatternHandler):
    hint_text = _FOUR_DIGITS
    pattern = r"\d{4}"


class TRHandler(PatternHandler):
    hint_text = (
        "PostalCodes consist of 5 digits, the first two (01-81) identifying the province."
    )
    pattern = r"(0[1-9]|[1-7]\d|8[01])\d{3}"


class ZAHandler(PatternHandler):
    hint_text = _FOUR_DIGITS
    pattern = r"\d{4}"


class ZMHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"
