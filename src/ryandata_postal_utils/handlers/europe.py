"""Postal code rules for European countries."""

from __future__ import annotations

import re
from typing import ClassVar

from ryandata_postal_utils.handlers.base import PatternHandler, PostalCodeHandler, SingleCodeHandler

_FOUR_DIGITS = "PostalCodes consist of 4 digits, without separator."
_FIVE_DIGITS = "PostalCodes consist of 5 digits, without separator."


class ADHandler(PatternHandler):
    hint_text = "PostalCodes consist of the letters AD, followed by 3 digits, without separator."
    pattern = r"\d{3}"
    input_prefix = "AD"
    output_prefix = "AD"


class ALHandler(PatternHandler):
    hint_text = _FOUR_DIGITS
    pattern = r"\d{4}"


class AMHandler(PatternHandler):
    hint_text = _FOUR_DIGITS
    pattern = r"\d{4}"


class ATHandler(PatternHandler):
    hint_text = "PostalCodes consist of 4 digits, without separator. The first digit must be 1-9."
    pattern = r"[1-9]\d{3}"
    input_prefix = "A"


class _PrefixKeepingHandler(PostalCodeHandler):
    """Five digits, optionally written with the country prefix, which is kept.

    ``22100`` stays ``22100``; ``AX22100`` becomes ``AX-22100``.
    """

    prefix: ClassVar[str]
    leading: ClassVar[str] = ""

    _DIGITS: ClassVar[re.Pattern[str]] = re.compile(r"\d{5}", re.ASCII)

    def _format_impl(self, postal_code: str) -> str | None:
        prefixed = len(postal_code) == 7
        if prefixed:
            if not postal_code.startswith(self.prefix):
                return None
            postal_code = postal_code[len(self.prefix) :]

        if self._DIGITS.fullmatch(postal_code) is None:
            return None
        if not postal_code.startswith(self.leading):
            return None

        if prefixed:
            return f"{self.prefix}-{postal_code}"
        return postal_code


class AXHandler(_PrefixKeepingHandler):
    hint_text = "PostalCodes consist of 5 digits, starting with 22."
    prefix = "AX"
    leading = "22"


class AZHandler(PatternHandler):
    hint_text = "The postalCode format is AZ NNNN, where N represents a digit."
    pattern = r"\d{4}"
    input_prefix = "AZ"
    output_prefix = "AZ "


class BAHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class BEHandler(PatternHandler):
    hint_text = _FOUR_DIGITS
    pattern = r"\d{4}"
    input_prefix = "B"


class BGHandler(PatternHandler):
    hint_text = _FOUR_DIGITS
    pattern = r"\d{4}"


class BYHandler(PatternHandler):
    hint_text = "Postal codes in Belarus are 6 digit numeric."
    pattern = r"\d{6}"


class CHHandler(PatternHandler):
    hint_text = "PostalCodes consist of 4 digits, without separator. The first digit must be 1-9."
    pattern = r"[1-9]\d{3}"


class CYHandler(PatternHandler):
    hint_text = _FOUR_DIGITS
    # 5-digit codes starting with 99 are used for Northern Cyprus via Turkey
    pattern = r"\d{4}|99\d{3}"


class CZHandler(PatternHandler):
    hint_text = "PostalCodes consist of 5 digits in the following format: xxx xx."
    pattern = r"([1-7]\d{2})(\d{2})"
    template = r"\1 \2"


class DEHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class DKHandler(PatternHandler):
    hint_text = _FOUR_DIGITS
    pattern = r"\d{4}"


class EEHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class ESHandler(PatternHandler):
    hint_text = "PostalCodes consist of 5 digits, the first two (01-52) identifying the province."
    pattern = r"(0[1-9]|[1-4]\d|5[0-2])\d{3}"


class FIHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class FOHandler(PatternHandler):
    hint_text = "PostalCodes consist of 3 digits, without separator."
    pattern = r"\d{3}"


class FRHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


_GB_N = "[0-9]"
_GB_OUT1 = "[ABCDEFGHIJKLMNOPRSTUWYZ]"  # all letters except Q, V, X
_GB_OUT2 = "[ABCDEFGHKLMNOPQRSTUVWXY]"  # all letters except I, J, Z
_GB_OUT3 = "[ABCDEFGHJKPSTUW]"
_GB_OUT4 = "[ABEHMNPRVWXY]"
_GB_IN = "[ABCDEFGHJLNPQRSTUWXYZ]"


class GBHandler(PostalCodeHandler):
    """United Kingdom postcodes.

    The outward code is one of six shapes (A9, A9A, A99, AA9, AA9A, AA99) whose
    leading letters must be a known postcode area; the inward code is always
    digit-letter-letter. ``GIR 0AA`` (Girobank) is accepted as a special case.
    """

    hint_text = (
        "PostalCodes can have six different formats: A9 9AA, A9A 9AA, A99 9AA, "
        "AA9 9AA, AA9A 9AA, AA99 9AA. A stands for a capital letter, 9 stands for a digit."
    )

    AREA_CODES: ClassVar[frozenset[str]] = frozenset(
        (
            "AB AL B BA BB BD BH BL BN BR BS BT CA CB CF CH CM CO CR CT CV CW "
            "DA DD DE DG DH DL DN DT DY E EC EH EN EX FK FY G GL GU HA HD HG HP "
            "HR HS HU HX IG IP IV KA KT KW KY L LA LD LE LL LN LS LU M ME MK ML "
            "N NE NG NN NP NR NW OL OX PA PE PH PL PO PR RG RH RM S SA SE SG SK "
            "SL SM SN SO SP SR SS ST SW SY TA TD TF TN TQ TR TS TW UB W WA WC WD "
            "WF WN WR WS WV YO ZE BF BX XX"
        ).split()
    )

    _OUTWARD: ClassVar[tuple[str, ...]] = (
        f"({_GB_OUT1}){_GB_N}",
        f"({_GB_OUT1}){_GB_N}{_GB_OUT3}",
        f"({_GB_OUT1}){_GB_N}{_GB_N}",
        f"({_GB_OUT1}{_GB_OUT2}){_GB_N}",
        f"({_GB_OUT1}{_GB_OUT2}){_GB_N}{_GB_OUT4}",
        f"({_GB_OUT1}{_GB_OUT2}){_GB_N}{_GB_N}",
    )
    _PATTERNS: ClassVar[tuple[re.Pattern[str], ...]] = tuple(
        re.compile(f"({outward})({_GB_N}{_GB_IN}{_GB_IN})") for outward in _OUTWARD
    )

    def _format_impl(self, postal_code: str) -> str | None:
        if postal_code == "GIR0AA":
            return "GIR 0AA"

        for pattern in self._PATTERNS:
            match = pattern.fullmatch(postal_code)
            if match is None:
                continue
            outward, area, inward = match.groups()
            if area not in self.AREA_CODES:
                return None
            return f"{outward} {inward}"

        return None


class GEHandler(PatternHandler):
    hint_text = _FOUR_DIGITS
    pattern = r"\d{4}"


class GGHandler(PatternHandler):
    hint_text = (
        "PostalCodes can have two different formats: GY9 9AA or GY99 9AA. "
        "A stands for a capital letter, 9 stands for a digit."
    )
    pattern = r"(GY\d\d?)(\d[A-Z]{2})"
    template = r"\1 \2"


class GIHandler(SingleCodeHandler):
    hint_text = "This country uses a single postalCode for all addresses."
    codes = {"GX111AA": "GX11 1AA"}


class GRHandler(PatternHandler):
    hint_text = "PostalCodes consist of 5 digits, in the format NNN NN."
    pattern = r"(\d{3})(\d{2})"
    template = r"\1 \2"


class HRHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"[1-5]\d{4}"


class HUHandler(PatternHandler):
    hint_text = "PostalCodes consist of 4 digits, without separator. The first digit must be 1-9."
    pattern = r"[1-9]\d{3}"


_IE_ROUTING_KEYS = (
    "A41 A42 A45 A63 A67 A75 A81 A82 A83 A84 A85 A86 A91 A92 A94 A96 A98 C15 "
    "D01 D02 D03 D04 D05 D06 D6W D07 D08 D09 D10 D11 D12 D13 D14 D15 D16 D17 "
    "D18 D20 D22 D24 E21 E25 E32 E34 E41 E45 E53 E91 F12 F23 F26 F28 F31 F35 "
    "F42 F45 F52 F56 F91 F92 F93 F94 H12 H14 H16 H18 H23 H53 H54 H62 H65 H71 "
    "H91 K32 K34 K36 K45 K56 K67 K78 N37 N39 N41 N91 P12 P14 P17 P24 P25 P31 "
    "P32 P36 P43 P47 P51 P56 P61 P67 P72 P75 P81 P85 R14 R21 R32 R35 R42 R45 "
    "R51 R56 R93 R95 T12 T23 T34 T45 T56 V14 V15 V23 V31 V35 V42 V92 V93 V94 "
    "V95 W12 W23 W34 W91 X35 X42 X91 Y14 Y21 Y25 Y34 Y35"
).split()


class IEHandler(PatternHandler):
    """Irish Eircodes: a routing key followed by a 4-character unique identifier."""

    hint_text = (
        "Eircodes consist of a 3-character routing key (e.g. D02, A41) followed by "
        "a 4-character unique identifier, in the format D02 X285."
    )
    pattern = "(" + "|".join(_IE_ROUTING_KEYS) + ")([ACDEFHKNPRTVWXY0-9]{4})"
    template = r"\1 \2"


class IMHandler(PatternHandler):
    hint_text = (
        "PostalCodes can have two different formats: IM9 9AA or IM99 9AA. "
        "A stands for a capital letter, 9 stands for a digit."
    )
    pattern = r"(IM\d\d?)(\d[A-Z]{2})"
    template = r"\1 \2"


class ISHandler(PatternHandler):
    hint_text = "PostalCodes consist of 3 digits, without separator."
    pattern = r"[1-9]\d{2}"


class ITHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class JEHandler(PatternHandler):
    hint_text = (
        "PostalCodes can have two different formats: JE9 9AA or JE99 9AA. "
        "A stands for a capital letter, 9 stands for a digit."
    )
    pattern = r"(JE\d\d?)(\d[A-Z]{2})"
    template = r"\1 \2"


class LIHandler(PatternHandler):
    hint_text = "PostalCodes consist of 4 digits, without separator, range 9485 to 9498."
    pattern = r"\d{4}"
    ranges = (("9485", "9498"),)


class LTHandler(_PrefixKeepingHandler):
    hint_text = "Postal codes in Lithuania since 2005 are 5 digit numeric."
    prefix = "LT"


class LUHandler(PatternHandler):
    hint_text = _FOUR_DIGITS
    pattern = r"\d{4}"
    input_prefix = "L"


class LVHandler(PatternHandler):
    hint_text = (
        "Postal codes in Latvia are 4 digit numeric and use a mandatory "
        "country code (LV) in front."
    )
    pattern = r"\d{4}"
    input_prefix = "LV"
    output_prefix = "LV-"


class MCHandler(PatternHandler):
    hint_text = "PostalCodes consist of 5 digits, without separator."
    pattern = r"980\d{2}"


class MDHandler(PatternHandler):
    hint_text = "The postalCode format is MD-NNNN, where N stands for a digit."
    pattern = r"\d{4}"
    input_prefix = "MD"
    output_prefix = "MD-"


class MEHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class MKHandler(PatternHandler):
    hint_text = _FOUR_DIGITS
    pattern = r"\d{4}"


class MTHandler(PatternHandler):
    hint_text = (
        "PostalCode format is AAA NNNN, A standing for a letter and N standing for a digit."
    )
    pattern = r"([A-Z]{3})(\d{4})"
    template = r"\1 \2"


class NLHandler(PatternHandler):
    hint_text = "PostalCode format is NNNN AA, where N stands for a digit and A for a letter."
    pattern = r"([1-9]\d{3})([A-Z]{2})"
    template = r"\1 \2"

    _RESERVED: ClassVar[frozenset[str]] = frozenset({"SA", "SD", "SS"})

    def _accepts(self, match: re.Match[str]) -> bool:
        return match.group(2) not in self._RESERVED


class NOHandler(PatternHandler):
    hint_text = _FOUR_DIGITS
    pattern = r"\d{4}"


class PLHandler(PatternHandler):
    hint_text = "PostalCodes consist of 5 digits in the following format: xy-zzz."
    pattern = r"(\d{2})(\d{3})"
    template = r"\1-\2"


class PTHandler(PatternHandler):
    hint_text = "PostalCode format is NNNN-NNN, N standing for a digit."
    pattern = r"(\d{4})(\d{3})"
    template = r"\1-\2"


class ROHandler(PatternHandler):
    hint_text = "PostalCodes consist of 6 digits, without separator."
    pattern = r"\d{6}"


class RSHandler(PatternHandler):
    hint_text = "Serbian postal codes consist of five digits."
    pattern = r"\d{5}"


class RUHandler(PatternHandler):
    hint_text = "Postal codes have six digits and no separator."
    pattern = r"\d{6}"


class SEHandler(PatternHandler):
    hint_text = (
        "PostalCode format is NNN NN. The lowest number is 100 00 and the highest number is 984 99."
    )
    pattern = r"(\d{3})(\d{2})"
    template = r"\1 \2"
    ranges = (("10000", "98499"),)


class SIHandler(PatternHandler):
    hint_text = "The codes consist of four digits written without separator characters."
    pattern = r"\d{4}"


class SJHandler(PatternHandler):
    hint_text = "This country uses Norwegian 4-digit postal codes."
    pattern = r"\d{4}"


class SKHandler(PatternHandler):
    hint_text = "PostalCodes consist of 5 digits in the following format: xxx xx."
    pattern = r"([089]\d{2})(\d{2})"
    template = r"\1 \2"


class SMHandler(PatternHandler):
    hint_text = "The postalCode format is 4789N, where N stands for a digit."
    pattern = r"4789\d"


class UAHandler(PatternHandler):
    hint_text = _FIVE_DIGITS
    pattern = r"\d{5}"


class VAHandler(PatternHandler):
    hint_text = "Single code used for all addresses. Part of the Italian postal code system."
    pattern = r"00120"


class XKHandler(PatternHandler):
    hint_text = "PostalCode format is NNNNN, where N stands for a digit."
    pattern = r"\d{5}"
