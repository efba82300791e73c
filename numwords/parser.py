# parser.py

from __future__ import annotations

import logging
import re

from typing import NamedTuple, Optional

from .cardinal import compose_cardinal
from .errors import InvalidFormat, Overflow
from .fraction import format_decimal
from .vocabulary import MAX_MAGNITUDE

logger = logging.getLogger(__name__)

# [+-] digits [. digits*]  -- ASCII digits only, no spaces, no exponent
_NUMERAL_RE = re.compile(r"([+-]?)([0-9]+)(?:(\.)([0-9]*))?")
_MAX_DIGITS = len(str(MAX_MAGNITUDE))


class Numeral(NamedTuple):
    negative: bool
    magnitude: int
    # None -> no decimal point at all; "" -> "5."
    fraction: Optional[str]


def parse_numeral(text: str) -> Numeral:
    """
    Split a decimal numeral into sign, integer magnitude and fractional digits.

    Accepted: "7", "-007", "+12.50", "5."
    Rejected (InvalidFormat): "", "-", ".5", "1.2.3", "1e5", "1,000", " 1"
    Integer part above 2**128 - 1 raises Overflow.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    m = _NUMERAL_RE.fullmatch(text)
    if not m:
        logger.debug("rejected numeral %r", text)
        raise InvalidFormat(f"Invalid numeral: {text!r}", text)

    sign, int_digits, point, frac_digits = m.groups()

    # leading zeros only pad, they don't scale
    significant = int_digits.lstrip("0") or "0"
    # length first: int() refuses very long digit strings
    magnitude = int(significant) if len(significant) <= _MAX_DIGITS else None
    if magnitude is None or magnitude > MAX_MAGNITUDE:
        logger.debug("numeral %r exceeds 128 bits", text)
        raise Overflow(f"Integer part too large (max 2**128 - 1): {text!r}", text)

    fraction = frac_digits if point else None
    return Numeral(negative=sign == "-", magnitude=magnitude, fraction=fraction)


def numeral_to_words(numeral: Numeral) -> str:
    if numeral.fraction is None:
        return compose_cardinal(numeral.magnitude, numeral.negative)
    return format_decimal(numeral.magnitude, numeral.fraction, numeral.negative)


def string_cardinal(text: str) -> str:
    """
    "123.456" -> "one hundred twenty-three point four five six"
    "-0003000" -> "negative three thousand"
    """
    return numeral_to_words(parse_numeral(text))
