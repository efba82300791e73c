# fraction.py

from __future__ import annotations

from .cardinal import compose_cardinal
from .digits import spell_digits
from .vocabulary import NEGATIVE, POINT


def format_decimal(magnitude: int, fraction_digits: str, negative: bool = False) -> str:
    """
    Integer part as a cardinal number, fraction digits spelled one by one.
      (42, "42")  -> "forty-two point four two"
      (5, "")     -> "five"
      (0, "05"), negative -> "negative zero point zero five"
    """
    # validate before composing anything
    spelled = spell_digits(fraction_digits)

    if not fraction_digits:
        return compose_cardinal(magnitude, negative)

    nonzero = magnitude != 0 or fraction_digits.strip("0") != ""
    words = [compose_cardinal(magnitude), POINT, spelled]
    if negative and nonzero:
        words.insert(0, NEGATIVE)
    return " ".join(words)
