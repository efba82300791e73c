# vocabulary.py

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

# index == digit value
ONES: Tuple[str, ...] = (
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
)

# index == value - 10
TEENS: Tuple[str, ...] = (
    "ten", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
)

# index == tens digit; 0 and 1 are covered by ONES/TEENS
TENS: Tuple[str, ...] = (
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety",
)

# index == group index (10 ** 3k); 2**128 - 1 has 39 digits -> 13 groups -> index 12
SCALES: Tuple[str, ...] = (
    "",
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
    "sextillion",
    "septillion",
    "octillion",
    "nonillion",
    "decillion",
    "undecillion",
)

HUNDRED = "hundred"
NEGATIVE = "negative"
POINT = "point"

MAX_MAGNITUDE = 2**128 - 1

ORDINAL_EXCEPTIONS: Mapping[str, str] = MappingProxyType({
    "zero": "zeroth",
    "one": "first",
    "two": "second",
    "three": "third",
    "five": "fifth",
    "eight": "eighth",
    "nine": "ninth",
    "twelve": "twelfth",
})

DIGIT_WORDS: Mapping[str, str] = MappingProxyType({str(d): w for d, w in enumerate(ONES)})
