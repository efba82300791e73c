# adapters.py

"""
Typed entry points.

Everything funnels into one engine working on (negative, magnitude). The per-width
functions (u8_to_words, i64_to_words, u32_to_ord_words, f32_to_words, ...) only
check that the value fits their width before handing it over.
"""

from __future__ import annotations

import logging
import math
import numbers

from typing import Any, Callable, Dict, Tuple

import numpy as np

from .cardinal import compose_cardinal
from .errors import InvalidFormat, NotFinite, Overflow
from .ordinal import to_ordinal
from .parser import parse_numeral, string_cardinal
from .vocabulary import MAX_MAGNITUDE

logger = logging.getLogger(__name__)


def _bounds(dtype: Any) -> Tuple[int, int]:
    info = np.iinfo(dtype)
    return int(info.min), int(info.max)


# numpy has no 128-bit integers
INT_BOUNDS: Dict[str, Tuple[int, int]] = {
    "u8": _bounds(np.uint8),
    "u16": _bounds(np.uint16),
    "u32": _bounds(np.uint32),
    "u64": _bounds(np.uint64),
    "u128": (0, 2**128 - 1),
    "usize": _bounds(np.uintp),
    "i8": _bounds(np.int8),
    "i16": _bounds(np.int16),
    "i32": _bounds(np.int32),
    "i64": _bounds(np.int64),
    "i128": (-(2**127), 2**127 - 1),
    "isize": _bounds(np.intp),
}

FLOAT_TYPES = {32: np.float32, 64: np.float64}


# --------------------------- Normalization ---------------------------

def as_int(value: Any) -> int:
    """Python int from an int or NumPy integer scalar. bool is not a number here."""
    if isinstance(value, (bool, np.bool_)):
        raise TypeError("bool is not accepted as a number")
    if isinstance(value, (int, np.integer)):
        return int(value)
    raise TypeError(f"Expected an integer, got {type(value).__name__}")


def fit_width(value: Any, width: str) -> int:
    lo, hi = INT_BOUNDS[width]
    n = as_int(value)
    if not lo <= n <= hi:
        logger.debug("%d does not fit %s", n, width)
        raise Overflow(f"{n} out of range for {width} ({lo} .. {hi})", value)
    return n


# --------------------------- Generic engine entry points ---------------------------

def cardinal(value: Any) -> str:
    """
    Cardinal words for any integer whose magnitude fits 128 bits.
      180 -> "one hundred eighty"
      -2918 -> "negative two thousand nine hundred eighteen"
    """
    n = as_int(value)
    magnitude = abs(n)
    if magnitude > MAX_MAGNITUDE:
        raise Overflow(f"Magnitude too large (max 2**128 - 1): {n}", value)
    return compose_cardinal(magnitude, n < 0)


def ordinal(value: Any) -> str:
    """
    Ordinal words for a non-negative integer below 2**128.
      2012 -> "two thousand twelfth"
    """
    n = fit_width(value, "u128")
    return to_ordinal(compose_cardinal(n))


def string_ordinal(text: str) -> str:
    """
    Ordinal words for an integer numeral: "0021" -> "twenty-first".
    Fractions and negative values are InvalidFormat.
    """
    numeral = parse_numeral(text)
    if numeral.fraction is not None or (numeral.negative and numeral.magnitude):
        raise InvalidFormat(f"Ordinal needs a non-negative integer: {text!r}", text)
    return ordinal(numeral.magnitude)


def float_text(value: Any, bits: int = 64) -> str:
    """
    Shortest positional text that round-trips at the given precision, no exponent:
      0.1 -> "0.1", 4e-5 -> "0.00004", 34.0 -> "34", -0.0 -> "-0"
    """
    if bits not in FLOAT_TYPES:
        raise ValueError(f"Unsupported float width: {bits} (use 32 or 64)")
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise TypeError(f"Expected a real number, got {type(value).__name__}")

    try:
        finite = math.isfinite(float(value))
    except OverflowError:
        raise Overflow(f"{value!r} does not fit float{bits}", value) from None
    if not finite:
        raise NotFinite(f"Not a finite number: {value!r}", value)

    with np.errstate(over="ignore"):
        f = FLOAT_TYPES[bits](value)
    if not np.isfinite(f):
        raise Overflow(f"{value!r} does not fit float{bits}", value)

    return np.format_float_positional(f, unique=True, trim="-")


def float_cardinal(value: Any, bits: int = 64) -> str:
    """
    15.2 -> "fifteen point two"
    Integer part above 2**128 - 1 raises Overflow, NaN/inf raise NotFinite.
    """
    return string_cardinal(float_text(value, bits))


# --------------------------- Per-width adapters ---------------------------

def _cardinal_for(width: str) -> Callable[[Any], str]:
    def convert(value: Any) -> str:
        return cardinal(fit_width(value, width))

    convert.__name__ = convert.__qualname__ = f"{width}_to_words"
    convert.__doc__ = f"Cardinal words for a {width} value."
    return convert


def _ordinal_for(width: str) -> Callable[[Any], str]:
    def convert(value: Any) -> str:
        return ordinal(fit_width(value, width))

    convert.__name__ = convert.__qualname__ = f"{width}_to_ord_words"
    convert.__doc__ = f"Ordinal words for a {width} value."
    return convert


def _float_for(bits: int) -> Callable[[Any], str]:
    def convert(value: Any) -> str:
        return float_cardinal(value, bits)

    convert.__name__ = convert.__qualname__ = f"f{bits}_to_words"
    convert.__doc__ = f"Words for a float{bits} value, fraction digits spelled individually."
    return convert


u8_to_words = _cardinal_for("u8")
u16_to_words = _cardinal_for("u16")
u32_to_words = _cardinal_for("u32")
u64_to_words = _cardinal_for("u64")
u128_to_words = _cardinal_for("u128")
usize_to_words = _cardinal_for("usize")
i8_to_words = _cardinal_for("i8")
i16_to_words = _cardinal_for("i16")
i32_to_words = _cardinal_for("i32")
i64_to_words = _cardinal_for("i64")
i128_to_words = _cardinal_for("i128")
isize_to_words = _cardinal_for("isize")

u8_to_ord_words = _ordinal_for("u8")
u16_to_ord_words = _ordinal_for("u16")
u32_to_ord_words = _ordinal_for("u32")
u64_to_ord_words = _ordinal_for("u64")
u128_to_ord_words = _ordinal_for("u128")
usize_to_ord_words = _ordinal_for("usize")

f32_to_words = _float_for(32)
f64_to_words = _float_for(64)
