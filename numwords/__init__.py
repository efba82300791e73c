"""English words for numbers: cardinal, ordinal, decimal and digit-by-digit."""

from .adapters import (
    cardinal,
    f32_to_words,
    f64_to_words,
    float_cardinal,
    i8_to_words,
    i16_to_words,
    i32_to_words,
    i64_to_words,
    i128_to_words,
    isize_to_words,
    ordinal,
    string_ordinal,
    u8_to_ord_words,
    u8_to_words,
    u16_to_ord_words,
    u16_to_words,
    u32_to_ord_words,
    u32_to_words,
    u64_to_ord_words,
    u64_to_words,
    u128_to_ord_words,
    u128_to_words,
    usize_to_ord_words,
    usize_to_words,
)
from .cardinal import compose_cardinal, group_to_words, split_groups
from .digits import spell_digits
from .errors import FormatError, InvalidFormat, NotFinite, Overflow
from .fraction import format_decimal
from .ordinal import to_ordinal
from .parser import Numeral, parse_numeral, string_cardinal

__version__ = "0.1.0"

__all__ = [
    "cardinal",
    "ordinal",
    "float_cardinal",
    "string_cardinal",
    "string_ordinal",
    "spell_digits",
    "parse_numeral",
    "Numeral",
    "compose_cardinal",
    "group_to_words",
    "split_groups",
    "format_decimal",
    "to_ordinal",
    "FormatError",
    "InvalidFormat",
    "Overflow",
    "NotFinite",
    "u8_to_words",
    "u16_to_words",
    "u32_to_words",
    "u64_to_words",
    "u128_to_words",
    "usize_to_words",
    "i8_to_words",
    "i16_to_words",
    "i32_to_words",
    "i64_to_words",
    "i128_to_words",
    "isize_to_words",
    "u8_to_ord_words",
    "u16_to_ord_words",
    "u32_to_ord_words",
    "u64_to_ord_words",
    "u128_to_ord_words",
    "usize_to_ord_words",
    "f32_to_words",
    "f64_to_words",
]
