import math

import numpy as np
import pytest

import numwords
from numwords import (
    cardinal,
    f32_to_words,
    f64_to_words,
    float_cardinal,
    i8_to_words,
    i16_to_words,
    i128_to_words,
    isize_to_words,
    ordinal,
    string_ordinal,
    u8_to_ord_words,
    u8_to_words,
    u16_to_words,
    u64_to_words,
    u128_to_ord_words,
    usize_to_ord_words,
)
from numwords.adapters import INT_BOUNDS, float_text
from numwords.errors import InvalidFormat, NotFinite, Overflow


def test_documented_examples():
    assert cardinal(180) == "one hundred eighty"
    assert cardinal(211) == "two hundred eleven"
    assert ordinal(2012) == "two thousand twelfth"
    assert float_cardinal(15.2) == "fifteen point two"
    assert numwords.string_cardinal("123.456") == "one hundred twenty-three point four five six"
    assert numwords.spell_digits("001247") == "zero zero one two four seven"
    with pytest.raises(InvalidFormat):
        numwords.string_cardinal("12x")


def test_width_adapters():
    assert u8_to_words(1) == "one"
    assert i8_to_words(2) == "two"
    assert u16_to_words(3) == "three"
    assert i16_to_words(4) == "four"
    assert numwords.u32_to_words(5) == "five"
    assert numwords.i32_to_words(6) == "six"
    assert u64_to_words(70) == "seventy"
    assert numwords.i64_to_words(71) == "seventy-one"
    assert numwords.u128_to_words(180) == "one hundred eighty"
    assert i128_to_words(211) == "two hundred eleven"
    assert numwords.usize_to_words(1050) == "one thousand fifty"
    assert isize_to_words(2012) == "two thousand twelve"


def test_ordinal_adapters():
    assert u8_to_ord_words(1) == "first"
    assert numwords.u16_to_ord_words(3) == "third"
    assert numwords.u32_to_ord_words(5) == "fifth"
    assert numwords.u64_to_ord_words(70) == "seventieth"
    assert u128_to_ord_words(180) == "one hundred eightieth"
    assert usize_to_ord_words(2012) == "two thousand twelfth"


def test_adapter_names():
    assert u8_to_words.__name__ == "u8_to_words"
    assert u128_to_ord_words.__name__ == "u128_to_ord_words"
    assert f32_to_words.__name__ == "f32_to_words"


@pytest.mark.parametrize("width", sorted(INT_BOUNDS))
def test_width_bounds(width):
    lo, hi = INT_BOUNDS[width]
    convert = getattr(numwords, f"{width}_to_words")

    assert convert(lo) == cardinal(lo)
    assert convert(hi) == cardinal(hi)
    with pytest.raises(Overflow):
        convert(hi + 1)
    with pytest.raises(Overflow):
        convert(lo - 1)


def test_pointer_width_follows_numpy():
    assert INT_BOUNDS["usize"][1] == int(np.iinfo(np.uintp).max)
    assert INT_BOUNDS["isize"][0] == int(np.iinfo(np.intp).min)


def test_i8_min():
    assert i8_to_words(-128) == "negative one hundred twenty-eight"


def test_numpy_scalars():
    assert cardinal(np.uint8(255)) == "two hundred fifty-five"
    assert cardinal(np.int16(-32768)) == "negative thirty-two thousand seven hundred sixty-eight"
    assert ordinal(np.uint64(21)) == "twenty-first"
    assert u8_to_words(np.int64(7)) == "seven"
    with pytest.raises(Overflow):
        u8_to_words(np.int64(256))


@pytest.mark.parametrize("value", [True, np.bool_(False), 1.0, "12", None])
def test_cardinal_rejects_non_integers(value):
    with pytest.raises(TypeError):
        cardinal(value)


def test_cardinal_magnitude_limit():
    assert cardinal(-(2**128 - 1)).startswith("negative three hundred forty undecillion")
    with pytest.raises(Overflow):
        cardinal(2**128)
    with pytest.raises(Overflow):
        cardinal(-(2**128))


def test_ordinal_rejects_negative():
    with pytest.raises(Overflow):
        ordinal(-1)
    with pytest.raises(Overflow):
        u8_to_ord_words(-1)


@pytest.mark.parametrize("text, expected", [
    ("21", "twenty-first"),
    ("0021", "twenty-first"),
    ("+3", "third"),
    ("0", "zeroth"),
    ("-0", "zeroth"),
])
def test_string_ordinal(text, expected):
    assert string_ordinal(text) == expected


@pytest.mark.parametrize("text", ["-1", "2.5", "3.", "x"])
def test_string_ordinal_rejects(text):
    with pytest.raises(InvalidFormat):
        string_ordinal(text)


# --------------------------- floats ---------------------------

@pytest.mark.parametrize("value, expected", [
    (15.2, "fifteen point two"),
    (42.42, "forty-two point four two"),
    (123.123, "one hundred twenty-three point one two three"),
    (4e-5, "zero point zero zero zero zero four"),
    (34.0, "thirty-four"),
    (0.1, "zero point one"),
    (0.0, "zero"),
    (-0.0, "zero"),
    (-2.5, "negative two point five"),
    (1e20, "one hundred quintillion"),
    (7, "seven"),
])
def test_f64_to_words(value, expected):
    assert f64_to_words(value) == expected


@pytest.mark.parametrize("value, expected", [
    (15.2, "fifteen point two"),
    (0.1, "zero point one"),
    (np.float32(42.42), "forty-two point four two"),
    (-1.25, "negative one point two five"),
])
def test_f32_to_words(value, expected):
    assert f32_to_words(value) == expected


def test_f32_max_fits():
    words = f32_to_words(float(np.finfo(np.float32).max))
    assert words == "three hundred forty undecillion two hundred eighty-two decillion three hundred fifty nonillion"


def test_float_text_is_shortest_round_trip():
    assert float_text(0.1) == "0.1"
    assert float_text(0.1, bits=32) == "0.1"
    assert float_text(4e-5) == "0.00004"
    assert float_text(34.0) == "34"
    assert float(float_text(2 / 3)) == 2 / 3


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, np.float32("nan")])
def test_float_not_finite(value):
    with pytest.raises(NotFinite):
        f64_to_words(value)
    with pytest.raises(NotFinite):
        f32_to_words(value)


@pytest.mark.parametrize("value", [1e39, -3.5e38, 1e300])
def test_float_too_large(value):
    with pytest.raises(Overflow):
        f64_to_words(value)


def test_f32_narrowing_overflow():
    with pytest.raises(Overflow):
        f32_to_words(1e39)


def test_float_bad_width_and_type():
    with pytest.raises(ValueError):
        float_cardinal(1.5, bits=16)
    with pytest.raises(TypeError):
        float_cardinal("1.5")
    with pytest.raises(TypeError):
        float_cardinal(True)
