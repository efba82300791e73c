# ordinal.py

from __future__ import annotations

from .vocabulary import ORDINAL_EXCEPTIONS


def ordinal_word(word: str) -> str:
    """
    Ordinal form of a single cardinal word:
      one -> first, twenty -> twentieth, seven -> seventh, million -> millionth
    """
    if word in ORDINAL_EXCEPTIONS:
        return ORDINAL_EXCEPTIONS[word]
    if word.endswith("y"):
        return word[:-1] + "ieth"
    return word + "th"


def to_ordinal(phrase: str) -> str:
    """Rewrite the last word of a cardinal phrase; for "seventy-one" only "one" changes."""
    if not phrase:
        return phrase

    head, sep, last = phrase.rpartition(" ")
    prefix, hyphen, tail = last.rpartition("-")
    last = prefix + hyphen + ordinal_word(tail)

    return head + sep + last
