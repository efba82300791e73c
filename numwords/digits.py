# digits.py

from __future__ import annotations

import logging

from .errors import InvalidFormat
from .vocabulary import DIGIT_WORDS

logger = logging.getLogger(__name__)


def spell_digits(text: str) -> str:
    """
    Spell every digit on its own, keeping leading zeros:
      "001247" -> "zero zero one two four seven"
    Anything other than 0-9 (spaces, signs, points) is rejected.
    """
    words = []
    for pos, ch in enumerate(text):
        word = DIGIT_WORDS.get(ch)
        if word is None:
            logger.debug("non-digit %r at position %d in %r", ch, pos, text)
            raise InvalidFormat(f"Not a decimal digit at position {pos}: {ch!r}", text)
        words.append(word)
    return " ".join(words)
