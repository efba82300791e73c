# cardinal.py

from __future__ import annotations

import logging

from typing import List

from .errors import Overflow
from .vocabulary import HUNDRED, MAX_MAGNITUDE, NEGATIVE, ONES, SCALES, TEENS, TENS

logger = logging.getLogger(__name__)


def split_groups(magnitude: int) -> List[int]:
    """
    Split a non-negative magnitude into base-1000 groups, least significant first.
      1_000_211 -> [211, 0, 1]
      0         -> [0]
    """
    if magnitude < 0 or magnitude > MAX_MAGNITUDE:
        logger.debug("magnitude out of 128-bit range: %d", magnitude)
        raise Overflow(f"Magnitude out of range (0 .. 2**128 - 1): {magnitude}", magnitude)

    groups: List[int] = []
    rest = magnitude
    while True:
        rest, group = divmod(rest, 1000)
        groups.append(group)
        if rest == 0:
            break
    return groups


def _under_100(n: int) -> str:
    if n < 10:
        return ONES[n]
    if n < 20:
        return TEENS[n - 10]

    tens, ones = divmod(n, 10)
    if ones:
        return f"{TENS[tens]}-{ONES[ones]}"
    return TENS[tens]


def group_to_words(group: int) -> str:
    """Words for a single 0..999 group, without scale name. 0 gives an empty string."""
    if not 0 <= group <= 999:
        raise ValueError(f"Group must be in 0..999, got {group}")

    parts: List[str] = []
    hundreds, rest = divmod(group, 100)

    if hundreds:
        parts.append(f"{ONES[hundreds]} {HUNDRED}")
    if rest:
        parts.append(_under_100(rest))

    return " ".join(parts)


def compose_cardinal(magnitude: int, negative: bool = False) -> str:
    if magnitude == 0:
        return ONES[0]

    groups = split_groups(magnitude)

    out: List[str] = [NEGATIVE] if negative else []
    for idx in range(len(groups) - 1, -1, -1):
        group = groups[idx]
        if group == 0:
            continue

        chunk = group_to_words(group)
        if idx:
            chunk = f"{chunk} {SCALES[idx]}"
        out.append(chunk)

    return " ".join(out)
