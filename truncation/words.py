"""
Word boundary handling for character-mode cuts.

Decides what to do when a cut falls inside a word, following the
``reserve_last_word`` policy:

- falsy: hard cut at the limit.
- negative: drop the partial word (unless it is the only word).
- ``True`` or a positive number: finish the word, exceeding the limit by at
  most 10 (or that number of) characters.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, List, Sequence

if TYPE_CHECKING:
    from .policy import TruncationPolicy

DEFAULT_MAX_EXCEEDED = 10

NON_WORD_RE = re.compile(r"\W", re.ASCII)
WORD_UNIT_RE = re.compile(r"\w+", re.ASCII)


def _is_word_unit(unit: str) -> bool:
    return WORD_UNIT_RE.fullmatch(unit) is not None


def resolve_cut(
    units: Sequence[str],
    index: int,
    policy: "TruncationPolicy",
) -> List[str]:
    """Return the units to keep for a cut at ``index``.

    Args:
        units: Grapheme units of the (whitespace-normalized) text.
        index: Cut position returned by the counter.
        policy: Active truncation policy.

    Returns:
        The kept units. May be longer than ``index`` when the last word is
        reserved, or shorter when a negative policy trims it.
    """
    cut = list(units[:index])
    reserve = policy.reserve_last_word
    if not reserve or index >= len(units):
        return cut

    boundary = "".join(units[max(index - 1, 0):index + 1])
    if NON_WORD_RE.search(boundary):
        return cut

    if reserve is not True and reserve < 0:
        trimmed = list(cut)
        while trimmed and _is_word_unit(trimmed[-1]):
            trimmed.pop()
        # Keep the only word of a node that filled the whole limit
        if trimmed or len(cut) != policy.length:
            return trimmed
        if policy.trim_the_only_word:
            return cut

    max_exceeded = reserve if reserve is not True and reserve > 0 else DEFAULT_MAX_EXCEEDED
    exceeded: List[str] = []
    for unit in units[index:]:
        if len(exceeded) >= max_exceeded or not _is_word_unit(unit):
            break
        exceeded.append(unit)
    return cut + exceeded


__all__ = ["DEFAULT_MAX_EXCEEDED", "resolve_cut"]
