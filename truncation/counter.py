"""
Length counting for truncation.

The counter walks a sequence of grapheme units and decides where the
remaining budget runs out. It never fails: at worst it keeps everything.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .graphemes import is_blank


@dataclass
class Budget:
    """Remaining number of characters (or words) allowed in the output.

    One instance is shared by every node of a single truncation pass, or of
    a single wing in bidirectional mode.
    """

    remaining: int

    @property
    def exhausted(self) -> bool:
        return self.remaining <= 0

    def consume(self, amount: int) -> None:
        self.remaining = max(self.remaining - amount, 0)


@dataclass(frozen=True)
class CountResult:
    """Outcome of counting one text node.

    Attributes:
        index: Number of units to keep (slice end).
        consumed: Budget actually used; less than the limit if the text fit.
        remaining: Budget left after this text (0 means exhausted).
    """

    index: int
    consumed: int
    remaining: int


def count_units(
    units: Sequence[str],
    limit: int,
    by_words: bool = False,
    prev_blank: Optional[bool] = None,
) -> CountResult:
    """Count units against ``limit`` and find the cut position.

    In word mode only transitions between blank and non-blank runs matter and
    each word costs one unit of budget. In character mode a blank unit right
    after another blank unit is free, so whitespace runs count once.

    Once the limit is reached, a blank following a blank is still absorbed;
    anything else ends the scan and is left out of the cut.

    Args:
        units: Grapheme units of the text.
        limit: Budget available for this text.
        by_words: Count words instead of characters.
        prev_blank: Blank state of the unit before ``units[0]``. Defaults to
            ``by_words`` so a leading word is counted.

    Returns:
        The cut index and budget bookkeeping.
    """
    prev_is_blank = by_words if prev_blank is None else prev_blank
    total = len(units)
    idx = 0
    count = 0

    while idx < total:
        cur_is_blank = is_blank(units[idx])
        idx += 1

        if by_words and prev_is_blank == cur_is_blank:
            continue

        if count == limit:
            # Trailing whitespace is free when it continues a blank run
            if prev_is_blank and cur_is_blank:
                prev_is_blank = cur_is_blank
                continue
            # Current unit belongs to the part that exceeds the limit
            idx -= 1
            break

        if by_words:
            if not cur_is_blank:
                count += 1
        elif not (cur_is_blank and prev_is_blank):
            count += 1
        prev_is_blank = cur_is_blank

    return CountResult(index=idx, consumed=count, remaining=limit - count)


__all__ = ["Budget", "CountResult", "count_units"]
