"""
Grapheme-safe segmentation and whitespace classification.

Counting and slicing work on "units" (extended grapheme clusters) rather than
code points, so emoji sequences, flags and combining marks are never split.
"""

from typing import List

import regex

from utils.text import collapse_whitespace

GRAPHEME_RE = regex.compile(r"\X")

BLANK_CHARS = frozenset(" \f\n\r\t\v\u00a0\u2028\u2029")


def segment(text: str) -> List[str]:
    """Split text into grapheme clusters.

    Args:
        text: Text to segment.

    Returns:
        List of units; joining them gives back ``text``.
    """
    if not text:
        return []
    return GRAPHEME_RE.findall(text)


def is_blank(unit: str) -> bool:
    """Return True if the unit is made only of whitespace characters."""
    return bool(unit) and all(char in BLANK_CHARS for char in unit)


def text_length(text: str, keep_whitespaces: bool = False) -> int:
    """Length of ``text`` in units, as seen by the truncation counter.

    Unless ``keep_whitespaces`` is set, whitespace runs count as one unit.
    """
    if not keep_whitespaces:
        text = collapse_whitespace(text)
    return len(segment(text))
