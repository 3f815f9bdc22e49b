"""Truncation of a single run of text against a shared budget."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from utils.text import collapse_whitespace

from .counter import Budget, count_units
from .graphemes import segment
from .words import resolve_cut

if TYPE_CHECKING:
    from .policy import TruncationPolicy

logger = structlog.get_logger(__name__)


def truncate_text(
    text: str,
    budget: Budget,
    policy: "TruncationPolicy",
    is_last: bool = False,
    reverse: bool = False,
) -> str:
    """Truncate ``text`` and consume the budget it uses.

    Whitespace runs are collapsed first unless ``keep_whitespaces`` is set.
    While budget remains after this text, it is returned whole. Once the
    budget runs out, the kept part gets the ellipsis, except when nothing was
    cut from a node that is last in traversal order.

    Args:
        text: Text content of one node (or of a whole document).
        budget: Shared budget, decremented in place.
        policy: Active truncation policy.
        is_last: Whether no content follows this text in traversal order.
        reverse: Keep the tail instead of the head; the ellipsis goes first.

    Returns:
        The replacement text.
    """
    if not policy.keep_whitespaces:
        text = collapse_whitespace(text)

    units = segment(text)
    if reverse:
        units.reverse()

    result = count_units(units, budget.remaining, policy.by_words)
    budget.consume(result.consumed)
    if not budget.exhausted:
        return text

    if policy.by_words:
        kept = units[:result.index]
    else:
        kept = resolve_cut(units, result.index, policy)
    if reverse:
        kept.reverse()
    kept_text = "".join(kept)

    logger.debug(
        "Budget exhausted in text",
        kept_units=len(kept),
        total_units=len(units),
        reverse=reverse,
    )

    if kept_text == text and is_last:
        return text
    if reverse:
        return policy.ellipsis + kept_text
    return kept_text + policy.ellipsis


__all__ = ["truncate_text"]
