"""
Bidirectional truncation around a target element.

Instead of keeping the start of the document, the text around a target
element is kept: the smallest ancestor of the target whose text still fits
the limit is kept whole, and the leftover budget is split evenly between the
siblings before it (the left wing) and after it (the right wing). Siblings
furthest from the container are dropped first; only the outermost kept
sibling of each wing is cut, keeping its tail on the left and its head on
the right.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, List, Sequence

import structlog
from bs4 import Tag
from bs4.element import PageElement

from utils.text import collapse_whitespace

from .counter import Budget
from .document import (
    Document,
    child_index,
    is_discarded,
    is_text,
    node_text,
    parent_of,
    replace_text,
)
from .errors import SelectorNotFoundError
from .graphemes import text_length
from .text import truncate_text
from .tree import TreeTruncator

if TYPE_CHECKING:
    from .policy import TruncationPolicy

logger = structlog.get_logger(__name__)


class BidirectionalTruncator:
    """Truncates a document symmetrically around a target element.

    Args:
        document: Loaded document; mutated in place.
        policy: Active truncation policy. ``policy.length`` must be set.
    """

    def __init__(self, document: Document, policy: "TruncationPolicy"):
        self.document = document
        self.policy = policy
        self._log = logger.bind(limit=policy.length)

    def length(self, node: PageElement) -> int:
        """Text length of ``node`` in the units the counter uses."""
        return text_length(node_text(node), self.policy.keep_whitespaces)

    def sum_lengths(self, nodes: Sequence[PageElement]) -> int:
        return sum(self.length(node) for node in nodes)

    def truncate(self, selector: str) -> Tag:
        """Truncate around the first element matching ``selector``.

        Args:
            selector: CSS selector of the target element.

        Returns:
            The element to render: the target itself when it alone exceeds
            the limit, the containing ancestor when everything up to the
            document fits, otherwise the container's parent with both wings
            truncated.

        Raises:
            SelectorNotFoundError: If nothing matches ``selector``.
        """
        limit = self.policy.length
        target = self.document.select_one(selector)
        if target is None:
            self._log.warning("Bidirectional target not found", selector=selector)
            raise SelectorNotFoundError(selector)

        if self.policy.keep_whitespaces:
            self._collapse_whitespace(target)

        if self.length(target) >= limit:
            self._log.debug("Target exceeds limit, truncating it alone", selector=selector)
            TreeTruncator(Budget(limit), self.policy).truncate_children(target)
            return target

        container: Tag = target
        parent = parent_of(container)
        while parent is not None and self.length(parent) < limit:
            container = parent
            parent = parent_of(container)

        if parent is None:
            self._log.debug("Whole container fits", container=container.name)
            return container

        remaining = limit - self.length(container)
        wing_size = math.ceil(remaining / 2)

        for child in list(parent.contents):
            if is_discarded(child):
                child.extract()
        siblings = list(parent.contents)
        position = child_index(parent, container)
        left_wing = siblings[:position]
        right_wing = siblings[position + 1:]

        self._log.debug(
            "Truncating wings",
            container=container.name,
            wing_size=wing_size,
            left=len(left_wing),
            right=len(right_wing),
        )
        self.truncate_wing(left_wing, Budget(wing_size), reverse=True)
        self.truncate_wing(list(reversed(right_wing)), Budget(wing_size))
        return parent

    def truncate_wing(
        self,
        wing: List[PageElement],
        budget: Budget,
        reverse: bool = False,
    ) -> None:
        """Fit one wing into ``budget``.

        ``wing[0]`` is the node furthest from the container. Outer nodes are
        dropped while the nodes inside them already exceed the budget;
        the outermost survivor is then cut to the budget left over. A single
        remaining node gets the whole budget even if its cut form, after
        reserving the last word, ends up longer.

        Args:
            wing: Sibling nodes, outermost first.
            budget: Budget for this wing.
            reverse: Keep the tail of the outer node (left wing).
        """
        while len(wing) > 1 and self.sum_lengths(wing[1:]) > budget.remaining:
            wing[0].extract()
            wing = wing[1:]

        if not wing:
            return

        outer, inner = wing[0], wing[1:]
        budget.consume(self.sum_lengths(inner))
        if is_text(outer):
            replace_text(
                outer,
                truncate_text(str(outer), budget, self.policy, is_last=True, reverse=reverse),
            )
        elif isinstance(outer, Tag):
            TreeTruncator(budget, self.policy).truncate_children(outer, is_last=True, reverse=reverse)

    @staticmethod
    def _collapse_whitespace(target: Tag) -> None:
        for string in list(target.descendants):
            if is_text(string):
                replace_text(string, collapse_whitespace(str(string)))


__all__ = ["BidirectionalTruncator"]
