"""
Depth-first truncation of a parsed HTML tree.

A single budget is consumed in traversal order. Text nodes are cut while the
budget lasts; once it is exhausted every following text node and element is
removed. Comments are always removed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from bs4 import Tag
from bs4.element import PageElement

from .counter import Budget
from .document import is_discarded, is_text, replace_text
from .text import truncate_text

if TYPE_CHECKING:
    from .policy import TruncationPolicy

logger = structlog.get_logger(__name__)


class TreeTruncator:
    """Single-direction tree walker.

    Args:
        budget: Budget shared by every node visited through this instance.
        policy: Active truncation policy.
    """

    def __init__(self, budget: Budget, policy: "TruncationPolicy"):
        self.budget = budget
        self.policy = policy
        self.removed = 0

    def truncate_children(
        self,
        node: Tag,
        is_last: bool = True,
        reverse: bool = False,
    ) -> None:
        """Truncate the children of ``node`` in place.

        Args:
            node: Element (or document) whose contents are truncated.
            is_last: Whether nothing follows ``node`` in traversal order.
            reverse: Walk children from last to first and keep text tails,
                so the end of the subtree is what survives.
        """
        children = list(node.contents)
        if reverse:
            children.reverse()
        last_idx = len(children) - 1
        for idx, child in enumerate(children):
            self.truncate_node(child, is_last and idx == last_idx, reverse)

    def truncate_node(
        self,
        node: PageElement,
        is_last: bool = True,
        reverse: bool = False,
    ) -> None:
        """Truncate one node: cut its text, walk into it, or remove it."""
        if is_discarded(node):
            node.extract()
            return

        if self.budget.exhausted:
            node.extract()
            self.removed += 1
            return

        if is_text(node):
            replace_text(
                node,
                truncate_text(str(node), self.budget, self.policy, is_last, reverse),
            )
            if self.budget.exhausted:
                logger.debug("Budget exhausted", is_last=is_last, reverse=reverse)
        elif isinstance(node, Tag):
            self.truncate_children(node, is_last, reverse)


__all__ = ["TreeTruncator"]
