"""
Public entry points: ``truncate`` and ``setup``.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

import structlog
from bs4 import BeautifulSoup

from .bidirectional import BidirectionalTruncator
from .counter import Budget
from .document import load_document
from .policy import build_policy
from .text import truncate_text
from .tree import TreeTruncator

logger = structlog.get_logger(__name__)

HtmlInput = Union[str, BeautifulSoup]


def truncate(
    html: Optional[HtmlInput],
    length: Union[int, float, Mapping[str, Any], None] = None,
    options: Optional[Mapping[str, Any]] = None,
    **overrides: Any,
) -> Optional[HtmlInput]:
    """Truncate HTML to ``length`` characters (or words) keeping tags intact.

    Examples::

        truncate("123456789", 5)                          # "12345..."
        truncate("<p>123456789</p>", {"length": 6})       # "<p>123456...</p>"
        truncate(html, 20, bidirectional_target="span")

    Args:
        html: Markup string or a parsed ``BeautifulSoup`` document. A parsed
            document is modified in place.
        length: Characters (or words with ``by_words``) to keep. May also be
            the options mapping itself.
        options: Options mapping; keys in snake_case or camelCase.
        **overrides: Options as keyword arguments.

    Returns:
        The truncated markup, or plain text with ``strip_tags``. When there is
        nothing to do (empty input, or a missing, zero, negative or infinite
        length) ``html`` itself is returned.

    Raises:
        SelectorNotFoundError: If ``bidirectional_target`` matches nothing.
    """
    policy = build_policy(length, options, **overrides)
    if html is None or (isinstance(html, str) and not html):
        return html
    if policy.length is None:
        logger.debug("No usable length, returning input unchanged")
        return html

    document = load_document(
        html,
        decode_entities=policy.decode_entities,
        keep_whitespaces=policy.keep_whitespaces,
    )

    if policy.excludes:
        document.remove(policy.exclude_selector)

    if policy.bidirectional_target:
        fragment = BidirectionalTruncator(document, policy).truncate(policy.bidirectional_target)
        if policy.strip_tags:
            return document.text(fragment)
        return document.serialize(fragment)

    budget = Budget(policy.length)
    if policy.strip_tags:
        return truncate_text(document.text(), budget, policy, is_last=True)

    TreeTruncator(budget, policy).truncate_children(document.root)
    return document.serialize()
