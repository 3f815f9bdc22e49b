"""
Markup parsing and serialization on top of BeautifulSoup.

Callers hand in either raw markup or an already parsed ``BeautifulSoup``
document. Both end up as a ``Document``; the kind is decided once, with an
explicit type check, when the document is loaded.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

import structlog
from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.dammit import EntitySubstitution
from bs4.element import PageElement, PreformattedString
from bs4.formatter import HTMLFormatter

from utils.text import protect_entities

logger = structlog.get_logger(__name__)

# Keeps fragments as-is (no <html>/<body> wrapper)
PARSER = "html.parser"

# Escapes &, < and > in decoded text
ESCAPING_FORMATTER = HTMLFormatter(
    entity_substitution=EntitySubstitution.substitute_xml,
    void_element_close_prefix=None,
    empty_attributes_are_booleans=True,
)

# Text already holds its references in encoded form
VERBATIM_FORMATTER = HTMLFormatter(
    entity_substitution=None,
    void_element_close_prefix=None,
    empty_attributes_are_booleans=True,
)


class _EveryTagName:
    """Whitespace-preserving tag set that matches every tag, the document included."""

    def __contains__(self, name: object) -> bool:
        return True


# Parser option that stops whitespace-only strings being collapsed to one space
PRESERVE_ALL_WHITESPACE = _EveryTagName()


class DocumentKind(Enum):
    """Where a document came from."""

    RAW_MARKUP = "raw_markup"
    PARSED = "parsed"


def is_text(node: PageElement) -> bool:
    """True for text strings; comments, doctypes and CDATA are not text."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def is_discarded(node: PageElement) -> bool:
    """True for comments and the other non-text strings dropped on output."""
    return isinstance(node, PreformattedString)


def node_text(node: PageElement) -> str:
    """Concatenated text of ``node`` and its descendants."""
    if isinstance(node, NavigableString):
        return str(node) if is_text(node) else ""
    return "".join(str(string) for string in node.descendants if is_text(string))


def replace_text(node: NavigableString, text: str) -> NavigableString:
    """Swap a text node for one holding ``text``, keeping its string class."""
    replacement = type(node)(text)
    node.replace_with(replacement)
    return replacement


def child_index(parent: Tag, node: PageElement) -> int:
    """Position of ``node`` among ``parent.contents``, matched by identity."""
    for idx, child in enumerate(parent.contents):
        if child is node:
            return idx
    raise ValueError("node is not a child of parent")


def parent_of(node: PageElement) -> Optional[Tag]:
    """Parent element, or None when ``node`` sits directly under the document."""
    parent = node.parent
    if parent is None or isinstance(parent, BeautifulSoup):
        return None
    return parent


@dataclass
class Document:
    """A parsed HTML tree plus the formatter that turns it back into markup.

    Attributes:
        soup: The parsed tree. Mutated in place by truncation.
        kind: Raw markup parsed here, or a document supplied by the caller.
        formatter: Serialization formatter matching how text was decoded.
    """

    soup: BeautifulSoup
    kind: DocumentKind
    formatter: HTMLFormatter

    @property
    def root(self) -> BeautifulSoup:
        return self.soup

    def select_one(self, selector: str) -> Optional[Tag]:
        return self.soup.select_one(selector)

    def remove(self, selector: str) -> int:
        """Remove every element matching ``selector``.

        Returns:
            Number of elements removed.
        """
        matches = self.soup.select(selector)
        for element in matches:
            element.extract()
        if matches:
            logger.debug("Removed excluded elements", selector=selector, count=len(matches))
        return len(matches)

    def text(self, node: Optional[PageElement] = None) -> str:
        return node_text(self.soup if node is None else node)

    def serialize(self, node: Optional[PageElement] = None) -> str:
        """Render the whole document, or one node of it, as markup."""
        target = self.soup if node is None else node
        if isinstance(target, NavigableString):
            return target.output_ready(self.formatter)
        return target.decode(formatter=self.formatter)


def load_document(
    html: Union[str, BeautifulSoup],
    decode_entities: bool = False,
    keep_whitespaces: bool = False,
) -> Document:
    """Wrap raw markup or a parsed document.

    Raw markup is parsed with the stdlib HTML parser. Unless
    ``decode_entities`` is set, character references are kept in their
    encoded form: they count at their written length and are emitted as-is.
    A parsed document is used directly; its text is already decoded.

    Args:
        html: Markup string or ``BeautifulSoup`` document.
        decode_entities: Decode references before counting.
        keep_whitespaces: Keep whitespace-only strings exactly as written.
            By default the parser reduces them to a single space or newline.

    Returns:
        The loaded document.

    Raises:
        TypeError: If ``html`` is neither a string nor a BeautifulSoup document.
    """
    if isinstance(html, BeautifulSoup):
        return Document(soup=html, kind=DocumentKind.PARSED, formatter=ESCAPING_FORMATTER)

    if isinstance(html, str):
        parser_options = {}
        if keep_whitespaces:
            parser_options["preserve_whitespace_tags"] = PRESERVE_ALL_WHITESPACE
        if decode_entities:
            soup = BeautifulSoup(html, PARSER, **parser_options)
            formatter = ESCAPING_FORMATTER
        else:
            soup = BeautifulSoup(protect_entities(html), PARSER, **parser_options)
            formatter = VERBATIM_FORMATTER
        return Document(soup=soup, kind=DocumentKind.RAW_MARKUP, formatter=formatter)

    raise TypeError(
        f"Expected markup string or BeautifulSoup document, got {type(html).__name__}"
    )


__all__ = [
    "Document",
    "DocumentKind",
    "ESCAPING_FORMATTER",
    "PARSER",
    "PRESERVE_ALL_WHITESPACE",
    "VERBATIM_FORMATTER",
    "child_index",
    "is_discarded",
    "is_text",
    "load_document",
    "node_text",
    "parent_of",
    "replace_text",
]
