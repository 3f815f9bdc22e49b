"""Text processing utilities for truncation."""

import re

WHITESPACE_RE = re.compile(r"\s+")

# An ampersand that starts a named, decimal or hex character reference
ENTITY_START_RE = re.compile(r"&(?=#?[0-9A-Za-z])")


def collapse_whitespace(text: str) -> str:
    """Replace every run of whitespace with a single space.

    Args:
        text: The text to normalize.

    Returns:
        Text where each whitespace run (including NBSP and the Unicode
        line/paragraph separators) is one ``" "``.
    """
    return WHITESPACE_RE.sub(" ", text)


def protect_entities(markup: str) -> str:
    """Escape the ampersand of every character reference in ``markup``.

    The HTML parser always decodes references such as ``&nbsp;`` or ``&#64;``.
    Escaping their leading ``&`` first makes the parser hand back the
    reference text itself, so it is counted and re-emitted exactly as written.

    Args:
        markup: Raw HTML markup.

    Returns:
        Markup with ``&name;`` rewritten to ``&amp;name;``.
    """
    return ENTITY_START_RE.sub("&amp;", markup)
