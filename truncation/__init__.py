"""
HTML truncation.

Cuts an HTML fragment down to a number of characters or words while keeping
its tag structure well formed, optionally keeping the text around a target
element instead of the start of the document.
"""

from .api import truncate
from .bidirectional import BidirectionalTruncator
from .counter import Budget, CountResult, count_units
from .document import Document, DocumentKind, load_document
from .errors import SelectorNotFoundError, TruncationError
from .graphemes import is_blank, segment, text_length
from .policy import TruncationPolicy, build_policy, get_defaults, reset_defaults, setup
from .text import truncate_text
from .tree import TreeTruncator
from .words import resolve_cut

__all__ = [
    "BidirectionalTruncator",
    "Budget",
    "CountResult",
    "Document",
    "DocumentKind",
    "SelectorNotFoundError",
    "TreeTruncator",
    "TruncationError",
    "TruncationPolicy",
    "build_policy",
    "count_units",
    "get_defaults",
    "is_blank",
    "load_document",
    "reset_defaults",
    "resolve_cut",
    "segment",
    "setup",
    "text_length",
    "truncate",
    "truncate_text",
]
