"""Exceptions raised by the truncation engine."""


class TruncationError(Exception):
    """Base class for truncation failures."""


class SelectorNotFoundError(TruncationError, LookupError):
    """Raised when the bidirectional target selector matches no node."""

    def __init__(self, selector: str):
        self.selector = selector
        super().__init__(
            f"Could not find node matching bidirectional target selector {selector!r}"
        )
