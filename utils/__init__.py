"""Shared utilities for the truncation engine."""

from .text import collapse_whitespace, protect_entities
from .logging_config import configure_logging

__all__ = ["collapse_whitespace", "protect_entities", "configure_logging"]
