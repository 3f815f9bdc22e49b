"""
Truncation options.

A ``TruncationPolicy`` is built once per call by merging the caller's options
over the process-wide defaults, which start out from ``Settings`` and can be
changed with ``setup``. Options may be given in snake_case or camelCase
(``by_words`` or ``byWords``).
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import structlog
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from config.settings import get_settings

logger = structlog.get_logger(__name__)


class TruncationPolicy(BaseModel):
    """Immutable options for one truncation call."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    length: Optional[int] = None
    strip_tags: bool = False
    ellipsis: str = "..."
    decode_entities: bool = False
    excludes: Tuple[str, ...] = ()
    by_words: bool = False
    reserve_last_word: Union[bool, int] = False
    trim_the_only_word: bool = False
    keep_whitespaces: bool = False
    bidirectional_target: Optional[str] = None

    @field_validator("excludes", mode="before")
    @classmethod
    def _normalize_excludes(cls, value: Any) -> Tuple[str, ...]:
        if not value:
            return ()
        if isinstance(value, str):
            return (value,)
        return tuple(selector for selector in value if selector)

    @property
    def exclude_selector(self) -> str:
        """All excludes as one comma-separated selector list."""
        return ",".join(self.excludes)


_FIELD_NAMES = frozenset(TruncationPolicy.model_fields)
_ALIASES = {to_camel(name): name for name in _FIELD_NAMES}


def _defaults_from_settings() -> Dict[str, Any]:
    settings = get_settings()
    defaults = TruncationPolicy().model_dump()
    defaults.update(settings.model_dump(include=set(_FIELD_NAMES)))
    return defaults


_defaults: Dict[str, Any] = _defaults_from_settings()


def normalize_options(options: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Map option keys to field names, dropping unknown keys.

    Args:
        options: Caller options, snake_case or camelCase.

    Returns:
        A new dict keyed by ``TruncationPolicy`` field names.
    """
    normalized: Dict[str, Any] = {}
    for key, value in (options or {}).items():
        name = key if key in _FIELD_NAMES else _ALIASES.get(key)
        if name is None:
            logger.warning("Ignoring unknown truncation option", option=key)
            continue
        normalized[name] = value
    return normalized


def resolve_limit(value: Any) -> Optional[int]:
    """Return a usable length, or None when truncation should be skipped.

    Missing, non-numeric, boolean, NaN, infinite and non-positive values are
    all treated as "no limit".
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    limit = int(value)
    return limit if limit > 0 else None


def build_policy(
    length: Union[int, float, Mapping[str, Any], None] = None,
    options: Optional[Mapping[str, Any]] = None,
    **overrides: Any,
) -> TruncationPolicy:
    """Merge caller options over the current defaults.

    Args:
        length: Length to keep, or a mapping of options (then ``options`` is
            ignored, as when only an options object is passed).
        options: Options mapping.
        **overrides: Options given as keyword arguments; they win over
            ``options``.

    Returns:
        A frozen policy. ``length`` is None when it is not usable.
    """
    if isinstance(length, Mapping):
        options, length = length, None

    explicit = normalize_options(options)
    explicit.update(normalize_options(overrides))
    if length is not None:
        explicit["length"] = length

    merged = dict(_defaults)
    merged.update({key: value for key, value in explicit.items() if value is not None})
    merged["length"] = resolve_limit(merged.get("length"))
    return TruncationPolicy(**merged)


def setup(options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Dict[str, Any]:
    """Change the process-wide defaults used by every later call.

    Options set to None clear the default back to "unset". This mutates
    shared state without locking; do not call it while other threads are
    truncating.

    Returns:
        A copy of the updated defaults.
    """
    changes = normalize_options(options)
    changes.update(normalize_options(kwargs))
    updated = dict(_defaults)
    updated.update(changes)
    # Validate before touching the shared defaults
    TruncationPolicy(**{**updated, "length": resolve_limit(updated.get("length"))})
    _defaults.clear()
    _defaults.update(updated)
    logger.debug("Truncation defaults updated", options=sorted(changes))
    return dict(_defaults)


def reset_defaults() -> Dict[str, Any]:
    """Restore the defaults from ``Settings``."""
    _defaults.clear()
    _defaults.update(_defaults_from_settings())
    return dict(_defaults)


def get_defaults() -> Dict[str, Any]:
    """Return a copy of the current defaults."""
    return dict(_defaults)


__all__ = [
    "TruncationPolicy",
    "build_policy",
    "get_defaults",
    "normalize_options",
    "reset_defaults",
    "resolve_limit",
    "setup",
]
