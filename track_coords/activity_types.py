"""Utilities for classifying GPX track activity types."""

from __future__ import annotations

from typing import Any, Collection, Mapping

from .config import ACTIVITY_TYPE_SYNONYMS, KNOWN_ACTIVITY_TYPES

__all__ = ["normalize_activity_type", "is_known_activity_type"]


def normalize_activity_type(
    value: Any,
    synonyms: Mapping[str, str] = ACTIVITY_TYPE_SYNONYMS,
) -> str | None:
    """Return a lowercase, canonical activity type or ``None`` when missing.

    GPX exporters write ``<type>`` values with inconsistent casing and
    vocabulary. Normalising once keeps downstream grouping deterministic:
    ``" Hiking "`` and ``"walking"`` both become ``"walking"``.
    """

    if value is None:
        return None
    normalized = str(value).strip().lower()
    if not normalized:
        return None
    return synonyms.get(normalized, normalized)


def is_known_activity_type(
    activity_type: str | None,
    known: Collection[str] = KNOWN_ACTIVITY_TYPES,
) -> bool:
    """Return ``True`` when ``activity_type`` is one of the classified types.

    A missing label and an unrecognised label both return ``False``.
    """

    return activity_type is not None and activity_type in known
