"""Utility helpers shared across the engine."""

from __future__ import annotations

import math
from typing import Any, Iterable, List, Mapping, Optional


def as_text(value: Any) -> Optional[str]:
    """Coerce a scalar payload value to non-blank text, or ``None``.

    Numbers render without a trailing ``.0`` when integral. Booleans, mappings
    and sequences are not text and yield ``None``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        return value or None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return str(int(value)) if value.is_integer() else str(value)
    return None


def first_text(raw: Mapping[str, Any], keys: Iterable[str]) -> Optional[str]:
    """Return the first alias in ``keys`` holding usable text."""
    for key in keys:
        text = as_text(raw.get(key))
        if text is not None:
            return text
    return None


def text_items(value: Any) -> List[str]:
    """Keep the textual elements of a list or tuple; anything else yields ``[]``."""
    if not isinstance(value, (list, tuple)):
        return []
    out: List[str] = []
    for it in value:
        text = as_text(it)
        if text is not None:
            out.append(text)
    return out
