from __future__ import annotations

from typing import Iterable

from .config import DEFAULT_SEASONINGS


def is_seasoning(name: str | None, seasonings: Iterable[str] = DEFAULT_SEASONINGS) -> bool:
    """
    True when ``name`` is a condiment that should not count towards coverage.

    Containment is checked both ways so "양조간장" and "간장" both hit the
    "간장" entry. Works on display names, not on normalized text.
    """
    key = (name or "").strip().lower()
    if not key:
        return False
    for entry in seasonings:
        entry = entry.strip().lower()
        if entry and (entry in key or key in entry):
            return True
    return False
