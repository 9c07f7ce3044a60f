from __future__ import annotations

import re

from .synonyms import SynonymResolver

_PARENTHESIZED = re.compile(r"\([^)]*\)")
# [^\W\d_] is "any letter" in every script (한글, latin, ...).
_QUANTITY_THEN_UNIT = re.compile(r"\d+(?:[^\W\d_]|/)*")
_UNIT_THEN_QUANTITY = re.compile(r"[^\W\d_]*\d+")


def _strip_noise(text: str) -> str:
    text = _PARENTHESIZED.sub("", text)
    text = _QUANTITY_THEN_UNIT.sub("", text)
    text = _UNIT_THEN_QUANTITY.sub("", text)
    return text.strip()


def normalize(raw: str | None) -> str:
    """
    Canonicalize a raw ingredient string into a comparable form.

    "양파 2개" -> "양파", "Carrot (diced)" -> "carrot". Idempotent.
    """
    if not raw:
        return ""
    return _strip_noise(raw.lower().strip())


def canonicalize(raw: str | None, resolver: SynonymResolver) -> str:
    """Synonym resolution runs before noise stripping: "양파(중간)" -> "양파"."""
    if not raw:
        return ""
    return _strip_noise(resolver.resolve(raw.lower().strip()))
