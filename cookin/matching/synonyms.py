from __future__ import annotations

from .config import DEFAULT_SYNONYMS, SynonymTable


class SynonymResolver:
    """Collapse surface variants of one ingredient onto its canonical key."""

    def __init__(self, table: SynonymTable = DEFAULT_SYNONYMS) -> None:
        # Lower-case once up front; the table itself is never modified.
        self._entries = tuple(
            (key.lower(), tuple(form.lower() for form in forms))
            for key, forms in table.entries
        )

    def resolve(self, text: str) -> str:
        """
        Return the canonical key of the first entry whose surface form is
        contained in ``text``, or ``text`` unchanged when nothing hits.
        """
        for key, forms in self._entries:
            if any(form in text for form in forms):
                return key
        return text
