from __future__ import annotations

from pydantic import BaseModel, Field


class OwnedIngredients(BaseModel):
    """
    The user's ingredient list, in entry order.

    Raw text is kept for display. Normalization only happens at match time.
    """

    items: list[str] = Field(default_factory=list)

    @staticmethod
    def _key(raw: str) -> str:
        return raw.strip().lower()

    def __contains__(self, raw: object) -> bool:
        if not isinstance(raw, str):
            return False
        key = self._key(raw)
        return any(self._key(i) == key for i in self.items)

    def __len__(self) -> int:
        return len(self.items)

    def add(self, raw: str) -> bool:
        """Append the trimmed ingredient. Blank or duplicate entries are rejected."""
        value = raw.strip()
        if not value or value in self:
            return False
        self.items.append(value)
        return True

    def remove(self, raw: str) -> bool:
        key = self._key(raw)
        kept = [i for i in self.items if self._key(i) != key]
        removed = len(kept) != len(self.items)
        self.items = kept
        return removed
