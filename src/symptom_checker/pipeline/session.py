"""
Symptom Session

The user's working list of symptoms: an insertion-ordered set of
free-text entries that is edited between analyses.
"""

from typing import Iterable, Iterator


class SymptomSession:
    """Ordered, duplicate-free list of user-entered symptoms."""

    def __init__(self, symptoms: Iterable[str] | None = None):
        self._symptoms: list[str] = []
        for symptom in symptoms or []:
            self.add(symptom)

    def __len__(self) -> int:
        return len(self._symptoms)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._symptoms))

    def __contains__(self, symptom: object) -> bool:
        return symptom in self._symptoms

    def __repr__(self) -> str:
        return f"SymptomSession({self._symptoms!r})"

    @property
    def is_empty(self) -> bool:
        return not self._symptoms

    def add(self, symptom: str) -> bool:
        """Add a symptom. Returns False for blank or already-listed entries."""
        symptom = symptom.strip()
        if not symptom or symptom in self._symptoms:
            return False
        self._symptoms.append(symptom)
        return True

    def remove(self, symptom: str) -> bool:
        """Remove a symptom by exact text. Returns False if it is not listed."""
        if symptom not in self._symptoms:
            return False
        self._symptoms.remove(symptom)
        return True

    def remove_at(self, index: int) -> str:
        """Remove and return the symptom at a position."""
        return self._symptoms.pop(index)

    def replace(self, old: str, new: str) -> bool:
        """
        Replace a symptom in place, keeping its position.

        If the replacement is already listed elsewhere the old entry is
        dropped instead, so the list stays duplicate-free.
        """
        new = new.strip()
        if old not in self._symptoms or not new:
            return False

        position = self._symptoms.index(old)
        if new != old and new in self._symptoms:
            del self._symptoms[position]
        else:
            self._symptoms[position] = new
        return True

    def clear(self) -> None:
        self._symptoms.clear()

    def snapshot(self) -> tuple[str, ...]:
        """Immutable copy of the current symptoms for one analysis."""
        return tuple(self._symptoms)
