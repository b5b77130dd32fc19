"""
Matching Data Types

Data models for fuzzy symptom matching.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class MatchCandidate:
    """A vocabulary entry that closely matches a free-text symptom."""

    full: str  # full record label, e.g. "Fever (HP:0001945)"
    simple: str  # label without the ontology code, e.g. "Fever"
    similarity: float  # rounded to 2 decimals

    @property
    def percentage(self) -> float:
        """Similarity as a percentage (0-100)."""
        return round(self.similarity * 100, 1)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "full": self.full,
            "simple": self.simple,
            "similarity": self.similarity,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MatchCandidate":
        """Create from dictionary."""
        return cls(
            full=data["full"],
            simple=data["simple"],
            similarity=float(data["similarity"]),
        )
