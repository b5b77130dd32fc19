"""
Symptom Vocabulary Index

Maps case-folded simple symptom names to the canonical full record label.

Dataset labels carry an optional ontology code in parentheses:

    "Muscle weakness (HP:0001324)" -> simple name "Muscle weakness"

Several records can share a simple name once the code is stripped. The
first record encountered wins; the rest remain in the prevalence table
but are never reached through the index.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable

logger = logging.getLogger(__name__)


def extract_symptom_name(label: str) -> str:
    """Strip a trailing parenthetical code from a symptom label."""
    if "(" in label and ")" in label:
        return label.split("(", 1)[0].strip()
    return label.strip()


def symptom_key(label: str) -> str:
    """Index key for a symptom label or free-text entry."""
    return extract_symptom_name(label).lower()


@dataclass
class VocabularyIndex:
    """Case-folded simple name -> canonical full record label."""

    records: dict[str, str] = field(default_factory=dict)
    simple_names: frozenset[str] = frozenset()

    @classmethod
    def build(cls, labels: Iterable[str]) -> "VocabularyIndex":
        """Build the index from full record labels (first occurrence wins)."""
        records: dict[str, str] = {}
        names: set[str] = set()
        collisions = 0

        for label in labels:
            simple = extract_symptom_name(label)
            names.add(simple)
            key = simple.lower()
            if key in records:
                collisions += 1
                continue
            records[key] = label

        if collisions:
            logger.debug(
                "Vocabulary index ignored %d duplicate simple names", collisions
            )

        return cls(records=records, simple_names=frozenset(names))

    def __contains__(self, symptom: object) -> bool:
        return isinstance(symptom, str) and symptom_key(symptom) in self.records

    def __len__(self) -> int:
        return len(self.records)

    def lookup(self, symptom: str) -> str | None:
        """Full record label for a symptom entry, or None if not indexed."""
        return self.records.get(symptom_key(symptom))

    def canonical_name(self, symptom: str) -> str | None:
        """Canonical-cased simple name for a symptom entry, or None."""
        label = self.lookup(symptom)
        if label is None:
            return None
        return extract_symptom_name(label)

    def sorted_names(self) -> list[str]:
        """Unique simple names, sorted, for autocomplete."""
        return sorted(self.simple_names)


def build_index(labels: Iterable[str]) -> VocabularyIndex:
    """Build a vocabulary index from full record labels."""
    return VocabularyIndex.build(labels)
