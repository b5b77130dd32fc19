"""
Scoring Data Types

Data models for condition prioritization and symptom analysis results.
"""

from dataclasses import dataclass, field
from typing import Any

from symptom_checker.matching.matching_types import MatchCandidate


@dataclass(frozen=True)
class ConditionScore:
    """Number of selected symptoms associated with a condition."""

    condition: str
    score: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"condition": self.condition, "score": self.score}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ConditionScore":
        """Create from dictionary."""
        return cls(condition=data["condition"], score=int(data["score"]))


@dataclass
class PrioritizationResult:
    """Ranked condition scores and the symptoms behind each one."""

    scores: list[ConditionScore] = field(default_factory=list)
    matched: dict[str, list[str]] = field(default_factory=dict)

    @property
    def top_condition(self) -> str | None:
        """Highest-scoring condition, if any condition scored."""
        return self.scores[0].condition if self.scores else None

    @property
    def is_empty(self) -> bool:
        return not self.scores


@dataclass
class ValidationOutcome:
    """Symptoms split into recognized and unrecognized entries."""

    valid: list[str] = field(default_factory=list)  # canonical simple names
    invalid: list[str] = field(default_factory=list)  # raw user entries
    suggestions: dict[str, list[MatchCandidate]] = field(default_factory=dict)


@dataclass
class AnalysisResult:
    """Everything the presentation layer needs to render one analysis."""

    valid_symptoms: list[str] = field(default_factory=list)
    invalid_symptoms: list[str] = field(default_factory=list)
    suggested_matches: dict[str, list[MatchCandidate]] = field(default_factory=dict)
    prioritized_conditions: list[ConditionScore] = field(default_factory=list)
    matched_symptoms: dict[str, list[str]] = field(default_factory=dict)
    top_condition: str | None = None

    @property
    def has_matches(self) -> bool:
        """True if at least one condition scored above zero."""
        return bool(self.prioritized_conditions)

    @property
    def total_score(self) -> int:
        return sum(c.score for c in self.prioritized_conditions)

    def other_conditions(self, limit: int = 3) -> list[ConditionScore]:
        """Runners-up after the top recommendation."""
        return self.prioritized_conditions[1 : 1 + limit]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "valid_symptoms": list(self.valid_symptoms),
            "invalid_symptoms": list(self.invalid_symptoms),
            "suggested_matches": {
                symptom: [m.to_dict() for m in matches]
                for symptom, matches in self.suggested_matches.items()
            },
            "prioritized_conditions": [c.to_dict() for c in self.prioritized_conditions],
            "matched_symptoms": {
                condition: list(names) for condition, names in self.matched_symptoms.items()
            },
            "top_condition": self.top_condition,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AnalysisResult":
        """Create from dictionary."""
        return cls(
            valid_symptoms=list(data.get("valid_symptoms", [])),
            invalid_symptoms=list(data.get("invalid_symptoms", [])),
            suggested_matches={
                symptom: [MatchCandidate.from_dict(m) for m in matches]
                for symptom, matches in data.get("suggested_matches", {}).items()
            },
            prioritized_conditions=[
                ConditionScore.from_dict(c) for c in data.get("prioritized_conditions", [])
            ],
            matched_symptoms={
                condition: list(names)
                for condition, names in data.get("matched_symptoms", {}).items()
            },
            top_condition=data.get("top_condition"),
        )
