"""
Symptom Checker

Session context that owns the loaded dataset and exposes the core API:
validate, suggest, prioritize and analyze.
"""

import json
import logging
from pathlib import Path
from typing import Iterable

from symptom_checker.dataset.condition_links import load_condition_links
from symptom_checker.dataset.prevalence import PrevalenceTable, load_prevalence
from symptom_checker.matching.matching_types import MatchCandidate
from symptom_checker.matching.resolver import find_closest_matches
from symptom_checker.matching.vocabulary import VocabularyIndex, build_index
from symptom_checker.pipeline.config import CheckerConfig, load_config
from symptom_checker.pipeline.session import SymptomSession
from symptom_checker.scoring.analysis import analyze, validate_symptoms
from symptom_checker.scoring.prioritizer import prioritize
from symptom_checker.scoring.scoring_types import (
    AnalysisResult,
    PrioritizationResult,
    ValidationOutcome,
)

logger = logging.getLogger(__name__)


class SymptomChecker:
    """Symptom checker bound to one loaded prevalence dataset."""

    def __init__(self, config: CheckerConfig):
        """Initialize checker with configuration."""
        self.config = config

        # Loaded on first use, read-only afterwards
        self._table: PrevalenceTable | None = None
        self._index: VocabularyIndex | None = None
        self._links: dict[str, str] | None = None

    @classmethod
    def from_config(cls, config_path: str | Path) -> "SymptomChecker":
        """Create checker from config file."""
        config = load_config(config_path)
        return cls(config)

    @classmethod
    def from_table(
        cls,
        table: PrevalenceTable,
        links: dict[str, str] | None = None,
        config: CheckerConfig | None = None,
    ) -> "SymptomChecker":
        """Create checker around an already loaded table."""
        checker = cls(config or CheckerConfig())
        checker._table = table
        checker._links = dict(links or {})
        return checker

    @property
    def table(self) -> PrevalenceTable:
        """Get or load the prevalence table. Raises DataLoadError on failure."""
        if self._table is None:
            self._table = load_prevalence(
                self.config.dataset.prevalence_source,
                timeout=self.config.dataset.timeout_seconds,
            )
        return self._table

    @property
    def index(self) -> VocabularyIndex:
        """Get or build the vocabulary index."""
        if self._index is None:
            self._index = build_index(self.table.symptoms)
        return self._index

    @property
    def condition_links(self) -> dict[str, str]:
        """Get or load the condition link lookup (empty if unavailable)."""
        if self._links is None:
            self._links = load_condition_links(
                self.config.dataset.links_source,
                timeout=self.config.dataset.timeout_seconds,
            )
        return self._links

    @property
    def is_loaded(self) -> bool:
        return self._table is not None

    @property
    def common_symptoms(self) -> list[str]:
        """Quick-add symptoms offered to the user."""
        return list(self.config.output.common_symptoms)

    def load(self) -> None:
        """Load the dataset, lookup and index eagerly."""
        _ = self.index
        _ = self.condition_links

    def symptom_names(self) -> list[str]:
        """Sorted unique simple names for autocomplete."""
        return self.index.sorted_names()

    def condition_url(self, condition: str) -> str | None:
        """Reference URL for a condition, if the lookup has one."""
        return self.condition_links.get(condition)

    def validate(self, symptoms: Iterable[str]) -> ValidationOutcome:
        """Split symptoms into recognized and unrecognized entries."""
        return validate_symptoms(
            symptoms,
            self.index,
            self.table.symptoms,
            threshold=self.config.matching.threshold,
            max_suggestions=self.config.matching.max_suggestions,
        )

    def suggest(
        self, symptom: str, threshold: float | None = None, limit: int | None = None
    ) -> list[MatchCandidate]:
        """Ranked vocabulary suggestions for a free-text symptom."""
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        if threshold is None:
            threshold = self.config.matching.threshold
        matches = find_closest_matches(symptom, self.table.symptoms, threshold)
        return matches if limit is None else matches[:limit]

    def prioritize(self, symptoms: Iterable[str]) -> PrioritizationResult:
        """Rank conditions for already validated symptoms."""
        return prioritize(symptoms, self.table, self.index)

    def analyze(self, symptoms: Iterable[str]) -> AnalysisResult:
        """Validate and prioritize a snapshot of symptoms."""
        snapshot = tuple(symptoms)
        logger.debug("Analyzing %d symptoms", len(snapshot))
        return analyze(
            snapshot,
            self.table,
            self.index,
            threshold=self.config.matching.threshold,
            max_suggestions=self.config.matching.max_suggestions,
        )

    def analyze_session(self, session: SymptomSession) -> AnalysisResult:
        """Analyze the current contents of a session."""
        return self.analyze(session.snapshot())

    def apply_suggestion(
        self, session: SymptomSession, invalid: str, replacement: str
    ) -> AnalysisResult | None:
        """
        Replace an unrecognized symptom with a suggestion and re-analyze.

        Returns None (and leaves the session unchanged) if the invalid
        symptom is no longer in the session.
        """
        if not session.replace(invalid, replacement):
            return None
        return self.analyze_session(session)

    def to_json(self, result: AnalysisResult, indent: int | None = None) -> str:
        """Serialize an analysis result to JSON string."""
        if indent is None:
            indent = self.config.output.indent
        return json.dumps(result.to_dict(), indent=indent)

    def save(self, result: AnalysisResult, filepath: str | Path) -> None:
        """Save an analysis result to file."""
        path = Path(filepath)
        with open(path, "w") as f:
            f.write(self.to_json(result))
