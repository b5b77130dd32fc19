"""
Symptom Analysis

Validates user-entered symptoms against the vocabulary and prioritizes
conditions for the recognized ones.

Flow:
    user symptoms -> exact (case-folded) lookup -> valid: canonical name
                                                -> invalid: fuzzy suggestions
    valid symptoms -> prioritize -> AnalysisResult
"""

import logging
from typing import Iterable, Sequence

from symptom_checker.dataset.prevalence import PrevalenceTable
from symptom_checker.matching.resolver import DEFAULT_THRESHOLD, find_closest_matches
from symptom_checker.matching.vocabulary import VocabularyIndex
from symptom_checker.scoring.prioritizer import prioritize
from symptom_checker.scoring.scoring_types import AnalysisResult, ValidationOutcome

logger = logging.getLogger(__name__)

DEFAULT_MAX_SUGGESTIONS = 3


def validate_symptoms(
    symptoms: Iterable[str],
    index: VocabularyIndex,
    labels: Sequence[str],
    threshold: float = DEFAULT_THRESHOLD,
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
) -> ValidationOutcome:
    """
    Split symptoms into recognized and unrecognized entries.

    Recognized entries are replaced by the canonical simple name from the
    vocabulary. Unrecognized entries are kept as typed and, when close
    matches exist, receive up to max_suggestions ranked suggestions.
    """
    outcome = ValidationOutcome()

    for symptom in symptoms:
        canonical = index.canonical_name(symptom)
        if canonical is not None:
            outcome.valid.append(canonical)
            continue

        outcome.invalid.append(symptom)
        matches = find_closest_matches(symptom, labels, threshold)
        if matches:
            outcome.suggestions[symptom] = matches[:max_suggestions]

    if outcome.invalid:
        logger.info(
            "%d of %d symptoms not recognized: %s",
            len(outcome.invalid),
            len(outcome.valid) + len(outcome.invalid),
            ", ".join(outcome.invalid),
        )

    return outcome


def analyze(
    symptoms: Iterable[str],
    table: PrevalenceTable,
    index: VocabularyIndex,
    threshold: float = DEFAULT_THRESHOLD,
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
) -> AnalysisResult:
    """Run validation and prioritization for one snapshot of symptoms."""
    outcome = validate_symptoms(
        symptoms, index, table.symptoms, threshold, max_suggestions
    )

    result = AnalysisResult(
        valid_symptoms=outcome.valid,
        invalid_symptoms=outcome.invalid,
        suggested_matches=outcome.suggestions,
    )

    if outcome.valid:
        prioritized = prioritize(outcome.valid, table, index)
        result.prioritized_conditions = prioritized.scores
        result.matched_symptoms = prioritized.matched
        result.top_condition = prioritized.top_condition

    if outcome.valid and not result.has_matches:
        logger.info("No conditions match the %d recognized symptoms", len(outcome.valid))

    return result
