"""
Condition Prioritizer

Turns a set of recognized symptoms into a ranked list of conditions.

Algorithm:
    1. Map each case-folded symptom through the vocabulary index to its full
       record label, passing it through unchanged when it is not a key
    2. Resolve labels to table rows (unresolvable labels are dropped)
    3. Sum the presence values of the resolved rows for every condition
    4. Keep positive scores, highest first (ties keep table column order)
    5. Record which resolved symptoms are present for each condition
"""

import logging
from typing import Iterable

from symptom_checker.dataset.prevalence import PrevalenceTable
from symptom_checker.matching.vocabulary import VocabularyIndex, extract_symptom_name
from symptom_checker.scoring.scoring_types import ConditionScore, PrioritizationResult

logger = logging.getLogger(__name__)


def resolve_rows(
    symptoms: Iterable[str], table: PrevalenceTable, index: VocabularyIndex
) -> list[int]:
    """Table rows for the given symptoms, in the order they resolve."""
    rows: list[int] = []

    for symptom in symptoms:
        # Exact case-folded key only; a full label of a shadowed duplicate
        # must reach its own row
        label = index.records.get(symptom.lower(), symptom)
        row = table.row_index(label)
        if row is None:
            logger.debug("Symptom %r does not resolve to a table row", symptom)
            continue
        rows.append(row)

    return rows


def prioritize(
    symptoms: Iterable[str], table: PrevalenceTable, index: VocabularyIndex
) -> PrioritizationResult:
    """
    Score every condition by the number of given symptoms associated with it.

    Args:
        symptoms: Recognized symptom names (canonical simple names)
        table: The prevalence table
        index: Vocabulary index built from the same table

    Returns:
        PrioritizationResult with positive scores sorted descending and,
        for every condition, the matched simple names in resolution order.
        Both are empty when no symptom resolves to a table row.
    """
    rows = resolve_rows(symptoms, table, index)
    if not rows:
        return PrioritizationResult()

    # Repeated rows are counted once per occurrence
    totals = table.data[rows].sum(axis=0)

    scores = [
        ConditionScore(condition=condition, score=int(totals[col]))
        for col, condition in enumerate(table.conditions)
        if totals[col] > 0
    ]
    scores.sort(key=lambda s: s.score, reverse=True)

    names = [extract_symptom_name(table.symptoms[row]) for row in rows]
    matched: dict[str, list[str]] = {}
    for col, condition in enumerate(table.conditions):
        matched[condition] = [
            name for row, name in zip(rows, names) if table.data[row, col] == 1
        ]

    return PrioritizationResult(scores=scores, matched=matched)
