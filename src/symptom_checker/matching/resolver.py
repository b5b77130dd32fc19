"""
Fuzzy Symptom Resolver

Suggests vocabulary entries for symptoms that fail exact lookup.

Flow:
    user symptom -> exact index lookup fails -> score every record -> ranked suggestions
"""

from typing import Iterable

from symptom_checker.matching.matching_types import MatchCandidate
from symptom_checker.matching.similarity import round_score, similarity
from symptom_checker.matching.vocabulary import extract_symptom_name

DEFAULT_THRESHOLD = 0.6


def find_closest_matches(
    symptom: str,
    labels: Iterable[str],
    threshold: float = DEFAULT_THRESHOLD,
) -> list[MatchCandidate]:
    """
    Find vocabulary records similar to a free-text symptom.

    Args:
        symptom: The symptom text entered by the user
        labels: Every full record label in the table, in table order
        threshold: Minimum similarity for a record to be kept (0.0-1.0)

    Returns:
        Candidates sorted by rounded similarity, highest first. Records
        with equal scores keep their table order.
    """
    matches: list[MatchCandidate] = []

    for label in labels:
        simple = extract_symptom_name(label)
        score = similarity(symptom, simple)
        if score >= threshold:
            matches.append(
                MatchCandidate(full=label, simple=simple, similarity=round_score(score))
            )

    matches.sort(key=lambda m: m.similarity, reverse=True)
    return matches
