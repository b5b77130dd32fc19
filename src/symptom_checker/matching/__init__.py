"""
Matching Module

Similarity scoring, vocabulary indexing and fuzzy resolution of symptom names.
"""

from symptom_checker.matching.matching_types import MatchCandidate
from symptom_checker.matching.resolver import find_closest_matches
from symptom_checker.matching.similarity import lcs_length, similarity
from symptom_checker.matching.vocabulary import (
    VocabularyIndex,
    build_index,
    extract_symptom_name,
)

__all__ = [
    "MatchCandidate",
    "find_closest_matches",
    "lcs_length",
    "similarity",
    "VocabularyIndex",
    "build_index",
    "extract_symptom_name",
]
