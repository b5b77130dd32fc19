"""
Symptom Name Similarity

LCS-based similarity ratio used to reconcile free-text symptom entry
against the canonical vocabulary.

The ratio is 2 * LCS / (len(a) + len(b)). Unlike difflib.SequenceMatcher
it has no junk heuristics, so the score is fully determined by the two
strings. The LCS length comes from rapidfuzz's LCSseq metric.
"""

from rapidfuzz.distance import LCSseq


def lcs_length(s1: str, s2: str) -> int:
    """Length of the longest common subsequence of two strings (case-sensitive)."""
    return LCSseq.similarity(s1, s2)


def similarity(s1: str, s2: str) -> float:
    """Calculate case-insensitive similarity between two strings (0.0 to 1.0)."""
    s1 = s1.lower()
    s2 = s2.lower()

    if not s1 and not s2:
        return 1.0
    if not s1 or not s2:
        return 0.0

    return 2.0 * lcs_length(s1, s2) / (len(s1) + len(s2))


def round_score(score: float, digits: int = 2) -> float:
    """Round a similarity score for ranking and display."""
    return round(score, digits)
