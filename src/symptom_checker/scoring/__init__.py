"""
Scoring Module

Condition prioritization and symptom analysis.
"""

from symptom_checker.scoring.analysis import analyze, validate_symptoms
from symptom_checker.scoring.prioritizer import prioritize
from symptom_checker.scoring.scoring_types import (
    AnalysisResult,
    ConditionScore,
    PrioritizationResult,
    ValidationOutcome,
)

__all__ = [
    "analyze",
    "validate_symptoms",
    "prioritize",
    "AnalysisResult",
    "ConditionScore",
    "PrioritizationResult",
    "ValidationOutcome",
]
