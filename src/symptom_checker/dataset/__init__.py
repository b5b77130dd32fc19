"""
Dataset Module

Loading and validation of the prevalence table and the condition link lookup.
"""

from symptom_checker.dataset.condition_links import load_condition_links
from symptom_checker.dataset.prevalence import (
    DataLoadError,
    PrevalenceTable,
    load_prevalence,
)
from symptom_checker.dataset.validators import (
    ValidationIssue,
    ValidationResult,
    validate_prevalence,
)

__all__ = [
    "load_condition_links",
    "DataLoadError",
    "PrevalenceTable",
    "load_prevalence",
    "ValidationIssue",
    "ValidationResult",
    "validate_prevalence",
]
