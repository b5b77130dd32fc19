"""
Symptom Checker

Fuzzy symptom matching and condition prioritization over a
symptom x condition prevalence table.

Usage:
    from symptom_checker import SymptomChecker, CheckerConfig

    checker = SymptomChecker(CheckerConfig())
    result = checker.analyze(["Muscle weakness", "Scoliosis"])
    print(result.top_condition)

Author: Cleansheet LLC
License: CC BY 4.0
"""

from symptom_checker.pipeline.checker import SymptomChecker
from symptom_checker.pipeline.config import CheckerConfig
from symptom_checker.pipeline.session import SymptomSession

__version__ = "0.1.0"
__author__ = "Cleansheet LLC"
__license__ = "CC BY 4.0"

__all__ = [
    "SymptomChecker",
    "CheckerConfig",
    "SymptomSession",
    "__version__",
]
