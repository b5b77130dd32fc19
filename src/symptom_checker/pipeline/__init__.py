"""
Pipeline Module

Checker configuration, session state and the core API facade.
"""

from symptom_checker.pipeline.checker import SymptomChecker
from symptom_checker.pipeline.config import CheckerConfig, load_config
from symptom_checker.pipeline.session import SymptomSession

__all__ = [
    "SymptomChecker",
    "CheckerConfig",
    "load_config",
    "SymptomSession",
]
