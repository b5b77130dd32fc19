"""
Presentation Module

Chart data and export helpers for analysis results.
"""

from symptom_checker.presentation.export import (
    OntologyRow,
    extract_ontology_code,
    ontology_csv,
    ontology_rows,
    write_ontology_csv,
)
from symptom_checker.presentation.sunburst import build_sunburst

__all__ = [
    "OntologyRow",
    "extract_ontology_code",
    "ontology_csv",
    "ontology_rows",
    "write_ontology_csv",
    "build_sunburst",
]
