"""
Ontology Code Export

Spreadsheet export of symptom -> ontology code pairs (e.g. HPO codes) for
the matched symptoms of one condition.
"""

import csv
import io
import re
from pathlib import Path
from typing import NamedTuple

from symptom_checker.matching.vocabulary import VocabularyIndex
from symptom_checker.scoring.scoring_types import AnalysisResult

ONTOLOGY_CODE_PATTERN = re.compile(r"\(([^()]+)\)\s*$")
CSV_HEADER = ("Symptom", "Ontology Code")


class OntologyRow(NamedTuple):
    """One exported symptom with its ontology code."""
    symptom: str
    code: str | None


def extract_ontology_code(label: str) -> str | None:
    """Trailing parenthetical identifier of a label, e.g. 'HP:0001324'."""
    match = ONTOLOGY_CODE_PATTERN.search(label)
    return match.group(1).strip() if match else None


def ontology_rows(
    result: AnalysisResult, index: VocabularyIndex, condition: str | None = None
) -> list[OntologyRow]:
    """
    Symptom/code pairs for the matched symptoms of a condition.

    Args:
        result: A completed analysis
        index: Vocabulary index of the analyzed table
        condition: Condition to export; defaults to the top recommendation

    Returns:
        One row per matched symptom, in matched order. Symptoms whose
        record carries no code are exported with code None.
    """
    condition = condition or result.top_condition
    if not condition:
        return []

    rows: list[OntologyRow] = []
    for symptom in result.matched_symptoms.get(condition, []):
        label = index.lookup(symptom) or symptom
        rows.append(OntologyRow(symptom=symptom, code=extract_ontology_code(label)))
    return rows


def ontology_csv(rows: list[OntologyRow]) -> str:
    """Render rows as CSV text with a header line."""
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(CSV_HEADER)
    for row in rows:
        writer.writerow([row.symptom, row.code or ""])
    return buffer.getvalue()


def write_ontology_csv(rows: list[OntologyRow], filepath: str | Path) -> Path:
    """Write rows to a CSV file and return its path."""
    path = Path(filepath)
    path.write_text(ontology_csv(rows), encoding="utf-8", newline="")
    return path
