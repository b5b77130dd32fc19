"""
Pytest Configuration and Shared Fixtures

Copyright (c) 2024 Cleansheet LLC
License: CC BY 4.0
"""

import json
from pathlib import Path
from typing import Any

import pytest
import yaml

from symptom_checker.dataset.prevalence import PrevalenceTable
from symptom_checker.matching.vocabulary import VocabularyIndex, build_index
from symptom_checker.pipeline.checker import SymptomChecker
from symptom_checker.pipeline.config import CheckerConfig


# =============================================================================
# DATASET FIXTURES
# =============================================================================


@pytest.fixture
def flu_dataset() -> dict[str, Any]:
    """Two symptoms, two conditions."""
    return {
        "symptoms": ["Fever (HP:1)", "Cough (HP:2)"],
        "conditions": ["Flu", "Cold"],
        "data": [[1, 1], [0, 1]],
    }


@pytest.fixture
def flu_table(flu_dataset: dict[str, Any]) -> PrevalenceTable:
    """Prevalence table for the two-symptom dataset."""
    return PrevalenceTable.from_dict(flu_dataset)


@pytest.fixture
def flu_index(flu_table: PrevalenceTable) -> VocabularyIndex:
    """Vocabulary index for the two-symptom dataset."""
    return build_index(flu_table.symptoms)


@pytest.fixture
def muscle_dataset() -> dict[str, Any]:
    """Neuromuscular dataset with a duplicated simple name and an uncoded label."""
    return {
        "symptoms": [
            "Muscle weakness (HP:0001324)",
            "Scoliosis (HP:0002650)",
            "Joint contractures (HP:0034392)",
            "Cardiac abnormalities (HP:0001627)",
            "Muscle weakness (HP:0003326)",
            "Ptosis (HP:0000508)",
            "Fatigue",
        ],
        "conditions": [
            "Duchenne muscular dystrophy",
            "Myotonic dystrophy",
            "Spinal muscular atrophy",
            "Congenital myopathy",
        ],
        "data": [
            [1, 1, 1, 0],
            [1, 0, 1, 0],
            [1, 0, 1, 0],
            [1, 1, 0, 0],
            [0, 0, 0, 1],
            [0, 1, 0, 0],
            [0, 1, 0, 0],
        ],
    }


@pytest.fixture
def muscle_table(muscle_dataset: dict[str, Any]) -> PrevalenceTable:
    """Prevalence table for the neuromuscular dataset."""
    return PrevalenceTable.from_dict(muscle_dataset)


@pytest.fixture
def muscle_index(muscle_table: PrevalenceTable) -> VocabularyIndex:
    """Vocabulary index for the neuromuscular dataset."""
    return build_index(muscle_table.symptoms)


@pytest.fixture
def condition_links() -> dict[str, str]:
    """Condition -> URL lookup for the neuromuscular dataset."""
    return {
        "Duchenne muscular dystrophy": "https://example.org/dmd",
        "Spinal muscular atrophy": "https://example.org/sma",
    }


# =============================================================================
# FILE FIXTURES
# =============================================================================


@pytest.fixture
def prevalence_file(tmp_path: Path, muscle_dataset: dict[str, Any]) -> Path:
    """Neuromuscular dataset written to disk."""
    path = tmp_path / "prevalence.json"
    path.write_text(json.dumps(muscle_dataset))
    return path


@pytest.fixture
def links_file(tmp_path: Path, condition_links: dict[str, str]) -> Path:
    """Condition links written to disk."""
    path = tmp_path / "condition_links.json"
    path.write_text(json.dumps(condition_links))
    return path


@pytest.fixture
def sample_config_dict(prevalence_file: Path, links_file: Path) -> dict[str, Any]:
    """Sample checker configuration dictionary."""
    return {
        "name": "test-checker",
        "version": "0.0.1",
        "dataset": {
            "prevalence_source": str(prevalence_file),
            "links_source": str(links_file),
            "timeout_seconds": 5,
        },
        "matching": {
            "threshold": 0.7,
            "max_suggestions": 2,
        },
        "output": {
            "indent": 4,
            "other_conditions": 2,
            "common_symptoms": ["Muscle weakness", "Scoliosis"],
        },
    }


@pytest.fixture
def temp_config_file(tmp_path: Path, sample_config_dict: dict) -> Path:
    """Temporary config file."""
    path = tmp_path / "config.yaml"
    with open(path, "w") as f:
        yaml.dump(sample_config_dict, f)
    return path


# =============================================================================
# CHECKER FIXTURES
# =============================================================================


@pytest.fixture
def checker(muscle_table: PrevalenceTable, condition_links: dict[str, str]) -> SymptomChecker:
    """Checker bound to the neuromuscular dataset."""
    return SymptomChecker.from_table(muscle_table, links=condition_links, config=CheckerConfig())
