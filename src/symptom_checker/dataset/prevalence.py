"""
Prevalence Table

The symptom x condition presence matrix that drives all scoring, and the
loader that reads it from a local file or an HTTP(S) URL.

Dataset format (JSON):

    {
        "symptoms": ["Fever (HP:0001945)", "Cough (HP:0012735)", ...],
        "conditions": ["Influenza", "Common cold", ...],
        "data": [[1, 1, ...], [0, 1, ...], ...]
    }

Row i of "data" holds the presence values of symptoms[i] for every condition.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Sequence

import numpy as np
import requests

from symptom_checker.dataset.validators import validate_prevalence

logger = logging.getLogger(__name__)


class DataLoadError(RuntimeError):
    """The prevalence dataset could not be fetched or is malformed."""


@dataclass
class PrevalenceTable:
    """Symptom rows, condition columns and a dense presence matrix."""

    symptoms: tuple[str, ...]
    conditions: tuple[str, ...]
    data: np.ndarray
    _row_lookup: dict[str, int] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.symptoms = tuple(self.symptoms)
        self.conditions = tuple(self.conditions)

        matrix = np.array(self.data, dtype=np.int64)
        if matrix.size == 0:
            matrix = matrix.reshape(len(self.symptoms), len(self.conditions))
        expected = (len(self.symptoms), len(self.conditions))
        if matrix.shape != expected:
            raise ValueError(
                f"Presence matrix has shape {matrix.shape}, expected {expected}"
            )
        matrix.setflags(write=False)
        self.data = matrix

        for i, label in enumerate(self.symptoms):
            self._row_lookup.setdefault(label, i)

    @classmethod
    def from_dict(cls, document: dict[str, Any]) -> "PrevalenceTable":
        """Create from a validated dataset document."""
        result = validate_prevalence(document)
        if not result.is_valid:
            raise ValueError(f"Invalid prevalence dataset: {result.summary()}")

        for warning in result.warnings:
            logger.warning("Prevalence dataset %s: %s", warning.path, warning.message)

        return cls(
            symptoms=tuple(document["symptoms"]),
            conditions=tuple(document["conditions"]),
            data=document["data"],
        )

    @classmethod
    def from_rows(
        cls,
        symptoms: Sequence[str],
        conditions: Sequence[str],
        rows: Sequence[Sequence[int]],
    ) -> "PrevalenceTable":
        """Create directly from aligned lists."""
        return cls(symptoms=tuple(symptoms), conditions=tuple(conditions), data=rows)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the dataset document format."""
        return {
            "symptoms": list(self.symptoms),
            "conditions": list(self.conditions),
            "data": self.data.tolist(),
        }

    @property
    def n_symptoms(self) -> int:
        return len(self.symptoms)

    @property
    def n_conditions(self) -> int:
        return len(self.conditions)

    def row_index(self, label: str) -> int | None:
        """Row of the first record with exactly this label, or None."""
        return self._row_lookup.get(label)


def is_url(source: str | Path) -> bool:
    """True if the source should be fetched over HTTP."""
    return isinstance(source, str) and source.startswith(("http://", "https://"))


def read_json_source(source: str | Path, timeout: float = 30.0) -> Any:
    """
    Read a JSON document from a local path or an HTTP(S) URL.

    Raises:
        DataLoadError: If the source cannot be read or is not valid JSON
    """
    if is_url(source):
        try:
            response = requests.get(str(source), timeout=timeout)
        except requests.RequestException as e:
            raise DataLoadError(f"Failed to fetch {source}: {e}") from e

        if response.status_code != 200:
            raise DataLoadError(
                f"Failed to fetch {source}: HTTP {response.status_code}"
            )

        try:
            return response.json()
        except ValueError as e:
            raise DataLoadError(f"Invalid JSON from {source}: {e}") from e

    path = Path(source)
    if not path.exists():
        raise DataLoadError(f"Dataset file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise DataLoadError(f"Failed to read {path}: {e}") from e


def load_prevalence(source: str | Path, timeout: float = 30.0) -> PrevalenceTable:
    """
    Load the prevalence table.

    Args:
        source: Path to a JSON file or an HTTP(S) URL
        timeout: Request timeout in seconds for URL sources

    Raises:
        DataLoadError: If the dataset is missing, unreachable or malformed
    """
    document = read_json_source(source, timeout)

    try:
        table = PrevalenceTable.from_dict(document)
    except ValueError as e:
        raise DataLoadError(str(e)) from e

    logger.info(
        "Loaded prevalence table from %s: %d symptoms x %d conditions",
        source,
        table.n_symptoms,
        table.n_conditions,
    )
    return table
