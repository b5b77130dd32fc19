"""
Prevalence Dataset Validators

Validate a raw prevalence document before it becomes a PrevalenceTable.
"""

from dataclasses import dataclass, field
from numbers import Integral, Real
from typing import Any

from symptom_checker.matching.vocabulary import symptom_key


@dataclass
class ValidationIssue:
    """A single validation finding."""

    path: str
    message: str
    severity: str = "error"  # error, warning


@dataclass
class ValidationResult:
    """Result of dataset validation."""

    is_valid: bool
    errors: list[ValidationIssue] = field(default_factory=list)
    warnings: list[ValidationIssue] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def summary(self) -> str:
        """One line per error, for exception messages."""
        return "; ".join(f"{e.path}: {e.message}" for e in self.errors)


def validate_prevalence(document: Any) -> ValidationResult:
    """Validate a prevalence document of the form {symptoms, conditions, data}."""
    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []

    if not isinstance(document, dict):
        errors.append(
            ValidationIssue(path="$", message="Dataset must be a JSON object")
        )
        return ValidationResult(is_valid=False, errors=errors)

    for key in ("symptoms", "conditions", "data"):
        if key not in document:
            errors.append(ValidationIssue(path=key, message=f"'{key}' is required"))
    if errors:
        return ValidationResult(is_valid=False, errors=errors)

    symptoms = document["symptoms"]
    conditions = document["conditions"]
    data = document["data"]

    errors.extend(_validate_labels(symptoms, "symptoms"))
    errors.extend(_validate_labels(conditions, "conditions"))
    if not isinstance(data, list):
        errors.append(ValidationIssue(path="data", message="'data' must be a list of rows"))
    if errors:
        return ValidationResult(is_valid=False, errors=errors)

    if len(data) != len(symptoms):
        errors.append(
            ValidationIssue(
                path="data",
                message=f"Expected {len(symptoms)} rows, found {len(data)}",
            )
        )

    for i, row in enumerate(data):
        row_errors, row_warnings = _validate_row(row, i, len(conditions))
        errors.extend(row_errors)
        warnings.extend(row_warnings)

    if not symptoms:
        warnings.append(
            ValidationIssue(path="symptoms", message="Dataset has no symptoms", severity="warning")
        )
    if not conditions:
        warnings.append(
            ValidationIssue(path="conditions", message="Dataset has no conditions", severity="warning")
        )

    warnings.extend(_check_duplicate_names(symptoms))

    return ValidationResult(
        is_valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )


def _validate_labels(labels: Any, path: str) -> list[ValidationIssue]:
    """Validate a list of string labels."""
    if not isinstance(labels, list):
        return [ValidationIssue(path=path, message=f"'{path}' must be a list of strings")]

    return [
        ValidationIssue(path=f"{path}[{i}]", message="Label must be a string")
        for i, label in enumerate(labels)
        if not isinstance(label, str)
    ]


def _validate_row(
    row: Any, index: int, width: int
) -> tuple[list[ValidationIssue], list[ValidationIssue]]:
    """Validate one matrix row."""
    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []
    path = f"data[{index}]"

    if not isinstance(row, list):
        errors.append(ValidationIssue(path=path, message="Row must be a list"))
        return errors, warnings

    if len(row) != width:
        errors.append(
            ValidationIssue(path=path, message=f"Expected {width} columns, found {len(row)}")
        )

    for j, value in enumerate(row):
        cell = f"{path}[{j}]"
        if isinstance(value, bool) or not _is_integral(value):
            errors.append(ValidationIssue(path=cell, message=f"Value must be an integer, got {value!r}"))
        elif value not in (0, 1):
            # Weighted associations are summed verbatim
            warnings.append(
                ValidationIssue(path=cell, message=f"Non-binary presence value {value}", severity="warning")
            )

    return errors, warnings


def _is_integral(value: Any) -> bool:
    if isinstance(value, Integral):
        return True
    return isinstance(value, Real) and float(value).is_integer()


def _check_duplicate_names(symptoms: list[str]) -> list[ValidationIssue]:
    """Warn about records that the vocabulary index will shadow."""
    warnings: list[ValidationIssue] = []
    first_seen: dict[str, int] = {}

    for i, label in enumerate(symptoms):
        key = symptom_key(label)
        if key in first_seen:
            warnings.append(
                ValidationIssue(
                    path=f"symptoms[{i}]",
                    message=f"Simple name duplicates symptoms[{first_seen[key]}]; "
                    "only the first record is reachable by name",
                    severity="warning",
                )
            )
        else:
            first_seen[key] = i

    return warnings
