"""
Tests for prevalence dataset validators.

Copyright (c) 2024 Cleansheet LLC
License: CC BY 4.0
"""

from typing import Any

import pytest

from symptom_checker.dataset.validators import (
    ValidationIssue,
    ValidationResult,
    validate_prevalence,
)


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_counts(self):
        result = ValidationResult(
            is_valid=False,
            errors=[ValidationIssue("data", "bad")],
            warnings=[ValidationIssue("x", "odd", "warning"), ValidationIssue("y", "odd", "warning")],
        )

        assert result.error_count == 1
        assert result.warning_count == 2

    def test_summary(self):
        result = ValidationResult(
            is_valid=False,
            errors=[ValidationIssue("data", "bad"), ValidationIssue("symptoms", "worse")],
        )

        assert result.summary() == "data: bad; symptoms: worse"


class TestValidatePrevalence:
    """Tests for validate_prevalence."""

    def test_valid_dataset(self, flu_dataset: dict[str, Any]):
        result = validate_prevalence(flu_dataset)

        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []

    def test_not_an_object(self):
        result = validate_prevalence([1, 2, 3])

        assert not result.is_valid
        assert result.errors[0].path == "$"

    @pytest.mark.parametrize("key", ["symptoms", "conditions", "data"])
    def test_missing_key(self, flu_dataset: dict[str, Any], key: str):
        del flu_dataset[key]

        result = validate_prevalence(flu_dataset)

        assert not result.is_valid
        assert any(e.path == key for e in result.errors)

    def test_non_string_label(self, flu_dataset: dict[str, Any]):
        flu_dataset["conditions"] = ["Flu", 7]

        result = validate_prevalence(flu_dataset)

        assert not result.is_valid
        assert result.errors[0].path == "conditions[1]"

    def test_labels_not_a_list(self, flu_dataset: dict[str, Any]):
        flu_dataset["symptoms"] = "Fever"

        result = validate_prevalence(flu_dataset)

        assert not result.is_valid

    def test_row_count_mismatch(self, flu_dataset: dict[str, Any]):
        flu_dataset["data"] = [[1, 1]]

        result = validate_prevalence(flu_dataset)

        assert not result.is_valid
        assert "Expected 2 rows" in result.errors[0].message

    def test_column_count_mismatch(self, flu_dataset: dict[str, Any]):
        flu_dataset["data"] = [[1, 1], [0]]

        result = validate_prevalence(flu_dataset)

        assert not result.is_valid
        assert result.errors[0].path == "data[1]"

    def test_row_not_a_list(self, flu_dataset: dict[str, Any]):
        flu_dataset["data"] = [[1, 1], "01"]

        result = validate_prevalence(flu_dataset)

        assert not result.is_valid

    @pytest.mark.parametrize("value", ["1", None, 0.5, True])
    def test_non_integer_value(self, flu_dataset: dict[str, Any], value: Any):
        flu_dataset["data"][0][1] = value

        result = validate_prevalence(flu_dataset)

        assert not result.is_valid
        assert result.errors[0].path == "data[0][1]"

    def test_integral_float_accepted(self, flu_dataset: dict[str, Any]):
        flu_dataset["data"][0][0] = 1.0

        assert validate_prevalence(flu_dataset).is_valid

    def test_non_binary_value_warns(self, flu_dataset: dict[str, Any]):
        flu_dataset["data"][1][0] = 3

        result = validate_prevalence(flu_dataset)

        assert result.is_valid
        assert result.warnings[0].path == "data[1][0]"
        assert result.warnings[0].severity == "warning"

    def test_duplicate_simple_name_warns(self, muscle_dataset: dict[str, Any]):
        result = validate_prevalence(muscle_dataset)

        assert result.is_valid
        assert [w.path for w in result.warnings] == ["symptoms[4]"]

    def test_empty_dataset_warns(self):
        result = validate_prevalence({"symptoms": [], "conditions": [], "data": []})

        assert result.is_valid
        assert {w.path for w in result.warnings} == {"symptoms", "conditions"}
