"""
Tests for symptom validation and analysis.

Copyright (c) 2024 Cleansheet LLC
License: CC BY 4.0
"""

from symptom_checker.dataset.prevalence import PrevalenceTable
from symptom_checker.matching.vocabulary import VocabularyIndex, build_index
from symptom_checker.scoring.analysis import analyze, validate_symptoms
from symptom_checker.scoring.scoring_types import ConditionScore


class TestValidateSymptoms:
    """Tests for validate_symptoms."""

    def test_exact_match_forwards_canonical_case(
        self, flu_table: PrevalenceTable, flu_index: VocabularyIndex
    ):
        outcome = validate_symptoms(["FEVER", "cough"], flu_index, flu_table.symptoms)

        assert outcome.valid == ["Fever", "Cough"]
        assert outcome.invalid == []

    def test_parenthetical_stripped(self, flu_table: PrevalenceTable, flu_index: VocabularyIndex):
        outcome = validate_symptoms(["Fever (HP:999)"], flu_index, flu_table.symptoms)

        assert outcome.valid == ["Fever"]

    def test_invalid_with_suggestions(
        self, flu_table: PrevalenceTable, flu_index: VocabularyIndex
    ):
        outcome = validate_symptoms(["Feverr"], flu_index, flu_table.symptoms)

        assert outcome.valid == []
        assert outcome.invalid == ["Feverr"]
        assert [m.simple for m in outcome.suggestions["Feverr"]] == ["Fever"]

    def test_invalid_without_suggestions(
        self, flu_table: PrevalenceTable, flu_index: VocabularyIndex
    ):
        """Test that symptoms with no close match get no suggestion entry."""
        outcome = validate_symptoms(["xyz"], flu_index, flu_table.symptoms)

        assert outcome.invalid == ["xyz"]
        assert "xyz" not in outcome.suggestions

    def test_suggestions_limited(self):
        labels = ["Pain (A)", "Rain (B)", "Gain (C)", "Main (D)"]
        index = build_index(["Headache (X)"])

        outcome = validate_symptoms(["Pan"], index, labels, threshold=0.5, max_suggestions=3)

        assert len(outcome.suggestions["Pan"]) == 3
        assert outcome.suggestions["Pan"][0].simple == "Pain"

    def test_irregularities_accumulated(
        self, flu_table: PrevalenceTable, flu_index: VocabularyIndex
    ):
        """Test that every entry is processed, not just up to the first miss."""
        outcome = validate_symptoms(
            ["Headache", "Fever", "Feverr", "Cough"], flu_index, flu_table.symptoms
        )

        assert outcome.valid == ["Fever", "Cough"]
        assert outcome.invalid == ["Headache", "Feverr"]


class TestAnalyze:
    """Tests for analyze."""

    def test_full_result(self, flu_table: PrevalenceTable, flu_index: VocabularyIndex):
        result = analyze(["fever", "Cough", "Coughh"], flu_table, flu_index)

        assert result.valid_symptoms == ["Fever", "Cough"]
        assert result.invalid_symptoms == ["Coughh"]
        assert result.suggested_matches["Coughh"][0].simple == "Cough"
        assert result.prioritized_conditions == [
            ConditionScore("Cold", 2),
            ConditionScore("Flu", 1),
        ]
        assert result.matched_symptoms["Cold"] == ["Fever", "Cough"]
        assert result.top_condition == "Cold"

    def test_nothing_valid(self, flu_table: PrevalenceTable, flu_index: VocabularyIndex):
        result = analyze(["Headache"], flu_table, flu_index)

        assert result.valid_symptoms == []
        assert result.prioritized_conditions == []
        assert result.matched_symptoms == {}
        assert result.top_condition is None

    def test_empty_input(self, flu_table: PrevalenceTable, flu_index: VocabularyIndex):
        result = analyze([], flu_table, flu_index)

        assert result.valid_symptoms == []
        assert result.invalid_symptoms == []
        assert result.top_condition is None

    def test_no_matching_conditions(self):
        """Test that recognized symptoms with no associations give an empty ranking."""
        table = PrevalenceTable.from_rows(["Itch (1)"], ["X", "Y"], [[0, 0]])
        index = build_index(table.symptoms)

        result = analyze(["itch"], table, index)

        assert result.valid_symptoms == ["Itch"]
        assert result.prioritized_conditions == []
        assert not result.has_matches
        assert result.matched_symptoms == {"X": [], "Y": []}
        assert result.top_condition is None

    def test_canonical_names_reach_prioritizer(
        self, muscle_table: PrevalenceTable, muscle_index: VocabularyIndex
    ):
        result = analyze(["SCOLIOSIS"], muscle_table, muscle_index)

        assert result.matched_symptoms["Duchenne muscular dystrophy"] == ["Scoliosis"]
