"""
Tests for the condition link lookup.

Copyright (c) 2024 Cleansheet LLC
License: CC BY 4.0
"""

import json
import logging
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from symptom_checker.dataset.condition_links import load_condition_links


class TestLoadConditionLinks:
    """Tests for load_condition_links."""

    def test_load_file(self, links_file: Path, condition_links: dict[str, str]):
        assert load_condition_links(links_file) == condition_links

    @pytest.mark.parametrize("source", [None, ""])
    def test_no_source(self, source):
        assert load_condition_links(source) == {}

    def test_missing_file_degrades(self, tmp_path: Path, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.WARNING):
            links = load_condition_links(tmp_path / "missing.json")

        assert links == {}
        assert "links disabled" in caplog.text

    def test_not_an_object(self, tmp_path: Path):
        path = tmp_path / "links.json"
        path.write_text(json.dumps(["https://example.org"]))

        assert load_condition_links(path) == {}

    def test_invalid_entries_skipped(self, tmp_path: Path, caplog: pytest.LogCaptureFixture):
        path = tmp_path / "links.json"
        path.write_text(json.dumps({"Flu": "https://example.org/flu", "Cold": None, "Covid": ""}))

        with caplog.at_level(logging.WARNING):
            links = load_condition_links(path)

        assert links == {"Flu": "https://example.org/flu"}
        assert "Cold" in caplog.text

    @patch("symptom_checker.dataset.prevalence.requests.get")
    def test_unreachable_url_degrades(self, mock_get: MagicMock):
        mock_response = MagicMock()
        mock_response.status_code = 503
        mock_get.return_value = mock_response

        assert load_condition_links("https://example.org/links.json") == {}
