"""Tests for utility functions."""

import json
import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from qa_evaluator.models.request import EvaluationRequest
from qa_evaluator.utils.jsonl import stream_jsonl, write_jsonl, load_models


class TestJsonlUtils:
    """Tests for JSONL utilities."""

    def test_write_and_stream(self):
        """Test writing and reading JSONL."""
        data = [
            {"question": "q1", "answer": "a1"},
            {"question": "q2", "answer": "a2", "retrievedContext": ["p"]},
        ]

        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "requests.jsonl"
            write_jsonl(path, data)

            assert list(stream_jsonl(path)) == data

    def test_write_overwrites(self, tmp_path: Path):
        """Test that writing replaces earlier content."""
        path = tmp_path / "data.jsonl"
        write_jsonl(path, [{"n": 1}])
        write_jsonl(path, [{"n": 2}])

        assert list(stream_jsonl(path)) == [{"n": 2}]

    def test_blank_lines_ignored(self, tmp_path: Path):
        """Test that blank lines are skipped."""
        path = tmp_path / "data.jsonl"
        path.write_text('{"n": 1}\n\n   \n{"n": 2}\n')

        assert [item["n"] for item in stream_jsonl(path)] == [1, 2]

    def test_malformed_raises(self, tmp_path: Path):
        """Test that malformed lines raise."""
        path = tmp_path / "data.jsonl"
        path.write_text('{"n": 1}\nnot json\n')

        with pytest.raises(json.JSONDecodeError):
            list(stream_jsonl(path))

    def test_missing_file(self, tmp_path: Path):
        """Test reading a file that does not exist."""
        with pytest.raises(FileNotFoundError):
            list(stream_jsonl(tmp_path / "missing.jsonl"))

    def test_load_models(self, tmp_path: Path):
        """Test validating each line as a model."""
        path = tmp_path / "requests.jsonl"
        write_jsonl(
            path,
            [
                {"question": "q1", "answer": "a1"},
                {"question": "q2", "answer": "a2", "groundTruth": "t"},
            ],
        )

        requests = load_models(path, EvaluationRequest)

        assert [r.question for r in requests] == ["q1", "q2"]
        assert requests[1].ground_truth == "t"

    def test_load_models_invalid(self, tmp_path: Path):
        """Test that invalid records raise ValidationError."""
        path = tmp_path / "requests.jsonl"
        write_jsonl(path, [{"question": "q1"}])

        with pytest.raises(ValidationError):
            load_models(path, EvaluationRequest)
