"""Tests for parsing and reading stored question files."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from study_quiz.core.question_loader import (
    JsonQuestionProvider,
    QuestionLoadError,
    attach_question_ids,
    parse_question_records,
)
from tests.conftest import make_questions


class TestParseQuestionRecords:
    """Tests for validating question records."""

    def test_valid_records(self) -> None:
        raw = json.dumps(
            [
                {"question": "Q1\n\tindented", "answers": ["a", "b"], "correct_answer": 1, "image": "img/q1.png"},
                {"question": "Q2", "answers": ["x", "y", "z"], "correct_answer": 0, "id": "ignored"},
            ]
        )
        questions = parse_question_records(raw)

        assert len(questions) == 2
        assert questions[0].question_text == "Q1\n\tindented"
        assert questions[0].options == ("a", "b")
        assert questions[0].correct_option_index == 1
        assert questions[0].image_path == "img/q1.png"
        assert questions[1].image_path is None
        assert questions[1].question_id is None

    def test_correct_answer_out_of_range(self) -> None:
        raw = json.dumps([{"question": "Q", "answers": ["a", "b"], "correct_answer": 2}])
        with pytest.raises(QuestionLoadError):
            parse_question_records(raw)

    def test_too_few_answers(self) -> None:
        raw = json.dumps([{"question": "Q", "answers": ["a"], "correct_answer": 0}])
        with pytest.raises(QuestionLoadError):
            parse_question_records(raw)

    def test_not_a_list(self) -> None:
        with pytest.raises(QuestionLoadError):
            parse_question_records('{"question": "Q"}')

    def test_invalid_json(self) -> None:
        with pytest.raises(QuestionLoadError):
            parse_question_records("not json")

    def test_empty_list(self) -> None:
        assert parse_question_records("[]") == []


class TestAttachQuestionIds:
    def test_ids_follow_position(self) -> None:
        questions = attach_question_ids(make_questions("q", 3), "python")
        assert [question.question_id for question in questions] == ["python_0", "python_1", "python_2"]

    def test_ids_are_deterministic(self) -> None:
        questions = make_questions("q", 2)
        assert attach_question_ids(questions, "s") == attach_question_ids(questions, "s")


@pytest.mark.asyncio
class TestJsonQuestionProvider:
    """Tests for reading subject files from disk."""

    async def test_reads_subject_file(self, tmp_path: Path) -> None:
        (tmp_path / "alpha.json").write_text(
            json.dumps([{"question": "Q", "answers": ["a", "b"], "correct_answer": 0}]),
            encoding="utf-8",
        )
        provider = JsonQuestionProvider(tmp_path)
        questions = await provider.fetch_by_subject("alpha")
        assert [question.question_text for question in questions] == ["Q"]

    async def test_missing_file(self, tmp_path: Path) -> None:
        provider = JsonQuestionProvider(tmp_path)
        with pytest.raises(QuestionLoadError):
            await provider.fetch_by_subject("missing")

    async def test_bundled_sample_data(self) -> None:
        from study_quiz.constants.storage_constants import DEFAULT_QUESTION_DATA_DIR

        provider = JsonQuestionProvider(DEFAULT_QUESTION_DATA_DIR)
        questions = await provider.fetch_by_subject("programare_in_python")
        assert questions
        assert all(len(question.options) >= 2 for question in questions)
