"""Tests for score and time summaries."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

import pytest

from study_quiz.core.models import QuizResult
from study_quiz.core.services.scoreboard import elapsed_seconds, format_elapsed, score_percentage, summarize_results
from tests.conftest import make_question


@pytest.mark.parametrize(
    ("correct", "total", "expected"),
    [(0, 0, 0), (0, 5, 0), (3, 4, 75), (1, 3, 33), (2, 3, 67), (1, 8, 13), (5, 5, 100)],
)
def test_score_percentage(correct: int, total: int, expected: int) -> None:
    assert score_percentage(correct, total) == expected


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(0, "00:00"), (59, "00:59"), (125, "02:05"), (3600, "1:00:00"), (3725, "1:02:05")],
)
def test_format_elapsed(seconds: int, expected: str) -> None:
    assert format_elapsed(seconds) == expected


def test_elapsed_seconds_never_negative() -> None:
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert elapsed_seconds(start, start + timedelta(seconds=12.9)) == 12
    assert elapsed_seconds(start, start - timedelta(seconds=5)) == 0


def test_summarize_results() -> None:
    question = make_question("q")
    results = [
        QuizResult(question_index=0, selected_option_index=0, is_correct=True, question=question),
        QuizResult(question_index=1, selected_option_index=2, is_correct=False, question=question),
    ]
    summary = summarize_results(results, total_seconds=30)
    assert summary.correct_answers == 1
    assert summary.total_answers == 2
    assert summary.wrong_answers == 1
    assert summary.score_percentage == 50
    assert summary.total_seconds == 30


def test_summary_is_frozen() -> None:
    summary = summarize_results([], total_seconds=0)
    with pytest.raises(FrozenInstanceError):
        summary.score_percentage = 100
