"""Score and timing summaries for a quiz session."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import math
from typing import Sequence

from study_quiz.core.models import QuizResult


@dataclass(frozen=True, slots=True)
class ScoreSummary:
    """Immutable snapshot returned to consumers."""

    correct_answers: int
    total_answers: int
    wrong_answers: int
    score_percentage: int
    total_seconds: int | None = None


def count_correct(results: Sequence[QuizResult]) -> int:
    return sum(1 for result in results if result.is_correct)


def score_percentage(correct_answers: int, total_answers: int) -> int:
    """Percentage of correct attempts, halves rounded up; 0 without attempts."""
    if total_answers <= 0:
        return 0
    return math.floor(100 * correct_answers / total_answers + 0.5)


def elapsed_seconds(started_at: datetime, now: datetime) -> int:
    return max(0, int((now - started_at).total_seconds()))


def format_elapsed(seconds: int) -> str:
    """Render seconds as ``MM:SS`` (``H:MM:SS`` past one hour)."""
    hours, remainder = divmod(max(0, seconds), 3600)
    minutes, secs = divmod(remainder, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


def summarize_results(results: Sequence[QuizResult], total_seconds: int | None = None) -> ScoreSummary:
    correct = count_correct(results)
    return ScoreSummary(
        correct_answers=correct,
        total_answers=len(results),
        wrong_answers=len(results) - correct,
        score_percentage=score_percentage(correct, len(results)),
        total_seconds=total_seconds,
    )
