"""Shared fixtures for the quiz tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from study_quiz.core.catalog import SubjectCatalog
from study_quiz.core.models import Question


def make_question(text: str, correct: int = 0, option_count: int = 4, question_id: str | None = None) -> Question:
    return Question(
        question_text=text,
        options=tuple(f"{text} option {index}" for index in range(option_count)),
        correct_option_index=correct,
        question_id=question_id,
    )


def make_questions(prefix: str, count: int) -> list[Question]:
    return [make_question(f"{prefix} {index}", correct=index % 4) for index in range(count)]


class FakeClock:
    """Manually advanced clock for timing assertions."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def small_catalog() -> SubjectCatalog:
    """Two modules: module 1 holds ``alpha`` and ``beta``, module 2 holds ``gamma``."""
    return SubjectCatalog.from_definitions(
        subject_definitions=(
            ("alpha", "Alpha", 1),
            ("beta", "Beta", 1),
            ("gamma", "Gamma", 2),
        ),
        module_names={1: "First", 2: "Second"},
    )
