"""Question providers that read subject files from static storage.

File format: one JSON file per subject, named ``<subject_name>.json``, holding
a list of records::

    [
      {
        "question": "Prompt text, may contain\\nnewlines and\\ttabs",
        "answers": ["first option", "second option"],
        "correct_answer": 1,
        "image": "images/diagram.png",
        "id": "optional, ignored"
      }
    ]

Identifiers are not taken from the files. They are attached by
``attach_question_ids`` as ``<subject_name>_<position>`` when the full pool is
loaded for a custom selection.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, model_validator

from study_quiz.core.models import Question


class QuestionLoadError(Exception):
    """Raised when the questions of a subject cannot be read or parsed."""


class QuestionProvider(Protocol):
    """Key-value loader returning the questions stored for one subject."""

    async def fetch_by_subject(self, subject_name: str) -> list[Question]: ...


class QuestionRecord(BaseModel):
    """Schema of a stored question record."""

    model_config = ConfigDict(extra="ignore")

    question: str
    answers: list[str] = Field(min_length=2)
    correct_answer: int
    image: str | None = None

    @model_validator(mode="after")
    def _check_correct_answer(self) -> QuestionRecord:
        if not 0 <= self.correct_answer < len(self.answers):
            raise ValueError("correct_answer must index into answers")
        return self

    def to_question(self) -> Question:
        return Question(
            question_text=self.question,
            options=tuple(self.answers),
            correct_option_index=self.correct_answer,
            image_path=self.image or None,
        )


_RECORDS_ADAPTER = TypeAdapter(list[QuestionRecord])


def parse_question_records(raw_json: str | bytes) -> list[Question]:
    """Validate a JSON document and convert its records into questions."""
    try:
        records = _RECORDS_ADAPTER.validate_json(raw_json)
    except ValidationError as exc:
        raise QuestionLoadError(f"Malformed question data: {exc.error_count()} validation error(s).") from exc
    return [record.to_question() for record in records]


def attach_question_ids(questions: list[Question], subject_name: str) -> list[Question]:
    return [question.with_id(f"{subject_name}_{index}") for index, question in enumerate(questions)]


class JsonQuestionProvider:
    """Reads ``<data_dir>/<subject_name>.json`` without blocking the event loop."""

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    async def fetch_by_subject(self, subject_name: str) -> list[Question]:
        path = self._data_dir / f"{subject_name}.json"
        try:
            raw = await asyncio.to_thread(path.read_bytes)
        except OSError as exc:
            raise QuestionLoadError(f"Failed to load questions for {subject_name}: {exc}") from exc
        return parse_question_records(raw)


class InMemoryQuestionProvider:
    """Serves questions from a dict, mainly for tests and demos."""

    def __init__(self, questions_by_subject: dict[str, list[Question]]) -> None:
        self._questions_by_subject = questions_by_subject

    async def fetch_by_subject(self, subject_name: str) -> list[Question]:
        return list(self._questions_by_subject.get(subject_name, []))
