"""Domain models for the study quiz application."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, auto


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question; immutable for the lifetime of a session."""

    question_text: str
    options: tuple[str, ...]
    correct_option_index: int
    image_path: str | None = None
    question_id: str | None = None  # Only attached when loading for custom selection

    def __post_init__(self) -> None:
        if len(self.options) < 2:
            raise ValueError("A question needs at least two options.")
        if not 0 <= self.correct_option_index < len(self.options):
            raise ValueError(
                f"Correct option index {self.correct_option_index} is outside "
                f"the {len(self.options)} available options."
            )

    def with_id(self, question_id: str) -> Question:
        return replace(self, question_id=question_id)

    def is_correct(self, option_index: int) -> bool:
        return option_index == self.correct_option_index


@dataclass(frozen=True, slots=True)
class AnswerChoice:
    """One option as displayed, remembering where it sits in the original list."""

    text: str
    original_index: int


@dataclass(frozen=True, slots=True)
class QuizResult:
    """Outcome of a single submission."""

    question_index: int
    selected_option_index: int
    is_correct: bool
    question: Question


class ModeKind(Enum):
    """Strategies for building the initial working set."""

    ALL = auto()
    MODULE = auto()
    SUBJECT = auto()
    RANDOM = auto()
    CUSTOM = auto()


@dataclass(frozen=True, slots=True)
class QuizMode:
    """Selected quiz mode plus the answer-randomization flag."""

    kind: ModeKind
    module_number: int | None = None
    subject_name: str | None = None
    selected_question_ids: frozenset[str] = field(default_factory=frozenset)
    randomize_answers: bool = False

    @classmethod
    def all_questions(cls, randomize_answers: bool = False) -> QuizMode:
        return cls(ModeKind.ALL, randomize_answers=randomize_answers)

    @classmethod
    def module(cls, module_number: int, randomize_answers: bool = False) -> QuizMode:
        return cls(ModeKind.MODULE, module_number=module_number, randomize_answers=randomize_answers)

    @classmethod
    def subject(cls, subject_name: str, randomize_answers: bool = False) -> QuizMode:
        return cls(ModeKind.SUBJECT, subject_name=subject_name, randomize_answers=randomize_answers)

    @classmethod
    def random_sample(cls, randomize_answers: bool = False) -> QuizMode:
        return cls(ModeKind.RANDOM, randomize_answers=randomize_answers)

    @classmethod
    def custom(cls, selected_question_ids: set[str] | frozenset[str] | list[str], randomize_answers: bool = False) -> QuizMode:
        return cls(
            ModeKind.CUSTOM,
            selected_question_ids=frozenset(selected_question_ids),
            randomize_answers=randomize_answers,
        )

    @property
    def requeues_wrong_answers(self) -> bool:
        """Random quizzes show every question at most once."""
        return self.kind is not ModeKind.RANDOM


@dataclass(frozen=True, slots=True)
class Subject:
    """A subject whose questions are stored under ``name``."""

    name: str
    display_name: str
    module: int


@dataclass(frozen=True, slots=True)
class StudyModule:
    """A numbered group of subjects, kept in declaration order."""

    number: int
    name: str
    subjects: tuple[Subject, ...]
