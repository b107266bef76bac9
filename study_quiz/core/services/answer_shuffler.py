"""Pure shuffling helpers for question order and answer display order."""

from __future__ import annotations

import random
from typing import Sequence, TypeVar

from study_quiz.core.models import AnswerChoice, Question

T = TypeVar("T")


def shuffled(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a shuffled copy of ``items``; the input is left untouched."""
    result = list(items)
    (rng or random).shuffle(result)
    return result


def identity_answer_order(question: Question) -> list[AnswerChoice]:
    return [AnswerChoice(text=option, original_index=index) for index, option in enumerate(question.options)]


def shuffled_answer_order(question: Question, rng: random.Random | None = None) -> list[AnswerChoice]:
    """Pair every option with its original index, then shuffle the pairs."""
    return shuffled(identity_answer_order(question), rng)
