"""Tests for resolving quiz modes into working sets."""

from __future__ import annotations

from collections import Counter
import random

import pytest

from study_quiz.core.catalog import SubjectCatalog
from study_quiz.core.models import Question, QuizMode
from study_quiz.core.question_loader import InMemoryQuestionProvider, QuestionLoadError
from study_quiz.core.services.answer_shuffler import shuffled
from study_quiz.core.services.session_builder import SessionBuilder
from tests.conftest import make_questions


class FailingProvider:
    """Provider that fails for chosen subjects."""

    def __init__(self, questions_by_subject: dict[str, list[Question]], failing: set[str]) -> None:
        self._inner = InMemoryQuestionProvider(questions_by_subject)
        self._failing = failing

    async def fetch_by_subject(self, subject_name: str) -> list[Question]:
        if subject_name in self._failing:
            raise QuestionLoadError(f"cannot read {subject_name}")
        return await self._inner.fetch_by_subject(subject_name)


@pytest.fixture
def pool() -> dict[str, list[Question]]:
    return {
        "alpha": make_questions("alpha", 3),
        "beta": make_questions("beta", 2),
        "gamma": make_questions("gamma", 4),
    }


def _texts(questions: list[Question]) -> Counter[str]:
    return Counter(question.question_text for question in questions)


@pytest.mark.asyncio
class TestBuildModes:
    """Tests for each quiz mode."""

    async def test_all_questions(self, pool: dict[str, list[Question]], small_catalog: SubjectCatalog) -> None:
        builder = SessionBuilder(InMemoryQuestionProvider(pool), small_catalog, rng=random.Random(1))
        questions = await builder.build(QuizMode.all_questions())
        assert _texts(questions) == _texts(pool["alpha"] + pool["beta"] + pool["gamma"])

    async def test_module(self, pool: dict[str, list[Question]], small_catalog: SubjectCatalog) -> None:
        builder = SessionBuilder(InMemoryQuestionProvider(pool), small_catalog, rng=random.Random(1))
        questions = await builder.build(QuizMode.module(1))
        assert _texts(questions) == _texts(pool["alpha"] + pool["beta"])

    async def test_subject(self, pool: dict[str, list[Question]], small_catalog: SubjectCatalog) -> None:
        builder = SessionBuilder(InMemoryQuestionProvider(pool), small_catalog)
        questions = await builder.build(QuizMode.subject("gamma"))
        assert _texts(questions) == _texts(pool["gamma"])

    async def test_unknown_module_is_empty(self, pool: dict[str, list[Question]], small_catalog: SubjectCatalog) -> None:
        builder = SessionBuilder(InMemoryQuestionProvider(pool), small_catalog)
        assert await builder.build(QuizMode.module(9)) == []

    async def test_unknown_subject_is_empty(self, pool: dict[str, list[Question]], small_catalog: SubjectCatalog) -> None:
        builder = SessionBuilder(InMemoryQuestionProvider(pool), small_catalog)
        assert await builder.build(QuizMode.subject("delta")) == []

    async def test_empty_subject(self, small_catalog: SubjectCatalog) -> None:
        builder = SessionBuilder(InMemoryQuestionProvider({"alpha": []}), small_catalog)
        assert await builder.build(QuizMode.subject("alpha")) == []

    async def test_provider_failure_skips_subject(
        self, pool: dict[str, list[Question]], small_catalog: SubjectCatalog
    ) -> None:
        builder = SessionBuilder(FailingProvider(pool, failing={"beta"}), small_catalog)
        questions = await builder.build(QuizMode.all_questions())
        assert _texts(questions) == _texts(pool["alpha"] + pool["gamma"])

    async def test_provider_failure_for_subject_mode(
        self, pool: dict[str, list[Question]], small_catalog: SubjectCatalog
    ) -> None:
        builder = SessionBuilder(FailingProvider(pool, failing={"alpha"}), small_catalog)
        assert await builder.build(QuizMode.subject("alpha")) == []

    async def test_questions_have_no_ids_outside_custom(
        self, pool: dict[str, list[Question]], small_catalog: SubjectCatalog
    ) -> None:
        builder = SessionBuilder(InMemoryQuestionProvider(pool), small_catalog)
        questions = await builder.build(QuizMode.all_questions())
        assert all(question.question_id is None for question in questions)


@pytest.mark.asyncio
class TestRandomMode:
    """Tests for the uniform random sample."""

    async def test_samples_configured_size(self, small_catalog: SubjectCatalog) -> None:
        pool = {name: make_questions(name, 20) for name in ("alpha", "beta", "gamma")}
        builder = SessionBuilder(InMemoryQuestionProvider(pool), small_catalog, rng=random.Random(7))
        questions = await builder.build(QuizMode.random_sample())

        assert len(questions) == 36
        assert len(set(questions)) == 36

    async def test_smaller_pool_returns_everything(
        self, pool: dict[str, list[Question]], small_catalog: SubjectCatalog
    ) -> None:
        builder = SessionBuilder(InMemoryQuestionProvider(pool), small_catalog, rng=random.Random(7))
        questions = await builder.build(QuizMode.random_sample())
        assert len(questions) == 9

    async def test_custom_sample_size(self, pool: dict[str, list[Question]], small_catalog: SubjectCatalog) -> None:
        builder = SessionBuilder(InMemoryQuestionProvider(pool), small_catalog, random_quiz_size=4)
        assert len(await builder.build(QuizMode.random_sample())) == 4


@pytest.mark.asyncio
class TestCustomMode:
    """Tests for custom question subsets."""

    async def test_selects_matching_ids(self, small_catalog: SubjectCatalog) -> None:
        pool = {"alpha": make_questions("alpha", 40), "beta": make_questions("beta", 30), "gamma": make_questions("gamma", 30)}
        selected = {"alpha_0", "alpha_39", "beta_5", "gamma_12", "gamma_29"}
        builder = SessionBuilder(InMemoryQuestionProvider(pool), small_catalog)

        questions = await builder.build(QuizMode.custom(selected))

        assert len(questions) == 5
        assert {question.question_id for question in questions} == selected
        by_id = {question.question_id: question for question in questions}
        assert by_id["beta_5"].question_text == "beta 5"

    async def test_unknown_ids_are_ignored(self, pool: dict[str, list[Question]], small_catalog: SubjectCatalog) -> None:
        builder = SessionBuilder(InMemoryQuestionProvider(pool), small_catalog)
        questions = await builder.build(QuizMode.custom(["alpha_1", "nope_3"]))
        assert [question.question_id for question in questions] == ["alpha_1"]

    async def test_empty_selection(self, pool: dict[str, list[Question]], small_catalog: SubjectCatalog) -> None:
        builder = SessionBuilder(InMemoryQuestionProvider(pool), small_catalog)
        assert await builder.build(QuizMode.custom([])) == []

    async def test_question_pool_ids(self, pool: dict[str, list[Question]], small_catalog: SubjectCatalog) -> None:
        builder = SessionBuilder(InMemoryQuestionProvider(pool), small_catalog)
        ids = [question.question_id for question in await builder.load_question_pool()]
        assert ids == ["alpha_0", "alpha_1", "alpha_2", "beta_0", "beta_1", "gamma_0", "gamma_1", "gamma_2", "gamma_3"]


class TestShuffled:
    """Tests for the pure shuffle helper."""

    def test_does_not_mutate_input(self) -> None:
        items = list(range(20))
        result = shuffled(items, random.Random(3))
        assert items == list(range(20))
        assert sorted(result) == items
        assert result is not items
