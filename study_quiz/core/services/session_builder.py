"""Service resolving a quiz mode into the initial working set of questions."""

from __future__ import annotations

import logging
import random

from study_quiz.constants.quiz_constants import RANDOM_QUIZ_SIZE
from study_quiz.core.catalog import DEFAULT_CATALOG, SubjectCatalog
from study_quiz.core.models import ModeKind, Question, QuizMode, Subject
from study_quiz.core.question_loader import QuestionProvider, attach_question_ids
from study_quiz.core.services.answer_shuffler import shuffled

logger = logging.getLogger(__name__)


class SessionBuilder:
    """Builds the shuffled question sequence for a quiz start.

    Random quizzes draw a uniform sample of ``random_quiz_size`` questions
    from the concatenation of every subject.
    """

    def __init__(
        self,
        provider: QuestionProvider,
        catalog: SubjectCatalog = DEFAULT_CATALOG,
        rng: random.Random | None = None,
        random_quiz_size: int = RANDOM_QUIZ_SIZE,
    ) -> None:
        self._provider = provider
        self._catalog = catalog
        self._rng = rng or random.Random()
        self._random_quiz_size = random_quiz_size

    @property
    def catalog(self) -> SubjectCatalog:
        return self._catalog

    async def build(self, mode: QuizMode) -> list[Question]:
        """Return the shuffled working set for ``mode``; empty when nothing loads."""
        questions = await self._resolve(mode)
        logger.info("Built %d question(s) for %s quiz", len(questions), mode.kind.name.lower())
        return shuffled(questions, self._rng)

    async def load_question_pool(self) -> list[Question]:
        """Every question with its stable identifier attached."""
        pool: list[Question] = []
        for subject in self._catalog.all_subjects():
            questions = await self._fetch_subject(subject.name)
            pool.extend(attach_question_ids(questions, subject.name))
        return pool

    async def _resolve(self, mode: QuizMode) -> list[Question]:
        if mode.kind is ModeKind.ALL:
            return await self._load_subjects(self._catalog.all_subjects())

        if mode.kind is ModeKind.MODULE:
            if mode.module_number is None or self._catalog.find_module(mode.module_number) is None:
                logger.warning("Unknown module %r requested", mode.module_number)
                return []
            return await self._load_subjects(self._catalog.subjects_in_module(mode.module_number))

        if mode.kind is ModeKind.SUBJECT:
            subject = self._catalog.find_subject(mode.subject_name or "")
            if subject is None:
                logger.warning("Unknown subject %r requested", mode.subject_name)
                return []
            return await self._fetch_subject(subject.name)

        if mode.kind is ModeKind.RANDOM:
            pool = await self._load_subjects(self._catalog.all_subjects())
            sample_size = min(self._random_quiz_size, len(pool))
            return self._rng.sample(pool, sample_size)

        if mode.kind is ModeKind.CUSTOM:
            if not mode.selected_question_ids:
                return []
            pool = await self.load_question_pool()
            return [question for question in pool if question.question_id in mode.selected_question_ids]

        raise ValueError(f"Unsupported quiz mode: {mode.kind}")

    async def _load_subjects(self, subjects: list[Subject]) -> list[Question]:
        questions: list[Question] = []
        for subject in subjects:
            questions.extend(await self._fetch_subject(subject.name))
        return questions

    async def _fetch_subject(self, subject_name: str) -> list[Question]:
        # Providers are external; any failure means "no questions for this subject".
        try:
            return list(await self._provider.fetch_by_subject(subject_name))
        except Exception as exc:
            logger.warning("Error loading questions for %s: %s", subject_name, exc)
            return []
