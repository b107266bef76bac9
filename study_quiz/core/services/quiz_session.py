"""State machine driving one quiz session question by question."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, auto
import logging
import random
from typing import Callable

from study_quiz.core.models import AnswerChoice, Question, QuizMode, QuizResult
from study_quiz.core.services.answer_shuffler import identity_answer_order, shuffled_answer_order
from study_quiz.core.services.scoreboard import (
    ScoreSummary,
    count_correct,
    elapsed_seconds,
    score_percentage,
    summarize_results,
)

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SessionState(Enum):
    LOADING = auto()
    IN_PROGRESS = auto()
    COMPLETED = auto()
    NO_QUESTIONS = auto()


class QuestionPhase(Enum):
    AWAITING_ANSWER = auto()
    SHOWING_FEEDBACK = auto()


@dataclass(slots=True)
class QuizSession:
    """Mutable session data; only the engine writes to it."""

    queue: list[Question]
    started_at: datetime
    current_index: int = 0
    results: list[QuizResult] = field(default_factory=list)
    wrong_answers: list[Question] = field(default_factory=list)
    is_completed: bool = False
    ended_at: datetime | None = None


class QuizSessionEngine:
    """Sequences questions, grades answers and requeues mistakes.

    The engine starts in ``LOADING`` and is moved forward by ``begin`` once
    the working set is known. Every operation that is not allowed in the
    current state is rejected without changing anything: ``submit_answer``
    returns ``None`` and the other transitions return ``False``.
    """

    def __init__(
        self,
        mode: QuizMode,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._mode = mode
        self._rng = rng or random.Random()
        self._clock = clock
        self._state = SessionState.LOADING
        self._session: QuizSession | None = None

        # Per-occurrence state, reset whenever a question is presented
        self._phase: QuestionPhase | None = None
        self._selected_option_index: int | None = None
        self._answer_order: list[AnswerChoice] = []
        self._displayed_elapsed_seconds: int = 0

    # --- Transitions ---

    def begin(self, questions: list[Question]) -> SessionState:
        """Leave ``LOADING`` with the built working set."""
        if self._state is not SessionState.LOADING:
            logger.debug("Ignoring begin() in state %s", self._state.name)
            return self._state

        if not questions:
            self._state = SessionState.NO_QUESTIONS
            logger.info("No questions available for %s quiz", self._mode.kind.name.lower())
            return self._state

        self._session = QuizSession(queue=list(questions), started_at=self._clock())
        self._state = SessionState.IN_PROGRESS
        self._displayed_elapsed_seconds = 0
        self._present_current_question()
        logger.info("Quiz session started with %d question(s)", len(questions))
        return self._state

    def select_answer(self, option_index: int) -> bool:
        """Remember the pending choice (an original option index)."""
        if not self._accepts_answer(option_index):
            return False
        self._selected_option_index = option_index
        return True

    def submit_answer(self, option_index: int | None = None) -> QuizResult | None:
        """Grade the given original index, or the pending selection."""
        if option_index is None:
            option_index = self._selected_option_index
        if option_index is None:
            logger.debug("Rejected submit: no answer selected")
            return None
        if not self._accepts_answer(option_index):
            return None

        session = self._session
        if session is None:
            return None
        question = session.queue[session.current_index]
        is_correct = question.is_correct(option_index)
        result = QuizResult(
            question_index=session.current_index,
            selected_option_index=option_index,
            is_correct=is_correct,
            question=question,
        )
        session.results.append(result)

        if not is_correct:
            session.wrong_answers.append(question)
            if self._mode.requeues_wrong_answers:
                session.queue.append(question)

        self._selected_option_index = option_index
        self._phase = QuestionPhase.SHOWING_FEEDBACK
        return result

    def continue_to_next(self) -> bool:
        """Advance after feedback; completes the session past the last question."""
        if self._state is not SessionState.IN_PROGRESS or self._phase is not QuestionPhase.SHOWING_FEEDBACK:
            logger.debug("Rejected continue: no answer submitted for the current question")
            return False

        session = self._session
        if session is None:
            return False
        session.current_index += 1
        if session.current_index < len(session.queue):
            self._present_current_question()
            return True

        session.is_completed = True
        session.ended_at = self._clock()
        self._state = SessionState.COMPLETED
        self._phase = None
        self._selected_option_index = None
        self._answer_order = []
        self._displayed_elapsed_seconds = self.total_seconds or 0
        logger.info(
            "Quiz session completed: %d/%d correct in %ss",
            self.correct_count,
            len(session.results),
            self._displayed_elapsed_seconds,
        )
        return True

    def tick(self, now: datetime | None = None) -> int | None:
        """Refresh the displayed elapsed time; ignored unless in progress."""
        if self._state is not SessionState.IN_PROGRESS or self._session is None:
            return None
        self._displayed_elapsed_seconds = elapsed_seconds(self._session.started_at, now or self._clock())
        return self._displayed_elapsed_seconds

    # --- Projections ---

    @property
    def mode(self) -> QuizMode:
        return self._mode

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def phase(self) -> QuestionPhase | None:
        return self._phase

    @property
    def session(self) -> QuizSession | None:
        return self._session

    @property
    def is_completed(self) -> bool:
        return self._state is SessionState.COMPLETED

    @property
    def has_no_questions(self) -> bool:
        return self._state is SessionState.NO_QUESTIONS

    @property
    def current_question(self) -> Question | None:
        if self._state is not SessionState.IN_PROGRESS or self._session is None:
            return None
        return self._session.queue[self._session.current_index]

    @property
    def current_index(self) -> int:
        return self._session.current_index if self._session else 0

    @property
    def queue_length(self) -> int:
        return len(self._session.queue) if self._session else 0

    @property
    def progress_fraction(self) -> float:
        if not self._session or not self._session.queue:
            return 0.0
        if self.is_completed:
            return 1.0
        return (self._session.current_index + 1) / len(self._session.queue)

    @property
    def is_last_question(self) -> bool:
        """True when continuing from the current question would finish the quiz."""
        if self._session is None or self._state is not SessionState.IN_PROGRESS:
            return False
        return self._session.current_index + 1 >= len(self._session.queue)

    @property
    def answer_order(self) -> list[AnswerChoice]:
        return list(self._answer_order)

    @property
    def selected_option_index(self) -> int | None:
        return self._selected_option_index

    @property
    def last_result(self) -> QuizResult | None:
        if self._phase is not QuestionPhase.SHOWING_FEEDBACK or self._session is None:
            return None
        return self._session.results[-1]

    @property
    def results(self) -> list[QuizResult]:
        return list(self._session.results) if self._session else []

    @property
    def wrong_answers(self) -> list[Question]:
        return list(self._session.wrong_answers) if self._session else []

    @property
    def correct_count(self) -> int:
        return count_correct(self._session.results) if self._session else 0

    @property
    def attempt_count(self) -> int:
        return len(self._session.results) if self._session else 0

    @property
    def score_percentage(self) -> int:
        return score_percentage(self.correct_count, self.attempt_count)

    @property
    def started_at(self) -> datetime | None:
        return self._session.started_at if self._session else None

    @property
    def ended_at(self) -> datetime | None:
        return self._session.ended_at if self._session else None

    @property
    def total_seconds(self) -> int | None:
        if self._session is None or self._session.ended_at is None:
            return None
        return elapsed_seconds(self._session.started_at, self._session.ended_at)

    @property
    def displayed_elapsed_seconds(self) -> int:
        return self._displayed_elapsed_seconds

    def elapsed_seconds(self, now: datetime | None = None) -> int:
        """Live elapsed time while in progress, frozen total once completed."""
        if self._session is None:
            return 0
        if self._session.ended_at is not None:
            return self.total_seconds or 0
        return elapsed_seconds(self._session.started_at, now or self._clock())

    def summary(self) -> ScoreSummary:
        return summarize_results(self.results, self.total_seconds)

    # --- Internals ---

    def _accepts_answer(self, option_index: int) -> bool:
        if self._state is not SessionState.IN_PROGRESS or self._phase is not QuestionPhase.AWAITING_ANSWER:
            logger.debug("Rejected answer %r in state %s / %s", option_index, self._state.name, self._phase)
            return False
        question = self.current_question
        valid_index = isinstance(option_index, int) and not isinstance(option_index, bool)
        if question is None or not valid_index or not 0 <= option_index < len(question.options):
            logger.debug("Rejected answer %r: not a valid option index", option_index)
            return False
        return True

    def _present_current_question(self) -> None:
        question = self.current_question
        if question is None:
            return
        self._phase = QuestionPhase.AWAITING_ANSWER
        self._selected_option_index = None
        if self._mode.randomize_answers:
            self._answer_order = shuffled_answer_order(question, self._rng)
        else:
            self._answer_order = identity_answer_order(question)
