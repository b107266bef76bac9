"""Business logic for running quiz sessions, shared between UI and API."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
import logging
import random
from threading import Lock
from typing import Callable, Iterable

from study_quiz.core.catalog import SubjectCatalog
from study_quiz.core.models import AnswerChoice, Question, QuizMode, QuizResult
from study_quiz.core.services.quiz_session import (
    QuestionPhase,
    QuizSessionEngine,
    SessionState,
    utc_now,
)
from study_quiz.core.services.scoreboard import ScoreSummary
from study_quiz.core.services.selection_store import SelectionStore, unique_in_order
from study_quiz.core.services.session_builder import SessionBuilder

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SessionSnapshot:
    """Everything a front end needs to draw the current screen."""

    state: SessionState | None
    phase: QuestionPhase | None = None
    mode: QuizMode | None = None
    question: Question | None = None
    answer_order: list[AnswerChoice] = field(default_factory=list)
    selected_option_index: int | None = None
    last_result: QuizResult | None = None
    position: int = 0
    total: int = 0
    progress_fraction: float = 0.0
    is_last_question: bool = False
    correct_count: int = 0
    attempt_count: int = 0
    score_percentage: int = 0
    elapsed_seconds: int = 0


class QuizManager:
    """Facade over the session builder, the selection store and the active engine.

    ``engine is None`` means the user is on the mode-selection screen. Loads
    run outside the lock; their result is installed only if the engine that
    requested them is still the current one.
    """

    def __init__(
        self,
        builder: SessionBuilder,
        selection_store: SelectionStore,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._lock = Lock()
        self._builder = builder
        self._selection_store = selection_store
        self._rng = rng
        self._clock = clock
        self._engine: QuizSessionEngine | None = None

    @property
    def catalog(self) -> SubjectCatalog:
        return self._builder.catalog

    # --- Session lifecycle ---

    async def start_session(self, mode: QuizMode) -> SessionState:
        """Build a fresh session for ``mode`` and make it the active one."""
        engine = QuizSessionEngine(mode, rng=self._rng, clock=self._clock)
        with self._lock:
            self._engine = engine

        questions = await self._builder.build(mode)

        with self._lock:
            if self._engine is not engine:
                logger.info("Discarding %d loaded question(s): quiz was left while loading", len(questions))
                return engine.state
            return engine.begin(questions)

    async def start_custom_session(self, randomize_answers: bool = False) -> SessionState:
        mode = QuizMode.custom(self.get_custom_selection(), randomize_answers=randomize_answers)
        return await self.start_session(mode)

    def back_to_mode_selection(self) -> None:
        with self._lock:
            self._engine = None

    def has_session(self) -> bool:
        with self._lock:
            return self._engine is not None

    def get_state(self) -> SessionState | None:
        with self._lock:
            return self._engine.state if self._engine else None

    def get_mode(self) -> QuizMode | None:
        with self._lock:
            return self._engine.mode if self._engine else None

    # --- Answering ---

    def select_answer(self, option_index: int) -> bool:
        with self._lock:
            return self._engine.select_answer(option_index) if self._engine else False

    def submit_answer(self, option_index: int | None = None) -> QuizResult | None:
        with self._lock:
            return self._engine.submit_answer(option_index) if self._engine else None

    def continue_to_next(self) -> bool:
        with self._lock:
            return self._engine.continue_to_next() if self._engine else False

    def tick(self, now: datetime | None = None) -> int | None:
        with self._lock:
            return self._engine.tick(now) if self._engine else None

    # --- Projections for the presentation layer ---

    def get_snapshot(self) -> SessionSnapshot:
        """Read every projection under a single lock acquisition."""
        with self._lock:
            engine = self._engine
            if engine is None:
                return SessionSnapshot(state=None)
            return SessionSnapshot(
                state=engine.state,
                phase=engine.phase,
                mode=engine.mode,
                question=engine.current_question,
                answer_order=engine.answer_order,
                selected_option_index=engine.selected_option_index,
                last_result=engine.last_result,
                position=min(engine.current_index + 1, engine.queue_length),
                total=engine.queue_length,
                progress_fraction=engine.progress_fraction,
                is_last_question=engine.is_last_question,
                correct_count=engine.correct_count,
                attempt_count=engine.attempt_count,
                score_percentage=engine.score_percentage,
                elapsed_seconds=engine.displayed_elapsed_seconds,
            )

    def get_current_question(self) -> Question | None:
        with self._lock:
            return self._engine.current_question if self._engine else None

    def get_last_result(self) -> QuizResult | None:
        with self._lock:
            return self._engine.last_result if self._engine else None

    def get_position(self) -> tuple[int, int]:
        """Return ``(current_index + 1, queue length)``."""
        with self._lock:
            if not self._engine:
                return 0, 0
            return min(self._engine.current_index + 1, self._engine.queue_length), self._engine.queue_length

    def get_progress_fraction(self) -> float:
        with self._lock:
            return self._engine.progress_fraction if self._engine else 0.0

    def get_elapsed_seconds(self) -> int:
        with self._lock:
            return self._engine.elapsed_seconds() if self._engine else 0

    def get_summary(self) -> ScoreSummary | None:
        with self._lock:
            if not self._engine or not self._engine.is_completed:
                return None
            return self._engine.summary()

    def get_wrong_answers(self) -> list[Question]:
        with self._lock:
            return self._engine.wrong_answers if self._engine else []

    # --- Custom selection ---

    def get_custom_selection(self) -> list[str]:
        with self._lock:
            return self._selection_store.load()

    def set_custom_selection(self, question_ids: Iterable[str]) -> list[str]:
        selection = unique_in_order(question_ids)
        with self._lock:
            self._selection_store.save(selection)
        return selection

    def toggle_custom_question(self, question_id: str) -> bool:
        """Add or remove one question; returns whether it is now selected."""
        with self._lock:
            selection = self._selection_store.load()
            if question_id in selection:
                selection.remove(question_id)
                selected = False
            else:
                selection.append(question_id)
                selected = True
            self._selection_store.save(selection)
        return selected

    async def get_question_pool(self) -> list[Question]:
        """Every question with its identifier, for the selection picker."""
        return await self._builder.load_question_pool()
