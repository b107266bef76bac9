"""Qt main window switching between quiz selection, quiz and results."""

from __future__ import annotations

import asyncio
from enum import Enum, auto
import logging
from pathlib import Path
from threading import Thread

from PySide6.QtCore import QObject, QTimer, Signal
from PySide6.QtWidgets import QHBoxLayout, QMainWindow, QPushButton, QStackedWidget, QVBoxLayout, QWidget

from study_quiz.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION, HELP_TEXT
from study_quiz.constants.quiz_constants import ELAPSED_TICK_INTERVAL_MS
from study_quiz.constants.ui_constants import EMPTY_SELECTION_MESSAGE, WINDOW_TITLE
from study_quiz.core.models import ModeKind, QuizMode
from study_quiz.core.quiz_manager import QuizManager
from study_quiz.core.services.quiz_session import SessionState
from study_quiz.styling.styles import Styles
from study_quiz.ui.components.mode_panel import ModeSelectionPanel
from study_quiz.ui.components.quiz_panel import QuizPanel
from study_quiz.ui.components.results_panel import ResultsPanel
from study_quiz.ui.components.status_panel import StatusPanel
from study_quiz.ui.dialog_helpers import confirm_leave_quiz, show_info

logger = logging.getLogger(__name__)


class ScreenMode(Enum):
    """Which screen the window is showing."""

    MODE_SELECTION = auto()
    STATUS = auto()
    QUIZ = auto()
    RESULTS = auto()


class _SessionLoader(QObject):
    """Runs the asynchronous session build off the UI thread."""

    finished = Signal()

    def __init__(self, quiz_manager: QuizManager) -> None:
        super().__init__()
        self._quiz_manager = quiz_manager

    def start(self, mode: QuizMode) -> None:
        thread = Thread(target=self._run, args=(mode,), name="QuizSessionLoader", daemon=True)
        thread.start()

    def _run(self, mode: QuizMode) -> None:
        asyncio.run(self._quiz_manager.start_session(mode))
        self.finished.emit()


class QuizMainWindow(QMainWindow):
    """Main Qt window orchestrating the quiz screens."""

    def __init__(self, quiz_manager: QuizManager, image_root: Path, student_url: str | None = None) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.quiz_manager = quiz_manager
        self.student_url = student_url
        self._screen = ScreenMode.MODE_SELECTION

        self._loader = _SessionLoader(quiz_manager)
        self._loader.finished.connect(self._handle_session_loaded)

        self._build_ui(image_root)
        self._configure_elapsed_timer()
        self.setStyleSheet(Styles.get_main_window_style())

    def _build_ui(self, image_root: Path) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)
        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.about_button = QPushButton(f"About {APP_NAME}", self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)
        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)
        root_layout.addLayout(button_row)

        self.screen_stack = QStackedWidget(self)
        self.mode_panel = ModeSelectionPanel(self.quiz_manager, on_start_quiz=self._start_quiz, parent=self)
        self.status_panel = StatusPanel(on_back=self._back_to_mode_selection, parent=self)
        self.quiz_panel = QuizPanel(
            self.quiz_manager,
            image_root,
            on_session_finished=self._show_results,
            on_back=self._handle_leave_quiz,
            parent=self,
        )
        self.results_panel = ResultsPanel(on_back=self._back_to_mode_selection, parent=self)

        self.screen_stack.addWidget(self.mode_panel)
        self.screen_stack.addWidget(self.status_panel)
        self.screen_stack.addWidget(self.quiz_panel)
        self.screen_stack.addWidget(self.results_panel)
        root_layout.addWidget(self.screen_stack)

        self._set_screen(ScreenMode.MODE_SELECTION)

    def _configure_elapsed_timer(self) -> None:
        self.elapsed_timer = QTimer(self)
        self.elapsed_timer.setInterval(ELAPSED_TICK_INTERVAL_MS)
        self.elapsed_timer.timeout.connect(self._tick_elapsed)

    def _tick_elapsed(self) -> None:
        elapsed = self.quiz_manager.tick()
        if elapsed is None:
            self.elapsed_timer.stop()
            return
        self.quiz_panel.update_elapsed(elapsed)

    def _set_screen(self, screen: ScreenMode) -> None:
        self._screen = screen
        index_map = {
            ScreenMode.MODE_SELECTION: 0,
            ScreenMode.STATUS: 1,
            ScreenMode.QUIZ: 2,
            ScreenMode.RESULTS: 3,
        }
        self.screen_stack.setCurrentIndex(index_map[screen])
        if screen is not ScreenMode.QUIZ and self.elapsed_timer.isActive():
            self.elapsed_timer.stop()

    # --- Flow ---

    def _start_quiz(self, mode: QuizMode) -> None:
        self.status_panel.show_loading()
        self._set_screen(ScreenMode.STATUS)
        self._loader.start(mode)

    def _handle_session_loaded(self) -> None:
        state = self.quiz_manager.get_state()
        if state is SessionState.IN_PROGRESS:
            self.quiz_panel.display_current_question()
            self._set_screen(ScreenMode.QUIZ)
            self.elapsed_timer.start()
        elif state is SessionState.NO_QUESTIONS:
            mode = self.quiz_manager.get_mode()
            if mode is not None and mode.kind is ModeKind.CUSTOM and not mode.selected_question_ids:
                self.status_panel.show_no_questions(EMPTY_SELECTION_MESSAGE)
            else:
                self.status_panel.show_no_questions()
            self._set_screen(ScreenMode.STATUS)
        elif state is None:
            logger.debug("Session load finished after leaving the quiz")

    def _show_results(self) -> None:
        summary = self.quiz_manager.get_summary()
        if summary is None:
            return
        self.results_panel.show_summary(summary)
        self._set_screen(ScreenMode.RESULTS)

    def _handle_leave_quiz(self) -> None:
        if self.quiz_manager.get_state() is SessionState.IN_PROGRESS and not confirm_leave_quiz(self):
            return
        self._back_to_mode_selection()

    def _back_to_mode_selection(self) -> None:
        self.quiz_manager.back_to_mode_selection()
        self.mode_panel.refresh_custom_selection()
        self._set_screen(ScreenMode.MODE_SELECTION)

    def _handle_about(self) -> None:
        details = f"{APP_NAME} v{APP_VERSION}\nLicense: {APP_LICENSE}\n\n{APP_ABOUT_TEXT}"
        if self.student_url:
            details += f"\n\nBrowser version: {self.student_url}"
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)
