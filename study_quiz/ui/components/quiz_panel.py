"""Component presenting one question at a time."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import (
    QButtonGroup,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QRadioButton,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)

from study_quiz.constants.ui_constants import (
    BACK_BUTTON,
    CORRECT_FEEDBACK,
    ELAPSED_TEMPLATE,
    FINISH_BUTTON,
    NEXT_BUTTON,
    PROGRESS_TEMPLATE,
    QUESTION_FONT_SIZE,
    RUNNING_SCORE_TEMPLATE,
    SUBMIT_BUTTON,
    WRONG_FEEDBACK_TEMPLATE,
)
from study_quiz.core.models import ModeKind
from study_quiz.core.quiz_manager import QuizManager, SessionSnapshot
from study_quiz.core.services.scoreboard import format_elapsed
from study_quiz.styling.styles import Styles
from study_quiz.ui.question_renderer import render_option_text, render_question_html


class QuizPanel(QWidget):
    """UI component for answering questions and reading feedback."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        image_root: Path,
        on_session_finished: Callable[[], None],
        on_back: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self.image_root = image_root
        self.on_session_finished = on_session_finished
        self.on_back = on_back

        self._option_buttons: dict[int, QRadioButton] = {}

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.back_button = QPushButton(BACK_BUTTON, self)
        self.back_button.clicked.connect(self.on_back)
        header_row.addWidget(self.back_button)
        self.position_label = QLabel("", self)
        self.position_label.setStyleSheet("font-weight: bold;")
        header_row.addWidget(self.position_label)
        header_row.addStretch()
        self.running_score_label = QLabel("", self)
        header_row.addWidget(self.running_score_label)
        self.elapsed_label = QLabel("", self)
        header_row.addWidget(self.elapsed_label)
        layout.addLayout(header_row)

        self.progress_bar = QProgressBar(self)
        self.progress_bar.setRange(0, 1000)
        self.progress_bar.setTextVisible(False)
        layout.addWidget(self.progress_bar)

        self.prompt_view = QTextBrowser(self)
        self.prompt_view.setOpenExternalLinks(False)
        layout.addWidget(self.prompt_view, stretch=2)

        self.image_label = QLabel(self)
        self.image_label.setAlignment(Qt.AlignCenter)
        self.image_label.setVisible(False)
        layout.addWidget(self.image_label)

        self.options_layout = QVBoxLayout()
        layout.addLayout(self.options_layout)
        self.option_group = QButtonGroup(self)
        self.option_group.setExclusive(True)
        self.option_group.idClicked.connect(self._handle_option_clicked)

        self.feedback_label = QLabel("", self)
        self.feedback_label.setWordWrap(True)
        layout.addWidget(self.feedback_label)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.submit_button = QPushButton(SUBMIT_BUTTON, self)
        self.submit_button.setDefault(True)
        self.submit_button.clicked.connect(self._handle_submit)
        button_row.addWidget(self.submit_button)
        self.continue_button = QPushButton(NEXT_BUTTON, self)
        self.continue_button.setDefault(True)
        self.continue_button.setVisible(False)
        self.continue_button.clicked.connect(self._handle_continue)
        button_row.addWidget(self.continue_button)
        button_row.addStretch()
        layout.addLayout(button_row)

    # --- Rendering ---

    def display_current_question(self) -> None:
        """Redraw the panel for a fresh question occurrence."""
        snapshot = self.quiz_manager.get_snapshot()
        question = snapshot.question
        if question is None:
            return

        self._update_header(snapshot)
        self.prompt_view.setHtml(render_question_html(question.question_text, QUESTION_FONT_SIZE))
        self._show_image(question.image_path)
        self._rebuild_options(snapshot)

        self.feedback_label.setText("")
        self.submit_button.setVisible(True)
        self.submit_button.setEnabled(False)
        self.continue_button.setVisible(False)

    def update_elapsed(self, seconds: int) -> None:
        self.elapsed_label.setText(ELAPSED_TEMPLATE.format(elapsed=format_elapsed(seconds)))

    def _update_header(self, snapshot: SessionSnapshot) -> None:
        self.position_label.setText(PROGRESS_TEMPLATE.format(position=snapshot.position, total=snapshot.total))
        self.progress_bar.setValue(int(snapshot.progress_fraction * 1000))
        show_running_score = snapshot.mode is not None and snapshot.mode.kind is not ModeKind.RANDOM
        self.running_score_label.setVisible(show_running_score)
        self.running_score_label.setText(
            RUNNING_SCORE_TEMPLATE.format(correct=snapshot.correct_count, attempts=snapshot.attempt_count)
        )
        self.update_elapsed(snapshot.elapsed_seconds)

    def _show_image(self, image_path: str | None) -> None:
        if not image_path:
            self.image_label.setVisible(False)
            return
        pixmap = QPixmap(str(self.image_root / image_path.lstrip("/")))
        if pixmap.isNull():
            self.image_label.setVisible(False)
            return
        self.image_label.setPixmap(pixmap.scaledToWidth(min(pixmap.width(), 640), Qt.SmoothTransformation))
        self.image_label.setVisible(True)

    def _rebuild_options(self, snapshot: SessionSnapshot) -> None:
        for button in self._option_buttons.values():
            self.option_group.removeButton(button)
            self.options_layout.removeWidget(button)
            button.deleteLater()
        self._option_buttons = {}

        for choice in snapshot.answer_order:
            button = QRadioButton(render_option_text(choice.text), self)
            button.setStyleSheet(Styles.get_option_style(False, False))
            self.option_group.addButton(button, choice.original_index)
            self.options_layout.addWidget(button)
            self._option_buttons[choice.original_index] = button

    def _show_feedback(self) -> None:
        snapshot = self.quiz_manager.get_snapshot()
        result = snapshot.last_result
        if result is None:
            return
        correct_index = result.question.correct_option_index
        for original_index, button in self._option_buttons.items():
            button.setEnabled(False)
            button.setStyleSheet(
                Styles.get_option_style(
                    is_correct_option=original_index == correct_index,
                    is_wrong_choice=original_index == result.selected_option_index and not result.is_correct,
                )
            )

        if result.is_correct:
            self.feedback_label.setText(CORRECT_FEEDBACK)
        else:
            answer = result.question.options[correct_index]
            self.feedback_label.setText(WRONG_FEEDBACK_TEMPLATE.format(answer=render_option_text(answer)))

        self._update_header(snapshot)
        self.submit_button.setVisible(False)
        self.continue_button.setText(FINISH_BUTTON if snapshot.is_last_question else NEXT_BUTTON)
        self.continue_button.setVisible(True)

    # --- Events ---

    def _handle_option_clicked(self, original_index: int) -> None:
        self.submit_button.setEnabled(self.quiz_manager.select_answer(original_index))

    def _handle_submit(self) -> None:
        if self.quiz_manager.submit_answer() is None:
            return
        self._show_feedback()

    def _handle_continue(self) -> None:
        if not self.quiz_manager.continue_to_next():
            return
        if self.quiz_manager.get_current_question() is None:
            self.on_session_finished()
            return
        self.display_current_question()

