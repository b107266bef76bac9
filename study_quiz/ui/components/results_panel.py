"""Component showing the final score of a finished quiz."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from study_quiz.constants.quiz_constants import PASSING_SCORE_PERCENTAGE
from study_quiz.constants.ui_constants import (
    BACK_TO_MODES_BUTTON,
    QUIZ_COMPLETE_TITLE,
    RESULT_CORRECT_TEMPLATE,
    RESULT_SCORE_TEMPLATE,
    RESULT_TIME_TEMPLATE,
)
from study_quiz.core.services.scoreboard import ScoreSummary, format_elapsed
from study_quiz.styling.styles import Styles


class ResultsPanel(QWidget):
    """Correct answers over attempts, score percentage and total time."""

    def __init__(self, on_back: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_back = on_back
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        title = QLabel(QUIZ_COMPLETE_TITLE, self)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(title)

        self.correct_label = QLabel("", self)
        self.score_label = QLabel("", self)
        self.time_label = QLabel("", self)
        for label in (self.correct_label, self.score_label, self.time_label):
            label.setAlignment(Qt.AlignCenter)
            layout.addWidget(label)

        self.back_button = QPushButton(BACK_TO_MODES_BUTTON, self)
        self.back_button.setDefault(True)
        self.back_button.clicked.connect(self.on_back)
        layout.addWidget(self.back_button, alignment=Qt.AlignCenter)
        layout.addStretch()

    def show_summary(self, summary: ScoreSummary) -> None:
        self.correct_label.setText(
            RESULT_CORRECT_TEMPLATE.format(correct=summary.correct_answers, attempts=summary.total_answers)
        )
        self.score_label.setText(RESULT_SCORE_TEMPLATE.format(score=summary.score_percentage))
        self.score_label.setStyleSheet(
            Styles.get_score_style(passed=summary.score_percentage >= PASSING_SCORE_PERCENTAGE)
        )
        self.time_label.setText(RESULT_TIME_TEMPLATE.format(elapsed=format_elapsed(summary.total_seconds or 0)))
