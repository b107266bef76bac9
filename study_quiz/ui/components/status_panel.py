"""Component for the loading and "no questions" screens."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from study_quiz.constants.ui_constants import BACK_TO_MODES_BUTTON, LOADING_MESSAGE, NO_QUESTIONS_MESSAGE


class StatusPanel(QWidget):
    """Shows a single message with a way back to the quiz selection."""

    def __init__(self, on_back: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_back = on_back

        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()
        self.message_label = QLabel(LOADING_MESSAGE, self)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setWordWrap(True)
        layout.addWidget(self.message_label)
        self.back_button = QPushButton(BACK_TO_MODES_BUTTON, self)
        self.back_button.clicked.connect(self.on_back)
        layout.addWidget(self.back_button, alignment=Qt.AlignCenter)
        layout.addStretch()

    def show_loading(self) -> None:
        self.message_label.setText(LOADING_MESSAGE)

    def show_no_questions(self, message: str = NO_QUESTIONS_MESSAGE) -> None:
        self.message_label.setText(message)
