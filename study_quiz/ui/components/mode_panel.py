"""Component for choosing what to be quizzed on."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable

from PySide6.QtWidgets import (
    QCheckBox,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from study_quiz.constants.quiz_constants import RANDOM_QUIZ_SIZE
from study_quiz.constants.ui_constants import (
    MODE_BUTTON_ALL,
    MODE_BUTTON_CUSTOM_TEMPLATE,
    MODE_BUTTON_MODULE_TEMPLATE,
    MODE_BUTTON_RANDOM_TEMPLATE,
    MODE_SELECTION_FOOTER,
    MODE_SELECTION_TITLE,
    RANDOMIZE_ANSWERS_LABEL,
)
from study_quiz.core.models import QuizMode, StudyModule
from study_quiz.core.quiz_manager import QuizManager
from study_quiz.styling.styles import Styles

_SUBJECT_COLUMNS = 3


class ModeSelectionPanel(QWidget):
    """Lists the general quizzes, every module and every subject."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        on_start_quiz: Callable[[QuizMode], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self.on_start_quiz = on_start_quiz

        self._build_ui()

    def _build_ui(self) -> None:
        outer_layout = QVBoxLayout()
        self.setLayout(outer_layout)

        title = QLabel(MODE_SELECTION_TITLE, self)
        title.setStyleSheet(Styles.get_large_label_style())
        outer_layout.addWidget(title)

        scroll = QScrollArea(self)
        scroll.setWidgetResizable(True)
        content = QWidget(scroll)
        layout = QVBoxLayout()
        content.setLayout(layout)
        scroll.setWidget(content)
        outer_layout.addWidget(scroll, stretch=1)

        general_group = QGroupBox("General quizzes", content)
        general_row = QHBoxLayout()
        general_group.setLayout(general_row)

        self.all_button = QPushButton(MODE_BUTTON_ALL, general_group)
        self.all_button.clicked.connect(lambda: self._start(QuizMode.all_questions()))
        general_row.addWidget(self.all_button)

        self.random_button = QPushButton(MODE_BUTTON_RANDOM_TEMPLATE.format(count=RANDOM_QUIZ_SIZE), general_group)
        self.random_button.clicked.connect(lambda: self._start(QuizMode.random_sample()))
        general_row.addWidget(self.random_button)

        self.custom_button = QPushButton(general_group)
        self.custom_button.clicked.connect(self._handle_custom_click)
        general_row.addWidget(self.custom_button)
        layout.addWidget(general_group)

        for module in self.quiz_manager.catalog.get_modules():
            layout.addWidget(self._build_module_group(module, content))

        self.randomize_checkbox = QCheckBox(RANDOMIZE_ANSWERS_LABEL, content)
        layout.addWidget(self.randomize_checkbox)

        footer = QLabel(MODE_SELECTION_FOOTER, content)
        footer.setWordWrap(True)
        layout.addWidget(footer)
        layout.addStretch()

        self.refresh_custom_selection()

    def _build_module_group(self, module: StudyModule, parent: QWidget) -> QGroupBox:
        group = QGroupBox(f"Module {module.number}: {module.name} ({len(module.subjects)} subjects)", parent)
        group_layout = QVBoxLayout()
        group.setLayout(group_layout)

        start_button = QPushButton(MODE_BUTTON_MODULE_TEMPLATE.format(number=module.number, name=module.name), group)
        start_button.clicked.connect(lambda _=False, number=module.number: self._start(QuizMode.module(number)))
        group_layout.addWidget(start_button)

        grid = QGridLayout()
        for position, subject in enumerate(module.subjects):
            button = QPushButton(subject.display_name, group)
            button.clicked.connect(lambda _=False, name=subject.name: self._start(QuizMode.subject(name)))
            grid.addWidget(button, position // _SUBJECT_COLUMNS, position % _SUBJECT_COLUMNS)
        group_layout.addLayout(grid)
        return group

    def _handle_custom_click(self) -> None:
        self._start(QuizMode.custom(self.quiz_manager.get_custom_selection()))

    def _start(self, mode: QuizMode) -> None:
        self.on_start_quiz(replace(mode, randomize_answers=self.randomize_checkbox.isChecked()))

    def refresh_custom_selection(self) -> None:
        count = len(self.quiz_manager.get_custom_selection())
        self.custom_button.setText(MODE_BUTTON_CUSTOM_TEMPLATE.format(count=count))
