"""Application entry point for StudyQuiz."""

from __future__ import annotations

import os
from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication

from study_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from study_quiz.constants.storage_constants import (
    DATA_DIR_ENV_VAR,
    DEFAULT_QUESTION_DATA_DIR,
    DEFAULT_SELECTION_FILE,
    SELECTION_FILE_ENV_VAR,
)
from study_quiz.core.question_loader import JsonQuestionProvider
from study_quiz.core.quiz_manager import QuizManager
from study_quiz.core.services.selection_store import JsonFileSelectionStore
from study_quiz.core.services.session_builder import SessionBuilder
from study_quiz.server.api_server import start_api_server
from study_quiz.ui.quiz_main_window import QuizMainWindow
from study_quiz.utils.logging_config import configure_logging


def _resolve_path(env_var: str, default: Path) -> Path:
    value = os.environ.get(env_var)
    return Path(value).expanduser() if value else default


def build_quiz_manager(data_dir: Path, selection_file: Path) -> QuizManager:
    builder = SessionBuilder(JsonQuestionProvider(data_dir))
    return QuizManager(builder=builder, selection_store=JsonFileSelectionStore(selection_file))


def main() -> None:
    """Initialize logging, start the API server, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting StudyQuiz…")

    data_dir = _resolve_path(DATA_DIR_ENV_VAR, DEFAULT_QUESTION_DATA_DIR)
    selection_file = _resolve_path(SELECTION_FILE_ENV_VAR, DEFAULT_SELECTION_FILE)
    logger.info("Reading questions from %s", data_dir)

    quiz_manager = build_quiz_manager(data_dir, selection_file)
    start_api_server(quiz_manager=quiz_manager, host=DEFAULT_HOST, port=DEFAULT_PORT, image_root=data_dir)
    student_url = f"http://{DEFAULT_HOST}:{DEFAULT_PORT}/"
    logger.info("Browser version available at %s", student_url)

    app = QApplication(sys.argv)
    window = QuizMainWindow(quiz_manager=quiz_manager, image_root=data_dir, student_url=student_url)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
