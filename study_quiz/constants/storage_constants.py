"""Locations of the static question data and the persisted preference."""

from pathlib import Path

DEFAULT_QUESTION_DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data" / "questions"
DEFAULT_SELECTION_FILE: Path = Path.home() / ".study_quiz" / "custom_selection.json"
DATA_DIR_ENV_VAR: str = "STUDY_QUIZ_DATA_DIR"
SELECTION_FILE_ENV_VAR: str = "STUDY_QUIZ_SELECTION_FILE"
SELECTION_RECORD_KEY: str = "selectedQuestionIds"
