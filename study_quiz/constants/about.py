"""Static metadata describing StudyQuiz."""

APP_NAME = "StudyQuiz"
APP_VERSION = "0.2"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "StudyQuiz is a desktop drill tool for multiple-choice exam preparation. "
    "Pick a module, a subject, a random sample or your own selection of questions; "
    "wrong answers come back at the end of the quiz until you get them right."
)

HELP_TEXT = (
    "Questions are read from one JSON file per subject in the question data folder "
    "(override it with the STUDY_QUIZ_DATA_DIR environment variable). Each file holds a list of records:\n\n"
    '{"question": "What does len([1, 2]) return?", "answers": ["1", "2"], "correct_answer": 1}\n\n'
    "An optional \"image\" field points to a picture shown under the question."
)
