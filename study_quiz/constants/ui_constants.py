"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "StudyQuiz"

MODE_SELECTION_TITLE: str = "Choose a quiz"
MODE_BUTTON_ALL: str = "All questions"
MODE_BUTTON_RANDOM_TEMPLATE: str = "{count} random questions"
MODE_BUTTON_CUSTOM_TEMPLATE: str = "My selection ({count} questions)"
MODE_BUTTON_MODULE_TEMPLATE: str = "Start module {number}: {name}"
RANDOMIZE_ANSWERS_LABEL: str = "Randomize answer order"
MODE_SELECTION_FOOTER: str = "Wrong answers are repeated at the end of the quiz (except in random quizzes)."

BACK_BUTTON: str = "Back"
SUBMIT_BUTTON: str = "Submit answer"
NEXT_BUTTON: str = "Next question"
FINISH_BUTTON: str = "Finish quiz"
BACK_TO_MODES_BUTTON: str = "Back to quiz selection"

PROGRESS_TEMPLATE: str = "Question {position} of {total}"
RUNNING_SCORE_TEMPLATE: str = "Correct: {correct}/{attempts}"
ELAPSED_TEMPLATE: str = "Time: {elapsed}"
CORRECT_FEEDBACK: str = "Correct!"
WRONG_FEEDBACK_TEMPLATE: str = "Wrong. The correct answer is: {answer}"

LOADING_MESSAGE: str = "Loading questions…"
NO_QUESTIONS_MESSAGE: str = "No questions were found for this selection."
QUIZ_COMPLETE_TITLE: str = "Quiz complete!"
RESULT_CORRECT_TEMPLATE: str = "Correct answers: {correct} / {attempts}"
RESULT_SCORE_TEMPLATE: str = "Score: {score}%"
RESULT_TIME_TEMPLATE: str = "Total time: {elapsed}"
EMPTY_SELECTION_MESSAGE: str = "Your custom selection is empty. Pick questions in the browser page first."
QUESTION_FONT_SIZE: int = 14
