"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "QuizPlayer"

INTRO_START_BUTTON: str = "Start Quiz"
INTRO_QUESTION_COUNT_TEMPLATE: str = "{count} questions"
INTRO_TIMED_LABEL: str = "Timed"
INTRO_SHUFFLED_LABEL: str = "Shuffled"

PLAY_SUBMIT_BUTTON: str = "Check Answer"
PLAY_HINT_BUTTON: str = "Show Hint"
PLAY_HIDE_HINT_BUTTON: str = "Hide Hint"
PLAY_TYPE_IN_PLACEHOLDER: str = "Type your answer..."
PLAY_PROGRESS_TEMPLATE: str = "Question {number} of {total}"
PLAY_SCORE_TEMPLATE: str = "Score: {score}"
PLAY_STREAK_TEMPLATE: str = "Streak: {streak}"
PLAY_QUESTION_TIMER_TEMPLATE: str = "{seconds}s left"
PLAY_TOTAL_TIMER_TEMPLATE: str = "Quiz time: {clock}"

FEEDBACK_CORRECT: str = "Correct!"
FEEDBACK_INCORRECT: str = "Incorrect"
FEEDBACK_EXPECTED_TEMPLATE: str = "Expected answer: {answer}"
FEEDBACK_NEXT_BUTTON: str = "Next Question"
FEEDBACK_FINISH_BUTTON: str = "See Results"

RESULTS_SCORE_TEMPLATE: str = "{score} / {total} correct ({percentage}%)"
RESULTS_STREAK_TEMPLATE: str = "Best streak: {streak}"
RESULTS_TIME_TEMPLATE: str = "Time spent: {duration}"
RESULTS_NEW_BEST: str = "New personal best!"
RESULTS_PREVIOUS_BEST_TEMPLATE: str = "Previous best: {percentage}%"
RESULTS_RESTART_BUTTON: str = "Play Again"

EXIT_BUTTON: str = "Exit"
ABOUT_BUTTON: str = "About"
HELP_BUTTON: str = "Help"
CONFIG_ERROR_TITLE: str = "Quiz cannot start"
