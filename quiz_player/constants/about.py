"""Static metadata describing QuizPlayer."""

APP_NAME = "QuizPlayer"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "QuizPlayer runs single-player quiz sessions with single-choice, multi-select "
    "and type-in questions, optional per-question and whole-quiz time limits, "
    "answer streaks and a completion summary."
)

HELP_TEXT = (
    "Keyboard shortcuts while playing:\n\n"
    "1-9: select the matching option (toggles it on multi-select questions)\n"
    "Enter: submit the answer, or continue after feedback\n"
    "H: show or hide the hint (when hints are enabled for the quiz)"
)
