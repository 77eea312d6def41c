"""Application entry point for QuizPlayer."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from quiz_player.constants.quiz_constants import DEFAULT_TEMPLATE_ID
from quiz_player.core.quiz_templates import QUIZ_TEMPLATES, get_template
from quiz_player.core.services.attempt_history import InMemoryAttemptHistory
from quiz_player.ui.player_window import QuizPlayerWindow
from quiz_player.utils.logging_config import configure_logging


def _select_template_id(argv: list[str]) -> str:
    """Use the first command-line argument as a template id when it names one."""
    if len(argv) > 1 and argv[1] in QUIZ_TEMPLATES:
        return argv[1]
    return DEFAULT_TEMPLATE_ID


def main() -> None:
    """Initialize logging and launch the Qt player for a built-in quiz."""
    logger = configure_logging()
    template_id = _select_template_id(sys.argv)
    quiz = get_template(template_id)
    logger.info("Starting QuizPlayer with quiz '%s'", quiz.title)

    app = QApplication(sys.argv)
    window = QuizPlayerWindow(quiz=quiz, attempt_history=InMemoryAttemptHistory())
    window.resize(900, 650)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
