"""Qt main window that plays one quiz through a SessionController."""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent, QKeyEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from quiz_player.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from quiz_player.constants.ui_constants import (
    ABOUT_BUTTON,
    CONFIG_ERROR_TITLE,
    EXIT_BUTTON,
    HELP_BUTTON,
    WINDOW_TITLE,
)
from quiz_player.core.models import Quiz, SessionPhase
from quiz_player.core.quiz_validation import QuizConfigurationError
from quiz_player.core.services.attempt_history import InMemoryAttemptHistory
from quiz_player.core.services.session_controller import SessionController
from quiz_player.core.services.timer_service import TickScheduler
from quiz_player.ui.components.intro_panel import IntroPanel
from quiz_player.ui.components.question_panel import QuestionPanel
from quiz_player.ui.components.results_panel import ResultsPanel
from quiz_player.ui.dialog_helpers import confirm_exit_session, show_error, show_info
from quiz_player.ui.qt_scheduler import QtTickScheduler

logger = logging.getLogger(__name__)

_PAGE_INDEX = {
    SessionPhase.INTRO: 0,
    SessionPhase.PLAYING: 1,
    SessionPhase.FEEDBACK: 1,
    SessionPhase.RESULTS: 2,
}


class QuizPlayerWindow(QMainWindow):
    """Shows the intro, question and results pages for the active session."""

    def __init__(
        self,
        quiz: Quiz,
        attempt_history: InMemoryAttemptHistory,
        scheduler: TickScheduler | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(f"{WINDOW_TITLE} - {quiz.title}")
        self.quiz = quiz
        self.attempt_history = attempt_history
        self.scheduler = scheduler or QtTickScheduler(self)
        self.controller: SessionController | None = None

        self._build_ui()
        self._new_controller()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)
        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        button_row = QHBoxLayout()
        self.exit_button = QPushButton(EXIT_BUTTON, self)
        self.exit_button.clicked.connect(self._handle_exit)
        button_row.addWidget(self.exit_button)
        button_row.addStretch()
        self.about_button = QPushButton(ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)
        self.help_button = QPushButton(HELP_BUTTON, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)
        root_layout.addLayout(button_row)

        self.page_stack = QStackedWidget(self)
        self.intro_panel = IntroPanel(on_start=self._handle_start, parent=self)
        self.question_panel = QuestionPanel(parent=self)
        self.results_panel = ResultsPanel(
            on_restart=self._handle_restart,
            on_exit=self._handle_exit,
            parent=self,
        )
        self.page_stack.addWidget(self.intro_panel)
        self.page_stack.addWidget(self.question_panel)
        self.page_stack.addWidget(self.results_panel)
        root_layout.addWidget(self.page_stack)

    def _new_controller(self) -> None:
        if self.controller is not None:
            self.controller.exit()
        controller = SessionController(
            self.quiz, self.scheduler, attempt_history=self.attempt_history
        )
        controller.add_completion_listener(self.attempt_history.save_attempt)
        controller.add_change_listener(self._refresh)
        self.controller = controller
        self.question_panel.bind(controller)
        self._refresh()

    def _refresh(self) -> None:
        controller = self.controller
        if controller is None or controller.is_closed:
            return
        phase = controller.phase
        self.page_stack.setCurrentIndex(_PAGE_INDEX[phase])
        if phase is SessionPhase.INTRO:
            self.intro_panel.show_quiz(
                self.quiz,
                controller.question_count,
                self.attempt_history.best_percentage(self.quiz.id),
            )
        elif phase is SessionPhase.RESULTS:
            if controller.summary is not None:
                self.results_panel.show_summary(
                    controller.summary, controller.settings.show_explanations
                )
        else:
            self.question_panel.refresh()

    # --- Handlers ---

    def _handle_start(self) -> None:
        try:
            self.controller.start_session()
        except QuizConfigurationError as exc:
            logger.warning("Quiz %s cannot start: %s", self.quiz.id, exc)
            show_error(self, CONFIG_ERROR_TITLE, str(exc))

    def _handle_restart(self) -> None:
        self.controller.restart()

    def _handle_exit(self) -> None:
        if self.controller.phase in (SessionPhase.PLAYING, SessionPhase.FEEDBACK):
            if not confirm_exit_session(self):
                return
        self._new_controller()

    def _handle_about(self) -> None:
        details = f"{APP_NAME} {APP_VERSION}\n\n{APP_ABOUT_TEXT}\n\n{APP_LICENSE}"
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        controller = self.controller
        key = event.key()
        phase = controller.phase

        if key in (Qt.Key_Return, Qt.Key_Enter) and self.question_panel.answer_input.hasFocus():
            # The line edit already handled it through returnPressed.
            event.accept()
        elif phase is SessionPhase.INTRO and key in (Qt.Key_Return, Qt.Key_Enter, Qt.Key_Space):
            self._handle_start()
        elif phase in (SessionPhase.PLAYING, SessionPhase.FEEDBACK) and key in (Qt.Key_Return, Qt.Key_Enter):
            self.question_panel.trigger_primary_action()
        elif phase is SessionPhase.FEEDBACK and key in (Qt.Key_Space, Qt.Key_Right):
            controller.advance()
        elif phase is SessionPhase.PLAYING and Qt.Key_1 <= key <= Qt.Key_9:
            self.question_panel.select_option_by_number(key - Qt.Key_0)
        elif phase is SessionPhase.PLAYING and key == Qt.Key_H:
            controller.toggle_hint()
        else:
            super().keyPressEvent(event)

    def closeEvent(self, event: QCloseEvent) -> None:
        if self.controller is not None:
            self.controller.exit()
        super().closeEvent(event)
