"""Component shown before a session starts."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from quiz_player.constants.ui_constants import (
    INTRO_QUESTION_COUNT_TEMPLATE,
    INTRO_SHUFFLED_LABEL,
    INTRO_START_BUTTON,
    INTRO_TIMED_LABEL,
    RESULTS_PREVIOUS_BEST_TEMPLATE,
)
from quiz_player.core.models import Quiz


class IntroPanel(QWidget):
    """Quiz title card with a start button."""

    def __init__(self, on_start: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_start = on_start
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        self.title_label = QLabel("", self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet("font-size: 24pt; font-weight: bold;")
        layout.addWidget(self.title_label)

        self.description_label = QLabel("", self)
        self.description_label.setAlignment(Qt.AlignCenter)
        self.description_label.setWordWrap(True)
        layout.addWidget(self.description_label)

        self.meta_label = QLabel("", self)
        self.meta_label.setAlignment(Qt.AlignCenter)
        self.meta_label.setStyleSheet("color: #666666;")
        layout.addWidget(self.meta_label)

        self.previous_best_label = QLabel("", self)
        self.previous_best_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.previous_best_label)

        self.start_button = QPushButton(INTRO_START_BUTTON, self)
        self.start_button.clicked.connect(self.on_start)
        layout.addWidget(self.start_button, alignment=Qt.AlignCenter)

    def show_quiz(self, quiz: Quiz, question_count: int, previous_best: int | None) -> None:
        self.title_label.setText(quiz.title)
        self.description_label.setText(quiz.description)
        self.description_label.setVisible(bool(quiz.description))

        meta = [INTRO_QUESTION_COUNT_TEMPLATE.format(count=question_count)]
        settings = quiz.settings
        if settings.timer_enabled or settings.total_time_limit:
            meta.append(INTRO_TIMED_LABEL)
        if settings.shuffle_questions:
            meta.append(INTRO_SHUFFLED_LABEL)
        self.meta_label.setText("  |  ".join(meta))

        if previous_best is None:
            self.previous_best_label.setVisible(False)
        else:
            self.previous_best_label.setText(
                RESULTS_PREVIOUS_BEST_TEMPLATE.format(percentage=previous_best)
            )
            self.previous_best_label.setVisible(True)
        self.start_button.setFocus()
