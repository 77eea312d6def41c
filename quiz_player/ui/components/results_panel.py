"""Component showing the completion summary."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_player.constants.ui_constants import (
    EXIT_BUTTON,
    RESULTS_NEW_BEST,
    RESULTS_PREVIOUS_BEST_TEMPLATE,
    RESULTS_RESTART_BUTTON,
    RESULTS_SCORE_TEMPLATE,
    RESULTS_STREAK_TEMPLATE,
    RESULTS_TIME_TEMPLATE,
)
from quiz_player.core.models import SessionSummary


def format_duration(seconds: int) -> str:
    minutes, secs = divmod(max(0, seconds), 60)
    if minutes == 0:
        return f"{secs}s"
    return f"{minutes}m {secs}s"


class ResultsPanel(QWidget):
    """Score, streak, time and a per-question review."""

    def __init__(
        self,
        on_restart: Callable[[], None],
        on_exit: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_restart = on_restart
        self.on_exit = on_exit
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        self.score_label.setStyleSheet("font-size: 20pt; font-weight: bold;")
        layout.addWidget(self.score_label)

        self.best_label = QLabel("", self)
        self.best_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.best_label)

        stats_row = QHBoxLayout()
        self.streak_label = QLabel("", self)
        stats_row.addWidget(self.streak_label)
        stats_row.addStretch()
        self.time_label = QLabel("", self)
        stats_row.addWidget(self.time_label)
        layout.addLayout(stats_row)

        self.review_list = QListWidget(self)
        layout.addWidget(self.review_list, stretch=1)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.restart_button = QPushButton(RESULTS_RESTART_BUTTON, self)
        self.restart_button.clicked.connect(self.on_restart)
        button_row.addWidget(self.restart_button)
        self.exit_button = QPushButton(EXIT_BUTTON, self)
        self.exit_button.clicked.connect(self.on_exit)
        button_row.addWidget(self.exit_button)
        layout.addLayout(button_row)

    def show_summary(self, summary: SessionSummary, show_explanations: bool) -> None:
        record = summary.record
        self.score_label.setText(
            RESULTS_SCORE_TEMPLATE.format(
                score=record.score, total=record.total_questions, percentage=record.percentage
            )
        )
        if summary.previous_best_percentage is None:
            self.best_label.setVisible(False)
        elif summary.is_new_best:
            self.best_label.setText(RESULTS_NEW_BEST)
            self.best_label.setVisible(True)
        else:
            self.best_label.setText(
                RESULTS_PREVIOUS_BEST_TEMPLATE.format(percentage=summary.previous_best_percentage)
            )
            self.best_label.setVisible(True)

        self.streak_label.setText(RESULTS_STREAK_TEMPLATE.format(streak=record.max_streak))
        self.time_label.setText(RESULTS_TIME_TEMPLATE.format(duration=format_duration(record.time_spent)))

        self.review_list.clear()
        for number, review in enumerate(summary.reviews, start=1):
            mark = "✓" if review.is_correct else "✗"
            lines = [f"{mark} {number}. {review.question.prompt}"]
            if review.answer is None or not review.answer.has_submitted:
                lines.append("    Not answered")
            if show_explanations and review.question.explanation:
                lines.append(f"    {review.question.explanation}")
            self.review_list.addItem(QListWidgetItem("\n".join(lines)))
        self.restart_button.setFocus()
