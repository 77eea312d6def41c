"""Component for answering a question and reviewing feedback."""

from __future__ import annotations

from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_player.constants.quiz_constants import (
    TIME_CRITICAL_THRESHOLD_SECONDS,
    TIME_WARNING_THRESHOLD_SECONDS,
)
from quiz_player.constants.ui_constants import (
    FEEDBACK_CORRECT,
    FEEDBACK_EXPECTED_TEMPLATE,
    FEEDBACK_FINISH_BUTTON,
    FEEDBACK_INCORRECT,
    FEEDBACK_NEXT_BUTTON,
    PLAY_HIDE_HINT_BUTTON,
    PLAY_HINT_BUTTON,
    PLAY_PROGRESS_TEMPLATE,
    PLAY_QUESTION_TIMER_TEMPLATE,
    PLAY_SCORE_TEMPLATE,
    PLAY_STREAK_TEMPLATE,
    PLAY_SUBMIT_BUTTON,
    PLAY_TOTAL_TIMER_TEMPLATE,
    PLAY_TYPE_IN_PLACEHOLDER,
)
from quiz_player.core.models import (
    MultiSelectQuestion,
    SessionPhase,
    SingleChoiceQuestion,
    TypeInQuestion,
)
from quiz_player.core.services.session_controller import SessionController
from quiz_player.ui.question_renderer import render_question


def format_clock(seconds: int) -> str:
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes}:{secs:02d}"


class QuestionPanel(QWidget):
    """Renders the current question and forwards input to the controller."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller: SessionController | None = None
        self._game_font_size: int = 14
        self._rendered_key: tuple | None = None
        self._option_buttons: list[tuple[str, QPushButton]] = []
        self._build_ui()

    def bind(self, controller: SessionController) -> None:
        self.controller = controller
        self._rendered_key = None

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        status_row = QHBoxLayout()
        self.progress_label = QLabel("", self)
        status_row.addWidget(self.progress_label)
        status_row.addStretch()
        self.score_label = QLabel("", self)
        status_row.addWidget(self.score_label)
        self.streak_label = QLabel("", self)
        status_row.addWidget(self.streak_label)
        self.question_timer_label = QLabel("", self)
        status_row.addWidget(self.question_timer_label)
        self.total_timer_label = QLabel("", self)
        status_row.addWidget(self.total_timer_label)
        layout.addLayout(status_row)

        self.preview_view = QWebEngineView(self)
        layout.addWidget(self.preview_view, stretch=1)

        self.options_layout = QHBoxLayout()
        layout.addLayout(self.options_layout)

        self.answer_input = QLineEdit(self)
        self.answer_input.setPlaceholderText(PLAY_TYPE_IN_PLACEHOLDER)
        self.answer_input.textEdited.connect(self._handle_text_edited)
        self.answer_input.returnPressed.connect(self._handle_primary_action)
        layout.addWidget(self.answer_input)

        self.feedback_label = QLabel("", self)
        self.feedback_label.setWordWrap(True)
        layout.addWidget(self.feedback_label)

        action_row = QHBoxLayout()
        self.hint_button = QPushButton(PLAY_HINT_BUTTON, self)
        self.hint_button.clicked.connect(self._handle_hint)
        action_row.addWidget(self.hint_button)
        action_row.addStretch()
        self.primary_button = QPushButton(PLAY_SUBMIT_BUTTON, self)
        self.primary_button.clicked.connect(self._handle_primary_action)
        action_row.addWidget(self.primary_button)
        layout.addLayout(action_row)

    # --- Rendering ---

    def refresh(self) -> None:
        controller = self.controller
        if controller is None or controller.current_question is None:
            return
        question = controller.current_question
        in_feedback = controller.phase is SessionPhase.FEEDBACK

        self.progress_label.setText(
            PLAY_PROGRESS_TEMPLATE.format(
                number=controller.current_index + 1, total=controller.question_count
            )
        )
        self.score_label.setText(PLAY_SCORE_TEMPLATE.format(score=controller.score))
        self.streak_label.setText(PLAY_STREAK_TEMPLATE.format(streak=controller.streak))
        self.streak_label.setVisible(controller.streak > 0)
        self._refresh_timers(controller, in_feedback)

        render_key = (
            controller.current_index,
            controller.phase,
            controller.visible_hint,
            controller.visible_explanation,
        )
        if render_key != self._rendered_key:
            self._rendered_key = render_key
            self.preview_view.setHtml(
                render_question(
                    question,
                    hint=controller.visible_hint,
                    explanation=controller.visible_explanation,
                    font_size=self._game_font_size,
                )
            )
            self._rebuild_inputs(controller)

        self._refresh_inputs(controller, in_feedback)

    def _refresh_timers(self, controller: SessionController, in_feedback: bool) -> None:
        remaining = controller.question_time_remaining
        if remaining is None or in_feedback:
            self.question_timer_label.setVisible(False)
        else:
            self.question_timer_label.setText(PLAY_QUESTION_TIMER_TEMPLATE.format(seconds=remaining))
            self._set_time_limit_label_emphasis(self.question_timer_label, remaining)
            self.question_timer_label.setVisible(True)

        total_remaining = controller.total_time_remaining
        if total_remaining is None:
            self.total_timer_label.setVisible(False)
        else:
            self.total_timer_label.setText(
                PLAY_TOTAL_TIMER_TEMPLATE.format(clock=format_clock(total_remaining))
            )
            self._set_time_limit_label_emphasis(self.total_timer_label, total_remaining)
            self.total_timer_label.setVisible(True)

    def _rebuild_inputs(self, controller: SessionController) -> None:
        while self.options_layout.count():
            item = self.options_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        self._option_buttons = []

        question = controller.current_question
        if isinstance(question, (SingleChoiceQuestion, MultiSelectQuestion)):
            for idx, option in enumerate(question.options, start=1):
                button = QPushButton(f"{idx}. {option.text}", self)
                button.setCheckable(True)
                button.clicked.connect(
                    lambda _checked=False, option_id=option.id: self._handle_option_clicked(option_id)
                )
                self.options_layout.addWidget(button)
                self._option_buttons.append((option.id, button))

        is_type_in = isinstance(question, TypeInQuestion)
        self.answer_input.setVisible(is_type_in)
        if is_type_in:
            answer = controller.current_answer
            self.answer_input.setText(answer.typed_answer if answer else "")
            self.answer_input.setFocus()

    def _refresh_inputs(self, controller: SessionController, in_feedback: bool) -> None:
        question = controller.current_question
        answer = controller.current_answer
        selected = answer.selected_option_ids if answer else set()

        for option_id, button in self._option_buttons:
            button.setChecked(option_id in selected)
            button.setEnabled(not in_feedback)
            button.setStyleSheet(self._option_style(question, option_id, selected, in_feedback))
        self.answer_input.setReadOnly(in_feedback)

        hints_available = controller.settings.show_hints and bool(question.hint)
        self.hint_button.setVisible(hints_available and not in_feedback)
        self.hint_button.setText(PLAY_HIDE_HINT_BUTTON if controller.hint_visible else PLAY_HINT_BUTTON)

        if in_feedback:
            self.feedback_label.setText(self._feedback_text(controller))
            is_last = controller.current_index >= controller.question_count - 1
            self.primary_button.setText(FEEDBACK_FINISH_BUTTON if is_last else FEEDBACK_NEXT_BUTTON)
            self.primary_button.setEnabled(True)
        else:
            self.feedback_label.setText("")
            self.primary_button.setText(PLAY_SUBMIT_BUTTON)
            self.primary_button.setEnabled(controller.can_submit)

    @staticmethod
    def _feedback_text(controller: SessionController) -> str:
        answer = controller.current_answer
        if answer is not None and answer.is_correct:
            return FEEDBACK_CORRECT
        question = controller.current_question
        if isinstance(question, TypeInQuestion):
            return f"{FEEDBACK_INCORRECT}. {FEEDBACK_EXPECTED_TEMPLATE.format(answer=question.expected_answer)}"
        return FEEDBACK_INCORRECT

    @staticmethod
    def _option_style(question, option_id: str, selected: set[str], in_feedback: bool) -> str:
        if not in_feedback:
            return ""
        is_correct = any(option.id == option_id and option.is_correct for option in question.options)
        if is_correct:
            return "border: 2px solid #16a34a;"
        if option_id in selected:
            return "border: 2px solid #dc2626;"
        return ""

    def _set_time_limit_label_emphasis(self, label: QLabel, seconds_left: int) -> None:
        base_style = f"padding: 2px 6px; border-radius: 4px; font-size: {self._game_font_size}pt;"
        if seconds_left <= TIME_CRITICAL_THRESHOLD_SECONDS:
            label.setStyleSheet(base_style + " color: #fff; background-color: #dc2626;")
        elif seconds_left <= TIME_WARNING_THRESHOLD_SECONDS:
            label.setStyleSheet(base_style + " color: #000; background-color: #facc15;")
        else:
            label.setStyleSheet(base_style)

    # --- Input handlers ---

    def select_option_by_number(self, number: int) -> None:
        if 1 <= number <= len(self._option_buttons):
            option_id, _ = self._option_buttons[number - 1]
            self._handle_option_clicked(option_id)

    def _handle_option_clicked(self, option_id: str) -> None:
        if self.controller is None:
            return
        if isinstance(self.controller.current_question, MultiSelectQuestion):
            self.controller.toggle_multi_select_option(option_id)
        else:
            self.controller.select_option(option_id)

    def _handle_text_edited(self, text: str) -> None:
        if self.controller is not None:
            self.controller.set_typed_answer(text)

    def _handle_hint(self) -> None:
        if self.controller is not None:
            self.controller.toggle_hint()

    def _handle_primary_action(self) -> None:
        controller = self.controller
        if controller is None:
            return
        if controller.phase is SessionPhase.FEEDBACK:
            controller.advance()
        else:
            controller.submit_answer()

    def trigger_primary_action(self) -> None:
        self._handle_primary_action()
