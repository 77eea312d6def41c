"""Phase state machine that drives a learner through one quiz.

The controller owns the ``SessionState`` and both countdown timers. Every
mutation happens in response to exactly one user command or one timer expiry,
and each of those is applied as a single transition: commands that arrive
while a transition is still being applied (for example from a listener) are
ignored.
"""

from __future__ import annotations

from contextlib import contextmanager
import copy
import logging
import time
from typing import Callable, Iterator

from quiz_player.core.models import (
    Answer,
    ChoiceQuestion,
    CompletionRecord,
    MultiSelectQuestion,
    Question,
    Quiz,
    QuizSettings,
    SessionPhase,
    SessionState,
    SessionSummary,
    SingleChoiceQuestion,
    TypeInQuestion,
)
from quiz_player.core.quiz_validation import validate_quiz
from quiz_player.core.services.answer_evaluator import evaluate, has_meaningful_content
from quiz_player.core.services.attempt_history import AttemptHistory
from quiz_player.core.services.question_preparer import QuestionPreparer
from quiz_player.core.services.result_aggregator import aggregate_results
from quiz_player.core.services.timer_service import CountdownTimer, TickScheduler, TimerState

logger = logging.getLogger(__name__)

CompletionListener = Callable[[CompletionRecord], None]
ChangeListener = Callable[[], None]


class SessionController:
    """Runs one quiz: intro -> playing <-> feedback -> results."""

    def __init__(
        self,
        quiz: Quiz,
        scheduler: TickScheduler,
        *,
        preparer: QuestionPreparer | None = None,
        attempt_history: AttemptHistory | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._quiz = quiz
        self._preparer = preparer or QuestionPreparer()
        self._attempt_history = attempt_history
        self._clock = clock

        self._prepared_questions: tuple[Question, ...] | None = None
        self._state = SessionState(ordered_questions=())
        self._summary: SessionSummary | None = None
        self._question_started_at: float | None = None

        self._question_timer = CountdownTimer(
            "question",
            scheduler,
            on_expired=self._handle_question_timer_expired,
            on_tick=self._handle_question_tick,
        )
        self._total_timer = CountdownTimer(
            "total",
            scheduler,
            on_expired=self._handle_total_timer_expired,
            on_tick=self._handle_total_tick,
        )

        self._completion_listeners: list[CompletionListener] = []
        self._change_listeners: list[ChangeListener] = []
        self._completion_delivered = False
        self._transitioning = False
        self._closed = False

    # --- Subscriptions ---

    def add_completion_listener(self, listener: CompletionListener) -> None:
        self._completion_listeners.append(listener)

    def add_change_listener(self, listener: ChangeListener) -> None:
        self._change_listeners.append(listener)

    # --- Queries ---

    @property
    def quiz(self) -> Quiz:
        return self._quiz

    @property
    def settings(self) -> QuizSettings:
        return self._quiz.settings

    @property
    def phase(self) -> SessionPhase:
        return self._state.phase

    @property
    def state(self) -> SessionState:
        """Snapshot of the session state for rendering."""
        return copy.deepcopy(self._state)

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def current_index(self) -> int:
        return self._state.current_index

    @property
    def question_count(self) -> int:
        if self._state.ordered_questions:
            return len(self._state.ordered_questions)
        return len(self._quiz.questions)

    @property
    def current_question(self) -> Question | None:
        if self._state.phase not in (SessionPhase.PLAYING, SessionPhase.FEEDBACK):
            return None
        return self._state.ordered_questions[self._state.current_index]

    @property
    def current_answer(self) -> Answer | None:
        question = self.current_question
        if question is None:
            return None
        return copy.deepcopy(self._state.answers.get(question.id))

    @property
    def score(self) -> int:
        return sum(1 for answer in self._state.answers.values() if answer.is_correct)

    @property
    def streak(self) -> int:
        return self._state.streak

    @property
    def max_streak(self) -> int:
        return self._state.max_streak

    @property
    def can_submit(self) -> bool:
        if self._state.phase is not SessionPhase.PLAYING:
            return False
        question = self.current_question
        return has_meaningful_content(question, self._state.answers.get(question.id))

    @property
    def question_time_remaining(self) -> int | None:
        if self._question_timer.state is TimerState.IDLE:
            return None
        return self._question_timer.remaining_seconds

    @property
    def total_time_remaining(self) -> int | None:
        return self._state.total_time_remaining

    @property
    def hint_visible(self) -> bool:
        return self._state.hint_visible

    @property
    def visible_hint(self) -> str | None:
        question = self.current_question
        if question is None or not self._state.hint_visible:
            return None
        return question.hint

    @property
    def visible_explanation(self) -> str | None:
        if self._state.phase is not SessionPhase.FEEDBACK or not self.settings.show_explanations:
            return None
        return self.current_question.explanation

    @property
    def summary(self) -> SessionSummary | None:
        return self._summary

    @property
    def completion_record(self) -> CompletionRecord | None:
        return self._summary.record if self._summary else None

    # --- Commands ---

    def start_session(self) -> None:
        """Leave the intro. Raises ``QuizConfigurationError`` for an unplayable quiz."""
        if self._closed:
            raise RuntimeError("Session has been exited; create a new controller.")
        if self._state.phase is not SessionPhase.INTRO:
            logger.debug("Ignoring start_session in phase %s", self._state.phase.name)
            return
        validate_quiz(self._quiz)

        with self._applying("start_session") as allowed:
            if not allowed:
                return
            if self._prepared_questions is None:
                self._prepared_questions = self._preparer.prepare(self._quiz)
            self._state = SessionState(
                ordered_questions=self._prepared_questions,
                phase=SessionPhase.PLAYING,
            )
            self._summary = None
            self._completion_delivered = False

            total_limit = self.settings.total_time_limit
            if total_limit:
                self._state.total_time_remaining = total_limit
                self._total_timer.start(total_limit)
            else:
                self._total_timer.cancel()

            self._begin_current_question()
            logger.info(
                "Started quiz %s with %s questions", self._quiz.id, len(self._prepared_questions)
            )

    def select_option(self, option_id: str) -> None:
        with self._applying("select_option") as allowed:
            question = self._playing_question() if allowed else None
            if not isinstance(question, (SingleChoiceQuestion, MultiSelectQuestion)):
                return
            if not _has_option(question, option_id):
                logger.debug("Unknown option %s for question %s", option_id, question.id)
                return
            self._answer_for(question).selected_option_ids = {option_id}

    def toggle_multi_select_option(self, option_id: str) -> None:
        with self._applying("toggle_multi_select_option") as allowed:
            question = self._playing_question() if allowed else None
            if not isinstance(question, MultiSelectQuestion):
                return
            if not _has_option(question, option_id):
                logger.debug("Unknown option %s for question %s", option_id, question.id)
                return
            selected = self._answer_for(question).selected_option_ids
            if option_id in selected:
                selected.discard(option_id)
            else:
                selected.add(option_id)

    def set_typed_answer(self, text: str) -> None:
        with self._applying("set_typed_answer") as allowed:
            question = self._playing_question() if allowed else None
            if not isinstance(question, TypeInQuestion):
                return
            self._answer_for(question).typed_answer = text

    def toggle_hint(self) -> None:
        with self._applying("toggle_hint") as allowed:
            question = self._playing_question() if allowed else None
            if question is None or not self.settings.show_hints or not question.hint:
                return
            self._state.hint_visible = not self._state.hint_visible

    def submit_answer(self) -> bool:
        """Score the current answer. Returns False when there is nothing to submit."""
        accepted = False
        with self._applying("submit_answer") as allowed:
            question = self._playing_question() if allowed else None
            if question is None:
                return False
            answer = self._state.answers.get(question.id)
            if not has_meaningful_content(question, answer):
                logger.debug("Rejected empty submission for question %s", question.id)
                return False
            self._finalize_answer(question, answer, self._elapsed_question_seconds())
            accepted = True
        return accepted

    def advance(self) -> None:
        with self._applying("advance") as allowed:
            if not allowed or self._state.phase is not SessionPhase.FEEDBACK:
                return
            if self._state.current_index < len(self._state.ordered_questions) - 1:
                self._state.current_index += 1
                self._state.phase = SessionPhase.PLAYING
                self._total_timer.resume()
                self._begin_current_question()
            else:
                self._finish()

    def restart(self) -> None:
        """Return to the intro, keeping the prepared order but zeroing progress."""
        with self._applying("restart") as allowed:
            if not allowed or self._state.phase is not SessionPhase.RESULTS:
                return
            self._cancel_timers()
            self._state = SessionState(ordered_questions=self._prepared_questions or ())
            self._summary = None
            self._completion_delivered = False
            self._question_started_at = None

    def exit(self) -> None:
        """Abandon the session. No timer callback fires afterwards."""
        self._cancel_timers()
        self._state = SessionState(ordered_questions=())
        self._summary = None
        self._question_started_at = None
        self._closed = True
        logger.debug("Session for quiz %s exited", self._quiz.id)

    # --- Timer callbacks ---

    def _handle_question_timer_expired(self) -> None:
        with self._applying("question timer expiry") as allowed:
            question = self._playing_question() if allowed else None
            if question is None:
                return
            time_limit = self._question_timer.duration_seconds or 0
            answer = self._state.answers.get(question.id)
            if answer is None:
                answer = Answer(question_id=question.id)
                self._state.answers[question.id] = answer
            logger.info("Time limit reached on question %s; forcing submission", question.id)
            self._finalize_answer(question, answer, time_limit)

    def _handle_total_timer_expired(self) -> None:
        with self._applying("total timer expiry") as allowed:
            if not allowed or self._state.phase not in (SessionPhase.PLAYING, SessionPhase.FEEDBACK):
                return
            logger.info(
                "Quiz time limit reached on question %s of %s",
                self._state.current_index + 1,
                len(self._state.ordered_questions),
            )
            self._state.total_time_remaining = 0
            self._finish()

    def _handle_question_tick(self, remaining_seconds: int) -> None:
        self._notify_change()

    def _handle_total_tick(self, remaining_seconds: int) -> None:
        self._state.total_time_remaining = remaining_seconds
        self._notify_change()

    # --- Internals ---

    @contextmanager
    def _applying(self, command: str) -> Iterator[bool]:
        if self._closed or self._transitioning:
            logger.debug(
                "Ignoring %s: %s",
                command,
                "session exited" if self._closed else "another transition is in progress",
            )
            yield False
            return
        self._transitioning = True
        try:
            yield True
        finally:
            self._transitioning = False
        self._notify_change()

    def _notify_change(self) -> None:
        for listener in list(self._change_listeners):
            listener()

    def _playing_question(self) -> Question | None:
        if self._state.phase is not SessionPhase.PLAYING:
            return None
        return self._state.ordered_questions[self._state.current_index]

    def _answer_for(self, question: Question) -> Answer:
        answer = self._state.answers.get(question.id)
        if answer is None:
            answer = Answer(question_id=question.id)
            self._state.answers[question.id] = answer
        return answer

    def _question_duration(self, question: Question) -> int | None:
        if question.time_limit_seconds:
            return question.time_limit_seconds
        if self.settings.timer_enabled and self.settings.time_per_question:
            return self.settings.time_per_question
        return None

    def _begin_current_question(self) -> None:
        question = self._state.ordered_questions[self._state.current_index]
        self._state.hint_visible = False
        self._question_started_at = self._clock()
        duration = self._question_duration(question)
        if duration:
            self._question_timer.start(duration)
        else:
            self._question_timer.cancel()

    def _elapsed_question_seconds(self) -> int:
        if self._question_started_at is None:
            return 0
        return max(0, int(self._clock() - self._question_started_at + 0.5))

    def _finalize_answer(self, question: Question, answer: Answer, time_spent: int) -> None:
        answer.is_correct = evaluate(question, answer, self.settings.type_in_match)
        answer.has_submitted = True
        answer.time_spent_seconds = time_spent

        state = self._state
        state.total_time_spent_seconds += time_spent
        if answer.is_correct:
            state.streak += 1
            state.max_streak = max(state.max_streak, state.streak)
        else:
            state.streak = 0
        state.hint_visible = False
        state.phase = SessionPhase.FEEDBACK

        self._question_timer.cancel()
        self._total_timer.pause()
        logger.debug(
            "Question %s submitted: correct=%s, %ss", question.id, answer.is_correct, time_spent
        )

    def _finish(self) -> None:
        if self._total_timer.duration_seconds is not None:
            self._state.total_time_remaining = self._total_timer.remaining_seconds
        self._cancel_timers()
        self._state.phase = SessionPhase.RESULTS

        previous_attempts = (
            self._attempt_history.get_attempts_for_quiz(self._quiz.id)
            if self._attempt_history is not None
            else []
        )
        self._summary = aggregate_results(self._quiz.id, self._state, previous_attempts)
        record = self._summary.record
        logger.info(
            "Quiz %s complete: %s/%s (%s%%), best streak %s",
            record.quiz_id,
            record.score,
            record.total_questions,
            record.percentage,
            record.max_streak,
        )
        self._deliver_completion(record)

    def _deliver_completion(self, record: CompletionRecord) -> None:
        if self._completion_delivered:
            return
        self._completion_delivered = True
        for listener in list(self._completion_listeners):
            listener(record)

    def _cancel_timers(self) -> None:
        self._question_timer.cancel()
        self._total_timer.cancel()


def _has_option(question: ChoiceQuestion, option_id: str) -> bool:
    return any(option.id == option_id for option in question.options)
