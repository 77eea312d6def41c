from __future__ import annotations

import os
from typing import Callable

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from quiz_player.core.models import (
    MultiSelectQuestion,
    Quiz,
    QuizOption,
    QuizSettings,
    SingleChoiceQuestion,
    TypeInQuestion,
)


class VirtualTickHandle:
    def __init__(self, seq: int, interval: float, callback: Callable[[], None], next_fire: float) -> None:
        self.seq = seq
        self.interval = interval
        self.callback = callback
        self.next_fire = next_fire
        self.active = True

    def cancel(self) -> None:
        self.active = False


class VirtualScheduler:
    """Tick scheduler and clock driven by ``advance`` instead of wall time."""

    def __init__(self) -> None:
        self.now = 0.0
        self._handles: list[VirtualTickHandle] = []
        self._seq = 0

    def clock(self) -> float:
        return self.now

    def schedule_repeating(self, interval_seconds: float, callback: Callable[[], None]) -> VirtualTickHandle:
        self._seq += 1
        handle = VirtualTickHandle(self._seq, interval_seconds, callback, self.now + interval_seconds)
        self._handles.append(handle)
        return handle

    @property
    def active_handles(self) -> list[VirtualTickHandle]:
        return [handle for handle in self._handles if handle.active]

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        while True:
            due = [h for h in self._handles if h.active and h.next_fire <= target]
            if not due:
                break
            handle = min(due, key=lambda h: (h.next_fire, h.seq))
            self.now = handle.next_fire
            handle.next_fire += handle.interval
            handle.callback()
        self.now = target


@pytest.fixture
def scheduler() -> VirtualScheduler:
    return VirtualScheduler()


def single_choice(question_id: str, correct: str = "a", option_ids: str = "abcd", **kwargs) -> SingleChoiceQuestion:
    return SingleChoiceQuestion(
        id=question_id,
        prompt=f"Prompt {question_id}",
        options=tuple(
            QuizOption(id=option_id, text=option_id.upper(), is_correct=option_id == correct)
            for option_id in option_ids
        ),
        **kwargs,
    )


def multi_select(question_id: str, correct: str = "ab", option_ids: str = "abcd", **kwargs) -> MultiSelectQuestion:
    return MultiSelectQuestion(
        id=question_id,
        prompt=f"Prompt {question_id}",
        options=tuple(
            QuizOption(id=option_id, text=option_id.upper(), is_correct=option_id in correct)
            for option_id in option_ids
        ),
        **kwargs,
    )


def type_in(question_id: str, expected: str = "Paris", **kwargs) -> TypeInQuestion:
    return TypeInQuestion(id=question_id, prompt=f"Prompt {question_id}", expected_answer=expected, **kwargs)


def make_quiz(*questions, quiz_id: str = "quiz-1", **settings) -> Quiz:
    return Quiz(id=quiz_id, title="Test quiz", questions=questions, settings=QuizSettings(**settings))
