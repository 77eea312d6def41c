from __future__ import annotations

import pytest

from conftest import single_choice
from quiz_player.core.models import Answer, CompletionRecord, SessionPhase, SessionState
from quiz_player.core.services.result_aggregator import (
    aggregate_results,
    best_previous_percentage,
    calculate_percentage,
)


@pytest.mark.parametrize(
    ("correct", "total", "expected"),
    [(2, 3, 67), (1, 3, 33), (1, 8, 13), (1, 2, 50), (0, 4, 0), (4, 4, 100), (0, 0, 0)],
)
def test_percentage_rounds_half_up(correct, total, expected):
    assert calculate_percentage(correct, total) == expected


def _record(quiz_id: str, percentage: int) -> CompletionRecord:
    return CompletionRecord(
        quiz_id=quiz_id,
        score=0,
        total_questions=1,
        percentage=percentage,
        max_streak=0,
        time_spent=0,
        time_remaining=None,
        per_question_results=(),
    )


def _finished_state() -> SessionState:
    questions = (single_choice("q1"), single_choice("q2"), single_choice("q3"))
    return SessionState(
        ordered_questions=questions,
        phase=SessionPhase.RESULTS,
        current_index=1,
        answers={
            "q1": Answer("q1", {"a"}, is_correct=True, has_submitted=True, time_spent_seconds=4),
            "q2": Answer("q2", {"b"}, is_correct=False, has_submitted=True, time_spent_seconds=6),
        },
        streak=0,
        max_streak=1,
        total_time_spent_seconds=10,
        total_time_remaining=0,
    )


def test_unreached_questions_count_as_incorrect():
    summary = aggregate_results("quiz-1", _finished_state())
    record = summary.record

    assert (record.score, record.total_questions, record.percentage) == (1, 3, 33)
    assert record.time_spent == 10
    assert record.time_remaining == 0
    assert [(r.question_id, r.is_correct, r.time_spent_seconds) for r in record.per_question_results] == [
        ("q1", True, 4),
        ("q2", False, 6),
    ]
    assert [review.question.id for review in summary.reviews] == ["q1", "q2", "q3"]
    assert summary.reviews[2].answer is None
    assert summary.reviews[2].is_correct is False


def test_aggregation_does_not_share_state():
    state = _finished_state()
    summary = aggregate_results("quiz-1", state)
    state.answers["q1"].selected_option_ids.add("c")
    assert summary.reviews[0].answer.selected_option_ids == {"a"}


def test_previous_best_only_considers_same_quiz():
    attempts = [_record("quiz-1", 20), _record("other", 90), _record("quiz-1", 40)]
    assert best_previous_percentage("quiz-1", attempts) == 40
    assert best_previous_percentage("missing", attempts) is None

    summary = aggregate_results("quiz-1", _finished_state(), attempts)
    assert summary.previous_best_percentage == 40
    assert summary.is_new_best is False

    summary = aggregate_results("quiz-1", _finished_state(), [_record("quiz-1", 20)])
    assert summary.is_new_best is True


def test_first_attempt_is_new_best():
    summary = aggregate_results("quiz-1", _finished_state())
    assert summary.previous_best_percentage is None
    assert summary.is_new_best is True
