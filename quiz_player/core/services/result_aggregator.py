"""Builds the completion record and results review for a finished session."""

from __future__ import annotations

import copy
from typing import Iterable

from quiz_player.core.models import (
    CompletionRecord,
    QuestionResult,
    QuestionReview,
    SessionState,
    SessionSummary,
)


def calculate_percentage(correct: int, total: int) -> int:
    """Percentage rounded half up, so 1 of 8 reports 13 rather than 12."""
    if total <= 0:
        return 0
    return (correct * 200 + total) // (2 * total)


def aggregate_results(
    quiz_id: str,
    state: SessionState,
    previous_attempts: Iterable[CompletionRecord] = (),
) -> SessionSummary:
    """Derive the final summary without touching ``state``.

    Questions the session never reached have no answer and count as incorrect.
    Only answers that exist appear in the record's per-question results.
    """
    questions = state.ordered_questions
    total = len(questions)
    correct = sum(1 for answer in state.answers.values() if answer.is_correct)
    percentage = calculate_percentage(correct, total)

    reviews: list[QuestionReview] = []
    results: list[QuestionResult] = []
    for question in questions:
        answer = state.answers.get(question.id)
        is_correct = bool(answer is not None and answer.is_correct)
        reviews.append(
            QuestionReview(
                question=question,
                answer=copy.deepcopy(answer),
                is_correct=is_correct,
            )
        )
        if answer is not None:
            results.append(
                QuestionResult(
                    question_id=question.id,
                    is_correct=is_correct,
                    time_spent_seconds=answer.time_spent_seconds,
                )
            )

    record = CompletionRecord(
        quiz_id=quiz_id,
        score=correct,
        total_questions=total,
        percentage=percentage,
        max_streak=state.max_streak,
        time_spent=state.total_time_spent_seconds,
        time_remaining=state.total_time_remaining,
        per_question_results=tuple(results),
    )

    previous_best = best_previous_percentage(quiz_id, previous_attempts)
    return SessionSummary(
        record=record,
        reviews=tuple(reviews),
        previous_best_percentage=previous_best,
        is_new_best=previous_best is None or percentage > previous_best,
    )


def best_previous_percentage(
    quiz_id: str, previous_attempts: Iterable[CompletionRecord]
) -> int | None:
    percentages = [attempt.percentage for attempt in previous_attempts if attempt.quiz_id == quiz_id]
    if not percentages:
        return None
    return max(percentages)
