"""Correctness rules for every question variant."""

from __future__ import annotations

from typing import assert_never

from quiz_player.core.models import (
    Answer,
    MultiSelectQuestion,
    Question,
    SingleChoiceQuestion,
    TypeInMatchPolicy,
    TypeInQuestion,
)


def evaluate(
    question: Question,
    answer: Answer | None,
    policy: TypeInMatchPolicy = TypeInMatchPolicy.EXACT,
) -> bool:
    """Return whether ``answer`` is correct for ``question``.

    A missing answer is always incorrect. Neither argument is modified.
    """
    if answer is None:
        return False

    match question:
        case SingleChoiceQuestion():
            correct_ids = {option.id for option in question.options if option.is_correct}
            return len(correct_ids) == 1 and answer.selected_option_ids == correct_ids
        case MultiSelectQuestion():
            correct_ids = {option.id for option in question.options if option.is_correct}
            return set(answer.selected_option_ids) == correct_ids
        case TypeInQuestion():
            return _matches_typed_answer(question.expected_answer, answer.typed_answer, policy)
        case _:
            assert_never(question)


def has_meaningful_content(question: Question, answer: Answer | None) -> bool:
    """Whether an explicit submission of ``answer`` should be accepted."""
    if answer is None:
        return False

    match question:
        case SingleChoiceQuestion() | MultiSelectQuestion():
            return bool(answer.selected_option_ids)
        case TypeInQuestion():
            return bool(answer.typed_answer.strip())
        case _:
            assert_never(question)


def normalize_text(text: str) -> str:
    return text.strip().lower()


def _matches_typed_answer(expected: str, submitted: str, policy: TypeInMatchPolicy) -> bool:
    normalized_expected = normalize_text(expected)
    if not normalized_expected:
        return False
    normalized_submitted = normalize_text(submitted)
    if policy is TypeInMatchPolicy.CONTAINS:
        return normalized_expected in normalized_submitted
    return normalized_submitted == normalized_expected
