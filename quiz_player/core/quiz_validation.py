"""Playability checks run before a quiz session may start."""

from __future__ import annotations

from quiz_player.core.models import ChoiceQuestion, MultiSelectQuestion, Quiz, SingleChoiceQuestion


class QuizConfigurationError(Exception):
    """Raised when a quiz cannot be played as configured."""


def validate_quiz(quiz: Quiz) -> None:
    if not quiz.questions:
        raise QuizConfigurationError("Quiz must contain at least one question.")

    seen_ids: set[str] = set()
    for number, question in enumerate(quiz.questions, start=1):
        if question.id in seen_ids:
            raise QuizConfigurationError(
                f"Question {number} reuses the id '{question.id}'."
            )
        seen_ids.add(question.id)

        if isinstance(question, (SingleChoiceQuestion, MultiSelectQuestion)):
            _validate_options(number, question)


def _validate_options(number: int, question: ChoiceQuestion) -> None:
    if len(question.options) < 2:
        raise QuizConfigurationError(f"Question {number} needs at least two options.")
    option_ids = [option.id for option in question.options]
    if len(set(option_ids)) != len(option_ids):
        raise QuizConfigurationError(f"Question {number} has duplicate option ids.")
    if not any(option.is_correct for option in question.options):
        raise QuizConfigurationError(f"Question {number} has no correct option.")
