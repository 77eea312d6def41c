"""Service that fixes the question and option order for a session."""

from __future__ import annotations

import random

from quiz_player.core.models import MultiSelectQuestion, Question, Quiz, SingleChoiceQuestion


class QuestionPreparer:
    """Computes the prepared order once; callers keep the result for the session."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._shuffle_rng = rng or random.Random()

    def set_seed(self, seed: int | None) -> None:
        self._shuffle_rng.seed(seed)

    def prepare(self, quiz: Quiz) -> tuple[Question, ...]:
        settings = quiz.settings
        questions = list(quiz.questions)

        if settings.shuffle_questions:
            self._shuffle_rng.shuffle(questions)

        if settings.shuffle_options:
            questions = [self._shuffle_options(question) for question in questions]

        return tuple(questions)

    def _shuffle_options(self, question: Question) -> Question:
        if not isinstance(question, (SingleChoiceQuestion, MultiSelectQuestion)):
            return question
        options = list(question.options)
        self._shuffle_rng.shuffle(options)
        return question.model_copy(update={"options": tuple(options)})
