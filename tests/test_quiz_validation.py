from __future__ import annotations

import pytest

from conftest import make_quiz, multi_select, single_choice, type_in
from quiz_player.core.models import QuizOption, SingleChoiceQuestion
from quiz_player.core.quiz_templates import QUIZ_TEMPLATES
from quiz_player.core.quiz_validation import QuizConfigurationError, validate_quiz


def test_valid_quiz_passes():
    validate_quiz(make_quiz(single_choice("q1"), multi_select("q2"), type_in("q3")))


@pytest.mark.parametrize("quiz_id", sorted(QUIZ_TEMPLATES))
def test_built_in_templates_are_playable(quiz_id):
    validate_quiz(QUIZ_TEMPLATES[quiz_id])


@pytest.mark.parametrize(
    ("questions", "message"),
    [
        ((), "at least one question"),
        ((single_choice("q1"), type_in("q1")), "reuses the id"),
        ((single_choice("q1", option_ids="a"),), "at least two options"),
        ((multi_select("q1", correct=""),), "no correct option"),
        ((single_choice("q1", option_ids="aab"),), "duplicate option ids"),
    ],
)
def test_unplayable_quizzes_are_rejected(questions, message):
    with pytest.raises(QuizConfigurationError, match=message):
        validate_quiz(make_quiz(*questions))


def test_error_names_question_number():
    bad = SingleChoiceQuestion(
        id="q2",
        prompt="No answers",
        options=(QuizOption(id="a", text="A"), QuizOption(id="b", text="B")),
    )
    with pytest.raises(QuizConfigurationError, match="Question 2"):
        validate_quiz(make_quiz(single_choice("q1"), bad))
