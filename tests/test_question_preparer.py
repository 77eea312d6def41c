from __future__ import annotations

from collections import Counter
import random

from conftest import make_quiz, multi_select, single_choice, type_in
from quiz_player.core.services.question_preparer import QuestionPreparer


def _big_quiz(**settings):
    questions = [single_choice(f"s{i}", option_ids="abcdef") for i in range(6)]
    questions += [multi_select(f"m{i}", option_ids="abcdef") for i in range(3)]
    questions += [type_in(f"t{i}") for i in range(3)]
    return make_quiz(*questions, **settings)


def test_no_shuffle_keeps_authored_order():
    quiz = _big_quiz()
    prepared = QuestionPreparer(random.Random(1)).prepare(quiz)
    assert prepared == quiz.questions


def test_question_shuffle_is_a_permutation():
    quiz = _big_quiz(shuffle_questions=True)
    prepared = QuestionPreparer(random.Random(7)).prepare(quiz)

    assert Counter(q.id for q in prepared) == Counter(q.id for q in quiz.questions)
    assert [q.id for q in prepared] != [q.id for q in quiz.questions]


def test_option_shuffle_is_a_permutation_per_question():
    quiz = _big_quiz(shuffle_options=True)
    prepared = QuestionPreparer(random.Random(3)).prepare(quiz)

    originals = {q.id: q for q in quiz.questions}
    reordered = 0
    for question in prepared:
        original = originals[question.id]
        if hasattr(original, "options"):
            assert Counter(o.id for o in question.options) == Counter(o.id for o in original.options)
            assert {o.id: o.is_correct for o in question.options} == {
                o.id: o.is_correct for o in original.options
            }
            if [o.id for o in question.options] != [o.id for o in original.options]:
                reordered += 1
        else:
            assert question == original
    assert reordered > 0
    assert [q.id for q in prepared] == [q.id for q in quiz.questions]


def test_seeded_preparation_is_deterministic():
    quiz = _big_quiz(shuffle_questions=True, shuffle_options=True)
    first = QuestionPreparer(random.Random(42)).prepare(quiz)
    second = QuestionPreparer(random.Random(42)).prepare(quiz)
    assert first == second


def test_set_seed_resets_sequence():
    quiz = _big_quiz(shuffle_questions=True)
    preparer = QuestionPreparer()
    preparer.set_seed(5)
    first = preparer.prepare(quiz)
    preparer.set_seed(5)
    assert preparer.prepare(quiz) == first


def test_preparation_leaves_quiz_untouched():
    quiz = _big_quiz(shuffle_questions=True, shuffle_options=True)
    before = quiz.model_copy(deep=True)
    QuestionPreparer(random.Random(9)).prepare(quiz)
    assert quiz == before
