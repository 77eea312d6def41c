from __future__ import annotations

import copy

import pytest

from conftest import multi_select, single_choice, type_in
from quiz_player.core.models import Answer, QuizOption, SingleChoiceQuestion, TypeInMatchPolicy
from quiz_player.core.services.answer_evaluator import evaluate, has_meaningful_content


def _selected(question_id: str, *option_ids: str) -> Answer:
    return Answer(question_id=question_id, selected_option_ids=set(option_ids))


def _typed(question_id: str, text: str) -> Answer:
    return Answer(question_id=question_id, typed_answer=text)


def test_single_choice_correct_option():
    question = single_choice("q1", correct="b")
    assert evaluate(question, _selected("q1", "b")) is True


@pytest.mark.parametrize("option_id", ["a", "c", "d"])
def test_single_choice_other_option_is_wrong(option_id):
    question = single_choice("q1", correct="b")
    assert evaluate(question, _selected("q1", option_id)) is False


def test_single_choice_two_selections_is_wrong():
    question = single_choice("q1", correct="b")
    assert evaluate(question, _selected("q1", "a", "b")) is False


def test_single_choice_with_two_correct_options_never_matches():
    question = SingleChoiceQuestion(
        id="q1",
        prompt="Ambiguous",
        options=(
            QuizOption(id="a", text="A", is_correct=True),
            QuizOption(id="b", text="B", is_correct=True),
        ),
    )
    assert evaluate(question, _selected("q1", "a")) is False
    assert evaluate(question, _selected("q1", "a", "b")) is False


def test_multi_select_exact_set():
    question = multi_select("q1", correct="ac")
    assert evaluate(question, _selected("q1", "a", "c")) is True


def test_multi_select_superset_and_subset_are_wrong():
    question = multi_select("q1", correct="ac")
    assert evaluate(question, _selected("q1", "a", "c", "d")) is False
    assert evaluate(question, _selected("q1", "a")) is False
    assert evaluate(question, _selected("q1")) is False


@pytest.mark.parametrize("submitted", ["paris", " Paris ", "PARIS", "\tparis\n"])
def test_type_in_normalizes_case_and_whitespace(submitted):
    assert evaluate(type_in("q1", expected="Paris"), _typed("q1", submitted)) is True


def test_type_in_exact_rule_rejects_longer_text():
    assert evaluate(type_in("q1", expected="Paris"), _typed("q1", "Paris, France")) is False


def test_type_in_contains_policy_accepts_longer_text():
    question = type_in("q1", expected="Paris")
    assert evaluate(question, _typed("q1", "Paris, France"), TypeInMatchPolicy.CONTAINS) is True
    assert evaluate(question, _typed("q1", "Lyon"), TypeInMatchPolicy.CONTAINS) is False


@pytest.mark.parametrize("policy", list(TypeInMatchPolicy))
def test_type_in_empty_expected_answer_is_never_correct(policy):
    question = type_in("q1", expected="   ")
    assert evaluate(question, _typed("q1", ""), policy) is False
    assert evaluate(question, _typed("q1", "anything"), policy) is False


def test_missing_answer_is_incorrect():
    assert evaluate(single_choice("q1"), None) is False
    assert evaluate(type_in("q1"), None) is False


def test_evaluate_does_not_mutate_arguments():
    question = multi_select("q1", correct="ab")
    answer = _selected("q1", "a", "b")
    question_before = question.model_copy(deep=True)
    answer_before = copy.deepcopy(answer)

    evaluate(question, answer)
    evaluate(question, answer)

    assert question == question_before
    assert answer == answer_before


def test_meaningful_content_rules():
    assert has_meaningful_content(single_choice("q1"), _selected("q1", "a")) is True
    assert has_meaningful_content(single_choice("q1"), _selected("q1")) is False
    assert has_meaningful_content(multi_select("q1"), _selected("q1", "d")) is True
    assert has_meaningful_content(type_in("q1"), _typed("q1", "  x ")) is True
    assert has_meaningful_content(type_in("q1"), _typed("q1", "   ")) is False
    assert has_meaningful_content(type_in("q1"), None) is False
