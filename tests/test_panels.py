from __future__ import annotations

import pytest

pytest.importorskip("pytestqt")

from conftest import make_quiz, single_choice
from quiz_player.core.models import Answer, SessionPhase, SessionState
from quiz_player.core.services.result_aggregator import aggregate_results
from quiz_player.ui.components.intro_panel import IntroPanel
from quiz_player.ui.components.results_panel import ResultsPanel, format_duration


@pytest.mark.parametrize(("seconds", "text"), [(0, "0s"), (59, "59s"), (61, "1m 1s"), (-4, "0s")])
def test_format_duration(seconds, text):
    assert format_duration(seconds) == text


def test_intro_panel_describes_quiz(qtbot):
    panel = IntroPanel(on_start=lambda: None)
    qtbot.addWidget(panel)
    quiz = make_quiz(single_choice("q1"), single_choice("q2"), total_time_limit=60, shuffle_questions=True)

    panel.show_quiz(quiz, question_count=2, previous_best=None)
    assert panel.meta_label.text() == "2 questions  |  Timed  |  Shuffled"
    assert panel.previous_best_label.isHidden()

    panel.show_quiz(quiz, question_count=2, previous_best=75)
    assert panel.previous_best_label.text() == "Previous best: 75%"
    assert not panel.previous_best_label.isHidden()


def test_results_panel_lists_every_question(qtbot):
    restarted = []
    panel = ResultsPanel(on_restart=lambda: restarted.append(1), on_exit=lambda: None)
    qtbot.addWidget(panel)
    state = SessionState(
        ordered_questions=(single_choice("q1", explanation="Why."), single_choice("q2")),
        phase=SessionPhase.RESULTS,
        answers={"q1": Answer("q1", {"a"}, is_correct=True, has_submitted=True, time_spent_seconds=65)},
        max_streak=1,
        total_time_spent_seconds=65,
    )

    panel.show_summary(aggregate_results("quiz-1", state), show_explanations=True)
    assert panel.score_label.text() == "1 / 2 correct (50%)"
    assert panel.time_label.text() == "Time spent: 1m 5s"
    assert panel.review_list.count() == 2
    assert "Why." in panel.review_list.item(0).text()
    assert "Not answered" in panel.review_list.item(1).text()

    panel.restart_button.click()
    assert restarted == [1]
