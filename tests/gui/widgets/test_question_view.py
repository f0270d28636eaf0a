"""Unit tests for the question page."""

import pytest

from online_quiz.core.models import QuestionPrompt
from online_quiz.gui.widgets.question_view import QuestionView


@pytest.fixture
def view(qtbot):
    widget = QuestionView()
    qtbot.addWidget(widget)
    return widget


class TestMultipleChoicePrompt:

    def test_one_button_per_choice(self, view, capital_question):
        view.show_prompt(QuestionPrompt.for_question(capital_question, 0, 10))

        assert [b.text() for b in view.option_buttons] == ["Madrid", "Paris", "Yaounde", "London"]
        assert view.question_label.text() == "What is the capital of France?"
        assert view.progress_label.text() == "Question 1 of 10"

    def test_clicking_choice_submits_its_index(self, view, qtbot, capital_question):
        view.show_prompt(QuestionPrompt.for_question(capital_question, 0, 1))

        with qtbot.waitSignal(view.answerSubmitted, timeout=1000) as blocker:
            view.option_buttons[2].click()

        assert blocker.args == ["2"]


class TestTrueFalsePrompt:

    def test_true_and_false_buttons(self, view, java_question):
        view.show_prompt(QuestionPrompt.for_question(java_question, 3, 10))

        assert [b.text() for b in view.option_buttons] == ["True", "False"]
        assert view.progress_label.text() == "Question 4 of 10"

    @pytest.mark.parametrize("button_index, response", [(0, "true"), (1, "false")])
    def test_clicking_submits_token(self, view, qtbot, java_question, button_index, response):
        view.show_prompt(QuestionPrompt.for_question(java_question, 0, 1))

        with qtbot.waitSignal(view.answerSubmitted, timeout=1000) as blocker:
            view.option_buttons[button_index].click()

        assert blocker.args == [response]


class TestPromptReplacement:

    def test_new_prompt_replaces_old_buttons(self, view, capital_question, java_question):
        view.show_prompt(QuestionPrompt.for_question(capital_question, 0, 2))
        view.show_prompt(QuestionPrompt.for_question(java_question, 1, 2))

        assert len(view.option_buttons) == 2
        assert view.prompt.text == java_question.text

    def test_theme_update_keeps_prompt(self, view, capital_question):
        view.show_prompt(QuestionPrompt.for_question(capital_question, 0, 1))
        view.update_theme()
        assert len(view.option_buttons) == 4


class TestInputState:

    def test_next_button_requests_skip(self, view, qtbot, capital_question):
        view.show_prompt(QuestionPrompt.for_question(capital_question, 0, 1))
        with qtbot.waitSignal(view.skipRequested, timeout=1000):
            view.next_button.click()

    def test_disabled_input_emits_nothing(self, view, qtbot, capital_question):
        view.show_prompt(QuestionPrompt.for_question(capital_question, 0, 1))
        view.set_input_enabled(False)

        with qtbot.assertNotEmitted(view.answerSubmitted):
            view.option_buttons[1].click()
        assert not view.next_button.isEnabled()

    def test_show_prompt_reenables_input(self, view, capital_question):
        view.set_input_enabled(False)
        view.show_prompt(QuestionPrompt.for_question(capital_question, 0, 1))
        assert all(b.isEnabled() for b in view.option_buttons)
        assert view.next_button.isEnabled()

    def test_theme_update_keeps_input_disabled(self, view, java_question):
        view.show_prompt(QuestionPrompt.for_question(java_question, 0, 1))
        view.set_input_enabled(False)

        view.update_theme()

        assert len(view.option_buttons) == 2
        assert not any(b.isEnabled() for b in view.option_buttons)
        assert not view.next_button.isEnabled()
