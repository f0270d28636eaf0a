"""Integration tests for the main window driving a quiz session."""

import json

import pytest
from PySide6.QtWidgets import QMessageBox

from online_quiz.core.session import SessionState
from online_quiz.gui.main_window import QUESTION_PAGE, RESULT_PAGE, MainWindow


@pytest.fixture
def dialogs(monkeypatch):
    """Record message boxes instead of blocking on them."""
    shown = []
    monkeypatch.setattr(QMessageBox, "critical", lambda *args: shown.append(("critical", args[1:])))
    monkeypatch.setattr(QMessageBox, "warning", lambda *args: shown.append(("warning", args[1:])))
    return shown


@pytest.fixture
def window(qtbot, small_bank, settings):
    win = MainWindow(small_bank, settings)
    qtbot.addWidget(win)
    return win


class TestQuizFlow:

    def test_starts_on_first_question(self, window):
        assert window.windowTitle() == "Two Questions"
        assert window.stack.currentIndex() == QUESTION_PAGE
        assert window.question_view.question_label.text() == "What is the capital of France?"
        assert window.status_bar.currentMessage() == "Question 1 of 2"

    def test_answering_everything_correctly(self, window):
        window.question_view.option_buttons[1].click()   # Paris
        assert window.question_view.question_label.text() == "Java is a programming language."

        window.question_view.option_buttons[0].click()   # True

        assert window.stack.currentIndex() == RESULT_PAGE
        assert window.result_view.score_label.text() == "Your total score is: 2/2"
        assert window.session.state is SessionState.COMPLETED

    def test_wrong_answers_score_zero(self, window):
        window.question_view.option_buttons[0].click()   # Madrid
        window.question_view.option_buttons[1].click()   # False
        assert window.result_view.score_label.text() == "Your total score is: 0/2"

    def test_next_skips_question(self, window):
        window.question_view.next_button.click()
        assert window.session.current_index == 1
        assert window.session.score == 0

    def test_completed_disables_question_input(self, window):
        window.submit_answer("1")
        window.submit_answer("false")
        assert not any(b.isEnabled() for b in window.question_view.option_buttons)
        assert not window.question_view.next_button.isEnabled()

    def test_malformed_response_is_reported_without_transition(self, window, dialogs):
        window.submit_answer("yes")

        assert window.session.current_index == 0
        assert window.stack.currentIndex() == QUESTION_PAGE
        assert dialogs and dialogs[0][0] == "critical"


class TestRestart:

    def test_try_again_starts_fresh_session(self, window):
        window.submit_answer("1")
        window.submit_answer("true")

        window.result_view.restart_button.click()

        assert window.session.current_index == 0
        assert window.session.score == 0
        assert window.stack.currentIndex() == QUESTION_PAGE
        assert all(b.isEnabled() for b in window.question_view.option_buttons)


class TestOpenQuiz:

    def test_open_valid_file_replaces_bank(self, window, tmp_path, bank_data, settings):
        path = tmp_path / "space.json"
        path.write_text(json.dumps(bank_data), encoding="utf-8")

        assert window.open_quiz_file(path) is True

        assert window.windowTitle() == "Sample"
        assert window.question_view.question_label.text() == "Which planet is known as the Red Planet?"
        assert settings.get_last_quiz_path() == str(path)

    def test_open_invalid_file_keeps_current_quiz(self, window, tmp_path, dialogs, settings):
        path = tmp_path / "broken.json"
        path.write_text("{ not json", encoding="utf-8")
        window.submit_answer("1")

        assert window.open_quiz_file(path) is False

        assert window.session.current_index == 1
        assert window.windowTitle() == "Two Questions"
        assert dialogs[0][0] == "warning"
        assert settings.get_last_quiz_path() is None

    def test_open_non_utf8_file_warns(self, window, tmp_path, dialogs):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"title": "Caf\xe9"}')

        assert window.open_quiz_file(path) is False

        assert window.windowTitle() == "Two Questions"
        assert dialogs[0][0] == "warning"


class TestWindowState:

    def test_dark_mode_toggle_is_saved(self, window, settings):
        window.dark_mode_action.trigger()
        assert settings.get_dark_mode() is True

    def test_dark_mode_toggle_keeps_finished_quiz_locked(self, window):
        window.submit_answer("1")
        window.submit_answer("true")

        window.dark_mode_action.trigger()

        assert window.stack.currentIndex() == RESULT_PAGE
        assert not any(b.isEnabled() for b in window.question_view.option_buttons)
        assert not window.question_view.next_button.isEnabled()

    def test_geometry_saved_on_close(self, window, settings):
        window.show()
        window.close()
        assert settings.get_window_geometry()
