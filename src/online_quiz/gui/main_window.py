"""
Main Window for the Online Quiz GUI.
"""
import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QByteArray
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QApplication, QFileDialog, QMainWindow, QMessageBox, QStackedWidget
)

from online_quiz import __version__
from online_quiz.core import QuizSession
from online_quiz.core.models import (
    MalformedResponseError, QuestionBank, RenderInstruction, ShowQuestion, ShowSummary
)
from online_quiz.core.schemas import ValidationError
from online_quiz.core.utils import QuestionBankError, load_question_bank
from online_quiz.gui.models.settings import SettingsStore
from online_quiz.gui.styles.theme import apply_theme
from online_quiz.gui.widgets.question_view import QuestionView
from online_quiz.gui.widgets.result_view import ResultView

logger = logging.getLogger(__name__)

QUESTION_PAGE = 0
RESULT_PAGE = 1


class MainWindow(QMainWindow):
    def __init__(self, bank: QuestionBank, settings: SettingsStore):
        super().__init__()
        self.settings = settings
        self.bank = bank
        self.session = QuizSession(bank.questions)

        self.resize(500, 400)
        self.setMinimumSize(420, 320)

        # --- Menu Bar ---
        self.menu_bar = self.menuBar()

        file_menu = self.menu_bar.addMenu("File")
        open_action = QAction("Open Quiz...", self)
        open_action.setShortcut(QKeySequence.StandardKey.Open)
        open_action.triggered.connect(self._open_quiz_dialog)
        file_menu.addAction(open_action)

        restart_action = QAction("Restart Quiz", self)
        restart_action.triggered.connect(self.restart)
        file_menu.addAction(restart_action)

        file_menu.addSeparator()
        exit_action = QAction("Quit", self)
        exit_action.setShortcut(QKeySequence.StandardKey.Quit)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        settings_menu = self.menu_bar.addMenu("Settings")
        self.dark_mode_action = QAction("Dark Mode", self)
        self.dark_mode_action.setCheckable(True)
        self.dark_mode_action.setChecked(self.settings.get_dark_mode())
        self.dark_mode_action.triggered.connect(self._toggle_theme)
        settings_menu.addAction(self.dark_mode_action)

        help_menu = self.menu_bar.addMenu("Help")
        about_action = QAction("About", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

        # --- Pages ---
        self.stack = QStackedWidget()
        self.question_view = QuestionView()
        self.result_view = ResultView()
        self.stack.insertWidget(QUESTION_PAGE, self.question_view)
        self.stack.insertWidget(RESULT_PAGE, self.result_view)
        self.setCentralWidget(self.stack)

        self.question_view.answerSubmitted.connect(self.submit_answer)
        self.question_view.skipRequested.connect(self.skip_question)
        self.result_view.restartRequested.connect(self.restart)
        self.result_view.exitRequested.connect(self.close)

        self.status_bar = self.statusBar()

        geometry = self.settings.get_window_geometry()
        if geometry:
            self.restoreGeometry(QByteArray.fromHex(geometry.encode("ascii")))

        self._update_title()
        self._render(self.session.start())

    # ─────────────────────────────────────────────────────────────────────────
    # Session commands
    # ─────────────────────────────────────────────────────────────────────────

    def submit_answer(self, response: str) -> None:
        try:
            instruction = self.session.submit_answer(response)
        except MalformedResponseError as e:
            # A valid view only submits responses it was given; this is a UI bug
            logger.error(f"Rejected response for question {self.session.current_index + 1}: {e}")
            QMessageBox.critical(self, "Invalid Answer", str(e))
            return
        self._render(instruction)

    def skip_question(self) -> None:
        self._render(self.session.skip_question())

    def restart(self) -> None:
        """Start a fresh session over the current bank."""
        logger.info("Restarting quiz")
        self.session = QuizSession(self.bank.questions)
        self._render(self.session.start())

    def load_bank(self, bank: QuestionBank) -> None:
        """Replace the current bank and start over."""
        self.bank = bank
        self._update_title()
        self.restart()

    def open_quiz_file(self, path: Path) -> bool:
        """Load a bank file, keeping the current quiz if it fails. Returns success."""
        try:
            bank = load_question_bank(path)
        except (QuestionBankError, ValidationError) as e:
            logger.warning(f"Could not open quiz {path}: {e}")
            QMessageBox.warning(self, "Could Not Open Quiz", str(e))
            return False
        self.settings.set_last_quiz_path(str(path))
        self.load_bank(bank)
        return True

    # ─────────────────────────────────────────────────────────────────────────
    # Rendering
    # ─────────────────────────────────────────────────────────────────────────

    def _render(self, instruction: RenderInstruction) -> None:
        if isinstance(instruction, ShowQuestion):
            prompt = instruction.prompt
            self.question_view.show_prompt(prompt)
            self.stack.setCurrentIndex(QUESTION_PAGE)
            self.status_bar.showMessage(f"Question {prompt.number} of {prompt.total}")
        elif isinstance(instruction, ShowSummary):
            # Completed is terminal: nothing on the question page may submit again
            self.question_view.set_input_enabled(False)
            self.result_view.show_summary(instruction.summary)
            self.stack.setCurrentIndex(RESULT_PAGE)
            self.status_bar.showMessage("Quiz complete")
        else:
            raise TypeError(f"Unknown render instruction: {instruction!r}")

    def _update_title(self) -> None:
        self.setWindowTitle(self.bank.title)

    # ─────────────────────────────────────────────────────────────────────────
    # Menu handlers
    # ─────────────────────────────────────────────────────────────────────────

    def _open_quiz_dialog(self) -> None:
        start_dir = self.settings.get_last_quiz_path() or str(Path.home())
        path, _ = QFileDialog.getOpenFileName(
            self, "Open Quiz", start_dir, "Quiz files (*.json);;All files (*)"
        )
        if path:
            self.open_quiz_file(Path(path))

    def _toggle_theme(self, checked: bool) -> None:
        self.settings.set_dark_mode(checked)
        app = QApplication.instance()
        if app is not None:
            apply_theme(app, checked)
        self.question_view.update_theme()
        self.result_view.update_theme()

    def _show_about(self) -> None:
        QMessageBox.about(
            self,
            "About Online Quiz",
            f"Online Quiz v{__version__}\n\n"
            f"{len(self.bank)} questions loaded from \"{self.bank.title}\".",
        )

    def closeEvent(self, event) -> None:
        self.settings.set_window_geometry(self.saveGeometry().toHex().data().decode("ascii"))
        super().closeEvent(event)
