"""
Question page: prompt text, one button per answer option, and a Next button.
"""
from typing import List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from online_quiz.core.models import QuestionKind, QuestionPrompt
from online_quiz.gui.styles.theme import get_styles
from online_quiz.gui.utils.icons import MaterialIcons


class QuestionView(QWidget):
    """
    Renders a QuestionPrompt.

    Option buttons never build responses themselves: each one submits the
    response string paired with its label in ``prompt.options``.
    """

    answerSubmitted = Signal(str)
    skipRequested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._prompt: Optional[QuestionPrompt] = None
        self.option_buttons: List[QPushButton] = []

        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(32, 24, 32, 24)
        self.layout.setSpacing(16)

        self.progress_label = QLabel()
        self.layout.addWidget(self.progress_label)

        self.question_label = QLabel()
        self.question_label.setWordWrap(True)
        self.question_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.layout.addWidget(self.question_label)

        self.options_container = QWidget()
        self.options_layout = QVBoxLayout(self.options_container)
        self.options_layout.setContentsMargins(0, 0, 0, 0)
        self.options_layout.setSpacing(8)
        self.layout.addWidget(self.options_container)

        self.layout.addStretch()

        footer = QHBoxLayout()
        footer.addStretch()
        self.next_button = QPushButton("Next")
        self.next_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.next_button.setToolTip("Skip this question without answering")
        self.next_button.clicked.connect(self.skipRequested.emit)
        footer.addWidget(self.next_button)
        self.layout.addLayout(footer)

        self._update_styles()

    @property
    def prompt(self) -> Optional[QuestionPrompt]:
        return self._prompt

    def show_prompt(self, prompt: QuestionPrompt) -> None:
        """Replace the displayed question."""
        self._prompt = prompt
        self.progress_label.setText(f"Question {prompt.number} of {prompt.total}")
        self.question_label.setText(prompt.text)
        self._clear_options()

        if prompt.kind is QuestionKind.TRUE_FALSE:
            # Side by side, as two big buttons
            row = QHBoxLayout()
            for label, response in prompt.options:
                button = self._make_option_button(label, response)
                button.setIcon(
                    MaterialIcons.true_answer() if response == "true" else MaterialIcons.false_answer()
                )
                row.addWidget(button)
            self.options_layout.addLayout(row)
        else:
            for label, response in prompt.options:
                self.options_layout.addWidget(self._make_option_button(label, response))

        self.set_input_enabled(True)

    def set_input_enabled(self, enabled: bool) -> None:
        """Enable or disable every answer and skip button."""
        for button in self.option_buttons:
            button.setEnabled(enabled)
        self.next_button.setEnabled(enabled)

    def update_theme(self) -> None:
        """Update styles when theme changes."""
        self._update_styles()
        if self._prompt is not None:
            # Re-render for the new icon colours without re-enabling a finished quiz
            enabled = self.next_button.isEnabled()
            self.show_prompt(self._prompt)
            self.set_input_enabled(enabled)

    def _make_option_button(self, label: str, response: str) -> QPushButton:
        button = QPushButton(label)
        button.setCursor(Qt.CursorShape.PointingHandCursor)
        button.setStyleSheet(get_styles().CHOICE_BUTTON)
        button.clicked.connect(lambda _checked=False, r=response: self.answerSubmitted.emit(r))
        self.option_buttons.append(button)
        return button

    def _clear_options(self) -> None:
        for button in self.option_buttons:
            button.deleteLater()
        self.option_buttons = []
        # Drop nested row layouts left from a true/false prompt
        while self.options_layout.count():
            item = self.options_layout.takeAt(0)
            if item.layout() is not None:
                item.layout().deleteLater()

    def _update_styles(self) -> None:
        S = get_styles()
        self.progress_label.setStyleSheet(S.PROGRESS_LABEL)
        self.question_label.setStyleSheet(S.QUESTION_LABEL)
        self.next_button.setStyleSheet(S.BUTTON_PRIMARY)
        self.next_button.setIcon(MaterialIcons.skip())
