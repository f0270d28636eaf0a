"""
Result page shown once the quiz is complete.
"""
from PySide6.QtCore import QSize, Qt, Signal
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from online_quiz.core.models import QuizSummary
from online_quiz.gui.styles.theme import get_styles
from online_quiz.gui.utils.icons import MaterialIcons


def format_score(summary: QuizSummary) -> str:
    return f"Your total score is: {summary.score}/{summary.total}"


class ResultView(QWidget):
    restartRequested = Signal()
    exitRequested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)

        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(32, 24, 32, 24)
        self.layout.addStretch()

        self.icon_label = QLabel()
        self.icon_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.layout.addWidget(self.icon_label)

        self.score_label = QLabel()
        self.score_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.layout.addWidget(self.score_label)

        self.percentage_label = QLabel()
        self.percentage_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.layout.addWidget(self.percentage_label)

        self.layout.addStretch()

        buttons = QHBoxLayout()
        self.restart_button = QPushButton("Try Again")
        self.restart_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.restart_button.clicked.connect(self.restartRequested.emit)
        buttons.addWidget(self.restart_button)

        buttons.addStretch()

        self.exit_button = QPushButton("Exit")
        self.exit_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.exit_button.clicked.connect(self.exitRequested.emit)
        buttons.addWidget(self.exit_button)
        self.layout.addLayout(buttons)

        self._update_styles()

    def show_summary(self, summary: QuizSummary) -> None:
        self.score_label.setText(format_score(summary))
        self.percentage_label.setText(f"{summary.percentage:.0f}% correct")

    def update_theme(self) -> None:
        """Update styles when theme changes."""
        self._update_styles()

    def _update_styles(self) -> None:
        S = get_styles()
        self.score_label.setStyleSheet(S.SCORE_LABEL)
        self.percentage_label.setStyleSheet(S.PROGRESS_LABEL)
        self.restart_button.setStyleSheet(S.BUTTON_SECONDARY)
        self.exit_button.setStyleSheet(S.BUTTON_PRIMARY)
        self.icon_label.setPixmap(MaterialIcons.trophy().pixmap(QSize(64, 64)))
        self.restart_button.setIcon(MaterialIcons.restart())
        self.exit_button.setIcon(MaterialIcons.exit())
