"""
Module: core.session

Purpose:
    The quiz state machine. Walks a fixed question sequence once, in order,
    accumulating a score, and tells the presentation layer what to render
    after every transition.

    States:
        IN_PROGRESS  current_index < total
        COMPLETED    current_index == total (terminal)

Key Classes:
    - QuizSession: Owns the question sequence, position and score
    - SessionState: IN_PROGRESS / COMPLETED
    - InvalidTransitionError: Transition requested in the wrong state

Dependencies:
    - core.models: questions, render instructions

Used By:
    - gui.main_window.MainWindow
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Optional

from online_quiz.core.models import (
    Question,
    QuestionPrompt,
    QuizSummary,
    RenderInstruction,
    ShowQuestion,
    ShowSummary,
)

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class InvalidTransitionError(RuntimeError):
    """Raised when an operation is not defined for the session's current state."""

    def __init__(self, operation: str, state: SessionState):
        super().__init__(f"Cannot {operation} while session is {state.value}")
        self.operation = operation
        self.state = state


class QuizSession:
    """
    Single-pass walk over a fixed question sequence.

    The session exclusively owns its counters; callers only read them.
    Every transition is synchronous and must be called from one thread
    (the GUI thread in the app).

    Invariants:
        - 0 <= score <= current_index <= total
        - current_index grows by exactly 1 per accepted transition
        - score never decreases
        - once COMPLETED, no transition is accepted

    Example:
        >>> session = QuizSession([
        ...     MultipleChoiceQuestion("capital", ("Madrid", "Paris"), 1),
        ...     TrueFalseQuestion("Java is a language", True),
        ... ])
        >>> session.submit_answer("1")
        ShowQuestion(...)
        >>> session.submit_answer("true")
        ShowSummary(summary=QuizSummary(score=2, total=2))
    """

    def __init__(self, questions: Iterable[Question]):
        self._questions: tuple[Question, ...] = tuple(questions)
        self._current_index = 0
        self._score = 0
        logger.debug(f"Session created with {len(self._questions)} questions")

    # ─────────────────────────────────────────────────────────────────────────
    # Read-only state
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def score(self) -> int:
        return self._score

    @property
    def total(self) -> int:
        return len(self._questions)

    @property
    def state(self) -> SessionState:
        if self._current_index >= len(self._questions):
            return SessionState.COMPLETED
        return SessionState.IN_PROGRESS

    @property
    def is_complete(self) -> bool:
        return self.state is SessionState.COMPLETED

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    def current_prompt(self) -> Optional[QuestionPrompt]:
        """Prompt for the current question, or None once completed."""
        if self.is_complete:
            return None
        question = self._questions[self._current_index]
        return QuestionPrompt.for_question(question, self._current_index, self.total)

    def summary(self) -> QuizSummary:
        """
        Final ``(score, total)`` summary.

        Raises:
            InvalidTransitionError: If the session is still in progress
        """
        if not self.is_complete:
            raise InvalidTransitionError("summarize", self.state)
        return QuizSummary(score=self._score, total=self.total)

    def start(self) -> RenderInstruction:
        """Render instruction for the current state (first screen)."""
        return self._instruction()

    # ─────────────────────────────────────────────────────────────────────────
    # Transitions
    # ─────────────────────────────────────────────────────────────────────────

    def submit_answer(self, response: str) -> RenderInstruction:
        """
        Answer the current question and advance.

        The response is checked before any state changes, so a malformed
        response leaves the session exactly as it was.

        Args:
            response: Raw response string for the current question

        Returns:
            ShowQuestion for the next question, or ShowSummary when done

        Raises:
            InvalidTransitionError: If the session is already completed
            MalformedResponseError: If the response cannot be parsed
        """
        if self.is_complete:
            raise InvalidTransitionError("submit an answer", self.state)

        question = self._questions[self._current_index]
        correct = question.check_answer(response)
        if correct:
            self._score += question.score()
        logger.debug(
            f"Question {self._current_index + 1}/{self.total} answered "
            f"{'correctly' if correct else 'incorrectly'} (score {self._score})"
        )
        return self._advance()

    def skip_question(self) -> RenderInstruction:
        """
        Advance past the current question without scoring it.

        Raises:
            InvalidTransitionError: If the session is already completed
        """
        if self.is_complete:
            raise InvalidTransitionError("skip a question", self.state)
        logger.debug(f"Question {self._current_index + 1}/{self.total} skipped")
        return self._advance()

    def _advance(self) -> RenderInstruction:
        self._current_index += 1
        if self.is_complete:
            logger.info(f"Quiz completed: {self._score}/{self.total}")
        return self._instruction()

    def _instruction(self) -> RenderInstruction:
        prompt = self.current_prompt()
        if prompt is None:
            return ShowSummary(self.summary())
        return ShowQuestion(prompt)
