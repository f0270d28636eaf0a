"""
Module: instructions

Purpose:
    Read-only views the quiz session hands to the presentation layer:
    the prompt to render, the final summary, and the render instruction
    returned by every transition (ShowQuestion or ShowSummary).

Dependencies:
    - dataclasses (std)
    - .questions

Used By:
    - core.session
    - gui.main_window
    - gui.widgets.question_view
    - gui.widgets.result_view
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .questions import Question, QuestionKind


@dataclass(frozen=True)
class QuestionPrompt:
    """
    Everything needed to render one question.

    Attributes:
        index: Zero-based position in the session
        total: Number of questions in the session
        text: Prompt text
        kind: Question variant
        choices: Choice labels (empty for true/false)
        options: (label, response) pairs, one per button to render
    """

    index: int
    total: int
    text: str
    kind: QuestionKind
    choices: tuple[str, ...]
    options: tuple[tuple[str, str], ...]

    @classmethod
    def for_question(cls, question: Question, index: int, total: int) -> QuestionPrompt:
        choices = question.choices if question.kind is QuestionKind.MULTIPLE_CHOICE else ()
        return cls(
            index=index,
            total=total,
            text=question.text,
            kind=question.kind,
            choices=tuple(choices),
            options=tuple(question.choice_responses()),
        )

    @property
    def number(self) -> int:
        """One-based question number for display."""
        return self.index + 1


@dataclass(frozen=True)
class QuizSummary:
    """Final result of a completed session."""

    score: int
    total: int

    def as_tuple(self) -> tuple[int, int]:
        return (self.score, self.total)

    @property
    def percentage(self) -> float:
        if self.total == 0:
            return 0.0
        return 100.0 * self.score / self.total


@dataclass(frozen=True)
class ShowQuestion:
    prompt: QuestionPrompt


@dataclass(frozen=True)
class ShowSummary:
    summary: QuizSummary


RenderInstruction = Union[ShowQuestion, ShowSummary]
