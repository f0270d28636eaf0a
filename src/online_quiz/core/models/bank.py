"""
Module: bank

Purpose:
    Provides QuestionBank - a titled, ordered, immutable question list. This
    is the configuration input a QuizSession is started from, whether it
    comes from the bundled default bank or a user-supplied JSON file.

Dependencies:
    - dataclasses (std)
    - .questions

Used By:
    - core.utils.serialization
    - gui.main_window
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .questions import Question, QuestionKind, question_from_dict


BANK_SCHEMA_VERSION = 1


@dataclass(frozen=True)
class QuestionBank:
    """
    Ordered question list with a display title (immutable).

    Attributes:
        title: Display title, shown in the window title
        questions: Questions in presentation order
    """

    title: str
    questions: tuple[Question, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.questions, tuple):
            object.__setattr__(self, "questions", tuple(self.questions))

    def __len__(self) -> int:
        return len(self.questions)

    def count(self, kind: QuestionKind) -> int:
        """Number of questions of the given variant."""
        return sum(1 for q in self.questions if q.kind is kind)

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema_version": BANK_SCHEMA_VERSION,
            "title": self.title,
            "questions": [q.to_dict() for q in self.questions],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QuestionBank:
        return cls(
            title=data.get("title") or "Online Quiz",
            questions=tuple(question_from_dict(q) for q in data["questions"]),
        )
