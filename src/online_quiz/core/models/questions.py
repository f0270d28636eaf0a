"""
Module: questions

Purpose:
    Provides the two question variants - MultipleChoiceQuestion and
    TrueFalseQuestion - joined by the ``Question`` union. Each variant
    validates a raw response string and reports its point value. No I/O,
    no UI toolkit.

Key Functions:
    - MultipleChoiceQuestion.check_answer(response): index comparison
    - TrueFalseQuestion.check_answer(response): "true"/"false" comparison
    - <variant>.score(): points awarded for a correct answer
    - <variant>.choice_responses(): (label, response) pairs a UI may submit
    - question_from_dict(data): Dispatch on the ``kind`` tag

Key Classes:
    - QuestionKind: Variant tag
    - MalformedResponseError: Response cannot be parsed for the variant

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - core.session.QuizSession
    - core.utils.serialization
    - gui.widgets.question_view
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


# Flat scoring: every question is worth the same.
POINTS_PER_QUESTION = 1

_TRUE_TOKEN = "true"
_FALSE_TOKEN = "false"

# Optional sign and ASCII digits only: no underscores, no Unicode digits
_INDEX_RE = re.compile(r"[+-]?[0-9]+")


class QuestionKind(str, Enum):
    """Variant tag, also used as the ``kind`` field in bank JSON."""

    MULTIPLE_CHOICE = "multiple_choice"
    TRUE_FALSE = "true_false"


class MalformedResponseError(ValueError):
    """
    Raised when a response string cannot be parsed for a question.

    Valid UIs only submit responses taken from ``choice_responses()``, so
    this always points at a caller bug and is never treated as "incorrect".

    Attributes:
        response: The offending raw response
        expected: Human-readable description of the accepted format
    """

    def __init__(self, response: str, expected: str):
        super().__init__(f"Malformed response {response!r}: expected {expected}")
        self.response = response
        self.expected = expected


def _check_text(text: str) -> None:
    if not isinstance(text, str) or not text.strip():
        raise ValueError(f"Question text must be a non-empty string: {text!r}")


@dataclass(frozen=True)
class MultipleChoiceQuestion:
    """
    Multiple-choice question answered by choice index (immutable).

    Attributes:
        text: Prompt shown to the player
        choices: Ordered answer options
        correct_index: Index of the correct option in ``choices``

    Invariants:
        - text is non-empty
        - len(choices) >= 1 and no choice is blank
        - 0 <= correct_index < len(choices)

    Example:
        >>> q = MultipleChoiceQuestion(
        ...     "What is the capital of France?",
        ...     ("Madrid", "Paris", "Yaounde", "London"),
        ...     1,
        ... )
        >>> q.check_answer("1")
        True
        >>> q.check_answer("3")
        False
    """

    text: str
    choices: tuple[str, ...]
    correct_index: int

    def __post_init__(self) -> None:
        """Validate question on construction."""
        _check_text(self.text)
        # Accept any sequence but store a tuple so the dataclass stays hashable
        if not isinstance(self.choices, tuple):
            object.__setattr__(self, "choices", tuple(self.choices))
        if not self.choices:
            raise ValueError(f"Multiple-choice question needs at least one choice: {self.text!r}")
        for i, choice in enumerate(self.choices):
            if not isinstance(choice, str) or not choice.strip():
                raise ValueError(f"Choice {i} must be a non-empty string: {choice!r}")
        if isinstance(self.correct_index, bool) or not isinstance(self.correct_index, int):
            raise ValueError(f"correct_index must be an int: {self.correct_index!r}")
        if not (0 <= self.correct_index < len(self.choices)):
            raise ValueError(
                f"correct_index {self.correct_index} out of range for {len(self.choices)} choices"
            )

    @property
    def kind(self) -> QuestionKind:
        return QuestionKind.MULTIPLE_CHOICE

    def check_answer(self, response: str) -> bool:
        """
        Check a response given as a choice index literal.

        Args:
            response: Index of the selected choice, e.g. "1"

        Returns:
            True iff the index equals ``correct_index``. Indices outside the
            choice range are well-formed and simply incorrect.

        Raises:
            MalformedResponseError: If response is not an integer literal
        """
        if not isinstance(response, str) or not _INDEX_RE.fullmatch(response.strip()):
            raise MalformedResponseError(response, "an integer choice index")
        return int(response.strip()) == self.correct_index

    def score(self) -> int:
        return POINTS_PER_QUESTION

    def choice_responses(self) -> list[tuple[str, str]]:
        """Return ``(label, response)`` for each choice, in order."""
        return [(choice, str(i)) for i, choice in enumerate(self.choices)]

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "text": self.text,
            "choices": list(self.choices),
            "correct_index": self.correct_index,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MultipleChoiceQuestion:
        return cls(
            text=data["text"],
            choices=tuple(data["choices"]),
            correct_index=data["correct_index"],
        )


@dataclass(frozen=True)
class TrueFalseQuestion:
    """
    True/false question answered with "true" or "false" (immutable).

    Attributes:
        text: Prompt shown to the player
        correct_answer: The correct truth value

    Example:
        >>> q = TrueFalseQuestion("The Earth is flat.", False)
        >>> q.check_answer("FALSE")
        True
    """

    text: str
    correct_answer: bool

    def __post_init__(self) -> None:
        """Validate question on construction."""
        _check_text(self.text)
        if not isinstance(self.correct_answer, bool):
            raise ValueError(f"correct_answer must be a bool: {self.correct_answer!r}")

    @property
    def kind(self) -> QuestionKind:
        return QuestionKind.TRUE_FALSE

    def check_answer(self, response: str) -> bool:
        """
        Check a "true"/"false" response (case-insensitive).

        Raises:
            MalformedResponseError: For any other token
        """
        token = response.strip().lower() if isinstance(response, str) else None
        if token == _TRUE_TOKEN:
            selected = True
        elif token == _FALSE_TOKEN:
            selected = False
        else:
            raise MalformedResponseError(response, '"true" or "false"')
        return selected == self.correct_answer

    def score(self) -> int:
        return POINTS_PER_QUESTION

    def choice_responses(self) -> list[tuple[str, str]]:
        return [("True", _TRUE_TOKEN), ("False", _FALSE_TOKEN)]

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "text": self.text,
            "correct_answer": self.correct_answer,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TrueFalseQuestion:
        return cls(text=data["text"], correct_answer=data["correct_answer"])


Question = Union[MultipleChoiceQuestion, TrueFalseQuestion]

_VARIANTS: dict[QuestionKind, type] = {
    QuestionKind.MULTIPLE_CHOICE: MultipleChoiceQuestion,
    QuestionKind.TRUE_FALSE: TrueFalseQuestion,
}


def question_from_dict(data: dict[str, Any]) -> Question:
    """
    Build the right variant from a dictionary carrying a ``kind`` tag.

    Raises:
        ValueError: If kind is unknown or the fields violate an invariant
        KeyError: If a required field is missing
    """
    try:
        kind = QuestionKind(data["kind"])
    except ValueError:
        raise ValueError(f"Unknown question kind: {data['kind']!r}") from None
    return _VARIANTS[kind].from_dict(data)
