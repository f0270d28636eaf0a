"""
Core Models Package

Immutable, validated data models shared by the session and the GUI.

All models in this package are frozen dataclasses, so questions can be
shared freely between a running session and the widgets rendering it.
"""

from .questions import (
    POINTS_PER_QUESTION,
    MalformedResponseError,
    MultipleChoiceQuestion,
    Question,
    QuestionKind,
    TrueFalseQuestion,
    question_from_dict,
)
from .bank import BANK_SCHEMA_VERSION, QuestionBank
from .instructions import (
    QuestionPrompt,
    QuizSummary,
    RenderInstruction,
    ShowQuestion,
    ShowSummary,
)

__all__ = [
    "POINTS_PER_QUESTION",
    "MalformedResponseError",
    "MultipleChoiceQuestion",
    "Question",
    "QuestionKind",
    "TrueFalseQuestion",
    "question_from_dict",
    "BANK_SCHEMA_VERSION",
    "QuestionBank",
    "QuestionPrompt",
    "QuizSummary",
    "RenderInstruction",
    "ShowQuestion",
    "ShowSummary",
]
