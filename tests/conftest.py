import os
import sys
from pathlib import Path

import pytest

# Headless Qt for widget tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add src to sys.path so we can import online_quiz
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from online_quiz.core.models import MultipleChoiceQuestion, QuestionBank, TrueFalseQuestion


# Common test fixtures
@pytest.fixture
def capital_question():
    return MultipleChoiceQuestion(
        "What is the capital of France?",
        ("Madrid", "Paris", "Yaounde", "London"),
        1,
    )


@pytest.fixture
def java_question():
    return TrueFalseQuestion("Java is a programming language.", True)


@pytest.fixture
def two_questions(capital_question, java_question):
    """The two-question sequence used by the end-to-end scenarios."""
    return [capital_question, java_question]


@pytest.fixture
def small_bank(two_questions):
    return QuestionBank("Two Questions", tuple(two_questions))


@pytest.fixture
def bank_data() -> dict:
    """Valid question bank JSON document."""
    return {
        "schema_version": 1,
        "title": "Sample",
        "questions": [
            {
                "kind": "multiple_choice",
                "text": "Which planet is known as the Red Planet?",
                "choices": ["Venus", "Jupiter", "Mars", "Mercury"],
                "correct_index": 2,
            },
            {
                "kind": "true_false",
                "text": "The Earth is flat.",
                "correct_answer": False,
            },
        ],
    }
