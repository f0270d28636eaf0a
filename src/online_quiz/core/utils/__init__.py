"""
Utils Package

Serialization of question banks.
"""

from .serialization import (
    DEFAULT_BANK_PATH,
    QuestionBankError,
    serialize_question,
    deserialize_question,
    serialize_bank,
    deserialize_bank,
    load_question_bank,
    save_question_bank,
    load_default_bank,
)

__all__ = [
    "DEFAULT_BANK_PATH",
    "QuestionBankError",
    "serialize_question",
    "deserialize_question",
    "serialize_bank",
    "deserialize_bank",
    "load_question_bank",
    "save_question_bank",
    "load_default_bank",
]
