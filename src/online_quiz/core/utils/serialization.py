"""
Serialization Utilities

Provides to/from JSON utilities for question banks.

- ``serialize_*`` / ``deserialize_*`` convert between models and dicts
- ``load_question_bank`` / ``save_question_bank`` handle files
- ``load_default_bank`` reads the bank shipped with the package

Validation always runs before deserialization, so a bank that loads is a
bank a session can be started from.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..models.bank import QuestionBank
from ..models.questions import Question, question_from_dict
from ..schemas.validator import validate_question, validate_question_bank


logger = logging.getLogger(__name__)

DEFAULT_BANK_PATH = Path(__file__).resolve().parent.parent.parent / "data" / "default_bank.json"


class QuestionBankError(Exception):
    """Raised when a question bank file cannot be read or parsed."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


# ─────────────────────────────────────────────────────────────────────────────
# Question Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_question(question: Question) -> dict[str, Any]:
    return question.to_dict()


def deserialize_question(data: dict[str, Any], *, validate: bool = True) -> Question:
    """
    Deserialize a single question.

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If the fields violate a model invariant
    """
    if validate:
        validate_question(data)
    return question_from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# Bank Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_bank(bank: QuestionBank) -> dict[str, Any]:
    return bank.to_dict()


def deserialize_bank(data: dict[str, Any], *, strict: bool = False) -> QuestionBank:
    """
    Deserialize a question bank.

    Args:
        data: Parsed JSON document
        strict: Run full JSON Schema validation as well as basic checks

    Raises:
        ValidationError: If data is invalid
    """
    validate_question_bank(data, strict=strict)
    return QuestionBank.from_dict(data)


def load_question_bank(path: Path, *, strict: bool = True) -> QuestionBank:
    """
    Load and validate a question bank file.

    Raises:
        QuestionBankError: If the file is missing, unreadable or not JSON
        ValidationError: If the content fails validation
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise QuestionBankError(f"Question bank not found: {path}", path) from e
    except OSError as e:
        raise QuestionBankError(f"Failed to read question bank {path}: {e}", path) from e
    except UnicodeDecodeError as e:
        raise QuestionBankError(f"Question bank is not valid UTF-8 JSON ({path}): {e}", path) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise QuestionBankError(f"Question bank is not valid JSON ({path}): {e}", path) from e

    bank = deserialize_bank(data, strict=strict)
    logger.info(f"Loaded {len(bank)} questions from {path.name}")
    return bank


def save_question_bank(path: Path, bank: QuestionBank) -> None:
    """
    Write a question bank with atomic replacement.

    Uses a temp file so an interrupted write never leaves a truncated bank.

    Raises:
        QuestionBankError: If the file cannot be written
    """
    path = Path(path)
    temp_path = path.with_suffix(".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path.write_text(json.dumps(serialize_bank(bank), indent=2), encoding="utf-8")
        temp_path.replace(path)
    except OSError as e:
        if temp_path.exists():
            temp_path.unlink()
        raise QuestionBankError(f"Failed to save question bank {path}: {e}", path) from e


def load_default_bank() -> QuestionBank:
    """Load the question bank bundled with the package."""
    return load_question_bank(DEFAULT_BANK_PATH)
