"""
Schema Validation Utilities

Validates question bank JSON before any model is built from it.

Two levels:
- Basic checks (always): required fields, schema version, per-question
  kind and field types, ``correct_index`` within the choice range.
- Strict mode: full JSON Schema validation via ``jsonschema`` against
  ``question_bank.schema.json``.

The basic checks cover the one rule JSON Schema cannot express here
(``correct_index < len(choices)``), so strict mode runs both.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..models.bank import BANK_SCHEMA_VERSION

_KINDS = ("multiple_choice", "true_false")

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_question_bank(data: Any, *, strict: bool = False) -> None:
    """
    Validate question bank data.

    Args:
        data: Parsed JSON document
        strict: If True, also validate against the JSON Schema

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("Question bank must be a JSON object", path="")

    required = ["schema_version", "questions"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing]
        )

    version = data.get("schema_version")
    if version != BANK_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported question bank schema version: {version} (expected {BANK_SCHEMA_VERSION})",
            path="schema_version"
        )

    title = data.get("title")
    if title is not None and not isinstance(title, str):
        raise ValidationError("title must be a string", path="title")

    questions = data.get("questions")
    if not isinstance(questions, list):
        raise ValidationError("questions must be a list", path="questions")
    if not questions:
        raise ValidationError("Question bank has no questions", path="questions")

    for i, question in enumerate(questions):
        validate_question(question, path=f"questions[{i}]")

    if strict:
        import jsonschema

        schema = _load_schema("question_bank")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message]
            ) from e


def validate_question(data: Any, path: str = "") -> None:
    """Validate a single question object."""
    if not isinstance(data, dict):
        raise ValidationError("Question must be an object", path=path)

    kind = data.get("kind")
    if kind not in _KINDS:
        raise ValidationError(f"Invalid question kind: {kind!r}", path=f"{path}.kind")

    text = data.get("text")
    if not isinstance(text, str) or not text.strip():
        raise ValidationError("text must be a non-empty string", path=f"{path}.text")

    if kind == "multiple_choice":
        _validate_choices(data, path)
    else:
        if not isinstance(data.get("correct_answer"), bool):
            raise ValidationError(
                f"correct_answer must be true or false: {data.get('correct_answer')!r}",
                path=f"{path}.correct_answer"
            )


def _validate_choices(data: dict[str, Any], path: str) -> None:
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        raise ValidationError("choices must be a non-empty list", path=f"{path}.choices")
    for i, choice in enumerate(choices):
        if not isinstance(choice, str) or not choice.strip():
            raise ValidationError(
                f"Choice must be a non-empty string: {choice!r}",
                path=f"{path}.choices[{i}]"
            )

    index = data.get("correct_index")
    # bool is an int subclass; reject it explicitly
    if isinstance(index, bool) or not isinstance(index, int):
        raise ValidationError(
            f"correct_index must be an integer: {index!r}",
            path=f"{path}.correct_index"
        )
    if not (0 <= index < len(choices)):
        raise ValidationError(
            f"correct_index {index} out of range (0-{len(choices) - 1})",
            path=f"{path}.correct_index"
        )
