"""
Schemas Package

JSON schema definition and validation for question bank files.
"""

from .validator import (
    validate_question_bank,
    validate_question,
    ValidationError,
    BANK_SCHEMA_VERSION,
)

__all__ = [
    "validate_question_bank",
    "validate_question",
    "ValidationError",
    "BANK_SCHEMA_VERSION",
]
