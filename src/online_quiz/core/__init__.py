"""
Core Package

Toolkit-free quiz domain: question models, the session state machine and
question bank validation/serialization. Nothing here imports Qt.
"""

from .session import InvalidTransitionError, QuizSession, SessionState

__all__ = [
    "InvalidTransitionError",
    "QuizSession",
    "SessionState",
]
