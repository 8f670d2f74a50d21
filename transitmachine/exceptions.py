"""
Custom exceptions for the state machine.
"""
from typing import Optional


class StateMachineError(Exception):
    """Base exception for state machine errors."""

    pass


class TransitionError(StateMachineError):
    """Raised when a requested transition cannot be performed.

    Carries the human-readable reason: either the failing guard's message
    or the machine's invalid-transition message when no edge exists.
    """

    def __init__(self, message: str = "Transition failed", original_exception: Optional[BaseException] = None):
        self.message = message
        self.original_exception = original_exception
        super().__init__(self.message)
        if original_exception is not None:
            self.__cause__ = original_exception
