"""
A small generic finite state machine with guarded transitions and async hooks.

States and inputs are any hashable values. Machines are configured once with
a fluent builder and then driven by feeding inputs; guards and hooks may be
plain functions or coroutine functions.
"""

from .callbacks import GuardWrapper, HookWrapper, as_guard, as_hook
from .configuration import StateConfiguration
from .exceptions import StateMachineError, TransitionError
from .models import (
    DEFAULT_CONDITION_MESSAGE,
    ProcessResult,
    TransitCondition,
    Transition,
    default_invalid_transition_message,
)
from .node import StateNode
from .state_machine import StateMachine

__version__ = "0.1.0"
__author__ = "TransitMachine Contributors"
__license__ = "MIT"

__all__ = [
    "StateMachine",
    "StateConfiguration",
    "StateNode",
    "Transition",
    "TransitCondition",
    "ProcessResult",
    "StateMachineError",
    "TransitionError",
    "GuardWrapper",
    "HookWrapper",
    "as_guard",
    "as_hook",
    "DEFAULT_CONDITION_MESSAGE",
    "default_invalid_transition_message",
]
