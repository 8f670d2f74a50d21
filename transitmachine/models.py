"""
Core value types shared by the state machine, its nodes and its hooks.
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Hashable, Optional, TypeVar

StateT = TypeVar("StateT", bound=Hashable)
InputT = TypeVar("InputT", bound=Hashable)

DEFAULT_CONDITION_MESSAGE = "Condition was Failed"

# Canonical callable shapes stored by nodes and the machine.
Guard = Callable[[Any, Any], Awaitable[bool]]
Hook = Callable[["Transition"], Awaitable[None]]
MessageFactory = Callable[[Any, Any], str]


@dataclass(frozen=True)
class Transition(Generic[StateT, InputT]):
    """A move from ``source`` to ``destination`` triggered by ``input``.

    Used both as a configured edge of a node and as the argument passed to
    entry/exit hooks when the move is actually performed.
    """

    source: StateT
    input: InputT
    destination: StateT

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.destination

    def __str__(self) -> str:
        return f"{self.source} --{self.input}--> {self.destination}"


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of a feasibility check.

    ``message`` is only meaningful when ``allowed`` is False; it may still be
    None when the rejecting party had nothing to say (e.g. a missing edge,
    which the machine reports with its own message factory).
    """

    allowed: bool = True
    message: Optional[str] = None

    def __bool__(self) -> bool:
        return self.allowed


@dataclass(frozen=True)
class TransitCondition:
    """A guard predicate paired with the message reported when it fails."""

    predicate: Guard
    message: str = DEFAULT_CONDITION_MESSAGE

    async def evaluate(self, state: Any, input: Any) -> bool:
        return await self.predicate(state, input)


def default_invalid_transition_message(state: Any, input: Any) -> str:
    """Message used when the current state has no edge for ``input``."""
    return f"Transition for state {state} and input {input} failed"
