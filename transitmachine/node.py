"""
Per-state transition table with guards and entry/exit hooks.
"""

import logging
from typing import Dict, Generic, Hashable, Optional

from .models import Hook, InputT, ProcessResult, StateT, TransitCondition, Transition

# Set up logger for this module
logger = logging.getLogger(__name__)


class StateNode(Generic[StateT, InputT]):
    """Everything configured for one state.

    A node only evaluates: it decides whether an input may move the machine
    and where to, but it never changes the machine's state and never runs
    hooks. Hooks are stored here and dispatched by the machine.
    """

    def __init__(self, state: StateT):
        self.state = state

        # Generic guard applied to every input
        self.condition: Optional[TransitCondition] = None
        self.conditions_for: Dict[InputT, TransitCondition] = {}

        # Outgoing edges, one per input
        self.transitions: Dict[InputT, Transition[StateT, InputT]] = {}

        self.on_entry: Optional[Hook] = None
        self.on_exit: Optional[Hook] = None
        self.on_entry_from: Dict[InputT, Hook] = {}
        self.on_exit_to: Dict[InputT, Hook] = {}

    def __repr__(self) -> str:
        return f"StateNode({self.state!r}, inputs={list(self.transitions)!r})"

    def add_or_update_transition(self, input: InputT, destination: StateT) -> None:
        self.transitions[input] = Transition(self.state, input, destination)

    def add_or_update_condition_for(self, input: InputT, condition: TransitCondition) -> None:
        self.conditions_for[input] = condition

    def add_or_update_on_entry_from(self, input: InputT, hook: Hook) -> None:
        self.on_entry_from[input] = hook

    def add_or_update_on_exit_to(self, input: InputT, hook: Hook) -> None:
        self.on_exit_to[input] = hook

    def has_transition(self, input: Hashable) -> bool:
        return input in self.transitions

    async def check(self, input: InputT) -> ProcessResult:
        """Evaluate whether ``input`` may move the machine out of this state.

        Both guards are always awaited, the generic one first. The reported
        failure is chosen in this order:

        1. No edge for ``input``: ``ProcessResult(False, None)``. Guards do not
           matter when there is nowhere to go.
        2. The input-specific guard failed: its message.
        3. The generic guard failed: its message.

        Args:
            input: The input offered to the machine

        Returns:
            ProcessResult describing whether the move is allowed
        """
        condition_passed = await self._check_condition(input)
        condition_for_passed = await self._check_condition_for(input)

        if input not in self.transitions:
            return ProcessResult(False)
        if not condition_for_passed:
            return ProcessResult(False, self.conditions_for[input].message)
        if not condition_passed:
            # condition cannot be None here, _check_condition passes when unset
            return ProcessResult(False, self.condition.message)  # type: ignore[union-attr]
        return ProcessResult()

    async def transit(self, input: InputT) -> StateT:
        """Return the state ``input`` leads to, or this node's state if it leads nowhere."""
        result = await self.check(input)
        if not result.allowed:
            logger.debug(f"State {self.state!r} rejected input {input!r}: {result.message or 'no transition'}")
            return self.state
        return self.transitions[input].destination

    async def _check_condition(self, input: InputT) -> bool:
        if self.condition is None:
            return True
        return await self.condition.evaluate(self.state, input)

    async def _check_condition_for(self, input: InputT) -> bool:
        condition = self.conditions_for.get(input)
        if condition is None:
            return True
        return await condition.evaluate(self.state, input)
