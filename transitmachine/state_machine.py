"""
Generic finite state machine with guarded transitions and entry/exit hooks.
"""

import logging
from typing import Callable, Dict, Generic, Optional

import anyio

from .callbacks import as_hook
from .configuration import StateConfiguration
from .exceptions import TransitionError
from .models import (
    Hook,
    InputT,
    MessageFactory,
    ProcessResult,
    StateT,
    Transition,
    default_invalid_transition_message,
)
from .node import StateNode

# Set up logger for this module
logger = logging.getLogger(__name__)


class StateMachine(Generic[StateT, InputT]):
    """Finite state machine driven by inputs.

    States and inputs are any hashable values. Each configured state owns a
    ``StateNode`` holding its edges, guards and hooks; nodes are created on
    first reference and never removed. A state without a node is a legal
    terminal state: every input leaves it unchanged.

    The machine does no locking. One owner should drive an instance at a
    time; concurrent ``update`` calls on the same instance race.

    Example::

        machine = StateMachine("off")
        machine.configuration("off").transit("push", "on")
        machine.configuration("on").transit("push", "off")

        await machine.update("push")
        assert machine.state == "on"
    """

    def __init__(self, initial_state: StateT, invalid_transition_message: Optional[MessageFactory] = None):
        self._state = initial_state
        self._nodes: Dict[StateT, StateNode[StateT, InputT]] = {}
        self._on_entry: Optional[Hook] = None
        self._on_exit: Optional[Hook] = None
        self._invalid_transition_message: MessageFactory = (
            invalid_transition_message or default_invalid_transition_message
        )

    def __repr__(self) -> str:
        return f"StateMachine(state={self._state!r}, nodes={len(self._nodes)})"

    @property
    def state(self) -> StateT:
        """Current state."""
        return self._state

    @property
    def nodes(self) -> Dict[StateT, StateNode[StateT, InputT]]:
        """All configured states and their nodes."""
        return self._nodes

    def _get_or_create_node(self, state: StateT) -> StateNode[StateT, InputT]:
        node = self._nodes.get(state)
        if node is None:
            node = StateNode(state)
            self._nodes[state] = node
            logger.debug(f"Created node for state {state!r}")
        return node

    # ========================================================================
    # CONFIGURATION
    # ========================================================================

    def configuration(self, state: StateT) -> StateConfiguration[StateT, InputT]:
        """Return a builder for ``state``, creating its node if needed."""
        self._get_or_create_node(state)
        return StateConfiguration(self, state)

    def on_entry(self, hook: Callable) -> "StateMachine[StateT, InputT]":
        """Run ``hook`` after every committed transition, once the state hooks ran."""
        self._on_entry = as_hook(hook)
        return self

    def on_exit(self, hook: Callable) -> "StateMachine[StateT, InputT]":
        """Run ``hook`` on every committed transition, after the source state's exit hooks."""
        self._on_exit = as_hook(hook)
        return self

    def invalid_transition_message(self, factory: MessageFactory) -> "StateMachine[StateT, InputT]":
        """Replace the ``(state, input) -> str`` factory used when no edge exists."""
        self._invalid_transition_message = factory
        return self

    # ========================================================================
    # DRIVING
    # ========================================================================

    async def check(self, input: InputT) -> ProcessResult:
        """Evaluate ``input`` against the current state without side effects on the machine.

        Guards are awaited, but the state is not changed and no hook runs.

        Args:
            input: The input to evaluate

        Returns:
            ProcessResult whose message is the failing guard's message, or the
            invalid-transition message when the current state has no node or
            no edge for ``input``
        """
        node = self._nodes.get(self._state)
        if node is None:
            return ProcessResult(False, self._invalid_transition_message(self._state, input))

        result = await node.check(input)
        if not result.allowed and not node.has_transition(input):
            return ProcessResult(False, self._invalid_transition_message(self._state, input))
        return result

    async def can_transit(self, input: InputT) -> bool:
        """True if ``input`` has an edge from the current state and all guards pass."""
        result = await self.check(input)
        return result.allowed

    async def update(self, input: InputT) -> None:
        """Feed ``input`` to the machine.

        If the current state has an edge for ``input`` and its guards pass,
        the state is changed and hooks run in this order, all observing the
        new state:

        1. source state ``on_exit``, then ``on_exit_to[input]``
        2. machine ``on_exit``
        3. destination state ``on_entry``, then ``on_entry_from[input]``
        4. machine ``on_entry``

        Otherwise nothing happens. A transition whose destination is the
        current state is treated the same way: no hook runs.

        Exceptions raised by hooks propagate to the caller; the state change
        is not rolled back.
        """
        source = self._state
        node = self._nodes.get(source)
        if node is None:
            logger.debug(f"No node for state {source!r}, ignoring input {input!r}")
            return

        destination = await node.transit(input)
        if destination == source:
            return

        self._state = destination
        transition = Transition(source, input, destination)
        logger.debug(f"Transition {transition}")

        await self._process_exit(transition)
        await self._process_entry(transition)

    async def update_and_throw(self, input: InputT) -> None:
        """Like ``update``, but raise if ``input`` cannot move the machine.

        Raises:
            TransitionError: With the failing guard's message, or the
                invalid-transition message when no edge exists
        """
        result = await self.check(input)
        if not result.allowed:
            if result.message is None:
                raise TransitionError()
            raise TransitionError(result.message)
        await self.update(input)

    def update_sync(self, input: InputT) -> None:
        """Synchronous wrapper for update().

        Uses anyio.run(), so it must not be called from a running event loop.
        """
        anyio.run(self.update, input)

    def can_transit_sync(self, input: InputT) -> bool:
        """Synchronous wrapper for can_transit()."""
        return anyio.run(self.can_transit, input)

    def update_and_throw_sync(self, input: InputT) -> None:
        """Synchronous wrapper for update_and_throw()."""
        anyio.run(self.update_and_throw, input)

    # ========================================================================
    # HOOK DISPATCH
    # ========================================================================

    async def _process_exit(self, transition: Transition[StateT, InputT]) -> None:
        node = self._nodes.get(transition.source)
        if node is not None:
            if node.on_exit is not None:
                await node.on_exit(transition)
            on_exit_to = node.on_exit_to.get(transition.input)
            if on_exit_to is not None:
                await on_exit_to(transition)

        if self._on_exit is not None:
            await self._on_exit(transition)

    async def _process_entry(self, transition: Transition[StateT, InputT]) -> None:
        node = self._nodes.get(transition.destination)
        if node is not None:
            if node.on_entry is not None:
                await node.on_entry(transition)
            on_entry_from = node.on_entry_from.get(transition.input)
            if on_entry_from is not None:
                await on_entry_from(transition)

        if self._on_entry is not None:
            await self._on_entry(transition)
