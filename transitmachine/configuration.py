"""
Fluent builder used to configure a single state of a machine.
"""

from typing import TYPE_CHECKING, Callable, Generic

from .callbacks import as_guard, as_hook
from .models import DEFAULT_CONDITION_MESSAGE, InputT, StateT, TransitCondition
from .node import StateNode

if TYPE_CHECKING:
    from .state_machine import StateMachine


class StateConfiguration(Generic[StateT, InputT]):
    """Chainable configuration of one state.

    Every method mutates the underlying node (created on first use) and
    returns the builder itself. Builders obtained from separate
    ``machine.configuration(state)`` calls share the same node, so edges and
    guards for different inputs accumulate. Setting the same slot again
    (same input, or the generic guard/hook) replaces the previous value.

    Example::

        (machine.configuration("off")
            .transit("push", "on")
            .on_exit(lambda transition: print(transition)))
    """

    def __init__(self, machine: "StateMachine[StateT, InputT]", state: StateT):
        self._machine = machine
        self._state = state

    @property
    def state(self) -> StateT:
        return self._state

    @property
    def node(self) -> StateNode[StateT, InputT]:
        return self._machine._get_or_create_node(self._state)

    def transit(self, input: InputT, destination: StateT) -> "StateConfiguration[StateT, InputT]":
        """Add or replace the edge taken from this state on ``input``."""
        self.node.add_or_update_transition(input, destination)
        return self

    def condition(self, predicate: Callable, message: str = DEFAULT_CONDITION_MESSAGE) -> "StateConfiguration[StateT, InputT]":
        """Set the guard checked for every input leaving this state.

        Args:
            predicate: ``f()``, ``f(state)`` or ``f(state, input)``, sync or async
            message: Reported by ``update_and_throw`` when the guard fails

        Returns:
            This builder
        """
        self.node.condition = TransitCondition(as_guard(predicate), message)
        return self

    def condition_for(self, input: InputT, predicate: Callable, message: str = DEFAULT_CONDITION_MESSAGE) -> "StateConfiguration[StateT, InputT]":
        """Set the guard checked only when leaving this state on ``input``.

        It is ANDed with the generic guard, and its message takes precedence
        when both fail.
        """
        self.node.add_or_update_condition_for(input, TransitCondition(as_guard(predicate), message))
        return self

    def on_entry(self, hook: Callable) -> "StateConfiguration[StateT, InputT]":
        """Run ``hook`` whenever the machine enters this state."""
        self.node.on_entry = as_hook(hook)
        return self

    def on_entry_from(self, input: InputT, hook: Callable) -> "StateConfiguration[StateT, InputT]":
        """Run ``hook`` when the machine enters this state because of ``input``."""
        self.node.add_or_update_on_entry_from(input, as_hook(hook))
        return self

    def on_exit(self, hook: Callable) -> "StateConfiguration[StateT, InputT]":
        """Run ``hook`` whenever the machine leaves this state."""
        self.node.on_exit = as_hook(hook)
        return self

    def on_exit_to(self, input: InputT, hook: Callable) -> "StateConfiguration[StateT, InputT]":
        """Run ``hook`` when the machine leaves this state because of ``input``."""
        self.node.add_or_update_on_exit_to(input, as_hook(hook))
        return self
