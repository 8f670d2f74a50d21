"""
Tests for StateNode evaluation.
"""

import pytest

from transitmachine import ProcessResult, StateNode, TransitCondition, as_guard

pytestmark = pytest.mark.anyio


def condition(value, message="Condition was Failed", calls=None):
    def predicate(state, input):
        if calls is not None:
            calls.append(message)
        return value
    return TransitCondition(as_guard(predicate), message)


class TestStateNodeCheck:
    """Test feasibility evaluation and message precedence."""

    async def test_allowed_without_guards(self):
        node = StateNode("A")
        node.add_or_update_transition("go", "B")

        assert await node.check("go") == ProcessResult()

    async def test_missing_edge_has_no_message(self):
        node = StateNode("A")
        node.condition = condition(False, "generic")

        result = await node.check("go")

        assert result == ProcessResult(False, None)

    async def test_both_guards_always_evaluated(self):
        calls = []
        node = StateNode("A")
        node.add_or_update_transition("go", "B")
        node.condition = condition(False, "generic", calls)
        node.add_or_update_condition_for("go", condition(False, "specific", calls))

        await node.check("go")

        assert calls == ["generic", "specific"]

    async def test_condition_for_message_takes_precedence(self):
        node = StateNode("A")
        node.add_or_update_transition("go", "B")
        node.condition = condition(False, "generic")
        node.add_or_update_condition_for("go", condition(False, "specific"))

        result = await node.check("go")

        assert result == ProcessResult(False, "specific")

    async def test_generic_message_when_only_generic_fails(self):
        node = StateNode("A")
        node.add_or_update_transition("go", "B")
        node.condition = condition(False, "generic")
        node.add_or_update_condition_for("go", condition(True, "specific"))

        assert await node.check("go") == ProcessResult(False, "generic")

    async def test_condition_for_other_input_is_ignored(self):
        node = StateNode("A")
        node.add_or_update_transition("go", "B")
        node.add_or_update_condition_for("stop", condition(False, "stop"))

        assert (await node.check("go")).allowed


class TestStateNodeTransit:
    """Test destination selection."""

    async def test_returns_destination(self):
        node = StateNode("A")
        node.add_or_update_transition("go", "B")

        assert await node.transit("go") == "B"

    async def test_returns_own_state_when_blocked(self):
        node = StateNode("A")
        node.add_or_update_transition("go", "B")
        node.condition = condition(False)

        assert await node.transit("go") == "A"

    async def test_returns_own_state_without_edge(self):
        node = StateNode("A")

        assert await node.transit("go") == "A"
        assert not node.has_transition("go")

    async def test_does_not_run_hooks(self):
        fired = []

        async def hook(transition):
            fired.append(transition)

        node = StateNode("A")
        node.add_or_update_transition("go", "B")
        node.on_exit = hook
        node.on_entry = hook

        await node.transit("go")

        assert fired == []
