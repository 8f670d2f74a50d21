"""
Tests for the fluent StateConfiguration builder.
"""

import pytest

from transitmachine import StateConfiguration, StateMachine, TransitCondition, Transition

pytestmark = pytest.mark.anyio


class TestBuilder:
    """Test builder chaining and node creation."""

    def test_configuration_creates_node(self):
        machine = StateMachine("A")

        config = machine.configuration("A")

        assert isinstance(config, StateConfiguration)
        assert config.state == "A"
        assert list(machine.nodes) == ["A"]

    def test_methods_return_same_builder(self):
        machine = StateMachine("A")
        config = machine.configuration("A")

        assert config.transit("go", "B") is config
        assert config.condition(lambda: True) is config
        assert config.condition_for("go", lambda: True) is config
        assert config.on_entry(lambda: None) is config
        assert config.on_entry_from("go", lambda: None) is config
        assert config.on_exit(lambda: None) is config
        assert config.on_exit_to("go", lambda: None) is config

    def test_repeated_configuration_shares_node(self):
        machine = StateMachine("A")

        first = machine.configuration("A")
        second = machine.configuration("A")

        assert first.node is second.node
        assert len(machine.nodes) == 1

    def test_transit_registers_edge(self):
        machine = StateMachine("A")
        machine.configuration("A").transit("go", "B")

        node = machine.nodes["A"]
        assert node.transitions == {"go": Transition("A", "go", "B")}

    def test_condition_stores_message(self):
        machine = StateMachine("A")
        machine.configuration("A").condition(lambda: True, "custom")

        condition = machine.nodes["A"].condition
        assert isinstance(condition, TransitCondition)
        assert condition.message == "custom"

    def test_rejects_non_callable_guard(self):
        machine = StateMachine("A")

        with pytest.raises(TypeError):
            machine.configuration("A").condition(True)

    def test_rejects_non_callable_hook(self):
        machine = StateMachine("A")

        with pytest.raises(TypeError):
            machine.configuration("A").on_entry("not a hook")


class TestAccumulation:
    """Test that separate configuration calls accumulate and same-key calls overwrite."""

    async def test_distinct_inputs_accumulate_across_calls(self):
        machine = StateMachine("A")
        machine.configuration("A").transit("left", "B")
        machine.configuration("A").transit("right", "C")

        assert set(machine.nodes["A"].transitions) == {"left", "right"}
        assert await machine.can_transit("left")
        assert await machine.can_transit("right")

    async def test_same_input_overwrites_edge(self):
        machine = StateMachine("A")
        machine.configuration("A").transit("go", "B")
        machine.configuration("A").transit("go", "C")

        await machine.update("go")

        assert machine.state == "C"

    async def test_second_condition_overwrites_first(self):
        machine = StateMachine("A")
        machine.configuration("A").transit("go", "B").condition(lambda: False)
        machine.configuration("A").condition(lambda: True)

        await machine.update("go")

        assert machine.state == "B"

    async def test_condition_for_distinct_inputs_accumulate(self):
        machine = StateMachine("A")
        machine.configuration("A") \
            .transit("left", "B") \
            .transit("right", "C") \
            .condition_for("left", lambda: False)
        machine.configuration("A").condition_for("right", lambda: False)

        assert not await machine.can_transit("left")
        assert not await machine.can_transit("right")

    async def test_condition_for_same_input_overwrites(self):
        machine = StateMachine("A")
        machine.configuration("A").transit("go", "B").condition_for("go", lambda: False)
        machine.configuration("A").condition_for("go", lambda: True)

        assert await machine.can_transit("go")

    async def test_on_entry_overwrites_instead_of_accumulating(self):
        machine = StateMachine("A")
        fired = []
        machine.configuration("A").transit("go", "B")
        machine.configuration("B").on_entry(lambda: fired.append("first"))
        machine.configuration("B").on_entry(lambda: fired.append("second"))

        await machine.update("go")

        assert fired == ["second"]

    async def test_on_exit_to_same_input_overwrites(self):
        machine = StateMachine("A")
        fired = []
        machine.configuration("A") \
            .transit("go", "B") \
            .on_exit_to("go", lambda: fired.append("first")) \
            .on_exit_to("go", lambda: fired.append("second"))

        await machine.update("go")

        assert fired == ["second"]

    async def test_guards_and_together(self):
        flags = {"generic": True, "specific": True}
        machine = StateMachine("A")
        machine.configuration("A") \
            .transit("go", "B") \
            .condition(lambda: flags["generic"]) \
            .condition_for("go", lambda: flags["specific"])

        for generic, specific in [(False, False), (False, True), (True, False)]:
            flags.update(generic=generic, specific=specific)
            assert not await machine.can_transit("go")

        flags.update(generic=True, specific=True)
        assert await machine.can_transit("go")
