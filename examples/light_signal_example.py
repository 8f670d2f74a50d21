#!/usr/bin/env python3
"""
Traffic light example.

Demonstrates:
- Generic guards that read external state (a tick counter)
- Machine-wide exit hooks
- Entry hooks that change the next input
- Driving the machine from an async loop
"""

import asyncio
from enum import Enum

from transitmachine import StateMachine


class Signal(Enum):
    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"


class LightSignal:
    """Signal cycling red -> yellow -> green -> yellow -> red.

    Red and green stay on for 30 ticks, yellow for 5. The input fed to the
    machine is the direction: False walks towards green, True back to red.
    """

    def __init__(self):
        self._machine = StateMachine(Signal.RED)
        self._time_tick = -1
        self._reverse = False

        # Reset the counter after every transition
        self._machine.on_exit(self._reset_tick)

        self._machine.configuration(Signal.RED) \
            .transit(False, Signal.YELLOW) \
            .condition(lambda: self._time_tick >= 30) \
            .on_entry(self._flip_direction)

        self._machine.configuration(Signal.YELLOW) \
            .transit(False, Signal.GREEN) \
            .transit(True, Signal.RED) \
            .condition(lambda: self._time_tick >= 5)

        self._machine.configuration(Signal.GREEN) \
            .transit(True, Signal.YELLOW) \
            .condition(lambda: self._time_tick >= 30) \
            .on_entry(self._flip_direction)

    @property
    def state(self) -> Signal:
        return self._machine.state

    async def tick(self):
        self._time_tick += 1
        await self._machine.update(self._reverse)

    def _reset_tick(self):
        self._time_tick = 0

    def _flip_direction(self):
        self._reverse = not self._reverse


async def main():
    light = LightSignal()
    previous = None

    print("=== Light Signal Example ===\n")
    for tick in range(140):
        await light.tick()
        if light.state != previous:
            print(f"tick {tick:3d}: {light.state.value}")
            previous = light.state


if __name__ == "__main__":
    asyncio.run(main())
