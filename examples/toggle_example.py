#!/usr/bin/env python3
"""
Toggle switch example.

Demonstrates:
- Configuring states with the fluent builder
- Driving the machine synchronously with update_sync()
- Inputs without an edge being ignored
"""

import logging

from transitmachine import StateMachine


def setup_logging():
    """Set up logging configuration."""
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def create_switch():
    """Create an on/off switch toggled by 'push'."""
    machine = StateMachine("off")

    machine.configuration("off") \
        .transit("push", "on") \
        .on_entry(lambda: print("   light is off"))

    machine.configuration("on") \
        .transit("push", "off") \
        .on_entry(lambda: print("   light is on"))

    return machine


if __name__ == "__main__":
    setup_logging()

    switch = create_switch()

    print("=== Toggle Example ===\n")
    for command in ["", "miss", "push", "push", "push"]:
        print(f"Input {command!r}:")
        switch.update_sync(command)
        print(f"   state: {switch.state}\n")
