#!/usr/bin/env python3
"""
Document workflow example.

Demonstrates:
- Input-specific entry/exit hooks
- Guards for a single input (condition_for) with custom failure messages
- update_and_throw() reporting why a transition was refused
"""

import asyncio
from enum import Enum

from transitmachine import StateMachine, TransitionError


class DocumentStatus(Enum):
    DRAFT = "draft"
    AGREEMENT = "agreement"
    EDITING = "editing"
    ACCEPTED = "accepted"
    SENT = "sent"


class DocumentAction(Enum):
    SAVE = "save"
    ACCEPT = "accept"
    NOT_ACCEPT = "not_accept"
    SEND = "send"


class Document:
    """A document moving through review before being sent."""

    def __init__(self, title: str):
        self.title = title
        self.signed = False
        self.machine = StateMachine(
            DocumentStatus.DRAFT,
            invalid_transition_message=lambda state, action: f"cannot {action.value} a {state.value} document",
        )

        self.machine.configuration(DocumentStatus.DRAFT) \
            .transit(DocumentAction.SAVE, DocumentStatus.AGREEMENT)

        self.machine.configuration(DocumentStatus.AGREEMENT) \
            .transit(DocumentAction.NOT_ACCEPT, DocumentStatus.EDITING) \
            .transit(DocumentAction.ACCEPT, DocumentStatus.ACCEPTED) \
            .on_entry_from(DocumentAction.SAVE, self._sent_for_review) \
            .on_exit_to(DocumentAction.NOT_ACCEPT, lambda: print("   returned for edits"))

        self.machine.configuration(DocumentStatus.EDITING) \
            .transit(DocumentAction.SAVE, DocumentStatus.AGREEMENT)

        self.machine.configuration(DocumentStatus.ACCEPTED) \
            .transit(DocumentAction.SEND, DocumentStatus.SENT) \
            .condition_for(DocumentAction.SEND, lambda: self.signed, "document must be signed before sending")

        self.machine.configuration(DocumentStatus.SENT) \
            .on_entry(lambda: print(f"   '{self.title}' delivered"))

    def _sent_for_review(self, transition):
        print(f"   sent for review from {transition.source.value}")

    async def apply(self, action: DocumentAction):
        try:
            await self.machine.update_and_throw(action)
        except TransitionError as e:
            print(f"   refused: {e.message}")
        print(f"   status: {self.machine.state.value}")


async def main():
    document = Document("Quarterly report")

    print("=== Workflow Example ===\n")
    for action in [
        DocumentAction.SEND,
        DocumentAction.SAVE,
        DocumentAction.NOT_ACCEPT,
        DocumentAction.SAVE,
        DocumentAction.ACCEPT,
        DocumentAction.SEND,
    ]:
        print(f"{action.value}:")
        await document.apply(action)

    document.signed = True
    print("send (after signing):")
    await document.apply(DocumentAction.SEND)


if __name__ == "__main__":
    asyncio.run(main())
