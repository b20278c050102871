"""Shared test helpers."""

import asyncio

from app.domains.blocks.entities import Block


def make_block(id, type=None, **kwargs) -> Block:
    """Build a block with only the fields a test cares about."""
    return Block(id=id, type=type, **kwargs)


class FakeBlockSource:
    """Scripted block source.

    Each call to get_subtree consumes the next response (the last one is
    repeated). A response is either a list of blocks or an exception to
    raise. A call can be held until its gate is set.
    """

    def __init__(self, *responses):
        self.responses = list(responses) or [[]]
        self.calls = []
        self.gates = {}

    def gate(self, call_index: int) -> asyncio.Event:
        event = asyncio.Event()
        self.gates[call_index] = event
        return event

    async def get_subtree(self, root_id):
        index = len(self.calls)
        self.calls.append(root_id)

        gate = self.gates.get(index)
        if gate is not None:
            await gate.wait()

        response = self.responses[min(index, len(self.responses) - 1)]
        if isinstance(response, Exception):
            raise response
        return list(response)
