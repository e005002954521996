# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import logging
import typing

import trio

from ..util import invoke
from .hwtypes import Action

logger = logging.getLogger(__name__)

ACTION_QUEUE_CAPACITY = 10

ActionHandler = collections.abc.Callable[[Action], typing.Any]


class ActionDispatcher:
    """Bounded hand-off from the hook thread to the consumer loop.

    Must be created inside a trio run; `send` and `close` may then be called from any thread.
    Nothing on the sending side ever waits: when the buffer is full, the action is dropped.
    """

    send_channel: trio.MemorySendChannel[Action]
    receive_channel: trio.MemoryReceiveChannel[Action]

    def __init__(self, capacity: int = ACTION_QUEUE_CAPACITY):
        self.send_channel, self.receive_channel = trio.open_memory_channel[Action](capacity)
        self.trio_token = trio.lowlevel.current_trio_token()

    def send(self, action: Action):
        # trio's callback queue is unbounded, so the drop-on-full bound holds only while the loop keeps up
        try:
            self.trio_token.run_sync_soon(self.send_nowait, action)
        except trio.RunFinishedError:
            logger.debug("Trio run is gone; dropping %r", action)

    def send_nowait(self, action: Action) -> bool:
        try:
            self.send_channel.send_nowait(action)
        except trio.WouldBlock:
            logger.debug("Action queue full; dropping %r", action)
            return False
        except (trio.ClosedResourceError, trio.BrokenResourceError):
            logger.debug("Action queue closed; dropping %r", action)
            return False
        return True

    def close(self):
        try:
            self.trio_token.run_sync_soon(self.send_channel.close)
        except trio.RunFinishedError:
            pass

    async def forward(self, handler: ActionHandler):
        async with self.receive_channel:
            async for action in self.receive_channel:
                await invoke(handler, action)
