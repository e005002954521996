# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import datetime
import logging
import threading
import time
import typing

from .hwtypes import Action, Binding, Bindings, KeyPress, RawKeyEvent

if typing.TYPE_CHECKING:
    from .keymaps import KeyTranslator

logger = logging.getLogger(__name__)

DEFAULT_COOLDOWN = datetime.timedelta(milliseconds=100)

ActionSink = collections.abc.Callable[[Action], typing.Any]


def _discard(action: Action):
    logger.debug("No sink attached; discarding %r", action)


class ComboEngine:
    """Tracks held keys and turns exact chords into actions.

    Everything here runs on the hook thread, in event order. The lock covers the held keys,
    the cooldown clock and the bindings; it is only ever held for in-memory work.
    """

    _held: dict[str, str]
    _last_action: typing.Optional[float]

    def __init__(
        self,
        bindings: Bindings,
        translator: KeyTranslator,
        *,
        sink: ActionSink = _discard,
        cooldown: datetime.timedelta = DEFAULT_COOLDOWN,
        clock: collections.abc.Callable[[], float] = time.monotonic,
    ):
        self.translator = translator
        self.sink = sink
        self.cooldown = cooldown.total_seconds()
        self.clock = clock
        self._lock = threading.Lock()
        self._bindings = bindings
        # keyed by casefolded name, so a key reported as "a" going down and "A" coming up still clears
        self._held = {}
        self._last_action = None

    @property
    def bindings(self) -> Bindings:
        with self._lock:
            return self._bindings

    @property
    def held_keys(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._held.values())

    def update_bindings(self, bindings: Bindings):
        with self._lock:
            self._bindings = bindings
        logger.info("Hotkey bindings replaced")

    def reset(self):
        with self._lock:
            self._held.clear()
            self._last_action = None

    def process(self, event: RawKeyEvent) -> typing.Optional[Action]:
        name = self.translator.translate(event.code, event.char)
        if name is None:
            logger.debug("Ignoring untranslatable key event %r", event)
            return None
        if event.press is KeyPress.RELEASED:
            self.key_up(name)
            return None
        return self.key_down(name)

    def key_down(self, name: str) -> typing.Optional[Action]:
        folded = name.casefold()
        with self._lock:
            if folded in self._held:
                return None
            self._held[folded] = name

            now = self.clock()
            if self._last_action is not None and now - self._last_action < self.cooldown:
                return None

            action = self._match()
            if action is None:
                return None
            self._last_action = now

        logger.debug("Chord matched %r", action)
        self.sink(action)
        return action

    def key_up(self, name: str):
        with self._lock:
            self._held.pop(name.casefold(), None)

    def _match(self) -> typing.Optional[Action]:
        for action, binding in self._bindings.in_priority_order():
            if self._satisfies(binding):
                return action
        return None

    def _satisfies(self, binding: Binding) -> bool:
        if not binding:
            return False
        if not all(key.casefold() in self._held for key in binding):
            return False
        return len(self._held) == len(binding)
