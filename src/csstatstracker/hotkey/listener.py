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

import trio
from trio_util import AsyncBool

from .combos import DEFAULT_COOLDOWN, ComboEngine
from .dispatcher import ActionDispatcher, ActionHandler
from .hwtypes import Bindings, HookStartError, KeyPress, RawKeyEvent
from .keycodes import X11Keysym
from .keymaps import translator_for_platform

if typing.TYPE_CHECKING:
    from .keymaps import KeyTranslator

logger = logging.getLogger(__name__)

HOOK_READY_TIMEOUT = 2.0

RawEventCallback = collections.abc.Callable[[RawKeyEvent], typing.Any]


class KeyHook(typing.Protocol):
    def start(self) -> None:
        ...

    def stop(self) -> None:
        ...


HookFactory = collections.abc.Callable[[RawEventCallback], KeyHook]


def raw_event_from_pynput(key, press: KeyPress) -> RawKeyEvent:
    # special keys arrive as Key enum members wrapping a KeyCode
    keycode = getattr(key, "value", key)
    return RawKeyEvent(code=getattr(keycode, "vk", None), char=getattr(keycode, "char", None), press=press)


_KEYPAD_KEYSYMS = range(X11Keysym.XK_KP_Space, X11Keysym.XK_KP_Equal + 1)


def keypad_keysym(display, keycode: int) -> typing.Optional[int]:
    """Return the numlock-on keysym of an X11 keypad key, or None for any other key.

    pynput's X11 backend reports keypad digits and operators as plain characters, and keypad
    Enter as Return, which would make them indistinguishable from the main keyboard.
    """
    plain = display.keycode_to_keysym(keycode, 0)
    if plain not in _KEYPAD_KEYSYMS:
        return None
    numlocked = display.keycode_to_keysym(keycode, 1)
    return numlocked if numlocked in _KEYPAD_KEYSYMS else plain


def keypad_aware_listener(base: type, keycode_from_vk: collections.abc.Callable[[int], typing.Any]) -> type:
    class KeypadAwareListener(base):
        def _event_to_key(self, display, event):
            keysym = keypad_keysym(display, event.detail)
            if keysym is not None:
                return keycode_from_vk(keysym)
            return super()._event_to_key(display, event)

    return KeypadAwareListener


class PynputHook:
    """System-wide keyboard hook. pynput calls back on its own thread, one event at a time."""

    def __init__(self, callback: RawEventCallback, *, ready_timeout: float = HOOK_READY_TIMEOUT):
        self.callback = callback
        self.ready_timeout = ready_timeout
        self._listener = None

    def _on_press(self, key):
        self.callback(raw_event_from_pynput(key, KeyPress.PRESSED))

    def _on_release(self, key):
        self.callback(raw_event_from_pynput(key, KeyPress.RELEASED))

    def start(self):
        try:
            # pynput picks and connects its backend at import time, so a missing display fails here
            from pynput import keyboard
        except ImportError as exc:
            raise HookStartError(f"Global keyboard hook is unavailable: {exc}") from exc
        listener_class = keyboard.Listener
        if listener_class.__module__.endswith("._xorg"):
            listener_class = keypad_aware_listener(listener_class, keyboard.KeyCode.from_vk)
        listener = listener_class(on_press=self._on_press, on_release=self._on_release)
        listener.start()
        if not self._wait_until_ready(listener):
            listener.stop()
            raise HookStartError("Global keyboard hook did not become ready")
        self._listener = listener

    def _wait_until_ready(self, listener) -> bool:
        # pynput's wait() has no timeout and never returns if the backend dies before it is ready
        waiter = threading.Thread(target=listener.wait, daemon=True)
        waiter.start()
        deadline = time.monotonic() + self.ready_timeout
        while waiter.is_alive() and listener.is_alive() and time.monotonic() < deadline:
            waiter.join(0.05)
        return listener.is_alive() and not waiter.is_alive()

    def stop(self):
        # callable from any thread, including pynput's own; the thread is not joined
        if self._listener is not None:
            self._listener.stop()
            self._listener = None


class _Activation:
    def __init__(self, hook: KeyHook, dispatcher: ActionDispatcher):
        self.hook = hook
        self.dispatcher = dispatcher

    def close(self):
        # the hook goes first so nothing new is sent into a closed queue; queued actions still drain
        self.hook.stop()
        self.dispatcher.close()


class HotkeyListener:
    """Owns the engine, plus one hook and one dispatcher per activation.

    `start` must be awaited from trio; `stop` and `update_bindings` may be called from any thread.
    """

    listening: AsyncBool
    _activation: typing.Optional[_Activation]

    def __init__(
        self,
        bindings: Bindings,
        handler: ActionHandler,
        *,
        translator: typing.Optional[KeyTranslator] = None,
        hook_factory: HookFactory = PynputHook,
        cooldown: datetime.timedelta = DEFAULT_COOLDOWN,
    ):
        if translator is None:
            translator = translator_for_platform()
        self.engine = ComboEngine(bindings, translator, cooldown=cooldown)
        self.handler = handler
        self.hook_factory = hook_factory
        self.listening = AsyncBool(False)
        self._lifecycle_lock = threading.Lock()
        self._active = False
        self._generation = 0
        self._activation = None

    def update_bindings(self, bindings: Bindings):
        self.engine.update_bindings(bindings)

    async def start(self, nursery: trio.Nursery):
        """Start the hook and spawn the consumer loop in `nursery`. Does nothing if already listening.

        Raises HookStartError if the platform hook can't be started; the listener is then left stopped.
        """
        with self._lifecycle_lock:
            if self._active:
                return
            self._active = True
            self._generation += 1
            generation = self._generation

        dispatcher = ActionDispatcher()
        self.engine.reset()
        self.engine.sink = dispatcher.send
        hook = self.hook_factory(self.engine.process)
        try:
            await trio.to_thread.run_sync(hook.start)
        except BaseException as exc:
            with self._lifecycle_lock:
                if self._generation == generation:
                    self._active = False
            if isinstance(exc, HookStartError):
                logger.exception("Could not start the global keyboard hook; hotkeys are disabled")
            raise

        activation = _Activation(hook, dispatcher)
        with self._lifecycle_lock:
            current = self._active and self._generation == generation
            if current:
                self._activation = activation
        if not current:
            logger.debug("Listener was stopped while the hook was starting")
            activation.close()
            return

        logger.info("Listening for global hotkeys")
        self.listening.value = True
        nursery.start_soon(self._forward, activation)

    def stop(self):
        with self._lifecycle_lock:
            activation, self._activation = self._activation, None
            self._active = False
        if activation is not None:
            activation.close()

    async def _forward(self, activation: _Activation):
        try:
            await activation.dispatcher.forward(self.handler)
        finally:
            with self._lifecycle_lock:
                mine = self._activation is activation
                if mine:
                    # cancelled rather than stopped
                    self._activation = None
                    self._active = False
                idle = self._activation is None
            if mine:
                activation.close()
            if idle:
                self.listening.value = False
            logger.info("Stopped listening for global hotkeys")
