# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import datetime

import pytest

from csstatstracker.hotkey.combos import ComboEngine
from csstatstracker.hotkey.hwtypes import Action, Bindings, RawKeyEvent
from csstatstracker.hotkey.keycodes import X11Keysym
from csstatstracker.hotkey.keymaps import X11_TRANSLATOR
from csstatstracker.settings import LINUX_HOTKEYS


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def emitted():
    return []


@pytest.fixture
def engine(clock: FakeClock, emitted: list):
    return ComboEngine(Bindings(**LINUX_HOTKEYS), X11_TRANSLATOR, sink=emitted.append, clock=clock)


def count_matches(monkeypatch: pytest.MonkeyPatch, engine: ComboEngine):
    calls = []
    real_match = engine._match

    def spy():
        calls.append(None)
        return real_match()

    monkeypatch.setattr(engine, "_match", spy)
    return calls


def test_unmapped_keys_are_invisible(monkeypatch: pytest.MonkeyPatch, engine: ComboEngine, emitted: list):
    matches = count_matches(monkeypatch, engine)
    assert engine.process(RawKeyEvent.pressed(0x1008FF11, "\x03")) is None
    assert engine.process(RawKeyEvent.pressed(None, None)) is None
    assert engine.held_keys == frozenset()
    assert matches == []
    assert engine.process(RawKeyEvent.released(0x1008FF11, "\x03")) is None
    assert emitted == []


def test_auto_repeat_is_suppressed(monkeypatch: pytest.MonkeyPatch, engine: ComboEngine):
    matches = count_matches(monkeypatch, engine)
    engine.key_down("A")
    assert engine.held_keys == frozenset({"A"})
    assert len(matches) == 1
    engine.key_down("A")
    assert engine.held_keys == frozenset({"A"})
    assert len(matches) == 1


def test_exact_cardinality(engine: ComboEngine, emitted: list):
    engine.key_down("LeftShift")
    engine.key_down("LeftControl")
    assert engine.key_down("C") is None
    assert emitted == []
    # dropping the extra key is a release; releases never match
    engine.key_up("LeftShift")
    assert emitted == []

    engine.key_up("C")
    assert engine.key_down("C") is Action.SELECT_CT
    # auto-repeat of the last key doesn't fire again
    assert engine.key_down("C") is None
    assert emitted == [Action.SELECT_CT]


def test_held_superset_never_fires_sub_chord(engine: ComboEngine, clock: FakeClock, emitted: list):
    for key in ("LeftControl", "C", "T"):
        engine.key_down(key)
    assert emitted == [Action.SELECT_CT]
    engine.key_up("C")
    engine.key_up("T")
    engine.key_up("LeftControl")

    clock.advance(1)
    for key in ("T", "LeftControl", "C"):
        engine.key_down(key)
    # only the moment the held keys were exactly {T, LeftControl} counts
    assert emitted == [Action.SELECT_CT, Action.SELECT_T]


def test_cooldown(engine: ComboEngine, clock: FakeClock, emitted: list):
    engine.key_down("LeftControl")
    assert engine.key_down("C") is Action.SELECT_CT

    clock.advance(0.05)
    engine.key_up("C")
    assert engine.key_down("T") is None
    # swallowed, but still held
    assert engine.held_keys == frozenset({"LeftControl", "T"})

    clock.advance(0.1)
    engine.key_up("T")
    assert engine.key_down("S") is Action.SWAP_TEAMS
    assert emitted == [Action.SELECT_CT, Action.SWAP_TEAMS]


def test_cooldown_ends_after_exactly_100ms(engine: ComboEngine, clock: FakeClock, emitted: list):
    clock.now = 0.0
    engine.key_down("LeftControl")
    assert engine.key_down("C") is Action.SELECT_CT
    engine.key_up("C")

    clock.now = 0.099
    assert engine.key_down("T") is None
    engine.key_up("T")

    clock.now = 0.1
    assert engine.key_down("S") is Action.SWAP_TEAMS
    assert emitted == [Action.SELECT_CT, Action.SWAP_TEAMS]


def test_cooldown_is_configurable(clock: FakeClock, emitted: list):
    engine = ComboEngine(
        Bindings(select_ct=["LeftControl", "C"]),
        X11_TRANSLATOR,
        sink=emitted.append,
        clock=clock,
        cooldown=datetime.timedelta(seconds=1),
    )
    engine.key_down("LeftControl")
    engine.key_down("C")
    clock.advance(0.5)
    engine.key_up("C")
    engine.key_down("C")
    clock.advance(0.6)
    engine.key_up("C")
    engine.key_down("C")
    assert emitted == [Action.SELECT_CT, Action.SELECT_CT]


def test_first_binding_in_priority_order_wins(clock: FakeClock, emitted: list):
    engine = ComboEngine(
        Bindings(swap_teams=["F5"], reset=["F5"], increment_t=["F6"]),
        X11_TRANSLATOR,
        sink=emitted.append,
        clock=clock,
    )
    assert engine.key_down("F5") is Action.RESET
    assert emitted == [Action.RESET]


def test_empty_binding_never_matches(clock: FakeClock, emitted: list):
    engine = ComboEngine(Bindings(), X11_TRANSLATOR, sink=emitted.append, clock=clock)
    engine.key_down("A")
    engine.key_up("A")
    assert engine.held_keys == frozenset()
    assert emitted == []


def test_matching_ignores_case(clock: FakeClock, emitted: list):
    engine = ComboEngine(Bindings(select_ct=["LeftControl", "c"]), X11_TRANSLATOR, sink=emitted.append, clock=clock)
    engine.key_down("leftcontrol")
    assert engine.key_down("C") is Action.SELECT_CT


def test_release_with_different_case_clears_key(engine: ComboEngine):
    engine.key_down("a")
    engine.key_down("A")
    assert engine.held_keys == frozenset({"a"})
    engine.key_up("A")
    assert engine.held_keys == frozenset()


def test_release_of_unheld_key_is_a_noop(engine: ComboEngine):
    engine.key_up("Numpad5")
    assert engine.held_keys == frozenset()


def test_binding_replacement_applies_to_new_events(engine: ComboEngine, clock: FakeClock, emitted: list):
    engine.key_down("Numpad0")
    engine.update_bindings(Bindings(reset=["F5"]))
    # the old chord completes after the swap: nothing
    assert engine.key_down("NumpadEnter") is None
    engine.key_up("Numpad0")
    engine.key_up("NumpadEnter")

    assert engine.key_down("F5") is Action.RESET
    assert emitted == [Action.RESET]


def test_held_keys_survive_binding_replacement(engine: ComboEngine, emitted: list):
    engine.update_bindings(Bindings())
    engine.key_down("LeftControl")
    engine.update_bindings(Bindings(swap_teams=["LeftControl", "W"]))
    assert engine.key_down("W") is Action.SWAP_TEAMS
    assert engine.bindings == Bindings(swap_teams=["LeftControl", "W"])


def test_reset_clears_held_keys_and_cooldown(engine: ComboEngine, emitted: list):
    engine.key_down("LeftControl")
    engine.key_down("C")
    engine.reset()
    assert engine.held_keys == frozenset()
    # no cooldown carried over either, even though the clock hasn't moved
    engine.key_down("LeftControl")
    assert engine.key_down("T") is Action.SELECT_T
    assert emitted == [Action.SELECT_CT, Action.SELECT_T]


def test_raw_events_end_to_end(engine: ComboEngine, emitted: list):
    events = [
        RawKeyEvent.pressed(X11Keysym.XK_KP_0, "0"),
        RawKeyEvent.pressed(X11Keysym.XK_KP_Enter, "\r"),
        RawKeyEvent.released(X11Keysym.XK_KP_Enter, "\r"),
        RawKeyEvent.released(X11Keysym.XK_KP_0, "0"),
    ]
    results = [engine.process(event) for event in events]
    assert results == [None, Action.RESET, None, None]
    assert emitted == [Action.RESET]
    assert engine.held_keys == frozenset()
