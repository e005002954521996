from __future__ import annotations

import enum
import typing

import attr
import msgspec

from ..commontypes import CsStatsError


class HotkeyError(CsStatsError):
    pass


class HookStartError(HotkeyError):
    pass


class UnsupportedPlatformError(HookStartError):
    pass


class KeyPress(enum.IntEnum):
    RELEASED = 0
    PRESSED = 1


class RawKeyEvent(msgspec.Struct, frozen=True):
    code: typing.Optional[int]
    char: typing.Optional[str]
    press: KeyPress

    @classmethod
    def pressed(cls, code: typing.Optional[int], char: typing.Optional[str] = None):
        return cls(code=code, char=char, press=KeyPress.PRESSED)

    @classmethod
    def released(cls, code: typing.Optional[int], char: typing.Optional[str] = None):
        return cls(code=code, char=char, press=KeyPress.RELEASED)


# Declaration order is match priority: when two bindings are satisfied by the same
# held keys, the one declared first wins.
@enum.unique
class Action(enum.Enum):
    INCREMENT_CT = "increment_ct"
    DECREMENT_CT = "decrement_ct"
    INCREMENT_T = "increment_t"
    DECREMENT_T = "decrement_t"
    RESET = "reset"
    SELECT_CT = "select_ct"
    SELECT_T = "select_t"
    SWAP_TEAMS = "swap_teams"


Binding = tuple[str, ...]


def _binding(keys: typing.Iterable[str]) -> Binding:
    if isinstance(keys, str):
        raise TypeError(f"Binding must be a sequence of key names, not the string {keys!r}")
    return tuple(keys)


@attr.frozen(kw_only=True)
class Bindings:
    """One key combination per action. An empty combination disables that action.

    Attribute names are the Action values, so the settings file can use them as keys directly.
    """

    increment_ct: Binding = attr.field(factory=tuple, converter=_binding)
    decrement_ct: Binding = attr.field(factory=tuple, converter=_binding)
    increment_t: Binding = attr.field(factory=tuple, converter=_binding)
    decrement_t: Binding = attr.field(factory=tuple, converter=_binding)
    reset: Binding = attr.field(factory=tuple, converter=_binding)
    select_ct: Binding = attr.field(factory=tuple, converter=_binding)
    select_t: Binding = attr.field(factory=tuple, converter=_binding)
    swap_teams: Binding = attr.field(factory=tuple, converter=_binding)

    def for_action(self, action: Action) -> Binding:
        return getattr(self, action.value)

    def in_priority_order(self) -> list[tuple[Action, Binding]]:
        return [(action, self.for_action(action)) for action in Action]

    def replacing(self, action: Action, keys: typing.Iterable[str]) -> Bindings:
        return attr.evolve(self, **{action.value: keys})


def format_binding(keys: typing.Sequence[str]) -> str:
    "Render a binding for display, keeping the order the keys were configured in."
    if not keys:
        return "Not set"
    return "+".join(keys)
