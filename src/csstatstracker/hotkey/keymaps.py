# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import sys
import typing

import msgspec

from .hwtypes import UnsupportedPlatformError
from .keycodes import VirtualKey, X11Keysym

# Both tables must produce the same names for the same physical key, so that a settings
# file written on one platform still means the same thing on the other.

MODIFIER_NAMES = (
    "LeftShift",
    "RightShift",
    "LeftControl",
    "RightControl",
    "LeftAlt",
    "RightAlt",
    "LeftSuper",
    "RightSuper",
)


def _letters_and_digits(first_upper: int, first_digit: int) -> dict[int, str]:
    table = {first_upper + offset: chr(ord("A") + offset) for offset in range(26)}
    table.update({first_digit + offset: str(offset) for offset in range(10)})
    return table


def _numbered(first: int, prefix: str, count: int, start: int = 0) -> dict[int, str]:
    return {first + offset: f"{prefix}{start + offset}" for offset in range(count)}


X11_KEYMAP: dict[int, str] = {
    X11Keysym.XK_Shift_L: "LeftShift",
    X11Keysym.XK_Shift_R: "RightShift",
    X11Keysym.XK_Control_L: "LeftControl",
    X11Keysym.XK_Control_R: "RightControl",
    X11Keysym.XK_Alt_L: "LeftAlt",
    X11Keysym.XK_Alt_R: "RightAlt",
    X11Keysym.XK_Super_L: "LeftSuper",
    X11Keysym.XK_Super_R: "RightSuper",
    X11Keysym.XK_Return: "Return",
    X11Keysym.XK_BackSpace: "Backspace",
    X11Keysym.XK_Tab: "Tab",
    X11Keysym.XK_space: "Space",
    X11Keysym.XK_Escape: "Escape",
    X11Keysym.XK_Insert: "Insert",
    X11Keysym.XK_Delete: "Delete",
    X11Keysym.XK_Home: "Home",
    X11Keysym.XK_End: "End",
    X11Keysym.XK_Page_Up: "PageUp",
    X11Keysym.XK_Page_Down: "PageDown",
    X11Keysym.XK_Up: "Up",
    X11Keysym.XK_Down: "Down",
    X11Keysym.XK_Left: "Left",
    X11Keysym.XK_Right: "Right",
    X11Keysym.XK_Caps_Lock: "CapsLock",
    X11Keysym.XK_Num_Lock: "NumLock",
    X11Keysym.XK_Scroll_Lock: "ScrollLock",
    X11Keysym.XK_Pause: "Pause",
    X11Keysym.XK_Print: "PrintScreen",
    X11Keysym.XK_Menu: "Menu",
    X11Keysym.XK_KP_Decimal: "NumpadDecimal",
    X11Keysym.XK_KP_Add: "NumpadAdd",
    X11Keysym.XK_KP_Subtract: "NumpadSubtract",
    X11Keysym.XK_KP_Multiply: "NumpadMultiply",
    X11Keysym.XK_KP_Divide: "NumpadDivide",
    X11Keysym.XK_KP_Enter: "NumpadEnter",
    X11Keysym.XK_minus: "-",
    X11Keysym.XK_equal: "=",
    # the keysym changes with shift held; the physical key does not
    X11Keysym.XK_plus: "=",
    X11Keysym.XK_underscore: "-",
}
X11_KEYMAP.update(_numbered(X11Keysym.XK_F1, "F", 12, start=1))
X11_KEYMAP.update(_numbered(X11Keysym.XK_KP_0, "Numpad", 10))
# the same keypad keys with numlock off
X11_KEYMAP.update(
    {
        X11Keysym.XK_KP_Insert: "Numpad0",
        X11Keysym.XK_KP_End: "Numpad1",
        X11Keysym.XK_KP_Down: "Numpad2",
        X11Keysym.XK_KP_Page_Down: "Numpad3",
        X11Keysym.XK_KP_Left: "Numpad4",
        X11Keysym.XK_KP_Begin: "Numpad5",
        X11Keysym.XK_KP_Right: "Numpad6",
        X11Keysym.XK_KP_Home: "Numpad7",
        X11Keysym.XK_KP_Up: "Numpad8",
        X11Keysym.XK_KP_Page_Up: "Numpad9",
        X11Keysym.XK_KP_Delete: "NumpadDecimal",
    }
)
X11_KEYMAP.update(_letters_and_digits(X11Keysym.XK_A, X11Keysym.XK_0))
# with ctrl held the hook may not report a usable character, so lowercase keysyms need entries too
X11_KEYMAP.update({X11Keysym.XK_a + offset: chr(ord("A") + offset) for offset in range(26)})


WIN32_KEYMAP: dict[int, str] = {
    VirtualKey.VK_LSHIFT: "LeftShift",
    VirtualKey.VK_RSHIFT: "RightShift",
    VirtualKey.VK_LCONTROL: "LeftControl",
    VirtualKey.VK_RCONTROL: "RightControl",
    VirtualKey.VK_LMENU: "LeftAlt",
    VirtualKey.VK_RMENU: "RightAlt",
    VirtualKey.VK_LWIN: "LeftSuper",
    VirtualKey.VK_RWIN: "RightSuper",
    # numpad Enter shares VK_RETURN, so it can only ever be "Return" here
    VirtualKey.VK_RETURN: "Return",
    VirtualKey.VK_BACK: "Backspace",
    VirtualKey.VK_TAB: "Tab",
    VirtualKey.VK_SPACE: "Space",
    VirtualKey.VK_ESCAPE: "Escape",
    VirtualKey.VK_INSERT: "Insert",
    VirtualKey.VK_DELETE: "Delete",
    VirtualKey.VK_HOME: "Home",
    VirtualKey.VK_END: "End",
    VirtualKey.VK_PRIOR: "PageUp",
    VirtualKey.VK_NEXT: "PageDown",
    VirtualKey.VK_UP: "Up",
    VirtualKey.VK_DOWN: "Down",
    VirtualKey.VK_LEFT: "Left",
    VirtualKey.VK_RIGHT: "Right",
    VirtualKey.VK_CAPITAL: "CapsLock",
    VirtualKey.VK_NUMLOCK: "NumLock",
    VirtualKey.VK_SCROLL: "ScrollLock",
    VirtualKey.VK_PAUSE: "Pause",
    VirtualKey.VK_SNAPSHOT: "PrintScreen",
    VirtualKey.VK_APPS: "Menu",
    VirtualKey.VK_DECIMAL: "NumpadDecimal",
    VirtualKey.VK_ADD: "NumpadAdd",
    VirtualKey.VK_SUBTRACT: "NumpadSubtract",
    VirtualKey.VK_MULTIPLY: "NumpadMultiply",
    VirtualKey.VK_DIVIDE: "NumpadDivide",
    VirtualKey.VK_OEM_MINUS: "-",
    VirtualKey.VK_OEM_PLUS: "=",
}
WIN32_KEYMAP.update(_numbered(VirtualKey.VK_F1, "F", 12, start=1))
WIN32_KEYMAP.update(_numbered(VirtualKey.VK_NUMPAD0, "Numpad", 10))
WIN32_KEYMAP.update(_letters_and_digits(VirtualKey.VK_A, VirtualKey.VK_0))


def fallback_name(char: typing.Optional[str]) -> typing.Optional[str]:
    if char is None or len(char) != 1:
        return None
    if not 32 <= ord(char) <= 126:
        return None
    return char.upper() if char.isalpha() else char


class KeyTranslator(msgspec.Struct, frozen=True):
    platform: str
    keymap: dict[int, str]

    def translate(self, code: typing.Optional[int], char: typing.Optional[str] = None) -> typing.Optional[str]:
        if code is not None and code in self.keymap:
            return self.keymap[code]
        return fallback_name(char)

    def known_names(self) -> frozenset[str]:
        return frozenset(self.keymap.values())


X11_TRANSLATOR = KeyTranslator(platform="linux", keymap=X11_KEYMAP)
WIN32_TRANSLATOR = KeyTranslator(platform="win32", keymap=WIN32_KEYMAP)


def translator_for_platform(platform: typing.Optional[str] = None) -> KeyTranslator:
    if platform is None:
        platform = sys.platform
    if platform == "win32":
        return WIN32_TRANSLATOR
    if platform.startswith("linux"):
        return X11_TRANSLATOR
    raise UnsupportedPlatformError(f"No global hotkey keymap for platform {platform!r}")
