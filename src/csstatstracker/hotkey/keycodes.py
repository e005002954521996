# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from enum import IntEnum

# The global hook reports a "raw code" with every key event. What that number means
# depends on the platform: on X11 it is the keysym (so it already reflects shift, and
# keypad keys always come with their numlock-on keysym), on Windows it is the virtual-key
# code (layout independent, mostly).
# Only the keys that can reasonably appear in a binding are listed here.


# From X11/keysymdef.h. Latin-1 keysyms are equal to their character codes.
class X11Keysym(IntEnum):
    XK_space = 0x0020
    XK_plus = 0x002B
    XK_minus = 0x002D
    XK_0 = 0x0030
    XK_1 = 0x0031
    XK_2 = 0x0032
    XK_3 = 0x0033
    XK_4 = 0x0034
    XK_5 = 0x0035
    XK_6 = 0x0036
    XK_7 = 0x0037
    XK_8 = 0x0038
    XK_9 = 0x0039
    XK_equal = 0x003D
    XK_A = 0x0041
    XK_Z = 0x005A
    XK_underscore = 0x005F
    XK_a = 0x0061
    XK_b = 0x0062
    XK_c = 0x0063
    XK_d = 0x0064
    XK_e = 0x0065
    XK_f = 0x0066
    XK_g = 0x0067
    XK_h = 0x0068
    XK_i = 0x0069
    XK_j = 0x006A
    XK_k = 0x006B
    XK_l = 0x006C
    XK_m = 0x006D
    XK_n = 0x006E
    XK_o = 0x006F
    XK_p = 0x0070
    XK_q = 0x0071
    XK_r = 0x0072
    XK_s = 0x0073
    XK_t = 0x0074
    XK_u = 0x0075
    XK_v = 0x0076
    XK_w = 0x0077
    XK_x = 0x0078
    XK_y = 0x0079
    XK_z = 0x007A

    XK_BackSpace = 0xFF08
    XK_Tab = 0xFF09
    XK_Return = 0xFF0D
    XK_Pause = 0xFF13
    XK_Scroll_Lock = 0xFF14
    XK_Escape = 0xFF1B
    XK_Home = 0xFF50
    XK_Left = 0xFF51
    XK_Up = 0xFF52
    XK_Right = 0xFF53
    XK_Down = 0xFF54
    XK_Page_Up = 0xFF55
    XK_Page_Down = 0xFF56
    XK_End = 0xFF57
    XK_Print = 0xFF61
    XK_Insert = 0xFF63
    XK_Menu = 0xFF67
    XK_Num_Lock = 0xFF7F

    # the keypad spans XK_KP_Space..XK_KP_Equal; these are the keysyms with numlock off
    XK_KP_Space = 0xFF80
    XK_KP_Home = 0xFF95
    XK_KP_Left = 0xFF96
    XK_KP_Up = 0xFF97
    XK_KP_Right = 0xFF98
    XK_KP_Down = 0xFF99
    XK_KP_Page_Up = 0xFF9A
    XK_KP_Page_Down = 0xFF9B
    XK_KP_End = 0xFF9C
    XK_KP_Begin = 0xFF9D
    XK_KP_Insert = 0xFF9E
    XK_KP_Delete = 0xFF9F

    # keypad keysyms as reported with numlock on
    XK_KP_Enter = 0xFF8D
    XK_KP_Multiply = 0xFFAA
    XK_KP_Add = 0xFFAB
    XK_KP_Subtract = 0xFFAD
    XK_KP_Decimal = 0xFFAE
    XK_KP_Divide = 0xFFAF
    XK_KP_0 = 0xFFB0
    XK_KP_1 = 0xFFB1
    XK_KP_2 = 0xFFB2
    XK_KP_3 = 0xFFB3
    XK_KP_4 = 0xFFB4
    XK_KP_5 = 0xFFB5
    XK_KP_6 = 0xFFB6
    XK_KP_7 = 0xFFB7
    XK_KP_8 = 0xFFB8
    XK_KP_9 = 0xFFB9
    XK_KP_Equal = 0xFFBD

    XK_F1 = 0xFFBE
    XK_F2 = 0xFFBF
    XK_F3 = 0xFFC0
    XK_F4 = 0xFFC1
    XK_F5 = 0xFFC2
    XK_F6 = 0xFFC3
    XK_F7 = 0xFFC4
    XK_F8 = 0xFFC5
    XK_F9 = 0xFFC6
    XK_F10 = 0xFFC7
    XK_F11 = 0xFFC8
    XK_F12 = 0xFFC9

    XK_Shift_L = 0xFFE1
    XK_Shift_R = 0xFFE2
    XK_Control_L = 0xFFE3
    XK_Control_R = 0xFFE4
    XK_Caps_Lock = 0xFFE5
    XK_Alt_L = 0xFFE9
    XK_Alt_R = 0xFFEA
    XK_Super_L = 0xFFEB
    XK_Super_R = 0xFFEC
    XK_Delete = 0xFFFF


# From WinUser.h. The low-level hook reports the sided modifier codes (VK_LSHIFT etc),
# never the generic VK_SHIFT/VK_CONTROL/VK_MENU ones.
class VirtualKey(IntEnum):
    VK_BACK = 0x08
    VK_TAB = 0x09
    VK_RETURN = 0x0D
    VK_PAUSE = 0x13
    VK_CAPITAL = 0x14
    VK_ESCAPE = 0x1B
    VK_SPACE = 0x20
    VK_PRIOR = 0x21
    VK_NEXT = 0x22
    VK_END = 0x23
    VK_HOME = 0x24
    VK_LEFT = 0x25
    VK_UP = 0x26
    VK_RIGHT = 0x27
    VK_DOWN = 0x28
    VK_SNAPSHOT = 0x2C
    VK_INSERT = 0x2D
    VK_DELETE = 0x2E
    # VK_0 through VK_9 and VK_A through VK_Z are the ASCII codes of '0'-'9' and 'A'-'Z'
    VK_0 = 0x30
    VK_9 = 0x39
    VK_A = 0x41
    VK_Z = 0x5A
    VK_LWIN = 0x5B
    VK_RWIN = 0x5C
    VK_APPS = 0x5D
    VK_NUMPAD0 = 0x60
    VK_NUMPAD1 = 0x61
    VK_NUMPAD2 = 0x62
    VK_NUMPAD3 = 0x63
    VK_NUMPAD4 = 0x64
    VK_NUMPAD5 = 0x65
    VK_NUMPAD6 = 0x66
    VK_NUMPAD7 = 0x67
    VK_NUMPAD8 = 0x68
    VK_NUMPAD9 = 0x69
    VK_MULTIPLY = 0x6A
    VK_ADD = 0x6B
    VK_SUBTRACT = 0x6D
    VK_DECIMAL = 0x6E
    VK_DIVIDE = 0x6F
    VK_F1 = 0x70
    VK_F2 = 0x71
    VK_F3 = 0x72
    VK_F4 = 0x73
    VK_F5 = 0x74
    VK_F6 = 0x75
    VK_F7 = 0x76
    VK_F8 = 0x77
    VK_F9 = 0x78
    VK_F10 = 0x79
    VK_F11 = 0x7A
    VK_F12 = 0x7B
    VK_NUMLOCK = 0x90
    VK_SCROLL = 0x91
    VK_LSHIFT = 0xA0
    VK_RSHIFT = 0xA1
    VK_LCONTROL = 0xA2
    VK_RCONTROL = 0xA3
    VK_LMENU = 0xA4
    VK_RMENU = 0xA5
    VK_OEM_PLUS = 0xBB
    VK_OEM_MINUS = 0xBD
