# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Hotkey event stages
# hook level:
# stage 0: OS-specific; global keyboard hook issues raw key events on its own thread
#
# engine level (still on the hook thread):
# stage 1: translate raw platform code or character into a canonical key name
# stage 2: track held keys and match configured chords, subject to the action cooldown
#
# host level:
# stage 3: bounded hand-off of actions to the consumer loop running in trio
