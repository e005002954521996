import argparse
import logging
import pathlib
import sys

import trio

from .commontypes import SettingsError
from .hotkey.combos import ComboEngine
from .hotkey.hwtypes import Action, Bindings, HookStartError, KeyPress, RawKeyEvent, format_binding
from .hotkey.keymaps import translator_for_platform
from .hotkey.listener import HotkeyListener, PynputHook
from .settings import DEFAULT_SETTINGS_FILE, Settings


def configure_logging(root_level=logging.INFO):
    handler = logging.StreamHandler()
    handler.setLevel(root_level)
    logging.basicConfig(handlers=[handler], format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("csstatstracker").setLevel(root_level)


def print_action(action: Action):
    print(action.value, flush=True)


hotkeys_parser = argparse.ArgumentParser(description="Print the actions triggered by the configured global hotkeys.")
hotkeys_parser.add_argument("settings", type=pathlib.Path, nargs="?", default=DEFAULT_SETTINGS_FILE)
hotkeys_parser.add_argument("--verbose", action="store_true")


def print_hotkey_actions():
    args = hotkeys_parser.parse_args()
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)
    try:
        settings = Settings.load(args.settings)
    except SettingsError as exc:
        sys.exit(str(exc))
    for action, keys in settings.hotkeys.in_priority_order():
        print(f"{action.value}: {format_binding(keys)}")

    async def runner():
        async with trio.open_nursery() as nursery:
            try:
                listener = HotkeyListener(
                    settings.hotkeys,
                    print_action,
                    translator=translator_for_platform(settings.platform),
                )
                await listener.start(nursery)
            except HookStartError as exc:
                nursery.cancel_scope.cancel()
                return str(exc)

    try:
        failure = trio.run(runner)
    except KeyboardInterrupt:
        return
    if failure is not None:
        sys.exit(failure)


keynames_parser = argparse.ArgumentParser(description="Print canonical key names as keys are pressed, for writing bindings.")
keynames_parser.add_argument("--platform", choices=["linux", "win32"], default=None)
keynames_parser.add_argument("--verbose", action="store_true")


def print_key_names():
    args = keynames_parser.parse_args()
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)
    try:
        translator = translator_for_platform(args.platform)
    except HookStartError as exc:
        sys.exit(str(exc))
    # no bindings: the engine is only used for its held-key tracking
    engine = ComboEngine(Bindings(), translator)

    def on_event(event: RawKeyEvent):
        name = translator.translate(event.code, event.char)
        engine.process(event)
        if name is None:
            print(f"(unrecognized code={event.code!r} char={event.char!r})", flush=True)
        elif event.press is KeyPress.PRESSED:
            print(f"{name}    held: {format_binding(sorted(engine.held_keys))}", flush=True)

    hook = PynputHook(on_event)
    try:
        hook.start()
    except HookStartError as exc:
        sys.exit(str(exc))
    try:
        trio.run(trio.sleep_forever)
    except KeyboardInterrupt:
        pass
    finally:
        hook.stop()
