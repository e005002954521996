import dataclasses
import json
import logging
import pathlib
import sys
import typing

import cattrs
import cattrs.gen

from .commontypes import SettingsError
from .hotkey.hwtypes import Binding, Bindings

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_FILE = pathlib.Path("./csstatstracker.json")

LINUX_HOTKEYS = {
    "increment_ct": ["Numpad1", "NumpadAdd"],
    "decrement_ct": ["Numpad1", "NumpadSubtract"],
    "increment_t": ["Numpad2", "NumpadAdd"],
    "decrement_t": ["Numpad2", "NumpadSubtract"],
    "reset": ["Numpad0", "NumpadEnter"],
    "select_ct": ["LeftControl", "C"],
    "select_t": ["LeftControl", "T"],
    "swap_teams": ["LeftControl", "S"],
}

# Windows can't tell numpad Enter from the main Return key.
WIN32_HOTKEYS = dict(LINUX_HOTKEYS, reset=["Numpad0", "Return"])


def default_hotkeys(platform: typing.Optional[str] = None) -> dict[str, list[str]]:
    if platform is None:
        platform = sys.platform
    return WIN32_HOTKEYS if platform == "win32" else LINUX_HOTKEYS


settings_converter = cattrs.Converter()
settings_converter.register_unstructure_hook(pathlib.Path, str)
settings_converter.register_structure_hook(pathlib.Path, lambda v, _: pathlib.Path(v))


def _structure_binding(value, _) -> Binding:
    # cattrs would otherwise split a lone string into a tuple of characters
    if not isinstance(value, (list, tuple)) or not all(isinstance(key, str) for key in value):
        raise ValueError(f"A key binding must be a list of key names, not {value!r}")
    return tuple(value)


settings_converter.register_structure_hook_func(lambda t: t == Binding, _structure_binding)


@dataclasses.dataclass(kw_only=True)
class Settings:
    _path: pathlib.Path
    hotkeys: Bindings
    hotkey_platform: typing.Optional[str] = None

    @property
    def platform(self) -> str:
        return self.hotkey_platform if self.hotkey_platform is not None else sys.platform

    def save(self, dest: typing.Optional[pathlib.Path] = None):
        if dest is None:
            dest = self._path
        raw = settings_converter.unstructure(self)
        del raw["_path"]
        with dest.open("w") as outfile:
            json.dump(raw, outfile, indent=2)

    @classmethod
    def load(cls, src: pathlib.Path):
        try:
            with src.open() as infile:
                raw = json.load(infile)
        except FileNotFoundError:
            logger.info("No settings at %s; using defaults", src)
            return cls.default(src)
        except (OSError, ValueError) as exc:
            raise SettingsError(f"Failed to read settings from {src}: {exc}") from exc
        if not isinstance(raw, dict):
            raise SettingsError(f"Settings in {src} must be a JSON object")

        # actions missing from older files get the defaults; an explicit empty list stays disabled
        raw_hotkeys = raw.get("hotkeys") or {}
        if not isinstance(raw_hotkeys, dict):
            raise SettingsError(f"Hotkeys in {src} must be a JSON object")
        raw["hotkeys"] = default_hotkeys(raw.get("hotkey_platform")) | raw_hotkeys
        raw["_path"] = src
        try:
            return settings_converter.structure(raw, cls)
        except (cattrs.BaseValidationError, TypeError, ValueError) as exc:
            raise SettingsError(f"Invalid settings in {src}: {exc}") from exc

    @classmethod
    def default(cls, path: pathlib.Path = DEFAULT_SETTINGS_FILE, platform: typing.Optional[str] = None):
        return settings_converter.structure(
            {"_path": path, "hotkeys": default_hotkeys(platform), "hotkey_platform": platform},
            cls,
        )

    @classmethod
    def for_test(cls):
        return cls.default(pathlib.Path("test.settings.json"), platform="linux")


settings_converter.register_structure_hook(Settings, cattrs.gen.make_dict_structure_fn(Settings, settings_converter))
