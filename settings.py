# settings.py
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Tuple

from debug import Debug
from keyboard_and_plugboard import Plugboard
from machine import Machine
from rotor_and_reflector import REFLECTOR_WIRINGS, ROTOR_WIRINGS, Reflector, Rotor

debug = Debug()

DEFAULT_SETTINGS_FILE = "settings.json"


class ConfigurationError(ValueError):
    """Raised when a settings document cannot produce a valid machine."""


@dataclass(frozen=True, slots=True)
class RotorSetting:
    number: int         # 1–5
    position: int       # 1–26, as written in the settings file


@dataclass(frozen=True, slots=True)
class MachineSettings:
    rotors: Tuple[RotorSetting, RotorSetting, RotorSetting]
    reflector: str
    plugs: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Rotors": [{"Number": r.number, "Position": r.position} for r in self.rotors],
            "Reflector": self.reflector,
            "Plugs": list(self.plugs),
        }


# ──────────────────────────────────────────────────────────────────
#  Parsing & validation
# ──────────────────────────────────────────────────────────────────


def _fold_keys(obj: Dict[str, Any], where: str) -> Dict[str, Any]:
    """Key lookup is case-insensitive: ``"rotors"`` and ``"Rotors"`` are the same field."""
    folded: Dict[str, Any] = {}
    for key, value in obj.items():
        low = key.lower()
        if low in folded:
            raise ConfigurationError(f"Duplicate key {key!r} in {where}")
        folded[low] = value
    return folded


def _require_int(value: Any, what: str, lo: int, hi: int) -> int:
    # bool is an int subclass; JSON true/false are not numbers here
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{what} must be an integer, got {value!r}")
    if not lo <= value <= hi:
        raise ConfigurationError(f"{what} must be in {lo}–{hi}, got {value}")
    return value


def _parse_rotor(raw: Any, idx: int) -> RotorSetting:
    where = f"rotor #{idx + 1}"
    if not isinstance(raw, dict):
        raise ConfigurationError(f"{where} must be an object with Number and Position")
    fields = _fold_keys(raw, where)
    missing = {"number", "position"} - fields.keys()
    if missing:
        raise ConfigurationError(f"Missing keys in {where}: {', '.join(sorted(missing))}")

    number = _require_int(fields["number"], f"{where} Number", min(ROTOR_WIRINGS), max(ROTOR_WIRINGS))
    position = _require_int(fields["position"], f"{where} Position", 1, 26)
    return RotorSetting(number, position)


def parse_settings(data: Any) -> MachineSettings:
    """Validate a decoded settings document and return a :class:`MachineSettings`."""
    if not isinstance(data, dict):
        raise ConfigurationError("Settings document must be a JSON object")
    fields = _fold_keys(data, "settings")

    missing = {"rotors", "reflector"} - fields.keys()
    if missing:
        raise ConfigurationError(f"Missing keys in settings: {', '.join(sorted(missing))}")

    raw_rotors = fields["rotors"]
    if not isinstance(raw_rotors, list) or len(raw_rotors) != 3:
        raise ConfigurationError("Rotors must be a list of exactly 3 entries")
    rotors = tuple(_parse_rotor(r, i) for i, r in enumerate(raw_rotors))

    reflector = fields["reflector"]
    if not isinstance(reflector, str) or reflector not in REFLECTOR_WIRINGS:
        raise ConfigurationError(
            f"Reflector must be one of {', '.join(REFLECTOR_WIRINGS)}, got {reflector!r}"
        )

    plugs = fields.get("plugs")
    if plugs is None:
        plugs = []
    if not isinstance(plugs, list):
        raise ConfigurationError("Plugs must be a list of two-letter strings")
    try:
        Plugboard(plugs)                # validation only
    except ValueError as e:
        raise ConfigurationError(f"Invalid plugboard: {e}") from e

    settings = MachineSettings(rotors, reflector, tuple(plugs))
    debug.log("config", f"parsed {settings}")
    return settings


def load_settings_from_bytes(raw: bytes | str) -> MachineSettings:
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Settings are not valid JSON: {e}") from e
    return parse_settings(data)


def load_settings_from_file(path: str | Path = DEFAULT_SETTINGS_FILE) -> MachineSettings:
    try:
        raw = Path(path).read_bytes()
    except OSError as e:
        raise ConfigurationError(f"Cannot read settings file {str(path)!r}: {e}") from e
    return load_settings_from_bytes(raw)


# ──────────────────────────────────────────────────────────────────
#  Machine construction
# ──────────────────────────────────────────────────────────────────


def build_machine(settings: MachineSettings) -> Machine:
    """Build a fresh machine; positions are converted to 0-based offsets."""
    try:
        rotors = tuple(Rotor.load_wiring(r.number, r.position - 1) for r in settings.rotors)
        reflector = Reflector.load_wiring(settings.reflector)
        plugboard = Plugboard(settings.plugs)
        machine = Machine(rotors, reflector, plugboard)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e
    debug.log("config", f"built {machine!r}")
    return machine


def load_machine(path: str | Path = DEFAULT_SETTINGS_FILE) -> Machine:
    return build_machine(load_settings_from_file(path))
