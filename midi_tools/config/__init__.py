"""Library-wide defaults loaded from JSON resources."""

from __future__ import annotations

import json
from dataclasses import dataclass
from importlib import resources
from math import isfinite
from pathlib import Path
from typing import Any, Mapping

_CONFIG_RESOURCE = "midi.json"
_DEFAULT_TUNING_HZ = 440.0
_DEFAULT_BEND_RANGE = 2.0
_MIDI_CONFIG_CACHE: MidiConfig | None = None


@dataclass(frozen=True)
class MidiConfig:
    """Default reference tuning and pitch-bend range."""

    tuning_hz: float
    bend_range: float


def get_midi_config() -> MidiConfig:
    """Return the cached configuration."""

    global _MIDI_CONFIG_CACHE
    if _MIDI_CONFIG_CACHE is None:
        _MIDI_CONFIG_CACHE = load_midi_config()
    return _MIDI_CONFIG_CACHE


def set_midi_config(config: MidiConfig) -> None:
    """Replace the cached configuration, e.g. with one loaded from a user file."""

    global _MIDI_CONFIG_CACHE
    _MIDI_CONFIG_CACHE = config


def reset_midi_config_cache() -> None:
    """Reset the cached configuration for subsequent reloads."""

    global _MIDI_CONFIG_CACHE
    _MIDI_CONFIG_CACHE = None


def load_midi_config(path: str | Path | None = None) -> MidiConfig:
    """Load configuration from ``path`` or the bundled JSON resource."""

    data = _read_config_data(path)
    tuning_section = data.get("tuning")
    bend_section = data.get("pitch_bend")
    tuning = _parse_float_field(tuning_section, "a4_hz", default=_DEFAULT_TUNING_HZ)
    bend_range = _parse_float_field(bend_section, "range_semitones", default=_DEFAULT_BEND_RANGE)
    return MidiConfig(tuning_hz=tuning, bend_range=bend_range)


def get_default_tuning() -> float:
    """Frequency in Hz assigned to A4 (note number 69)."""

    return get_midi_config().tuning_hz


def get_default_bend_range() -> float:
    """Semitone range of a full pitch-bend deflection."""

    return get_midi_config().bend_range


def _read_config_data(path: str | Path | None) -> Mapping[str, Any]:
    if path is not None:
        return _load_json_from_path(Path(path).expanduser())
    return _load_default_config_data()


def _load_json_from_path(path: Path) -> Mapping[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError:
        return {}
    return _parse_json(raw)


def _load_default_config_data() -> Mapping[str, Any]:
    try:
        resource = resources.files(__package__).joinpath(_CONFIG_RESOURCE)
        raw = resource.read_text(encoding="utf-8")
    except (FileNotFoundError, OSError):
        return {}
    return _parse_json(raw)


def _parse_json(raw: str) -> Mapping[str, Any]:
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        return {}
    if isinstance(parsed, Mapping):
        return parsed
    return {}


def _parse_float_field(section: Any, key: str, *, default: float) -> float:
    if not isinstance(section, Mapping):
        return default
    return _coerce_positive_float(section.get(key), default=default)


def _coerce_positive_float(value: Any, *, default: float) -> float:
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        candidate = float(value)
    elif isinstance(value, str):
        try:
            candidate = float(value.strip())
        except ValueError:
            return default
    else:
        return default
    if not isfinite(candidate) or candidate <= 0:
        return default
    return candidate


__all__ = [
    "MidiConfig",
    "get_default_bend_range",
    "get_default_tuning",
    "get_midi_config",
    "load_midi_config",
    "reset_midi_config_cache",
    "set_midi_config",
]
