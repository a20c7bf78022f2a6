"""Note name, note number and frequency conversions (A4 = 69)."""

from __future__ import annotations

import math
import re
from types import MappingProxyType
from typing import Mapping, Optional

from .config import get_default_tuning
from .errors import NoteNameError

A4 = 69

NOTE_NUMBERS: Mapping[str, int] = MappingProxyType(
    {
        'C': 0,
        'C♯': 1,
        'D♭': 1,
        'D': 2,
        'D♯': 3,
        'E♭': 3,
        'E': 4,
        'F': 5,
        'F♯': 6,
        'G♭': 6,
        'G': 7,
        'G♯': 8,
        'A♭': 8,
        'A': 9,
        'A♯': 10,
        'B♭': 10,
        'B': 11,
    }
)

# Canonical spellings, indexed by pitch class.
NOTE_NAMES: tuple[str, ...] = ('C', 'C♯', 'D', 'E♭', 'E', 'F', 'F♯', 'G', 'G♯', 'A', 'B♭', 'B')

_NOTE_NAME_RE = re.compile(r'([A-G][♭♯]?)(-?\d+)', re.ASCII)
_SHORTHAND_RE = re.compile(r'[b#]')
_SHORTHAND_SYMBOLS = {'#': '♯', 'b': '♭'}


def normalise_note_name(name: str) -> str:
    """Replace ASCII ``#`` and ``b`` with ``♯`` and ``♭``."""

    return _SHORTHAND_RE.sub(lambda match: _SHORTHAND_SYMBOLS[match.group(0)], name)


def name_to_number(name: str) -> int:
    """Parse forms like 'A4', 'C#5', 'B♭-1' into a MIDI note number."""

    m = _NOTE_NAME_RE.fullmatch(normalise_note_name(name))
    if not m:
        raise NoteNameError(name)
    # Cb, E#, Fb and B# fit the pattern but have no pitch class here.
    pitch_class = NOTE_NUMBERS.get(m.group(1))
    if pitch_class is None:
        raise NoteNameError(name)
    octave = int(m.group(2))
    return (octave + 1) * 12 + pitch_class


def number_to_name(number: int) -> str:
    return f"{NOTE_NAMES[number % 12]}{number_to_octave(number)}"


def number_to_octave(number: int) -> int:
    return number // 12 - 1


def number_to_frequency(tuning: Optional[float], number: float) -> float:
    """Frequency in Hz of ``number`` when A4 sounds at ``tuning`` Hz.

    ``tuning`` of ``None`` uses the configured default (normally 440 Hz).
    """

    if tuning is None:
        tuning = get_default_tuning()
    return tuning * 2 ** ((number - A4) / 12)


def frequency_to_number(tuning: Optional[float], frequency: float) -> float:
    """Fractional note number of ``frequency`` when A4 sounds at ``tuning`` Hz.

    The result is rounded to the nearest millionth of a semitone so that
    whole semitones come back as whole numbers despite floating point noise.
    """

    if tuning is None:
        tuning = get_default_tuning()
    number = A4 + 12 * math.log2(frequency / tuning)
    return math.floor(number * 1_000_000 + 0.5) / 1_000_000


__all__ = [
    'A4',
    'NOTE_NAMES',
    'NOTE_NUMBERS',
    'frequency_to_number',
    'name_to_number',
    'normalise_note_name',
    'number_to_frequency',
    'number_to_name',
    'number_to_octave',
]
