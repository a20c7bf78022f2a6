"""Pitch-bend payload decoding."""

from __future__ import annotations

from typing import Optional, Sequence

from .config import get_default_bend_range

BEND_CENTER = 8192
BEND_MAX = 8191


def pitch_to_int(message: Sequence[int]) -> int:
    """Combine the two 7-bit data bytes into a signed value (-8192..8191)."""

    return (message[2] << 7 | message[1]) - BEND_CENTER


def pitch_to_float(bend_range: Optional[float], message: Sequence[int]) -> float:
    """Bend amount in semitones for a full deflection of ``bend_range``.

    ``bend_range`` of ``None`` uses the configured default (normally 2).
    """

    if bend_range is None:
        bend_range = get_default_bend_range()
    return bend_range * pitch_to_int(message) / BEND_MAX


__all__ = ["BEND_CENTER", "BEND_MAX", "pitch_to_float", "pitch_to_int"]
