"""Exception types raised by the MIDI conversion helpers."""

from __future__ import annotations


class MidiToolsError(Exception):
    """Base class for errors raised by :mod:`midi_tools`."""


class NoteNameError(MidiToolsError, ValueError):
    """Raised when a note name does not look like ``C♯4`` or ``Bb-1``."""

    def __init__(self, name: str):
        super().__init__(f"Bad note name: {name!r}")
        self.name = name


class UnknownStatusError(MidiToolsError, ValueError):
    """Raised when a status byte does not belong to a channel message."""

    def __init__(self, status: int):
        super().__init__(f"Status byte {status} is not a channel message (expected 128-239)")
        self.status = status


__all__ = ["MidiToolsError", "NoteNameError", "UnknownStatusError"]
