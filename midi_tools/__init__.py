"""Stateless conversion helpers for MIDI channel messages."""

from .bend import pitch_to_float, pitch_to_int
from .deprecated import (
    normalise_data,
    normalise_note_off,
    normalise_note_on,
    note_to_number,
    number_to_note,
)
from .errors import MidiToolsError, NoteNameError, UnknownStatusError
from .normalise import MidiEvent, normalise, normalise_note
from .pitch import (
    A4,
    NOTE_NAMES,
    NOTE_NUMBERS,
    frequency_to_number,
    name_to_number,
    normalise_note_name,
    number_to_frequency,
    number_to_name,
    number_to_octave,
)
from .status import (
    MESSAGE_TYPES,
    STATUS_BASES,
    MessageType,
    is_control,
    is_note,
    is_pitch,
    to_channel,
    to_status,
    to_type,
)

__all__ = [
    "A4",
    "MESSAGE_TYPES",
    "NOTE_NAMES",
    "NOTE_NUMBERS",
    "STATUS_BASES",
    "MessageType",
    "MidiEvent",
    "MidiToolsError",
    "NoteNameError",
    "UnknownStatusError",
    "frequency_to_number",
    "is_control",
    "is_note",
    "is_pitch",
    "name_to_number",
    "normalise",
    "normalise_data",
    "normalise_note",
    "normalise_note_name",
    "normalise_note_off",
    "normalise_note_on",
    "note_to_number",
    "number_to_frequency",
    "number_to_name",
    "number_to_note",
    "number_to_octave",
    "pitch_to_float",
    "pitch_to_int",
    "to_channel",
    "to_status",
    "to_type",
]
