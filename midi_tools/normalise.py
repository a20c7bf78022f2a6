"""Normalisation of raw MIDI messages and input events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, MutableSequence, Sequence, Tuple

from .bend import pitch_to_float
from .status import MessageType, to_type

NormalisedEvent = Tuple[Any, ...]


@dataclass(frozen=True)
class MidiEvent:
    """A raw message as delivered by a MIDI input, with its timestamp."""

    data: Sequence[int]
    time_stamp: float

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "MidiEvent":
        """Build an event from ``{"data": ..., "timeStamp": ...}`` records."""

        if "timeStamp" in mapping:
            time_stamp = mapping["timeStamp"]
        else:
            time_stamp = mapping["time_stamp"]
        return cls(data=list(mapping["data"]), time_stamp=float(time_stamp))


def normalise_note(message: MutableSequence[int]) -> MutableSequence[int]:
    """Rewrite a zero-velocity note-on as a note-off, in place."""

    if len(message) > 2 and message[2] == 0 and 143 < message[0] < 160:
        message[0] -= 16
    return message


def _pitch(data: Sequence[int], time: float, message_type: MessageType) -> NormalisedEvent:
    return (time, "pitch", pitch_to_float(2, data))


def _program(data: Sequence[int], time: float, message_type: MessageType) -> NormalisedEvent:
    return (time, "program", data[1])


def _channel_touch(data: Sequence[int], time: float, message_type: MessageType) -> NormalisedEvent:
    return (time, "touch", "all", data[1] / 127)


def _poly_touch(data: Sequence[int], time: float, message_type: MessageType) -> NormalisedEvent:
    return (time, "touch", data[1], data[2] / 127)


def _default(data: Sequence[int], time: float, message_type: MessageType) -> NormalisedEvent:
    return (time, message_type.value, data[1], data[2] / 127)


_CONVERTERS: Dict[MessageType, Callable[[Sequence[int], float, MessageType], NormalisedEvent]] = {
    MessageType.PITCH: _pitch,
    MessageType.PC: _program,
    MessageType.CHANNELTOUCH: _channel_touch,
    MessageType.POLYTOUCH: _poly_touch,
}


def normalise(event: MidiEvent) -> NormalisedEvent:
    """Flatten ``event`` into ``(time, type, ...payload)``.

    Velocities and pressures are scaled to 0..1 and pitch bends to semitones
    over a range of 2.
    """

    data = event.data
    message_type = to_type(data)
    converter = _CONVERTERS.get(message_type, _default)
    return converter(data, event.time_stamp, message_type)


__all__ = ["MidiEvent", "NormalisedEvent", "normalise", "normalise_note"]
