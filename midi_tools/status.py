"""Status byte classification for MIDI channel messages.

Channel messages encode their type in the high nibble of the status byte and
the channel (0-15 on the wire, 1-16 here) in the low nibble::

    noteoff         128 - 143
    noteon          144 - 159
    polytouch       160 - 175
    control         176 - 191
    pc              192 - 207
    channeltouch    208 - 223
    pitch           224 - 239
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from .errors import UnknownStatusError


class MessageType(str, Enum):
    """Semantic type of a channel message."""

    NOTEOFF = "noteoff"
    NOTEON = "noteon"
    POLYTOUCH = "polytouch"
    CONTROL = "control"
    PC = "pc"
    CHANNELTOUCH = "channeltouch"
    PITCH = "pitch"


STATUS_BASES: Mapping[MessageType, int] = MappingProxyType(
    {
        MessageType.NOTEOFF: 128,
        MessageType.NOTEON: 144,
        MessageType.POLYTOUCH: 160,
        MessageType.CONTROL: 176,
        MessageType.PC: 192,
        MessageType.CHANNELTOUCH: 208,
        MessageType.PITCH: 224,
    }
)
MESSAGE_TYPES: tuple[MessageType, ...] = tuple(STATUS_BASES)


def to_type(message: Sequence[int]) -> MessageType:
    """Return the message type, treating a zero-velocity note-on as a note-off."""

    status = message[0]
    if not 128 <= status <= 239:
        raise UnknownStatusError(status)
    name = MESSAGE_TYPES[status // 16 - 8]
    if name is MessageType.NOTEON and len(message) > 2 and message[2] == 0:
        return MessageType.NOTEOFF
    return name


def to_status(channel: int, message_type: MessageType | str) -> Optional[int]:
    """Return the status byte for ``message_type`` on ``channel`` (1-16).

    An out-of-range channel yields ``None`` rather than an exception, so
    callers must check the result.
    """

    base = STATUS_BASES[MessageType(message_type)]
    if not 0 < channel < 17:
        return None
    return base + channel - 1


def to_channel(message: Sequence[int]) -> int:
    return message[0] % 16 + 1


def is_note(message: Sequence[int]) -> bool:
    return 127 < message[0] < 160


def is_control(message: Sequence[int]) -> bool:
    return 175 < message[0] < 192


def is_pitch(message: Sequence[int]) -> bool:
    return 223 < message[0] < 240


__all__ = [
    "MESSAGE_TYPES",
    "STATUS_BASES",
    "MessageType",
    "is_control",
    "is_note",
    "is_pitch",
    "to_channel",
    "to_status",
    "to_type",
]
