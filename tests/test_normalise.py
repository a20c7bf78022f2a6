from __future__ import annotations

import pytest

from midi_tools import MidiEvent, normalise, normalise_note


def test_normalise_note_rewrites_zero_velocity_note_on() -> None:
    message = [144, 60, 0]
    result = normalise_note(message)
    assert result is message
    assert message == [128, 60, 0]
    assert normalise_note(message) == [128, 60, 0]


def test_normalise_note_works_on_bytearrays() -> None:
    message = bytearray([0x9F, 60, 0])
    normalise_note(message)
    assert message == bytearray([0x8F, 60, 0])


@pytest.mark.parametrize(
    "message",
    [[144, 60, 1], [128, 60, 0], [176, 64, 0], [192, 0]],
)
def test_normalise_note_leaves_other_messages_alone(message) -> None:
    before = list(message)
    assert normalise_note(message) == before


def test_normalise_note_events() -> None:
    assert normalise(MidiEvent([144, 60, 127], 10.0)) == (10.0, "noteon", 60, 1.0)
    assert normalise(MidiEvent([144, 60, 0], 1.5)) == (1.5, "noteoff", 60, 0.0)
    assert normalise(MidiEvent([129, 61, 0], 2.0)) == (2.0, "noteoff", 61, 0.0)


def test_normalise_control_change() -> None:
    time, kind, controller, value = normalise(MidiEvent([176, 7, 127], 3.0))
    assert (time, kind, controller) == (3.0, "control", 7)
    assert value == 1.0


def test_normalise_program_and_touch() -> None:
    assert normalise(MidiEvent([192, 42], 0.0)) == (0.0, "program", 42)
    assert normalise(MidiEvent([208, 127], 0.5)) == (0.5, "touch", "all", 1.0)
    time, kind, note, pressure = normalise(MidiEvent([160, 60, 64], 0.5))
    assert (time, kind, note) == (0.5, "touch", 60)
    assert pressure == pytest.approx(64 / 127)


def test_normalise_pitch_bend_uses_two_semitones() -> None:
    assert normalise(MidiEvent([224, 0, 64], 4.0)) == (4.0, "pitch", 0.0)
    time, kind, amount = normalise(MidiEvent([224, 127, 127], 4.0))
    assert (time, kind) == (4.0, "pitch")
    assert amount == pytest.approx(2.0)


def test_normalised_type_names_are_plain_strings() -> None:
    kind = normalise(MidiEvent([144, 60, 64], 0.0))[1]
    assert type(kind) is str


def test_event_from_mapping_accepts_dom_style_keys() -> None:
    event = MidiEvent.from_mapping({"data": bytes([0x90, 64, 100]), "timeStamp": 12})
    assert event == MidiEvent(data=[144, 64, 100], time_stamp=12.0)
    assert MidiEvent.from_mapping({"data": [192, 1], "time_stamp": 1.0}).time_stamp == 1.0
