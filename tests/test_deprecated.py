from __future__ import annotations

import logging
import warnings

import pytest

from midi_tools import deprecated


def test_aliases_forward_to_current_functions() -> None:
    with pytest.warns(DeprecationWarning, match="name_to_number"):
        assert deprecated.note_to_number("A4") == 69
    with pytest.warns(DeprecationWarning, match="number_to_name"):
        assert deprecated.number_to_note(69) == "A4"
    with pytest.warns(DeprecationWarning, match="normalise_note"):
        assert deprecated.normalise_note_off([144, 60, 0]) == [128, 60, 0]


def test_noop_aliases_return_none() -> None:
    with pytest.warns(DeprecationWarning):
        assert deprecated.normalise_data([144, 60, 0]) is None
    with pytest.warns(DeprecationWarning):
        assert deprecated.normalise_note_on([144, 60, 0]) is None


def test_aliases_warn_only_once() -> None:
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        deprecated.note_to_number("C4")
        deprecated.note_to_number("D4")
    assert [w.category for w in caught] == [DeprecationWarning]


def test_reset_rearms_warnings(caplog) -> None:
    with pytest.warns(DeprecationWarning):
        deprecated.number_to_note(60)
    deprecated.reset_deprecation_warnings()
    with caplog.at_level(logging.WARNING, logger="midi_tools.deprecated"):
        with pytest.warns(DeprecationWarning):
            deprecated.number_to_note(60)
    assert "number_to_name" in caplog.text


def test_deprecate_keeps_wrapped_metadata() -> None:
    def original(value):
        """Doubles value."""
        return value * 2

    wrapped = deprecated.deprecate(original, "original is going away")
    assert wrapped.__name__ == "original"
    assert wrapped.__doc__ == "Doubles value."
    with pytest.warns(DeprecationWarning, match="going away"):
        assert wrapped(2) == 4
