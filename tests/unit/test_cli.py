from __future__ import annotations

import json
import logging

import pytest

from midi_tools import cli
from midi_tools import logging_config


@pytest.fixture(autouse=True)
def reset_logging():
    logging_config._reset_for_tests()
    try:
        yield
    finally:
        logging_config._reset_for_tests()


def test_name_to_number_prints_note_number(capsys) -> None:
    assert cli.main(["name-to-number", "C#4"]) == 0
    assert capsys.readouterr().out == "61\n"


def test_number_to_name_accepts_negative_numbers(capsys) -> None:
    assert cli.main(["number-to-name", "-1"]) == 0
    assert capsys.readouterr().out == "B-2\n"


def test_frequency_and_number_commands(capsys) -> None:
    assert cli.main(["frequency", "81"]) == 0
    assert capsys.readouterr().out == "880.0\n"

    assert cli.main(["number", "440", "--tuning", "440"]) == 0
    assert capsys.readouterr().out == "69\n"

    assert cli.main(["number", "450"]) == 0
    assert capsys.readouterr().out.startswith("69.38")


def test_decode_reports_type_channel_and_normalised_tuple(capsys) -> None:
    assert cli.main(["decode", "0x91", "60", "0", "--time", "2.5"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "type: noteoff",
        "channel: 2",
        "normalised: (2.5, 'noteoff', 60, 0.0)",
    ]


def test_bad_note_name_exits_with_error(capsys) -> None:
    assert cli.main(["name-to-number", "H2"]) == 2
    assert "Bad note name" in capsys.readouterr().err


def test_unsupported_spelling_exits_with_error(capsys) -> None:
    assert cli.main(["name-to-number", "Cb4"]) == 2
    assert "Bad note name: 'Cb4'" in capsys.readouterr().err


@pytest.mark.parametrize(
    ("argv", "message"),
    [
        (["decode", "100", "0", "0"], "not a channel message"),
        (["decode", "0x90", "60"], "too short"),
        (["decode", "0x90", "60", "1", "2"], "at most 3 bytes"),
    ],
)
def test_decode_errors_exit_with_error(capsys, argv, message) -> None:
    assert cli.main(argv) == 2
    assert message in capsys.readouterr().err


def test_decode_rejects_out_of_range_bytes() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["decode", "256"])
    assert excinfo.value.code == 2


def test_config_option_changes_default_tuning(tmp_path, capsys) -> None:
    config_path = tmp_path / "midi.json"
    config_path.write_text(json.dumps({"tuning": {"a4_hz": 432}}), encoding="utf-8")

    assert cli.main(["--config", str(config_path), "frequency", "69"]) == 0
    assert capsys.readouterr().out == "432.0\n"


def test_log_verbosity_option_writes_log_file(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.setenv("MIDI_TOOLS_LOG_DIR", str(tmp_path))

    assert cli.main(["--log-verbosity", "error", "name-to-number", "nope"]) == 2
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "name-to-number failed" in (tmp_path / "midi_tools.log").read_text(encoding="utf-8")
