"""Command line front end for the MIDI conversion helpers."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List

from .config import load_midi_config, set_midi_config
from .errors import MidiToolsError
from .logging_config import LogVerbosity, ensure_app_logging, set_file_log_verbosity
from .normalise import MidiEvent, normalise
from .pitch import frequency_to_number, name_to_number, number_to_frequency, number_to_name
from .status import to_channel, to_type

logger = logging.getLogger(__name__)


def _parse_byte(text: str) -> int:
    try:
        value = int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a byte value: {text!r}") from None
    if not 0 <= value <= 255:
        raise argparse.ArgumentTypeError(f"byte out of range 0-255: {text!r}")
    return value


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(value)


def _cmd_name_to_number(args: argparse.Namespace) -> List[str]:
    return [str(name_to_number(args.name))]


def _cmd_number_to_name(args: argparse.Namespace) -> List[str]:
    return [number_to_name(args.number)]


def _cmd_frequency(args: argparse.Namespace) -> List[str]:
    return [repr(number_to_frequency(args.tuning, args.number))]


def _cmd_number(args: argparse.Namespace) -> List[str]:
    return [_format_number(frequency_to_number(args.tuning, args.frequency))]


def _cmd_decode(args: argparse.Namespace) -> List[str]:
    message = list(args.bytes)
    if len(message) > 3:
        raise ValueError("a MIDI channel message has at most 3 bytes")
    message_type = to_type(message)
    try:
        normalised = normalise(MidiEvent(data=message, time_stamp=args.time))
    except IndexError:
        raise ValueError(f"message is too short for a {message_type.value} message") from None
    return [
        f"type: {message_type.value}",
        f"channel: {to_channel(message)}",
        f"normalised: {normalised!r}",
    ]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="midi-tools", description=__doc__)
    parser.add_argument(
        "--config",
        type=Path,
        help="JSON file overriding the default tuning and pitch-bend range.",
    )
    parser.add_argument(
        "--log-verbosity",
        choices=[level.value for level in LogVerbosity],
        help="Write a log file at the given verbosity.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    name_parser = commands.add_parser("name-to-number", help="Convert a note name such as C#4.")
    name_parser.add_argument("name")
    name_parser.set_defaults(handler=_cmd_name_to_number)

    number_parser = commands.add_parser("number-to-name", help="Convert a note number to its name.")
    number_parser.add_argument("number", type=int)
    number_parser.set_defaults(handler=_cmd_number_to_name)

    frequency_parser = commands.add_parser("frequency", help="Frequency in Hz of a note number.")
    frequency_parser.add_argument("number", type=float)
    frequency_parser.add_argument("--tuning", type=float, help="Frequency of A4 in Hz.")
    frequency_parser.set_defaults(handler=_cmd_frequency)

    note_parser = commands.add_parser("number", help="Note number of a frequency in Hz.")
    note_parser.add_argument("frequency", type=float)
    note_parser.add_argument("--tuning", type=float, help="Frequency of A4 in Hz.")
    note_parser.set_defaults(handler=_cmd_number)

    decode_parser = commands.add_parser("decode", help="Classify and normalise a raw message.")
    decode_parser.add_argument("bytes", nargs="+", type=_parse_byte, help="Status and data bytes (decimal or 0x hex).")
    decode_parser.add_argument("--time", type=float, default=0.0, help="Timestamp attached to the event.")
    decode_parser.set_defaults(handler=_cmd_decode)

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    if args.log_verbosity:
        ensure_app_logging()
        set_file_log_verbosity(args.log_verbosity)
    if args.config is not None:
        set_midi_config(load_midi_config(args.config))
        logger.info("Loaded defaults from %s", args.config)

    handler: Callable[[argparse.Namespace], List[str]] = args.handler
    try:
        lines = handler(args)
    except (MidiToolsError, ValueError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    for line in lines:
        print(line)
    return 0


__all__ = ["build_parser", "main", "parse_args"]
