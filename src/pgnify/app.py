"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pgnify import __version__
from pgnify.config import DEFAULT_INPUT, ConverterSettings
from pgnify.converter import ConversionError, convert_file, convert_moves
from pgnify.core.grammar import NoGrammarMatch
from pgnify.core.models import MoveRecord
from pgnify.core.scanner import RecordHook
from pgnify.notation.pgn import format_move_record
from pgnify.stats import day_line, summary_line

_LOGGER = logging.getLogger(__name__)
_TITLE = f"PGN Game Transformer for Lichess game strings V{__version__}"


class StepAborted(Exception):
    """Raised when the user leaves step mode with 'E'."""


def _interactive_pause(record: MoveRecord) -> None:
    """Wait for a keypress after each move pair."""
    move = format_move_record(record).rstrip()
    prompt = f"{move}  Press C to continue or E to exit: "
    while True:
        try:
            answer = input(prompt).strip().lower()
        except EOFError:
            raise StepAborted(f"Stopped at move {record.number_text}") from None
        if answer == "c":
            return
        if answer == "e":
            raise StepAborted(f"Stopped at move {record.number_text}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pgnify",
        description="Convert lichess move transcripts to PGN with daily statistics.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        default=DEFAULT_INPUT,
        help="games file (default: %(default)s)",
    )
    parser.add_argument("--pgn", type=Path, help="output PGN path")
    parser.add_argument("--csv", type=Path, help="output CSV statistics path")
    parser.add_argument("--player", default="Player", help="your name in PGN tags")
    parser.add_argument("--opponent", default="Anon", help="opponent name in PGN tags")
    parser.add_argument("--event", default="lichess.com", help="PGN Event tag")
    parser.add_argument("--site", default="lichess.com", help="PGN Site tag")
    parser.add_argument("--debug", action="store_true", help="log every line and move")
    parser.add_argument(
        "--step", action="store_true", help="pause after every move pair"
    )
    parser.add_argument(
        "-m",
        "--moves",
        help="convert a single move string and print it instead of reading a file",
    )
    parser.add_argument("--version", action="version", version=__version__)
    return parser


def settings_from_args(args: argparse.Namespace) -> ConverterSettings:
    return ConverterSettings(
        input_path=args.input,
        pgn_path=args.pgn,
        csv_path=args.csv,
        event=args.event,
        site=args.site,
        player_name=args.player,
        opponent_name=args.opponent,
        debug=args.debug,
        step=args.step,
    )


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(message)s",
        stream=sys.stdout,
        force=True,
    )


def _run_moves(moves: str, hook: RecordHook | None) -> int:
    try:
        lines = convert_moves(moves, on_record=hook)
    except NoGrammarMatch as exc:
        _LOGGER.error("No Match - Buffer: %s", exc.remainder)
        return 1
    sys.stdout.write("".join(lines))
    return 0


def _run_file(settings: ConverterSettings, hook: RecordHook | None) -> int:
    _LOGGER.info("%s Starting...", _TITLE)
    try:
        result = convert_file(settings, on_record=hook)
    except UnicodeDecodeError as exc:
        _LOGGER.error("Can't decode %s: %s", settings.input_path, exc.reason)
        return 1
    except OSError as exc:
        _LOGGER.error(
            "Can't open %s: %s", exc.filename or settings.input_path, exc.strerror
        )
        return 1
    except ConversionError as exc:
        _LOGGER.error("%s", exc)
        _LOGGER.error("  in: %s", exc.line)
        return 1

    _LOGGER.info("%d games converted", result.game_count)
    _LOGGER.info("%s", summary_line(result.stats))
    for date, tally in result.stats.rows():
        _LOGGER.info("%s", day_line(date, tally))
    _LOGGER.info("%s Complete", _TITLE)
    return 0


def run(argv: Sequence[str] | None = None) -> int:
    """Parse *argv*, run the conversion and return the exit code."""
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)
    configure_logging(settings.debug)
    hook = _interactive_pause if settings.step else None

    try:
        if args.moves is not None:
            return _run_moves(args.moves, hook)
        return _run_file(settings, hook)
    except StepAborted as exc:
        _LOGGER.info("%s", exc)
        return 1


def main() -> None:
    """Launch the converter."""
    sys.exit(run())


if __name__ == "__main__":
    main()
