"""File driver: turns a transcript of games into PGN text and statistics."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum, auto

from pgnify.config import ConverterSettings
from pgnify.core.grammar import NoGrammarMatch
from pgnify.core.scanner import RecordHook, scan_moves
from pgnify.notation.header import GameHeader, HeaderError, is_header_line, parse_header
from pgnify.notation.pgn import (
    UNKNOWN_RESULT,
    build_pgn_game,
    format_move_record,
    header_tags,
    pgn_result_token,
)
from pgnify.stats import StatsTable, write_stats_csv

_LOGGER = logging.getLogger(__name__)


class LineKind(IntEnum):
    """Role of one input line."""

    SKIP = auto()  # blank or '#' comment
    HEADER = auto()
    MOVES = auto()


class ConversionError(Exception):
    """Raised when a line cannot be converted; the whole run stops."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        super().__init__(f"Line {line_number}: {reason}")
        self.line_number = line_number
        self.line = line
        self.reason = reason

    @property
    def remainder(self) -> str | None:
        cause = self.__cause__
        if isinstance(cause, NoGrammarMatch):
            return cause.remainder
        return None


@dataclass(slots=True)
class ConversionResult:
    """Everything produced by one run over an input transcript."""

    games: list[str] = field(default_factory=list)
    stats: StatsTable = field(default_factory=StatsTable)

    @property
    def game_count(self) -> int:
        return len(self.games)

    def pgn_text(self) -> str:
        return "".join(self.games)


def classify_line(line: str) -> LineKind:
    """Classify an already-trimmed input line."""
    if not line or line.startswith("#"):
        return LineKind.SKIP
    if is_header_line(line):
        return LineKind.HEADER
    return LineKind.MOVES


def _record_without_moves(
    stats: StatsTable, header: GameHeader, line_number: int
) -> StatsTable:
    _LOGGER.warning("Line %d: game details without a moves line", line_number)
    return stats.record(header.date, header.outcome())


def convert_lines(
    lines: Iterable[str],
    settings: ConverterSettings,
    *,
    on_record: RecordHook | None = None,
) -> ConversionResult:
    """Convert transcript lines, stopping at the first malformed line."""
    result = ConversionResult()
    stats = result.stats
    pending: GameHeader | None = None
    pending_line = 0
    round_number = 0

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        kind = classify_line(line)
        if kind == LineKind.SKIP:
            continue
        _LOGGER.debug("I: %s", line)

        if kind == LineKind.HEADER:
            try:
                header = parse_header(line)
            except HeaderError as exc:
                raise ConversionError(line_number, line, str(exc)) from exc
            if pending is not None:
                stats = _record_without_moves(stats, pending, pending_line)
            pending, pending_line = header, line_number
            round_number += 1
            continue

        try:
            records = scan_moves(line, on_record=on_record)
        except NoGrammarMatch as exc:
            raise ConversionError(
                line_number, line, f"No match - buffer: {exc.remainder}"
            ) from exc

        if pending is None:
            _LOGGER.warning("Line %d: moves without a game details line", line_number)
            result.games.append(build_pgn_game({}, records, UNKNOWN_RESULT))
            continue

        result.games.append(
            build_pgn_game(
                header_tags(pending, round_number, settings),
                records,
                pgn_result_token(pending.result),
                pending.comment,
            )
        )
        stats = stats.record(pending.date, pending.outcome())
        pending = None

    if pending is not None:
        stats = _record_without_moves(stats, pending, pending_line)
    result.stats = stats
    return result


def convert_moves(text: str, *, on_record: RecordHook | None = None) -> list[str]:
    """Render a single move string as PGN move lines."""
    return [
        format_move_record(record)
        for record in scan_moves(text.strip(), on_record=on_record)
    ]


def convert_file(
    settings: ConverterSettings, *, on_record: RecordHook | None = None
) -> ConversionResult:
    """Convert ``settings.input_path`` and write the PGN and CSV outputs.

    Nothing is written unless every line converted.
    """
    input_path = settings.input_path
    pgn_path = settings.resolved_pgn_path()
    csv_path = settings.resolved_csv_path()
    _LOGGER.info("Input Game file: %s", input_path)
    _LOGGER.info("Output PGN file: %s", pgn_path)
    _LOGGER.info("Output CSV file: %s", csv_path)

    with input_path.open(encoding="utf-8") as handle:
        result = convert_lines(handle, settings, on_record=on_record)

    pgn_path.write_text(result.pgn_text(), encoding="utf-8")
    write_stats_csv(csv_path, result.stats)
    return result
