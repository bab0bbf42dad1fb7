"""Parsing of the one-line game details that precede each move line.

A details line looks like ``21.03.17W1-0great game of tactics``: a
``YY.MM.DD`` date, ``W``/``B`` for the side the player had, the result
(``1-0``, ``0-1``, ``.5-.5`` or ``*``) and an optional free-text comment.
"""

from __future__ import annotations

from dataclasses import dataclass

from pgnify.core.enums import Color, GameResult

_DATE_LENGTH = 8
_COLOR_INDEX = 8
_RESULT_INDEX = 9

# Checked in order; the first prefix that matches wins.
_RESULT_PREFIXES: tuple[tuple[str, GameResult], ...] = (
    ("*", GameResult.IN_PROGRESS),
    ("1-0", GameResult.WHITE_WINS),
    ("0-1", GameResult.BLACK_WINS),
    (".5-.5", GameResult.DRAW),
)


class HeaderError(ValueError):
    """Raised when a game details line cannot be parsed."""


@dataclass(slots=True, frozen=True)
class GameOutcome:
    """Result of a game from the player's point of view."""

    won_as_white: bool = False
    won_as_black: bool = False
    drawn: bool = False

    @property
    def won(self) -> bool:
        return self.won_as_white or self.won_as_black


@dataclass(slots=True, frozen=True)
class GameHeader:
    """Metadata for one game."""

    date: str
    player_color: Color
    result: GameResult
    comment: str = ""

    def outcome(self) -> GameOutcome:
        if self.result == GameResult.DRAW:
            return GameOutcome(drawn=True)
        if self.result == GameResult.WHITE_WINS and self.player_color == Color.WHITE:
            return GameOutcome(won_as_white=True)
        if self.result == GameResult.BLACK_WINS and self.player_color == Color.BLACK:
            return GameOutcome(won_as_black=True)
        return GameOutcome()


def is_header_line(line: str) -> bool:
    """Return True if *line* starts with a ``YY.MM.DD`` date."""
    return len(line) > 5 and line[2] == "." and line[5] == "."


def parse_header(line: str) -> GameHeader:
    """Parse a game details line into a :class:`GameHeader`."""
    if not is_header_line(line) or len(line) <= _RESULT_INDEX:
        raise HeaderError(f"Invalid game details line: {line}")

    date = "20" + line[:_DATE_LENGTH]
    color = Color.WHITE if line[_COLOR_INDEX] == "W" else Color.BLACK

    rest = line[_RESULT_INDEX:]
    for prefix, result in _RESULT_PREFIXES:
        if rest.startswith(prefix):
            return GameHeader(
                date=date,
                player_color=color,
                result=result,
                comment=rest[len(prefix) :].strip(),
            )
    raise HeaderError(f"Unknown result in game details line: {line}")
