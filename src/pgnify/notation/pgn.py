"""PGN serialization of scanned transcripts."""

from __future__ import annotations

from collections.abc import Iterable

from pgnify.config import ConverterSettings
from pgnify.core.enums import Color, GameResult
from pgnify.core.models import MoveRecord
from pgnify.notation.header import GameHeader

UNKNOWN_RESULT = "*"


def pgn_result_token(result: GameResult) -> str:
    """Convert :class:`GameResult` to a PGN result token."""
    if result == GameResult.WHITE_WINS:
        return "1-0"
    if result == GameResult.BLACK_WINS:
        return "0-1"
    if result == GameResult.DRAW:
        return "1/2-1/2"
    return UNKNOWN_RESULT


def format_move_record(record: MoveRecord) -> str:
    """Render one move pair as ``"<n>. <white> <black>\\n"``."""
    if record.black is None:
        return f"{record.number_text}. {record.white.text}\n"
    return f"{record.number_text}. {record.white.text} {record.black.text}\n"


def header_tags(
    header: GameHeader, round_number: int, settings: ConverterSettings
) -> dict[str, str]:
    """Build the seven-tag roster for a game."""
    if header.player_color == Color.WHITE:
        white, black = settings.player_name, settings.opponent_name
    else:
        white, black = settings.opponent_name, settings.player_name
    return {
        "Event": settings.event,
        "Site": settings.site,
        "Date": header.date,
        "Round": str(round_number),
        "White": white,
        "Black": black,
        "Result": pgn_result_token(header.result),
    }


def _tag_line(key: str, value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'[{key} "{escaped}"]'


def build_pgn_game(
    tags: dict[str, str],
    records: Iterable[MoveRecord],
    result_token: str = UNKNOWN_RESULT,
    comment: str = "",
) -> str:
    """Build a single-game PGN block, terminated by a blank line."""
    parts: list[str] = []
    if tags:
        parts.extend(f"{_tag_line(key, value)}\n" for key, value in tags.items())
        parts.append("\n")
    parts.extend(format_move_record(record) for record in records)
    if comment:
        # PGN comments cannot contain a closing brace.
        parts.append(f"{{{comment.replace('}', ']')}}}\n")
    parts.append(f"{result_token}\n\n")
    return "".join(parts)
