"""Notation package: game details parsing and PGN serialization."""

from pgnify.notation.header import (
    GameHeader,
    GameOutcome,
    HeaderError,
    is_header_line,
    parse_header,
)
from pgnify.notation.pgn import (
    UNKNOWN_RESULT,
    build_pgn_game,
    format_move_record,
    header_tags,
    pgn_result_token,
)

__all__ = [
    "UNKNOWN_RESULT",
    "GameHeader",
    "GameOutcome",
    "HeaderError",
    "is_header_line",
    "parse_header",
    "pgn_result_token",
    "format_move_record",
    "header_tags",
    "build_pgn_game",
]
