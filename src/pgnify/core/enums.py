"""Core enumerations for the transcript domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Color(IntEnum):
    """Side the player had in a game."""

    WHITE = 0
    BLACK = 1


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3


class PlyKind(StrEnum):
    """Notation class of a single ply, listed in matching precedence."""

    QUEENSIDE_CASTLE = "queenside-castle"
    KINGSIDE_CASTLE = "kingside-castle"
    PIECE_CAPTURE_PROMOTION = "piece-capture-promotion"
    CAPTURE_PROMOTION = "capture-promotion"
    PIECE_CAPTURE = "piece-capture"
    CAPTURE = "capture"
    MOVE_PROMOTION = "move-promotion"
    MOVE = "move"

    @property
    def is_castle(self) -> bool:
        return self in (PlyKind.QUEENSIDE_CASTLE, PlyKind.KINGSIDE_CASTLE)

    @property
    def is_capture(self) -> bool:
        return self in (
            PlyKind.PIECE_CAPTURE_PROMOTION,
            PlyKind.CAPTURE_PROMOTION,
            PlyKind.PIECE_CAPTURE,
            PlyKind.CAPTURE,
        )

    @property
    def is_promotion(self) -> bool:
        return self in (
            PlyKind.PIECE_CAPTURE_PROMOTION,
            PlyKind.CAPTURE_PROMOTION,
            PlyKind.MOVE_PROMOTION,
        )
