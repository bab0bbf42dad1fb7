"""Data models produced by the move scanner."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from pgnify.core.enums import PlyKind


@dataclass(slots=True, frozen=True)
class PlyParts:
    """Structured view of a matched ply.

    ``piece`` is ``None`` for pawn moves and castling. ``origin`` holds the
    single disambiguating file or rank, or for pawn captures the file the
    pawn came from.
    """

    piece: str | None = None
    origin: str | None = None
    is_capture: bool = False
    target: str | None = None
    promotion: str | None = None
    suffix: str = ""
    castle: str | None = None


@dataclass(slots=True, frozen=True)
class PlyToken:
    """One side's move exactly as it appeared in the transcript."""

    text: str
    kind: PlyKind
    parts: PlyParts

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    @property
    def is_check(self) -> bool:
        return "+" in self.parts.suffix

    @property
    def is_mate(self) -> bool:
        return "#" in self.parts.suffix


@dataclass(slots=True, frozen=True)
class MoveRecord:
    """A numbered move pair; ``black`` is absent when the game ends on White."""

    number_text: str
    white: PlyToken
    black: PlyToken | None = None

    @property
    def number(self) -> int:
        return int(self.number_text)

    def plies(self) -> Iterator[PlyToken]:
        yield self.white
        if self.black is not None:
            yield self.black

    def source_text(self) -> str:
        """Rebuild the exact transcript slice this record was scanned from."""
        return self.number_text + "".join(ply.text for ply in self.plies())
