"""Left-to-right scanner splitting a move line into numbered move pairs."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator

from pgnify.core.grammar import NoGrammarMatch, match_ply
from pgnify.core.models import MoveRecord

_LOGGER = logging.getLogger(__name__)
_MOVE_NUMBER_RE = re.compile(r"\d*")

RecordHook = Callable[[MoveRecord], None]


class TruncatedInput(NoGrammarMatch):
    """Raised when a move number is missing or the line stops right after one."""


def _read_move_number(line: str, cursor: int) -> str:
    found = _MOVE_NUMBER_RE.match(line, cursor)
    digits = found.group(0) if found is not None else ""
    if not digits or cursor + len(digits) >= len(line):
        raise TruncatedInput(line[cursor:], cursor)
    return digits


def iter_moves(
    line: str, *, on_record: RecordHook | None = None
) -> Iterator[MoveRecord]:
    """Yield the move records of *line* one at a time.

    Records already yielded stay valid even if a later move fails to
    match; use :func:`scan_moves` to get all-or-nothing behaviour.
    """
    cursor = 0
    length = len(line)

    while cursor < length:
        number_text = _read_move_number(line, cursor)
        cursor += len(number_text)

        white = match_ply(line[cursor:], cursor)
        cursor += len(white)

        black = None
        if cursor < length:
            black = match_ply(line[cursor:], cursor)
            cursor += len(black)

        record = MoveRecord(number_text=number_text, white=white, black=black)
        _LOGGER.debug(
            "Move %s: %s %s", number_text, white.text, black.text if black else "-"
        )
        if on_record is not None:
            on_record(record)
        yield record


def scan_moves(line: str, *, on_record: RecordHook | None = None) -> list[MoveRecord]:
    """Split a whole move line into records, failing on the first bad ply."""
    return list(iter_moves(line, on_record=on_record))
