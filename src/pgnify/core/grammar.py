"""Ordered ply grammar for unspaced move transcripts.

Transcripts copied from a game viewer run every move together
(``1e4c52Nc3d6``), so a ply is recognised purely by the longest notation
that fits at the front of the remaining text. Several notations are
textual prefixes of others (``O-O`` of ``O-O-O``, ``e8`` of ``e8=Q``), so
the rules below are tried strictly in table order and the first match
wins:

1. queenside castle          ``O-O-O``
2. kingside castle           ``O-O``
3. piece capture with promotion   ``Rbxa8=Q+``
4. capture with promotion         ``dxe8=N``
5. piece capture                  ``Ndxb5``, ``Bxf2+``
6. capture                        ``exd5``
7. move with promotion            ``e8=Q#``
8. move                           ``Nf3``, ``R1e2``, ``a6``

Piece rules take an optional disambiguator before the ``x``; rules 4 and
6 accept a piece letter or a pawn's file. A disambiguator is at most one
character, a file or a rank.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from pgnify.core.enums import PlyKind
from pgnify.core.models import PlyParts, PlyToken

_PIECES = "KQBNR"
_SUFFIX = r"(?P<suffix>[+#]*)"
_TARGET = r"(?P<target>[a-h][1-8])"
_PROMOTION = r"=(?P<promotion>[QBNR])"
_PIECE_CAPTURE = r"(?P<piece>[KQBNR])(?P<origin>[a-h1-8])?(?P<capture>x)"
_ANY_CAPTURE = r"(?P<lead>[KQBNRa-h])(?P<capture>x)"
_PLAIN_MOVE = r"(?P<piece>[KQBNR])?(?P<origin>[a-h1-8])?"


class NoGrammarMatch(ValueError):
    """Raised when no ply rule matches at the current scan position."""

    def __init__(self, remainder: str, offset: int = 0) -> None:
        super().__init__(f"No ply notation matches remainder {remainder!r}")
        self.remainder = remainder
        self.offset = offset


@dataclass(slots=True, frozen=True)
class PlyRule:
    """A single named recogniser in the ordered ply table."""

    kind: PlyKind
    pattern: re.Pattern[str]

    def match(self, text: str) -> PlyToken | None:
        """Return the token this rule reads from the start of *text*."""
        found = self.pattern.match(text)
        if found is None:
            return None
        return PlyToken(
            text=found.group(0), kind=self.kind, parts=_parts_from(found)
        )


def _rule(kind: PlyKind, pattern: str) -> PlyRule:
    return PlyRule(kind, re.compile(pattern))


PLY_RULES: tuple[PlyRule, ...] = (
    _rule(PlyKind.QUEENSIDE_CASTLE, r"(?P<castle>O-O-O)" + _SUFFIX),
    _rule(PlyKind.KINGSIDE_CASTLE, r"(?P<castle>O-O)" + _SUFFIX),
    _rule(
        PlyKind.PIECE_CAPTURE_PROMOTION,
        _PIECE_CAPTURE + _TARGET + _PROMOTION + _SUFFIX,
    ),
    _rule(PlyKind.CAPTURE_PROMOTION, _ANY_CAPTURE + _TARGET + _PROMOTION + _SUFFIX),
    _rule(PlyKind.PIECE_CAPTURE, _PIECE_CAPTURE + _TARGET + _SUFFIX),
    _rule(PlyKind.CAPTURE, _ANY_CAPTURE + _TARGET + _SUFFIX),
    _rule(PlyKind.MOVE_PROMOTION, _PLAIN_MOVE + _TARGET + _PROMOTION + _SUFFIX),
    _rule(PlyKind.MOVE, _PLAIN_MOVE + _TARGET + _SUFFIX),
)


def _parts_from(found: re.Match[str]) -> PlyParts:
    groups = found.groupdict()
    piece = groups.get("piece")
    origin = groups.get("origin")
    lead = groups.get("lead")
    if lead is not None:
        if lead in _PIECES:
            piece = lead
        else:
            origin = lead
    return PlyParts(
        piece=piece,
        origin=origin,
        is_capture=groups.get("capture") is not None,
        target=groups.get("target"),
        promotion=groups.get("promotion"),
        suffix=groups.get("suffix") or "",
        castle=groups.get("castle"),
    )


def match_ply(remainder: str, offset: int = 0) -> PlyToken:
    """Read the single ply at the front of *remainder*.

    *offset* is only used to report where the failure happened.
    """
    for rule in PLY_RULES:
        token = rule.match(remainder)
        if token is not None:
            return token
    raise NoGrammarMatch(remainder, offset)


def rule_for(kind: PlyKind) -> PlyRule:
    """Look up the rule that recognises *kind*."""
    for rule in PLY_RULES:
        if rule.kind == kind:
            return rule
    raise KeyError(kind)
