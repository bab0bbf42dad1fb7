"""Core domain layer — ply grammar and move scanner, no external dependencies.

Quick start::

    from pgnify.core import scan_moves

    for record in scan_moves("1e4e52Nf3Nf6"):
        print(record.number, record.white, record.black)
"""

from pgnify.core.enums import Color, GameResult, PlyKind
from pgnify.core.grammar import PLY_RULES, NoGrammarMatch, PlyRule, match_ply, rule_for
from pgnify.core.models import MoveRecord, PlyParts, PlyToken
from pgnify.core.scanner import RecordHook, TruncatedInput, iter_moves, scan_moves

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PlyKind",
    # Models
    "MoveRecord",
    "PlyParts",
    "PlyToken",
    # Grammar
    "PLY_RULES",
    "NoGrammarMatch",
    "PlyRule",
    "match_ply",
    "rule_for",
    # Scanner
    "RecordHook",
    "TruncatedInput",
    "iter_moves",
    "scan_moves",
]
