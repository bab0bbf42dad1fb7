"""Converter settings shared by the CLI and the file driver."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_INPUT = Path("games.txt")


@dataclass
class ConverterSettings:
    """All user-configurable settings."""

    # Files
    input_path: Path = DEFAULT_INPUT
    pgn_path: Path | None = None  # None: <input stem>.pgn
    csv_path: Path | None = None  # None: <input stem>.csv

    # PGN tags
    event: str = "lichess.com"
    site: str = "lichess.com"
    player_name: str = "Player"
    opponent_name: str = "Anon"

    # Diagnostics
    debug: bool = False
    step: bool = False

    def resolved_pgn_path(self) -> Path:
        return self.pgn_path or self.input_path.with_suffix(".pgn")

    def resolved_csv_path(self) -> Path:
        return self.csv_path or self.input_path.with_suffix(".csv")
