"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from pgnify.config import ConverterSettings

FIRST_GAME_MOVES = (
    "1e4c52Nc3d63Nf3g64d4cxd45Nxd4Bg76Bb5+Bd77Bg5Bxb58Ndxb5Qa5"
    "9O-Oa610Nd4Qxg511f4Qc5"
)
SECOND_GAME_MOVES = (
    "1d4e52dxe5d53exd6Qxd64Qxd6Bxd65Nc3Bb46Bf4Nf67Nf3O-O8Bxc7Bg4"
    "9h3Bxf310gxf3Nc611Rg1Bxc3+12bxc3Rad8"
)
MATE_GAME_MOVES = (
    "1e4e52Nf3Nf63Nxe5Nc64Nxc6dxc65Nc3Bc56d3O-O7Bg5Nxe48Bxd8Bxf2+9Ke2Bg4#"
)

GAMES_TEXT = f"""\
# Games copied from lichess
21.03.15W1-0
{FIRST_GAME_MOVES}

21.03.19W1-0
{SECOND_GAME_MOVES}
21.03.19B0-1great game of tactics
{MATE_GAME_MOVES}
21.03.20B.5-.5
1e4e52Nf3Nf6
"""


@pytest.fixture
def games_file(tmp_path: Path) -> Path:
    """Write the sample transcript to a temporary games file."""
    path = tmp_path / "games.txt"
    path.write_text(GAMES_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def settings(games_file: Path) -> ConverterSettings:
    return ConverterSettings(input_path=games_file, player_name="Mike")


@pytest.fixture
def sample_move_lines() -> list[str]:
    return [FIRST_GAME_MOVES, SECOND_GAME_MOVES, MATE_GAME_MOVES]
