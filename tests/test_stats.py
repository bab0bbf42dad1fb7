"""Tests for per-day statistics."""

from __future__ import annotations

import csv
from pathlib import Path

from pgnify.notation import GameOutcome
from pgnify.stats import (
    CSV_COLUMNS,
    DailyTally,
    StatsTable,
    day_line,
    percent,
    summary_line,
    write_stats_csv,
)

_WHITE_WIN = GameOutcome(won_as_white=True)
_BLACK_WIN = GameOutcome(won_as_black=True)
_DRAW = GameOutcome(drawn=True)
_LOSS = GameOutcome()


def _sample_table() -> StatsTable:
    table = StatsTable()
    table = table.record("2021.03.19", _WHITE_WIN)
    table = table.record("2021.03.15", _BLACK_WIN)
    table = table.record("2021.03.19", _DRAW)
    return table.record("2021.03.19", _LOSS)


class TestDailyTally:
    def test_add_returns_new_tally(self) -> None:
        empty = DailyTally()
        tally = empty.add(_WHITE_WIN)
        assert empty.played == 0
        assert tally == DailyTally(played=1, won=1, won_as_white=1)

    def test_loss_counts_as_played_only(self) -> None:
        assert DailyTally().add(_LOSS) == DailyTally(played=1)

    def test_merge(self) -> None:
        merged = DailyTally(played=2, won=1).merge(DailyTally(played=1, drawn=1))
        assert merged == DailyTally(played=3, won=1, drawn=1)


class TestStatsTable:
    def test_record_does_not_mutate(self) -> None:
        table = StatsTable()
        updated = table.record("2021.03.15", _DRAW)
        assert dict(table.days) == {}
        assert updated.days["2021.03.15"] == DailyTally(played=1, drawn=1)

    def test_rows_are_sorted_by_date(self) -> None:
        dates = [date for date, _tally in _sample_table().rows()]
        assert dates == ["2021.03.15", "2021.03.19"]

    def test_totals(self) -> None:
        assert _sample_table().totals() == DailyTally(
            played=4, won=2, won_as_white=1, won_as_black=1, drawn=1
        )

    def test_empty_totals(self) -> None:
        assert StatsTable().totals() == DailyTally()


class TestFormatting:
    def test_percent(self) -> None:
        assert percent(1, 3) == "33.3"
        assert percent(2, 2) == "100.0"

    def test_percent_without_games(self) -> None:
        assert percent(0, 0) == "0.0"

    def test_summary_line(self) -> None:
        assert summary_line(_sample_table()) == (
            "4 played, 2 won (50.0%), 1 won as white (25.0%), "
            "1 won as black (25.0%), 1 draws (25.0%)"
        )

    def test_day_line(self) -> None:
        tally = DailyTally(played=3, won=1, won_as_white=1, drawn=1)
        assert day_line("2021.03.19", tally) == (
            "2021.03.19 - 3 played, 1 won, 1 as white, 0 as black, 1 draws"
        )


def test_write_stats_csv(tmp_path: Path) -> None:
    path = tmp_path / "games.csv"
    write_stats_csv(path, _sample_table())

    with path.open(encoding="utf-8", newline="") as handle:
        rows = list(csv.reader(handle))

    assert rows[0] == list(CSV_COLUMNS)
    assert rows[1] == ["2021.03.15", "1", "1", "0", "1", "0"]
    assert rows[2] == ["2021.03.19", "3", "1", "1", "0", "1"]
    assert rows[3] == []
    assert rows[4][0] == ""
    assert rows[4][1] == "4 played"
    assert rows[4][-1] == "1 draws (25.0%)"
