"""Per-day win/draw statistics for converted games."""

from __future__ import annotations

import csv
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from pgnify.notation.header import GameOutcome

CSV_COLUMNS = ("Date", "Played", "Won", "Won as White", "Won as Black", "Drawn")


@dataclass(slots=True, frozen=True)
class DailyTally:
    """Counters for the games played on one date (or over all dates)."""

    played: int = 0
    won: int = 0
    won_as_white: int = 0
    won_as_black: int = 0
    drawn: int = 0

    def add(self, outcome: GameOutcome) -> DailyTally:
        """Return a new tally with one more game counted."""
        return DailyTally(
            played=self.played + 1,
            won=self.won + int(outcome.won),
            won_as_white=self.won_as_white + int(outcome.won_as_white),
            won_as_black=self.won_as_black + int(outcome.won_as_black),
            drawn=self.drawn + int(outcome.drawn),
        )

    def merge(self, other: DailyTally) -> DailyTally:
        return DailyTally(
            played=self.played + other.played,
            won=self.won + other.won,
            won_as_white=self.won_as_white + other.won_as_white,
            won_as_black=self.won_as_black + other.won_as_black,
            drawn=self.drawn + other.drawn,
        )


@dataclass(slots=True, frozen=True)
class StatsTable:
    """Immutable date -> :class:`DailyTally` mapping.

    The driver threads a table through the run, replacing it with the
    value returned by :meth:`record` after every game.
    """

    days: Mapping[str, DailyTally] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def record(self, date: str, outcome: GameOutcome) -> StatsTable:
        days = dict(self.days)
        days[date] = days.get(date, DailyTally()).add(outcome)
        return StatsTable(MappingProxyType(days))

    def rows(self) -> Iterator[tuple[str, DailyTally]]:
        """Yield ``(date, tally)`` pairs in date order."""
        for date in sorted(self.days):
            yield date, self.days[date]

    def totals(self) -> DailyTally:
        total = DailyTally()
        for tally in self.days.values():
            total = total.merge(tally)
        return total


def percent(part: int, whole: int) -> str:
    """Format ``part / whole`` as a percentage with one decimal."""
    if whole == 0:
        return "0.0"
    return f"{part * 100 / whole:.1f}"


def _summary_fields(total: DailyTally) -> list[str]:
    played = total.played
    return [
        f"{played} played",
        f"{total.won} won ({percent(total.won, played)}%)",
        f"{total.won_as_white} won as white "
        f"({percent(total.won_as_white, played)}%)",
        f"{total.won_as_black} won as black "
        f"({percent(total.won_as_black, played)}%)",
        f"{total.drawn} draws ({percent(total.drawn, played)}%)",
    ]


def summary_line(table: StatsTable) -> str:
    """One-line summary of the whole run."""
    return ", ".join(_summary_fields(table.totals()))


def day_line(date: str, tally: DailyTally) -> str:
    return (
        f"{date} - {tally.played} played, {tally.won} won, "
        f"{tally.won_as_white} as white, {tally.won_as_black} as black, "
        f"{tally.drawn} draws"
    )


def write_stats_csv(path: Path, table: StatsTable) -> None:
    """Write one row per date followed by an overall summary row."""
    with path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(CSV_COLUMNS)
        for date, tally in table.rows():
            writer.writerow(
                [
                    date,
                    tally.played,
                    tally.won,
                    tally.won_as_white,
                    tally.won_as_black,
                    tally.drawn,
                ]
            )
        writer.writerow([])
        writer.writerow(["", *_summary_fields(table.totals())])
