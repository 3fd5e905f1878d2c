from __future__ import annotations

from datetime import date, timedelta
from functools import cached_property
from typing import Iterator, Optional

import numpy as np
from dateutil.relativedelta import relativedelta

from .._exceptions import DateOutOfRangeError
from ..config.configuration import Configuration
from ..zones import get_zone


def weekday(d: date) -> int:
    """Weekday number of ``d`` with 0 = Sunday ... 6 = Saturday."""
    return d.isoweekday() % 7


def not_found(d: date) -> DateOutOfRangeError:
    return DateOutOfRangeError(f"{d.isoformat()}T00:00:00.000Z was not found in the cache")


class WorkdaySequence:
    """
    Gap-free run of daily workday flags starting at ``start``.

    Day ``i`` of the sequence is ``start + i days``; ``flags[i]`` says whether
    it is a workday.  The flag array is read-only once constructed.
    """

    def __init__(self, start: date, flags: np.ndarray) -> None:
        flags = np.array(flags, dtype=bool).reshape(-1)
        flags.setflags(write=False)
        self._start: date = start
        self._flags: np.ndarray = flags

    # ── span ─────────────────────────────────────────────────────────────

    @property
    def start(self) -> date:
        return self._start

    @property
    def end(self) -> date:
        """First date *after* the sequence."""
        return self._start + timedelta(days=len(self._flags))

    @property
    def flags(self) -> np.ndarray:
        return self._flags

    @cached_property
    def dates(self) -> np.ndarray:
        return np.datetime64(self._start, "D") + np.arange(len(self._flags))

    @cached_property
    def prefix(self) -> np.ndarray:
        """``prefix[i]`` = number of workdays in ``[start, start + i]``."""
        return np.cumsum(self._flags, dtype=np.int64)

    def __len__(self) -> int:
        return len(self._flags)

    def __contains__(self, d: date) -> bool:
        return self._start <= d < self.end

    def index_of(self, d: date) -> int:
        if d not in self:
            raise not_found(d)
        return (d - self._start).days

    def entries(self) -> Iterator[tuple[date, bool]]:
        for i, flag in enumerate(self._flags):
            yield self._start + timedelta(days=i), bool(flag)

    # ── comparison / repr ────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WorkdaySequence):
            return NotImplemented
        return self._start == other._start and np.array_equal(self._flags, other._flags)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"WorkdaySequence(start={self._start.isoformat()}, "
            f"end={self.end.isoformat()}, "
            f"days={len(self)}, "
            f"workdays={int(self._flags.sum())})"
        )


def horizon_end(start: date, number_of_years: int) -> date:
    """Exclusive end of a horizon of ``number_of_years`` calendar years."""
    return start + relativedelta(years=number_of_years)


def generate(configuration: Configuration, today: Optional[date] = None) -> WorkdaySequence:
    """
    Build the workday sequence for ``configuration`` starting at ``today``.

    The weekly pattern is broadcast over the whole horizon first; excluded
    dates and zone holidays are then applied as overrides.  The result only
    depends on ``configuration`` and ``today``.
    """
    zone = get_zone(configuration.zone)
    start = today if today is not None else date.today()
    end = horizon_end(start, configuration.number_of_years)
    n = (end - start).days

    pattern = np.array([d in configuration.workdays for d in range(7)], dtype=bool)
    flags = pattern[(np.arange(n, dtype=np.int64) + weekday(start)) % 7]

    for d in configuration.exclude:
        if start <= d < end:
            flags[(d - start).days] = False

    for year in range(start.year, end.year + 1):
        for d, name in zone.holidays(year):
            if name in configuration.exclude_holidays:
                continue
            if start <= d < end:
                flags[(d - start).days] = False

    return WorkdaySequence(start, flags)
