from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Sequence, Union

import numpy as np

from ..cache import DiskCache
from ..generator import WorkdaySequence
from ..generator.generator import not_found

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime, str, np.datetime64]


def as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, np.datetime64):
        return value.astype("datetime64[D]").item()
    return date.fromisoformat(value)


class Workdays:
    """
    Workday lookups and arithmetic on top of a :class:`DiskCache`.

    Sequences are memoised per ref on first read.  The memo is only a read
    amortisation: :meth:`flush` drops an entry and the next read fetches it
    from the cache again.
    """

    def __init__(self, cache: DiskCache) -> None:
        self._cache = cache
        self._memo: dict[str, WorkdaySequence] = {}

    def _sequence(self, ref: str) -> WorkdaySequence:
        seq = self._memo.get(ref)
        if seq is None:
            seq = self._cache.get(ref)
            self._memo[ref] = seq
        return seq

    # ── point queries ────────────────────────────────────────────────────

    def is_workday(
        self, ref: str, when: DateLike | Sequence[DateLike] | np.ndarray
    ) -> bool | np.ndarray:
        seq = self._sequence(ref)

        if np.ndim(when) == 0:
            return bool(seq.flags[seq.index_of(as_date(when))])

        days = np.asarray(when, dtype="datetime64[D]")
        idx = (days - np.datetime64(seq.start, "D")).astype(np.int64)
        outside = (idx < 0) | (idx >= len(seq))
        if outside.any():
            raise not_found(days[outside].flat[0].item())
        return seq.flags[idx]

    def get_workday(self, ref: str, when: DateLike, add: int) -> date:
        """
        Date of the ``add``-th workday strictly after ``when``.

        ``add == 0`` returns ``when`` itself.  Raises DateOutOfRangeError when
        ``when`` is not cached or the horizon runs out before ``add`` workdays
        have been counted.
        """
        if add < 0:
            raise ValueError(f"add must be non-negative; got {add}.")

        seq = self._sequence(ref)
        start = as_date(when)
        i = seq.index_of(start)
        if add == 0:
            return start

        # prefix only increments on workdays, so the first index reaching the
        # target count is the add-th workday after i.
        target = seq.prefix[i] + add
        j = int(np.searchsorted(seq.prefix, target, side="left"))
        if j >= len(seq):
            raise not_found(seq.end)
        return seq.start + timedelta(days=j)

    # ── range queries ────────────────────────────────────────────────────

    def workdays_between(self, ref: str, start: DateLike, end: DateLike) -> list[date]:
        """All workdays in ``[start, end)``."""
        seq = self._sequence(ref)
        lo, hi = as_date(start), as_date(end)
        i = seq.index_of(lo)
        if hi > seq.end:
            raise not_found(hi)
        j = max(i, (hi - seq.start).days)
        return [seq.start + timedelta(days=int(k)) for k in np.flatnonzero(seq.flags[i:j]) + i]

    # ── invalidation ─────────────────────────────────────────────────────

    def flush(self, ref: str) -> None:
        if self._memo.pop(ref, None) is not None:
            logger.debug("Flushed memoised sequence for ref %r", ref)

    def __repr__(self) -> str:
        return f"Workdays(cache={self._cache!r}, memoised={sorted(self._memo)})"
