"""
workcal.calculator
~~~~~~~~~~~~~~~~~~

Workday lookups and arithmetic against the cached sequences.  A cumulative
workday count over the sequence turns "advance N workdays" into a single
``searchsorted``.

Basic usage::

    from workcal.calculator import Workdays

    workdays = Workdays(cache)
    workdays.is_workday("nl", "2021-04-27")        # False, koningsdag
    workdays.get_workday("nl", "2020-01-02", 10)   # date(2020, 1, 16)
    workdays.flush("nl")                           # drop the memoised copy

Arrays of dates are accepted by ``is_workday``::

    workdays.is_workday("nl", ["2021-04-26", "2021-04-27"])   # [True, False]
"""

from workcal.calculator.calculator import DateLike, Workdays, as_date

__all__ = [
    "DateLike",
    "Workdays",
    "as_date",
]
