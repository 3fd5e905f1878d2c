"""
workcal.generator
~~~~~~~~~~~~~~~~~

Pure configuration -> daily workday-flag sequence.  A dense boolean array is
built by broadcasting the weekly pattern over the horizon, after which
explicitly excluded dates and zone holidays are applied as overrides.

Basic usage::

    from datetime import date
    from workcal.config import Configuration
    from workcal.generator import generate

    cfg = Configuration(zone="nl", workdays={1, 2, 3, 4, 5}, number_of_years=10)
    seq = generate(cfg, today=date(2020, 1, 1))
    seq.start, seq.end        # (2020-01-01, 2030-01-01)
    seq.flags[:7]             # [False, True, True, False, False, True, True]
"""

from workcal.generator.generator import WorkdaySequence, generate, horizon_end, weekday

__all__ = [
    "WorkdaySequence",
    "generate",
    "horizon_end",
    "weekday",
]
