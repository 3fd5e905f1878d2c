"""
workcal.zones
~~~~~~~~~~~~~

Static per-zone holiday tables.  Each zone resolves, per year, to a list of
``(date, holiday id)`` pairs covering both fixed-date holidays and the
moveable feasts derived from Easter.

Basic usage::

    from workcal.zones import holidays, holiday_names

    holidays("nl", 2021)       # [(date(2021, 1, 1), 'nieuwjaar'), ...]
    holiday_names("be")        # ['nieuwjaarsdag', 'paasmaandag', ...]

Unknown zone ids raise :class:`workcal.ZoneNotFoundError`.
"""

from workcal.zones.zones import ZONES, Zone, get_zone, holiday_names, holidays

__all__ = [
    "ZONES",
    "Zone",
    "get_zone",
    "holiday_names",
    "holidays",
]
