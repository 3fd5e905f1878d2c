from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable

from dateutil.easter import easter

from .._exceptions import ZoneNotFoundError

Holiday = tuple[date, str]


@dataclass(frozen=True, slots=True)
class Zone:
    names: tuple[str, ...]
    rule: Callable[[int], list[Holiday]]

    def holidays(self, year: int) -> list[Holiday]:
        return sorted(self.rule(year))


def _nl(year: int) -> list[Holiday]:
    e = easter(year)
    days = [
        (date(year, 1, 1), "nieuwjaar"),
        (e, "eerste paasdag"),
        (e + timedelta(days=1), "tweede paasdag"),
        (date(year, 4, 27), "koningsdag"),
        (e + timedelta(days=39), "hemelvaartsdag"),
        (e + timedelta(days=49), "eerste pinksterdag"),
        (e + timedelta(days=50), "tweede pinksterdag"),
        (date(year, 12, 25), "eerste kerstdag"),
        (date(year, 12, 26), "tweede kerstdag"),
    ]
    # Only a day off in lustrum years.
    if year % 5 == 0:
        days.append((date(year, 5, 5), "bevrijdingsdag"))
    return days


def _be(year: int) -> list[Holiday]:
    e = easter(year)
    return [
        (date(year, 1, 1), "nieuwjaarsdag"),
        (e + timedelta(days=1), "paasmaandag"),
        (date(year, 5, 1), "dag van de arbeid"),
        (e + timedelta(days=39), "O.H. Hemelvaart"),
        (e + timedelta(days=50), "pinkstermaandag"),
        (date(year, 7, 21), "nationale feestdag"),
        (date(year, 8, 15), "O.L.V hemelvaart"),
        (date(year, 11, 1), "allerheiligen"),
        (date(year, 11, 11), "wapenstilstand"),
        (date(year, 12, 25), "eerste kerstdag"),
    ]


ZONES: dict[str, Zone] = {
    "nl": Zone(
        names=(
            "nieuwjaar",
            "eerste paasdag",
            "tweede paasdag",
            "koningsdag",
            "hemelvaartsdag",
            "eerste pinksterdag",
            "tweede pinksterdag",
            "eerste kerstdag",
            "tweede kerstdag",
            "bevrijdingsdag",
        ),
        rule=_nl,
    ),
    "be": Zone(
        names=(
            "nieuwjaarsdag",
            "paasmaandag",
            "dag van de arbeid",
            "O.H. Hemelvaart",
            "pinkstermaandag",
            "nationale feestdag",
            "O.L.V hemelvaart",
            "allerheiligen",
            "wapenstilstand",
            "eerste kerstdag",
        ),
        rule=_be,
    ),
}


def get_zone(zone: str) -> Zone:
    try:
        return ZONES[zone]
    except KeyError:
        raise ZoneNotFoundError(f"Zone {zone} not found") from None


def holidays(zone: str, year: int) -> list[Holiday]:
    """All ``(date, holiday id)`` pairs of ``zone`` in ``year``, sorted by date."""
    return get_zone(zone).holidays(year)


def holiday_names(zone: str) -> list[str]:
    return list(get_zone(zone).names)
