"""American English."""

from __future__ import annotations

from timephrase.locales.base import LocaleTable, two_forms
from timephrase.types import Tense, Unit

_UNITS = {
    Unit.SECOND: ("second", "seconds"),
    Unit.MINUTE: ("minute", "minutes"),
    Unit.HOUR: ("hour", "hours"),
    Unit.DAY: ("day", "days"),
    Unit.WEEK: ("week", "weeks"),
    Unit.MONTH: ("month", "months"),
    Unit.YEAR: ("year", "years"),
}

TABLE = LocaleTable(
    code="en_us",
    instant="just now",
    past={
        unit: two_forms(f"1 {one} ago", f"{{amount}} {other} ago")
        for unit, (one, other) in _UNITS.items()
    },
    future={
        unit: two_forms(f"in 1 {one}", f"in {{amount}} {other}")
        for unit, (one, other) in _UNITS.items()
    },
)


def en_us(tense: Tense, unit: Unit, amount: int) -> str:
    return TABLE.render(tense, unit, amount)
