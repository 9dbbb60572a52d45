"""German.

"vor" and "in" both take the dative, so past and future share the plural
nouns ("vor 3 Tagen", "in 3 Tagen").
"""

from __future__ import annotations

from timephrase.locales.base import LocaleTable, two_forms
from timephrase.types import Tense, Unit

_UNITS = {
    Unit.SECOND: ("Sekunde", "Sekunden"),
    Unit.MINUTE: ("Minute", "Minuten"),
    Unit.HOUR: ("Stunde", "Stunden"),
    Unit.DAY: ("Tag", "Tagen"),
    Unit.WEEK: ("Woche", "Wochen"),
    Unit.MONTH: ("Monat", "Monaten"),
    Unit.YEAR: ("Jahr", "Jahren"),
}

TABLE = LocaleTable(
    code="de_de",
    instant="jetzt",
    past={
        unit: two_forms(f"vor 1 {one}", f"vor {{amount}} {other}")
        for unit, (one, other) in _UNITS.items()
    },
    future={
        unit: two_forms(f"in 1 {one}", f"in {{amount}} {other}")
        for unit, (one, other) in _UNITS.items()
    },
)


def de_de(tense: Tense, unit: Unit, amount: int) -> str:
    return TABLE.render(tense, unit, amount)
