"""Italian."""

from __future__ import annotations

from timephrase.locales.base import LocaleTable, two_forms
from timephrase.types import Tense, Unit

_UNITS = {
    Unit.SECOND: ("secondo", "secondi"),
    Unit.MINUTE: ("minuto", "minuti"),
    Unit.HOUR: ("ora", "ore"),
    Unit.DAY: ("giorno", "giorni"),
    Unit.WEEK: ("settimana", "settimane"),
    Unit.MONTH: ("mese", "mesi"),
    Unit.YEAR: ("anno", "anni"),
}

TABLE = LocaleTable(
    code="it_it",
    instant="proprio adesso",
    past={
        unit: two_forms(f"1 {one} fa", f"{{amount}} {other} fa")
        for unit, (one, other) in _UNITS.items()
    },
    future={
        unit: two_forms(f"tra 1 {one}", f"tra {{amount}} {other}")
        for unit, (one, other) in _UNITS.items()
    },
)


def it_it(tense: Tense, unit: Unit, amount: int) -> str:
    return TABLE.render(tense, unit, amount)
