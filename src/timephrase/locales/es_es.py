"""Spanish (Spain)."""

from __future__ import annotations

from timephrase.locales.base import LocaleTable, two_forms
from timephrase.types import Tense, Unit

_UNITS = {
    Unit.SECOND: ("segundo", "segundos"),
    Unit.MINUTE: ("minuto", "minutos"),
    Unit.HOUR: ("hora", "horas"),
    Unit.DAY: ("día", "días"),
    Unit.WEEK: ("semana", "semanas"),
    Unit.MONTH: ("mes", "meses"),
    Unit.YEAR: ("año", "años"),
}

TABLE = LocaleTable(
    code="es_es",
    instant="ahora mismo",
    past={
        unit: two_forms(f"hace 1 {one}", f"hace {{amount}} {other}")
        for unit, (one, other) in _UNITS.items()
    },
    future={
        unit: two_forms(f"dentro de 1 {one}", f"dentro de {{amount}} {other}")
        for unit, (one, other) in _UNITS.items()
    },
)


def es_es(tense: Tense, unit: Unit, amount: int) -> str:
    return TABLE.render(tense, unit, amount)
