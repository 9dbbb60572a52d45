"""Brazilian Portuguese."""

from __future__ import annotations

from timephrase.locales.base import LocaleTable, two_forms
from timephrase.types import Tense, Unit

_UNITS = {
    Unit.SECOND: ("segundo", "segundos"),
    Unit.MINUTE: ("minuto", "minutos"),
    Unit.HOUR: ("hora", "horas"),
    Unit.DAY: ("dia", "dias"),
    Unit.WEEK: ("semana", "semanas"),
    Unit.MONTH: ("mês", "meses"),
    Unit.YEAR: ("ano", "anos"),
}

TABLE = LocaleTable(
    code="pt_br",
    instant="agora mesmo",
    past={
        unit: two_forms(f"há 1 {one}", f"há {{amount}} {other}")
        for unit, (one, other) in _UNITS.items()
    },
    future={
        unit: two_forms(f"em 1 {one}", f"em {{amount}} {other}")
        for unit, (one, other) in _UNITS.items()
    },
)


def pt_br(tense: Tense, unit: Unit, amount: int) -> str:
    return TABLE.render(tense, unit, amount)
