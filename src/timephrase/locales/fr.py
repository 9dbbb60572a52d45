"""French."""

from __future__ import annotations

from timephrase.locales.base import LocaleTable, two_forms
from timephrase.types import Tense, Unit

_UNITS = {
    Unit.SECOND: ("seconde", "secondes"),
    Unit.MINUTE: ("minute", "minutes"),
    Unit.HOUR: ("heure", "heures"),
    Unit.DAY: ("jour", "jours"),
    Unit.WEEK: ("semaine", "semaines"),
    Unit.MONTH: ("mois", "mois"),
    Unit.YEAR: ("an", "ans"),
}

TABLE = LocaleTable(
    code="fr",
    instant="à l'instant",
    past={
        unit: two_forms(f"il y a 1 {one}", f"il y a {{amount}} {other}")
        for unit, (one, other) in _UNITS.items()
    },
    future={
        unit: two_forms(f"dans 1 {one}", f"dans {{amount}} {other}")
        for unit, (one, other) in _UNITS.items()
    },
)


def fr(tense: Tense, unit: Unit, amount: int) -> str:
    return TABLE.render(tense, unit, amount)
