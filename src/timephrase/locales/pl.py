"""Polish.

Singular phrases use the accusative noun without a number ("minutę temu"),
and one day maps to the words for yesterday and tomorrow.
"""

from __future__ import annotations

from timephrase.locales.base import LocaleTable, three_forms
from timephrase.types import Tense, Unit

TABLE = LocaleTable(
    code="pl",
    instant="teraz",
    past={
        Unit.SECOND: three_forms("sekundę temu", "{amount} sekundy temu", "{amount} sekund temu"),
        Unit.MINUTE: three_forms("minutę temu", "{amount} minuty temu", "{amount} minut temu"),
        Unit.HOUR: three_forms("godzinę temu", "{amount} godziny temu", "{amount} godzin temu"),
        Unit.DAY: three_forms("wczoraj", "{amount} dni temu", "{amount} dni temu"),
        Unit.WEEK: three_forms("tydzień temu", "{amount} tygodnie temu", "{amount} tygodni temu"),
        Unit.MONTH: three_forms("miesiąc temu", "{amount} miesiące temu", "{amount} miesięcy temu"),
        Unit.YEAR: three_forms("rok temu", "{amount} lata temu", "{amount} lat temu"),
    },
    future={
        Unit.SECOND: three_forms("za sekundę", "za {amount} sekundy", "za {amount} sekund"),
        Unit.MINUTE: three_forms("za minutę", "za {amount} minuty", "za {amount} minut"),
        Unit.HOUR: three_forms("za godzinę", "za {amount} godziny", "za {amount} godzin"),
        Unit.DAY: three_forms("jutro", "za {amount} dni", "za {amount} dni"),
        Unit.WEEK: three_forms("za tydzień", "za {amount} tygodnie", "za {amount} tygodni"),
        Unit.MONTH: three_forms("za miesiąc", "za {amount} miesiące", "za {amount} miesięcy"),
        Unit.YEAR: three_forms("za rok", "za {amount} lata", "za {amount} lat"),
    },
)


def pl(tense: Tense, unit: Unit, amount: int) -> str:
    return TABLE.render(tense, unit, amount)
