"""Locale table base.

A locale is any callable ``(Tense, Unit, int) -> str``. Built-in locales are
backed by a ``LocaleTable``, which checks at construction time that it has a
template for every tense, unit and plural category it can be asked for.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

from timephrase.errors import IncompleteLocaleError
from timephrase.plurals import PluralCategory, get_plural_category, get_plural_rules
from timephrase.types import Tense, Unit

LocaleFn = Callable[[Tense, Unit, int], str]

UnitForms = Mapping[Unit, Mapping[PluralCategory, str]]

PLACEHOLDER = "{amount}"


@dataclass(frozen=True, eq=False)
class LocaleTable:
    """Templates for one language.

    Templates contain a single ``{amount}`` placeholder. Singular (ONE)
    templates may omit it when the language uses a dedicated word instead
    of the number.

    Attributes:
        code: Locale code (e.g., "en_us").
        instant: Phrase used for sub-second differences.
        past: Templates for targets before the reference.
        future: Templates for targets after the reference.
    """

    code: str
    instant: str
    past: UnitForms
    future: UnitForms

    def __post_init__(self) -> None:
        object.__setattr__(self, "past", _freeze(self.past))
        object.__setattr__(self, "future", _freeze(self.future))
        self.validate()

    def validate(self) -> None:
        """Check that every tense/unit/category combination has a template.

        Raises:
            IncompleteLocaleError: If any template is missing or malformed.
        """
        missing: list[tuple] = []
        if not self.instant:
            missing.append(("instant",))

        categories = get_plural_rules().categories(self.code)
        for tense in Tense:
            forms_by_unit = self.forms(tense)
            for unit in Unit.timed():
                forms = forms_by_unit.get(unit, {})
                for category in sorted(categories, key=lambda c: c.value):
                    template = forms.get(category)
                    if not template or not _placeholder_ok(template, category):
                        missing.append((tense, unit, category))

        if missing:
            raise IncompleteLocaleError(self.code, missing)

    def forms(self, tense: Tense) -> UnitForms:
        return self.past if tense is Tense.PAST else self.future

    def render(self, tense: Tense, unit: Unit, amount: int) -> str:
        """Render a phrase.

        Args:
            tense: Past or future.
            unit: Unit of the amount.
            amount: Whole units, ignored for sub-second units.

        Returns:
            Display string.
        """
        if unit.is_instant:
            return self.instant
        category = get_plural_category(amount, self.code)
        return self.forms(tense)[unit][category].format(amount=amount)


def two_forms(one: str, other: str) -> dict[PluralCategory, str]:
    """Forms for languages with a singular/plural split."""
    return {PluralCategory.ONE: one, PluralCategory.OTHER: other}


def three_forms(one: str, few: str, many: str) -> dict[PluralCategory, str]:
    """Forms for languages with a separate 2-4 tier."""
    return {PluralCategory.ONE: one, PluralCategory.FEW: few, PluralCategory.MANY: many}


def _placeholder_ok(template: str, category: PluralCategory) -> bool:
    count = template.count(PLACEHOLDER)
    if category is PluralCategory.ONE:
        return count <= 1
    return count == 1


def _freeze(forms: UnitForms) -> UnitForms:
    return MappingProxyType({unit: MappingProxyType(dict(f)) for unit, f in forms.items()})
