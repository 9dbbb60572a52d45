"""Plural rules for relative time phrases.

Plural categories follow CLDR naming. Amounts are always whole numbers, so
the rules only look at the integer value.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable


class PluralCategory(Enum):
    """CLDR plural categories."""

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


# Type for plural rule function
PluralRuleFunc = Callable[[int], PluralCategory]


def one_other(n: int) -> PluralCategory:
    """English, German, Italian, Spanish, Portuguese."""
    if n == 1:
        return PluralCategory.ONE
    return PluralCategory.OTHER


def french(n: int) -> PluralCategory:
    if n in (0, 1):
        return PluralCategory.ONE
    return PluralCategory.OTHER


def polish(n: int) -> PluralCategory:
    """Three tiers: 1, 2-4 and everything else.

    Only the single-digit "few" range is used; 22-24 take the "many" form.
    """
    if n == 1:
        return PluralCategory.ONE
    if 2 <= n <= 4:
        return PluralCategory.FEW
    return PluralCategory.MANY


class PluralRules:
    """Plural category provider keyed by language.

    Example:
        rules = PluralRules()
        category = rules.get_category(3, "pl")  # PluralCategory.FEW
    """

    def __init__(self) -> None:
        self._rules: dict[str, PluralRuleFunc] = {}
        self._categories: dict[str, frozenset[PluralCategory]] = {}
        self._register_rules()

    def _register_rules(self) -> None:
        two_forms = frozenset({PluralCategory.ONE, PluralCategory.OTHER})
        for lang in ["en", "de", "it", "es", "pt"]:
            self.register_rule(lang, one_other, two_forms)

        self.register_rule("fr", french, two_forms)
        self.register_rule(
            "pl",
            polish,
            frozenset({PluralCategory.ONE, PluralCategory.FEW, PluralCategory.MANY}),
        )

    def get_category(self, count: int, locale: str) -> PluralCategory:
        """Get plural category for a number.

        Args:
            count: The number.
            locale: Locale code (e.g., "en", "pt_br").

        Returns:
            Plural category. Unknown languages use the one/other split.
        """
        return self._rules.get(_language(locale), one_other)(count)

    def categories(self, locale: str) -> frozenset[PluralCategory]:
        """Categories the rule for ``locale`` can produce for positive amounts."""
        return self._categories.get(
            _language(locale), frozenset({PluralCategory.ONE, PluralCategory.OTHER})
        )

    def register_rule(
        self,
        language: str,
        rule: PluralRuleFunc,
        categories: frozenset[PluralCategory],
    ) -> None:
        """Register a plural rule and the categories it yields."""
        self._rules[language] = rule
        self._categories[language] = categories


def _language(locale: str) -> str:
    return locale.split("_")[0].split("-")[0].lower()


# Global instance
_rules = PluralRules()


def get_plural_category(count: int, locale: str = "en") -> PluralCategory:
    """Get plural category for a number.

    Example:
        get_plural_category(1, "en")  # ONE
        get_plural_category(5, "pl")  # MANY
    """
    return _rules.get_category(count, locale)


def get_plural_rules() -> PluralRules:
    """Get global plural rules instance."""
    return _rules
