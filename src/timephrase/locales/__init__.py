"""Locale formatters and registry.

Built-in locales:
    en_us, fr, pt_br, de_de, it_it, es_es, pl

Example:
    from timephrase.locales import get_locale, register_locale

    fmt = get_locale("pt-BR")
    fmt(Tense.PAST, Unit.HOUR, 2)  # "há 2 horas"

    def shouty(tense, unit, amount):
        ...

    register_locale("en_shout", shouty)
"""

from __future__ import annotations

import logging
import threading

from timephrase.errors import IncompleteLocaleError, UnknownLocaleError
from timephrase.locales.base import LocaleFn, LocaleTable
from timephrase.locales.de_de import de_de
from timephrase.locales.en_us import en_us
from timephrase.locales.es_es import es_es
from timephrase.locales.fr import fr
from timephrase.locales.it_it import it_it
from timephrase.locales.pl import pl
from timephrase.locales.pt_br import pt_br
from timephrase.types import Tense, Unit

logger = logging.getLogger(__name__)

BUILTIN_LOCALES: dict[str, LocaleFn] = {
    "en_us": en_us,
    "fr": fr,
    "pt_br": pt_br,
    "de_de": de_de,
    "it_it": it_it,
    "es_es": es_es,
    "pl": pl,
}

# Amounts exercised when checking a caller-supplied locale
_PROBE_AMOUNTS = (1, 2, 5)


def normalize_code(code: str) -> str:
    """Normalize a locale code (``pt-BR`` -> ``pt_br``)."""
    return code.strip().replace("-", "_").lower()


def check_locale(code: str, fn: LocaleFn) -> None:
    """Check that a locale returns text for every tense and unit.

    Raises:
        IncompleteLocaleError: If any combination fails or returns no text.
    """
    missing: list[tuple] = []
    for tense in Tense:
        for unit in Unit:
            amounts = (1,) if unit.is_instant else _PROBE_AMOUNTS
            for amount in amounts:
                try:
                    text = fn(tense, unit, amount)
                except Exception as e:
                    logger.debug(
                        "Locale %s failed for %s/%s/%d: %r",
                        code, tense.value, unit.value, amount, e,
                    )
                    text = None
                if not isinstance(text, str) or not text:
                    missing.append((tense, unit, amount))
    if missing:
        raise IncompleteLocaleError(code, missing)


class LocaleRegistry:
    """Registry of locale formatters keyed by normalized code.

    Lookup order: exact code, then the first locale sharing the language
    prefix (``de`` -> ``de_de``, ``en_gb`` -> ``en_us``).
    """

    def __init__(self) -> None:
        self._locales: dict[str, LocaleFn] = {}
        self._lock = threading.Lock()
        self._initialized = False

    def _ensure_initialized(self) -> None:
        if self._initialized:
            return
        with self._lock:
            if not self._initialized:
                self._locales.update(BUILTIN_LOCALES)
                self._initialized = True

    def _snapshot(self) -> dict[str, LocaleFn]:
        self._ensure_initialized()
        with self._lock:
            return dict(self._locales)

    def get(self, code: str) -> LocaleFn:
        """Get a locale by code.

        Raises:
            UnknownLocaleError: If neither the code nor its language is known.
        """
        locales = self._snapshot()
        normalized = normalize_code(code)

        if normalized in locales:
            return locales[normalized]

        lang = normalized.split("_")[0]
        for candidate, fn in locales.items():
            if candidate.split("_")[0] == lang:
                if "_" in normalized:
                    logger.warning("Locale %r not available, using %r", code, candidate)
                else:
                    logger.debug("Resolved locale %r to %r", code, candidate)
                return fn

        raise UnknownLocaleError(code, list(locales))

    def register(self, code: str, fn: LocaleFn, validate: bool = True) -> None:
        """Register a locale.

        Args:
            code: Locale code.
            fn: Formatter callable.
            validate: Probe the formatter over every tense and unit first.
        """
        if not callable(fn):
            raise TypeError(f"Locale {code!r} must be callable, got {type(fn).__name__}")
        normalized = normalize_code(code)
        if validate:
            check_locale(normalized, fn)

        self._ensure_initialized()
        with self._lock:
            self._locales[normalized] = fn
        logger.debug("Registered locale %r", normalized)

    def unregister(self, code: str) -> None:
        """Unregister a locale."""
        self._ensure_initialized()
        with self._lock:
            self._locales.pop(normalize_code(code), None)

    def list_locales(self) -> list[str]:
        """List registered locale codes."""
        return list(self._snapshot())

    def code_for(self, fn: LocaleFn) -> str | None:
        """Code a formatter is registered under, if any."""
        for code, candidate in self._snapshot().items():
            if candidate is fn:
                return code
        return None

    def reset(self) -> None:
        """Drop caller-registered locales."""
        with self._lock:
            self._locales = dict(BUILTIN_LOCALES)
            self._initialized = True


# Global registry
_registry = LocaleRegistry()


def get_locale(code: str) -> LocaleFn:
    """Get locale formatter for a code."""
    return _registry.get(code)


def register_locale(code: str, fn: LocaleFn, validate: bool = True) -> None:
    """Register a locale formatter."""
    _registry.register(code, fn, validate=validate)


def unregister_locale(code: str) -> None:
    """Unregister a locale formatter."""
    _registry.unregister(code)


def get_supported_locales() -> list[str]:
    """Get supported locale codes."""
    return _registry.list_locales()


def get_registry() -> LocaleRegistry:
    """Get global locale registry."""
    return _registry


def locale_name(fn: LocaleFn) -> str:
    """Registered code of a formatter, or its function name."""
    return _registry.code_for(fn) or getattr(fn, "__name__", repr(fn))


__all__ = [
    "BUILTIN_LOCALES",
    "LocaleFn",
    "LocaleRegistry",
    "LocaleTable",
    "check_locale",
    "de_de",
    "en_us",
    "es_es",
    "fr",
    "get_locale",
    "get_registry",
    "get_supported_locales",
    "it_it",
    "locale_name",
    "normalize_code",
    "pl",
    "pt_br",
    "register_locale",
    "unregister_locale",
]
