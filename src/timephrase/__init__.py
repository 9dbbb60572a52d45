"""timephrase - Human-readable relative time phrases with pluggable locales."""

from timephrase.engine import SECONDS_PER_UNIT, bucket, classify, difference
from timephrase.errors import (
    ConfigError,
    IncompleteLocaleError,
    InvalidInstantError,
    LocaleError,
    TimephraseError,
    UnknownLocaleError,
)
from timephrase.formatter import (
    Formatter,
    create,
    format,
    format_relative,
    resolve_locale,
    with_locale,
    with_reference_time,
)
from timephrase.locales import (
    BUILTIN_LOCALES,
    LocaleFn,
    de_de,
    en_us,
    es_es,
    fr,
    get_locale,
    get_supported_locales,
    it_it,
    pl,
    pt_br,
    register_locale,
    unregister_locale,
)
from timephrase.types import Classification, Duration, Instant, Tense, Unit

__version__ = "0.1.0"

__all__ = [
    # Core
    "format_relative",
    "classify",
    "difference",
    "bucket",
    "SECONDS_PER_UNIT",
    # Builder
    "Formatter",
    "create",
    "with_reference_time",
    "with_locale",
    "format",
    "resolve_locale",
    # Types
    "Instant",
    "Duration",
    "Tense",
    "Unit",
    "Classification",
    # Locales
    "LocaleFn",
    "BUILTIN_LOCALES",
    "get_locale",
    "register_locale",
    "unregister_locale",
    "get_supported_locales",
    "en_us",
    "fr",
    "pt_br",
    "de_de",
    "it_it",
    "es_es",
    "pl",
    # Errors
    "TimephraseError",
    "InvalidInstantError",
    "LocaleError",
    "UnknownLocaleError",
    "IncompleteLocaleError",
    "ConfigError",
]
