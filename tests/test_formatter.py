"""Tests for the functional and builder-style entry points."""

import dataclasses
import threading
import time
from datetime import datetime, timedelta, timezone

import pytest

import timephrase
from timephrase import Formatter, create, format_relative
from timephrase.config import Settings, set_settings
from timephrase.errors import InvalidInstantError, UnknownLocaleError
from timephrase.formatter import resolve_locale
from timephrase.locales import de_de, en_us, fr
from timephrase.types import Classification, Duration, Instant, Tense, Unit

REFERENCE = Instant(1546300800)


class TestFormatRelative:
    """Test the functional entry point."""

    def test_defaults_to_english(self):
        assert format_relative(REFERENCE - Duration.from_seconds(300), REFERENCE) == "5 minutes ago"

    def test_locale_code(self):
        target = REFERENCE + Duration.from_seconds(7200)
        assert format_relative(target, REFERENCE, locale="de") == "in 2 Stunden"

    def test_locale_function(self):
        target = REFERENCE + Duration.from_seconds(7200)
        assert format_relative(target, REFERENCE, locale=fr) == "dans 2 heures"

    def test_custom_callable(self):
        """Any callable with the locale signature works without registration."""

        def terse(tense, unit, amount):
            sign = "-" if tense is Tense.PAST else "+"
            return f"{sign}{amount}{unit.value[0]}"

        assert format_relative(REFERENCE - Duration.from_seconds(3 * 86400), REFERENCE, terse) == "-3d"

    def test_datetime_inputs(self):
        ref = datetime(2019, 1, 1)
        assert format_relative(ref - timedelta(minutes=5), ref) == "5 minutes ago"
        aware = ref.replace(tzinfo=timezone.utc)
        assert format_relative(aware + timedelta(days=14), ref) == "in 2 weeks"

    def test_default_reference_is_now(self):
        assert format_relative(Instant.now()) == "just now"
        assert format_relative(Instant.now() - Duration.from_seconds(7200)) == "2 hours ago"

    def test_configured_default_locale(self):
        set_settings(Settings(locale="de_de"))
        assert format_relative(REFERENCE - Duration.from_seconds(60), REFERENCE) == "vor 1 Minute"

    def test_invalid_target(self):
        with pytest.raises(InvalidInstantError):
            format_relative("2019-01-01", REFERENCE)  # type: ignore[arg-type]

    def test_unknown_locale(self):
        with pytest.raises(UnknownLocaleError):
            format_relative(REFERENCE, REFERENCE, locale="tlh")


class TestResolveLocale:
    """Test locale resolution."""

    def test_none_uses_settings(self):
        assert resolve_locale(None) is en_us
        set_settings(Settings(locale="fr"))
        assert resolve_locale(None) is fr

    def test_code_and_callable(self):
        assert resolve_locale("de_de") is de_de
        assert resolve_locale(fr) is fr

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            resolve_locale(42)  # type: ignore[arg-type]


class TestFormatter:
    """Test the immutable builder."""

    def test_create_defaults(self):
        formatter = create()
        assert formatter.reference is None
        assert formatter.locale is None
        assert formatter.locale_code == "en_us"

    def test_with_methods_return_copies(self):
        base = create()
        localized = base.with_locale("fr")
        anchored = localized.with_reference_time(REFERENCE)

        assert base.locale is None and base.reference is None
        assert localized.locale is fr and localized.reference is None
        assert anchored.locale is fr and anchored.reference == REFERENCE
        assert anchored.locale_code == "fr"

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            create().locale = fr  # type: ignore[misc]

    def test_format(self):
        formatter = create().with_reference_time(REFERENCE)
        assert formatter.format(REFERENCE - Duration.from_seconds(59)) == "59 seconds ago"
        assert formatter.with_locale(fr).format(REFERENCE + Duration.from_seconds(60)) == "dans 1 minute"

    def test_reference_accepts_datetime(self):
        formatter = create().with_reference_time(datetime(2019, 1, 1))
        assert formatter.reference == REFERENCE

    def test_clearing_reference_and_locale(self):
        formatter = create().with_reference_time(REFERENCE).with_locale("fr")
        cleared = formatter.with_reference_time(None).with_locale(None)
        assert cleared.reference is None
        assert cleared.locale is None

    def test_classify(self):
        formatter = create().with_reference_time(REFERENCE)
        assert formatter.classify(REFERENCE + Duration.from_seconds(604800)) == Classification(
            Tense.FUTURE, Unit.WEEK, 1
        )

    def test_unknown_locale_fails_fast(self):
        with pytest.raises(UnknownLocaleError):
            create().with_locale("tlh")

    def test_clock_is_read_at_format_time(self):
        """Without a reference, every call reads the clock again."""
        ticks = iter([Instant(100), Instant(160), Instant(3700)])
        formatter = create().with_clock(lambda: next(ticks))
        target = Instant(100)

        assert formatter.format(target) == "just now"
        assert formatter.format(target) == "1 minute ago"
        assert formatter.format(target) == "1 hour ago"

    def test_reference_time_ignores_clock(self):
        def clock():
            raise AssertionError("clock should not be read")

        formatter = create().with_clock(clock).with_reference_time(REFERENCE)
        assert formatter.format(REFERENCE) == "just now"

    def test_now_is_not_captured_at_creation(self):
        """A formatter created earlier still sees the elapsed time."""
        formatter = create()
        target = Instant.now()
        time.sleep(1.1)
        assert formatter.format(target) == "1 second ago"

    def test_shared_between_threads(self):
        formatter = create().with_reference_time(REFERENCE).with_locale("pl")
        results: list[str] = []

        def worker(seconds: int) -> None:
            results.append(formatter.format(REFERENCE - Duration.from_seconds(seconds)))

        threads = [threading.Thread(target=worker, args=(60 * n,)) for n in range(1, 6)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(results) == sorted(
            ["minutę temu", "2 minuty temu", "3 minuty temu", "4 minuty temu", "5 minut temu"]
        )

    def test_equality(self):
        assert create().with_locale("fr") == Formatter(locale=fr)


class TestModuleLevelBuilder:
    """The builder operations are also available as functions."""

    def test_functions(self):
        formatter = timephrase.with_locale(timephrase.create(), "es")
        formatter = timephrase.with_reference_time(formatter, REFERENCE)
        assert timephrase.format(formatter, REFERENCE - Duration.from_seconds(86400 * 2)) == "hace 2 días"
