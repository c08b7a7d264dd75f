#!/usr/bin/env python3
"""
Tests for locale negotiation and relative time rendering.
"""

import os
import sys

import pytest
from babel import Locale

# Add package to path
sys.path.insert(0, os.path.dirname(__file__))

from intl_distance.config import settings
from intl_distance.exceptions import InvalidOptionError
from intl_distance.utils.time_formatting import format_relative_time, resolve_locale


@pytest.mark.parametrize(
    "value,unit,expected",
    [
        (1, "hour", "in 1 hour"),
        (-1, "hour", "1 hour ago"),
        (-3, "day", "3 days ago"),
        (4, "quarter", "in 4 quarters"),
        (1, "year", "in 1 year"),
        (8760, "hour", "in 8,760 hours"),
        (525600, "minute", "in 525,600 minutes"),
        (31536000, "second", "in 31,536,000 seconds"),
        (0, "second", "in 0 seconds"),
    ],
)
def test_format_relative_time_english(value, unit, expected):
    assert format_relative_time(value, unit, locale="en") == expected


def test_format_relative_time_other_locales():
    assert format_relative_time(60, "minute", locale="es") == "dentro de 60 minutos"
    assert format_relative_time(60, "minute", locale="de") == "in 60 Minuten"


def test_format_relative_time_short_style():
    assert format_relative_time(1, "month", locale="en", style="short") == "in 1 mo."


@pytest.mark.parametrize(
    "value,unit,expected",
    [
        (0, "second", "now"),
        (1, "day", "tomorrow"),
        (-1, "day", "yesterday"),
        (1, "year", "next year"),
        (-1, "year", "last year"),
        (3, "day", "in 3 days"),
    ],
)
def test_numeric_auto_uses_locale_phrases(value, unit, expected):
    assert format_relative_time(value, unit, locale="en", numeric="auto") == expected


def test_numeric_always_keeps_the_number():
    assert format_relative_time(1, "day", locale="en", numeric="always") == "in 1 day"
    assert format_relative_time(-1, "day", locale="en", numeric="always") == "1 day ago"
    assert format_relative_time(0, "second", locale="en", numeric="always") == "in 0 seconds"


def test_numeric_auto_phrases_follow_locale():
    assert format_relative_time(1, "day", locale="es", numeric="auto") == "mañana"
    assert format_relative_time(-1, "day", locale="de", numeric="auto") == "gestern"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"unit": "fortnight"},
        {"numeric": "sometimes"},
        {"style": "medium"},
        {"locale_matcher": "closest"},
        {"locale": "en_US"},
        {"locale": ""},
        {"locale": ["en", 5]},
        {"locale": 42},
    ],
)
def test_format_relative_time_rejects_invalid_options(kwargs):
    arguments = {"value": 1, "unit": "hour"}
    arguments.update(kwargs)
    with pytest.raises(InvalidOptionError):
        format_relative_time(**arguments)


def test_resolve_locale_defaults_to_configured_locale():
    default = Locale.parse(settings.DEFAULT_LOCALE, sep="-")
    assert resolve_locale() == default
    assert resolve_locale([]) == default
    assert resolve_locale("xx") == default


def test_resolve_locale_skips_unsupported_tags():
    assert resolve_locale(["xx", "es"]) == Locale("es")


def test_resolve_locale_lookup_truncates_subtags():
    assert resolve_locale("de-AT-1996", "lookup") == Locale("de", "AT")
    assert resolve_locale("es-ZZ", "lookup") == Locale("es")


def test_resolve_locale_ignores_extensions():
    assert resolve_locale("en-US-u-ca-buddhist") == Locale("en", "US")


def test_resolve_locale_checks_every_tag_before_matching():
    with pytest.raises(InvalidOptionError):
        resolve_locale(["es", "not a tag"])
