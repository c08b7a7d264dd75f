"""
Time formatting utilities for displaying locale-aware relative times.
Locale negotiation uses the CLDR data shipped with Babel; rendering, including
pluralization and phrases like "tomorrow", is done by ICU's
RelativeDateTimeFormatter.
"""

import re
from typing import List, Optional, Sequence, Union

from babel import Locale, UnknownLocaleError
from icu import (
    Locale as ICULocale,
    NumberFormat,
    RelativeDateTimeFormatter,
    UDateRelativeDateTimeFormatterStyle,
    UDisplayContext,
    URelativeDateTimeUnit,
)

from intl_distance.config import settings
from intl_distance.exceptions import InvalidOptionError

UNITS = ("second", "minute", "hour", "day", "week", "month", "quarter", "year")
LOCALE_MATCHERS = ("lookup", "best fit")
NUMERIC_FORMATS = ("always", "auto")
STYLES = ("long", "short", "narrow")

# Language subtag followed by alphanumeric subtags of up to 8 characters
_LANGUAGE_TAG = re.compile(r"^[A-Za-z]{2,8}(?:-[A-Za-z0-9]{1,8})*$")

ICU_STYLES = {
    "long": UDateRelativeDateTimeFormatterStyle.LONG,
    "short": UDateRelativeDateTimeFormatterStyle.SHORT,
    "narrow": UDateRelativeDateTimeFormatterStyle.NARROW,
}

ICU_UNITS = {unit: getattr(URelativeDateTimeUnit, unit.upper()) for unit in UNITS}


def _requested_tags(locale: Union[str, Sequence[str], None]) -> List[str]:
    if locale is None:
        return []
    if isinstance(locale, str):
        tags = [locale]
    elif isinstance(locale, (list, tuple)):
        tags = list(locale)
    else:
        raise InvalidOptionError(f"locale must be a string or a list of strings, got {locale!r}")

    for tag in tags:
        if not isinstance(tag, str) or not _LANGUAGE_TAG.match(tag):
            raise InvalidOptionError(f"Incorrect locale information provided: {tag!r}")

    return tags


def _match_tag(tag: str, locale_matcher: str) -> Optional[Locale]:
    """
    Find the Babel locale for a single language tag.

    Subtags are dropped from the right until a supported locale is found.
    "best fit" also lets Babel apply likely-subtag resolution to each
    candidate (e.g. "zh-TW" -> zh_Hant_TW).

    Returns:
        Locale, or None if no truncation of the tag is supported
    """
    subtags = tag.split("-")

    # Extensions and private use start at the first single-character subtag
    for index, subtag in enumerate(subtags[1:], start=1):
        if len(subtag) == 1:
            subtags = subtags[:index]
            break

    while subtags:
        candidate = "-".join(subtags)
        try:
            return Locale.parse(
                candidate,
                sep="-",
                resolve_likely_subtags=locale_matcher == "best fit",
            )
        except UnknownLocaleError:
            subtags = subtags[:-1]
        except ValueError as e:
            raise InvalidOptionError(f"Incorrect locale information provided: {tag!r}") from e

    return None


def resolve_locale(
    locale: Union[str, Sequence[str], None] = None,
    locale_matcher: Optional[str] = None,
) -> Locale:
    """
    Negotiate the Babel locale for the requested language tags.

    Args:
        locale: BCP 47 tag or tags in preference order
        locale_matcher: "lookup" or "best fit" (default)

    Returns:
        First supported locale, or the configured DEFAULT_LOCALE

    Raises:
        InvalidOptionError: If a tag is malformed or the matcher is unknown
    """
    if locale_matcher is None:
        locale_matcher = "best fit"
    if locale_matcher not in LOCALE_MATCHERS:
        raise InvalidOptionError(f"Invalid localeMatcher: {locale_matcher!r}")

    # All tags are checked before any is matched
    for tag in _requested_tags(locale):
        match = _match_tag(tag, locale_matcher)
        if match is not None:
            return match

    return Locale.parse(settings.DEFAULT_LOCALE, sep="-")


def _icu_formatter(babel_locale: Locale, style: str) -> RelativeDateTimeFormatter:
    icu_locale = ICULocale(str(babel_locale))
    return RelativeDateTimeFormatter(
        icu_locale,
        NumberFormat.createInstance(icu_locale),
        ICU_STYLES[style],
        UDisplayContext.CAPITALIZATION_NONE,
    )


def format_relative_time(
    value: int,
    unit: str,
    locale: Union[str, Sequence[str], None] = None,
    locale_matcher: Optional[str] = None,
    numeric: Optional[str] = None,
    style: Optional[str] = None,
) -> str:
    """
    Format a signed number of units as a relative time.

    Args:
        value: Number of units, negative for the past
        unit: One of UNITS
        locale: BCP 47 tag or tags in preference order
        locale_matcher: "lookup" or "best fit"
        numeric: "always" (default) or "auto"; "auto" uses the locale's
            phrases where it has one ("now", "tomorrow", "last year")
        style: "long" (default), "short" or "narrow"

    Returns:
        String like "in 1 hour", "3 days ago", "dentro de 60 minutos"

    Raises:
        InvalidOptionError: If any option holds an unsupported value
    """
    unit = getattr(unit, "value", unit)
    if unit not in UNITS:
        raise InvalidOptionError(f"Invalid unit argument: {unit!r}")

    numeric = numeric or "always"
    if numeric not in NUMERIC_FORMATS:
        raise InvalidOptionError(f"Invalid numeric: {numeric!r}")

    style = style or "long"
    if style not in STYLES:
        raise InvalidOptionError(f"Invalid style: {style!r}")

    formatter = _icu_formatter(resolve_locale(locale, locale_matcher), style)

    # A float offset selects ICU's (offset, URelativeDateTimeUnit) overloads
    if numeric == "auto":
        return formatter.format(float(value), ICU_UNITS[unit])
    return formatter.formatNumeric(float(value), ICU_UNITS[unit])
