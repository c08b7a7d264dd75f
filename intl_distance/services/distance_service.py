"""
Distance service - picks the unit for the distance between two instants and
hands the signed value to the relative time formatter.
"""

from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple, Union

from pydantic import ValidationError

from intl_distance.exceptions import InvalidOptionError
from intl_distance.models.distance import Distance, DistanceOptions, Unit
from intl_distance.utils.app_logger import logger
from intl_distance.utils.date_difference import (
    SECONDS_IN_DAY,
    SECONDS_IN_HOUR,
    SECONDS_IN_MINUTE,
    SECONDS_IN_MONTH,
    SECONDS_IN_QUARTER,
    SECONDS_IN_WEEK,
    SECONDS_IN_YEAR,
    Instant,
    difference_in_calendar_days,
    difference_in_calendar_months,
    difference_in_calendar_quarters,
    difference_in_calendar_weeks,
    difference_in_calendar_years,
    difference_in_hours,
    difference_in_minutes,
    difference_in_seconds,
    resolve_pair,
)
from intl_distance.utils.time_formatting import format_relative_time

DifferenceFunction = Callable[[Instant, Instant], int]
Threshold = Tuple[int, Unit, DifferenceFunction]
OptionsInput = Union[DistanceOptions, Mapping[str, Any], None]

# Checked in order: the first entry whose threshold exceeds the absolute
# distance in seconds picks the unit and how its value is counted.
UNIT_THRESHOLDS: Tuple[Threshold, ...] = (
    (SECONDS_IN_MINUTE, Unit.SECOND, difference_in_seconds),
    (SECONDS_IN_HOUR, Unit.MINUTE, difference_in_minutes),
    (SECONDS_IN_DAY, Unit.HOUR, difference_in_hours),
    (SECONDS_IN_WEEK, Unit.DAY, difference_in_calendar_days),
    (SECONDS_IN_MONTH, Unit.WEEK, difference_in_calendar_weeks),
    (SECONDS_IN_QUARTER, Unit.MONTH, difference_in_calendar_months),
    (SECONDS_IN_YEAR, Unit.QUARTER, difference_in_calendar_quarters),
)

DIFFERENCE_BY_UNIT: Dict[Unit, DifferenceFunction] = {
    Unit.SECOND: difference_in_seconds,
    Unit.MINUTE: difference_in_minutes,
    Unit.HOUR: difference_in_hours,
    Unit.DAY: difference_in_calendar_days,
    Unit.WEEK: difference_in_calendar_weeks,
    Unit.MONTH: difference_in_calendar_months,
    Unit.QUARTER: difference_in_calendar_quarters,
    Unit.YEAR: difference_in_calendar_years,
}

QUARTERS_IN_YEAR = 4


def parse_options(options: OptionsInput = None, **kwargs: Any) -> DistanceOptions:
    """
    Build DistanceOptions from a model, a mapping and/or keyword arguments.

    Mapping keys may use either the camelCase alias (localeMatcher) or the
    field name (locale_matcher). Keyword arguments override the mapping.

    Raises:
        InvalidOptionError: If an option is unknown or holds an invalid value
    """
    if isinstance(options, DistanceOptions) and not kwargs:
        return options

    if options is None:
        data: Dict[str, Any] = {}
    elif isinstance(options, DistanceOptions):
        data = options.model_dump(exclude_unset=True)
    elif isinstance(options, Mapping):
        data = dict(options)
    else:
        raise InvalidOptionError(f"options must be a mapping, got {type(options).__name__}")

    data.update(kwargs)

    try:
        return DistanceOptions.model_validate(data)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise InvalidOptionError(f"Invalid options: {details}") from e


def select_unit(
    diff_in_seconds: int, thresholds: Sequence[Threshold] = UNIT_THRESHOLDS
) -> Tuple[Unit, DifferenceFunction]:
    """
    Pick the unit for a distance from the threshold table.

    Args:
        diff_in_seconds: Signed elapsed seconds between the instants
        thresholds: Ascending (threshold, unit, difference function) entries

    Returns:
        tuple: (unit, function counting the distance in that unit)
    """
    for threshold, unit, difference in thresholds:
        if abs(diff_in_seconds) < threshold:
            return unit, difference

    return Unit.YEAR, difference_in_calendar_years


class DistanceService:
    """Service for classifying and formatting the distance between instants"""

    def __init__(
        self,
        thresholds: Sequence[Threshold] = UNIT_THRESHOLDS,
        difference_by_unit: Optional[Mapping[Unit, DifferenceFunction]] = None,
    ):
        """
        Initialize distance service.

        Args:
            thresholds: Table used when no unit is requested
            difference_by_unit: Functions used when a unit is requested
        """
        self.thresholds = thresholds
        self.difference_by_unit = difference_by_unit or DIFFERENCE_BY_UNIT

    def classify(self, date: Instant, base_date: Instant, options: OptionsInput = None) -> Distance:
        """
        Get the signed value and unit for the distance from base_date to date.

        Args:
            date: The instant being described
            base_date: The instant to compare with
            options: Distance options, only unit is used here

        Returns:
            Distance: (value, unit), value is positive when date is later

        Raises:
            InvalidOptionError: If options are invalid (checked first)
            InvalidInstantError: If either instant cannot be resolved
        """
        options = parse_options(options)
        left, right = resolve_pair(date, base_date)

        if options.unit is None:
            mode = "auto"
            unit, difference = select_unit(difference_in_seconds(left, right), self.thresholds)
            value = difference(left, right)

            # A span just short of a year can still cross four quarter boundaries
            if unit is Unit.QUARTER and abs(value) >= QUARTERS_IN_YEAR:
                unit = Unit.YEAR
                value = difference_in_calendar_years(left, right)
        else:
            mode = "explicit"
            unit = options.unit
            value = self.difference_by_unit[unit](left, right)

        logger.distance_classified(value, unit.value, mode)

        return Distance(value, unit)

    def format(self, distance: Distance, options: OptionsInput = None) -> str:
        """
        Render a distance with the locale formatter.

        numeric defaults to "auto"; the other options fall back to the
        formatter's defaults.
        """
        options = parse_options(options)

        return format_relative_time(
            distance.value,
            Unit(distance.unit).value,
            locale=options.locale,
            locale_matcher=options.locale_matcher,
            numeric=options.numeric or "auto",
            style=options.style,
        )

    def format_distance(
        self, date: Instant, base_date: Instant, options: OptionsInput = None
    ) -> Tuple[Distance, str]:
        """
        Classify and format in one step.

        Returns:
            tuple: (Distance, formatted string)
        """
        options = parse_options(options)
        distance = self.classify(date, base_date, options)

        return distance, self.format(distance, options)


def classify_distance(
    date: Instant, base_date: Instant, options: OptionsInput = None, **kwargs: Any
) -> Distance:
    """Get the (value, unit) pair for the distance between two instants"""
    return DistanceService().classify(date, base_date, parse_options(options, **kwargs))


def intl_format_distance(
    date: Instant, base_date: Instant, options: OptionsInput = None, **kwargs: Any
) -> str:
    """
    Format the distance between two instants in human-readable words.

    Picks the most appropriate unit for the distance (the smaller the
    distance, the finer the unit) unless a unit is given:

        >>> intl_format_distance(datetime(1986, 4, 4, 11, 30), datetime(1986, 4, 4, 10, 30))
        'in 1 hour'
        >>> intl_format_distance(datetime(1987, 4, 4, 10, 30), datetime(1986, 4, 4, 10, 30))
        'next year'
        >>> intl_format_distance(
        ...     datetime(1987, 4, 4, 10, 30), datetime(1986, 4, 4, 10, 30), unit="quarter"
        ... )
        'in 4 quarters'
        >>> intl_format_distance(
        ...     datetime(1986, 4, 4, 11, 30), datetime(1986, 4, 4, 10, 30),
        ...     {"unit": "minute", "locale": "es"},
        ... )
        'dentro de 60 minutos'

    Args:
        date: The instant being described (datetime, date or epoch milliseconds)
        base_date: The instant to compare with
        options: DistanceOptions or mapping with unit, locale, localeMatcher,
            numeric and style
        **kwargs: Options as keyword arguments, overriding the mapping

    Returns:
        Distance in words according to the locale's relative time patterns

    Raises:
        InvalidOptionError: If an option holds an unsupported value
        InvalidInstantError: If date or base_date is not a valid instant
    """
    _, text = DistanceService().format_distance(date, base_date, parse_options(options, **kwargs))
    return text
